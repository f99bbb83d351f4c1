"""Domain layer - playlist resolution and charts."""
