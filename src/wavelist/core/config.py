"""
Configuration management for Wavelist
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from loguru import logger


@dataclass
class ServerConfig:
    """Configuration for the HTTP server."""

    host: str = "0.0.0.0"
    port: int = 5000
    allowed_origins: List[str] = field(
        default_factory=lambda: ["http://localhost:5173"]
    )


@dataclass
class MediaConfig:
    """Configuration for locally served media."""

    # Relative to the working directory; also the URL prefix for served files
    root: str = "public/music"


@dataclass
class HttpConfig:
    """Configuration for outbound HTTP requests."""

    timeout_seconds: float = 10.0
    user_agent: str = "wavelist/1.0"


@dataclass
class PlaylistConfig:
    """Configuration for the playlist endpoint."""

    cache_ttl_seconds: int = 0  # 0 disables response caching
    cache_max_entries: int = 256

    def validate(self) -> None:
        """Validate playlist configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if self.cache_ttl_seconds < 0:
            raise ValueError("cache_ttl_seconds must be >= 0")
        if self.cache_max_entries < 1:
            raise ValueError("cache_max_entries must be >= 1")


@dataclass
class ChartsConfig:
    """Configuration for the Apple Music charts proxy."""

    cache_ttl_seconds: int = 900
    limit: int = 50


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = None  # No file sink unless set
    rotation: str = "10 MB"
    retention: int = 5
    console_output: bool = True


@dataclass
class Config:
    """Main configuration object."""

    server: ServerConfig = field(default_factory=ServerConfig)
    media: MediaConfig = field(default_factory=MediaConfig)
    http: HttpConfig = field(default_factory=HttpConfig)
    playlist: PlaylistConfig = field(default_factory=PlaylistConfig)
    charts: ChartsConfig = field(default_factory=ChartsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "wavelist"
    return Path.home() / ".config" / "wavelist"


def _find_project_config() -> Optional[Path]:
    """Find config.toml in project root by looking for pyproject.toml.

    Returns:
        Path to config.toml in project root, or None if not found
    """
    current = Path(__file__).resolve().parent
    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists():
            config_path = parent / "config.toml"
            if config_path.exists():
                return config_path
            return None
    return None


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. WAVELIST_CONFIG environment variable
    2. Project root (detected via pyproject.toml) - for development
    3. Current working directory
    4. XDG_CONFIG_HOME/wavelist (or ~/.config/wavelist)
    """
    explicit = os.environ.get("WAVELIST_CONFIG")
    if explicit:
        return Path(explicit).expanduser()

    project_config = _find_project_config()
    if project_config:
        return project_config

    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def parse_config(toml_data: dict) -> Config:
    """Build a Config from parsed TOML data, falling back to defaults per key."""
    config = Config()

    if "server" in toml_data:
        server_data = toml_data["server"]
        config.server = ServerConfig(
            host=server_data.get("host", config.server.host),
            port=int(server_data.get("port", config.server.port)),
            allowed_origins=server_data.get(
                "allowed_origins", config.server.allowed_origins
            ),
        )

    if "media" in toml_data:
        media_data = toml_data["media"]
        config.media = MediaConfig(root=media_data.get("root", config.media.root))

    if "http" in toml_data:
        http_data = toml_data["http"]
        config.http = HttpConfig(
            timeout_seconds=float(
                http_data.get("timeout_seconds", config.http.timeout_seconds)
            ),
            user_agent=http_data.get("user_agent", config.http.user_agent),
        )

    if "playlist" in toml_data:
        playlist_data = toml_data["playlist"]
        config.playlist = PlaylistConfig(
            cache_ttl_seconds=playlist_data.get(
                "cache_ttl_seconds", config.playlist.cache_ttl_seconds
            ),
            cache_max_entries=playlist_data.get(
                "cache_max_entries", config.playlist.cache_max_entries
            ),
        )
        try:
            config.playlist.validate()
        except ValueError as e:
            logger.warning(f"Invalid playlist configuration: {e}. Using defaults.")
            config.playlist = PlaylistConfig()

    if "charts" in toml_data:
        charts_data = toml_data["charts"]
        config.charts = ChartsConfig(
            cache_ttl_seconds=charts_data.get(
                "cache_ttl_seconds", config.charts.cache_ttl_seconds
            ),
            limit=charts_data.get("limit", config.charts.limit),
        )

    if "logging" in toml_data:
        logging_data = toml_data["logging"]
        log_file = logging_data.get("log_file")
        if log_file:
            log_file = str(Path(log_file).expanduser())
        config.logging = LoggingConfig(
            level=logging_data.get("level", config.logging.level).upper(),
            log_file=log_file,
            rotation=logging_data.get("rotation", config.logging.rotation),
            retention=logging_data.get("retention", config.logging.retention),
            console_output=logging_data.get(
                "console_output", config.logging.console_output
            ),
        )

    return config


def apply_env_overrides(config: Config) -> Config:
    """Override configuration values with environment variables if present.

    - WAVELIST_MEDIA_ROOT
    - WAVELIST_LOG_LEVEL
    - PORT
    - ALLOWED_ORIGINS (comma-separated)
    """
    media_root = os.environ.get("WAVELIST_MEDIA_ROOT")
    if media_root:
        config.media.root = media_root

    log_level = os.environ.get("WAVELIST_LOG_LEVEL")
    if log_level:
        config.logging.level = log_level.upper()

    port = os.environ.get("PORT")
    if port:
        try:
            config.server.port = int(port)
        except ValueError:
            logger.warning(f"Ignoring non-numeric PORT value: {port!r}")

    allowed_origins = os.environ.get("ALLOWED_ORIGINS")
    if allowed_origins:
        config.server.allowed_origins = [
            origin.strip() for origin in allowed_origins.split(",") if origin.strip()
        ]

    return config


def load_config() -> Config:
    """Load configuration from file, or defaults when no file exists.

    A .env file in the config directory is loaded first so its values
    take part in the environment overrides.
    """
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config_path = get_config_path()

    if not config_path.exists():
        return apply_env_overrides(Config())

    try:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)
        config = parse_config(toml_data)
    except (OSError, tomllib.TOMLDecodeError, TypeError, ValueError) as e:
        logger.warning(f"Error loading configuration from {config_path}: {e}")
        logger.warning("Using default configuration.")
        config = Config()

    return apply_env_overrides(config)
