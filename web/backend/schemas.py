from pydantic import BaseModel
from typing import Optional


class TrackOut(BaseModel):
    title: str
    url: str
    mime: str

    model_config = {"frozen": True}  # Immutable


class PlaylistResponse(BaseModel):
    success: bool = True
    count: int
    data: list[TrackOut]


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: Optional[str] = None  # Underlying cause, charts only


class ChartTrackOut(BaseModel):
    title: str
    artist: str
    art: str
    link: str
    explicit: bool


class ChartsResponse(BaseModel):
    updated: Optional[str] = None
    tracks: list[ChartTrackOut]
