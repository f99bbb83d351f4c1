"""Tests for track descriptor helpers."""

import pytest

from wavelist.domain.playlists.tracks import (
    DEFAULT_MIME,
    SUPPORTED_EXTENSIONS,
    TrackDescriptor,
    get_extension,
    is_supported,
    mime_for,
    title_from_filename,
)


def test_supported_extension_set():
    assert SUPPORTED_EXTENSIONS == {"mp3", "wav", "m4a", "ogg", "flac", "aac", "mp4"}


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("song.mp3", "mp3"),
        ("song.MP3", "mp3"),
        ("/a/b/track.Flac", "flac"),
        ("archive.tar.gz", "gz"),
        ("noext", None),
        ("folder/", None),
    ],
)
def test_get_extension(filename, expected):
    assert get_extension(filename) == expected


def test_is_supported_is_case_insensitive():
    assert is_supported("a.M4A")
    assert not is_supported("a.m3u")


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("a.mp3", "audio/mpeg"),
        ("a.WAV", "audio/wav"),
        ("a.m4a", "audio/mp4"),
        ("a.ogg", "audio/ogg"),
        ("a.flac", "audio/flac"),
        ("a.aac", "audio/aac"),
        ("a.mp4", "video/mp4"),
        ("a.opus", DEFAULT_MIME),
        ("a", DEFAULT_MIME),
    ],
)
def test_mime_for(filename, expected):
    assert mime_for(filename) == expected


@pytest.mark.parametrize(
    "filename, expected",
    [
        ("song1.mp3", "Song1"),
        ("song3.MP3", "Song3"),
        ("my-awesome-song.mp3", "My Awesome Song"),
        ("another_great_track.mp3", "Another Great Track"),
        ("my%20encoded%20song.mp3", "My Encoded Song"),
        ("/music/deep/cut.ogg", "Cut"),
        ("Already Titled.flac", "Already Titled"),
        (".mp3", ".mp3"),
    ],
)
def test_title_from_filename(filename, expected):
    assert title_from_filename(filename) == expected


def test_track_descriptor_to_dict():
    track = TrackDescriptor(title="A", url="https://example.com/a.mp3", mime="audio/mpeg")
    assert track.to_dict() == {
        "title": "A",
        "url": "https://example.com/a.mp3",
        "mime": "audio/mpeg",
    }


def test_track_descriptor_is_immutable():
    track = TrackDescriptor(title="A", url="u", mime="audio/mpeg")
    with pytest.raises(AttributeError):
        track.title = "B"
