"""
Playlist resolution errors.

Messages are part of the HTTP contract: the web layer returns them verbatim
in the error envelope, and clients match on some of them.
"""

from typing import Optional

PROTOCOL_NOT_ALLOWED = "URL must use HTTP or HTTPS protocol"
TRAVERSAL_NOT_ALLOWED = "Directory traversal is not allowed"
MISSING_PARAMETER = "Either url or folder parameter is required"


class PlaylistError(Exception):
    """Base class for playlist resolution failures."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingParameterError(PlaylistError):
    """Neither a url nor a folder was supplied."""

    status_code = 400

    def __init__(self, message: str = MISSING_PARAMETER):
        super().__init__(message)


class InvalidUrlError(PlaylistError):
    """Remote playlist URL rejected by validation.

    reason is one of "malformed", "protocol" or "format".
    """

    MALFORMED = "malformed"
    PROTOCOL = "protocol"
    FORMAT = "format"

    def __init__(self, reason: str, detail: Optional[str] = None):
        if reason == self.PROTOCOL:
            message = PROTOCOL_NOT_ALLOWED
        else:
            message = f"Invalid URL: {detail}"
        super().__init__(message)
        self.reason = reason


class DirectoryTraversalError(PlaylistError):
    """Folder path would escape the static-media root."""

    def __init__(self, message: str = TRAVERSAL_NOT_ALLOWED):
        super().__init__(message)


class RemoteFetchError(PlaylistError):
    """Remote playlist could not be validated, fetched or parsed."""

    def __init__(self, cause: str):
        super().__init__(f"Failed to fetch remote playlist: {cause}")


class LocalReadError(PlaylistError):
    """Local playlist folder could not be validated or listed."""

    def __init__(self, cause: str):
        super().__init__(f"Failed to read local playlist: {cause}")
