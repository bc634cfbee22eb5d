"""Error types raised by labelnotes."""

from typing import Iterable, Optional


class LabelNotesError(Exception):
    """Base class for all fatal labelnotes errors."""


class ConfigMissing(LabelNotesError):
    """Release configuration file does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Release config not found at {path}")


class InvalidInput(LabelNotesError):
    """Required input (tags, flags, config shape) is absent or malformed."""


class EnvMissing(LabelNotesError):
    """Required environment variables are not set."""

    def __init__(self, names: Iterable[str]):
        self.names = list(names)
        super().__init__(
            "Missing required environment variables: " + ", ".join(self.names)
        )


class ApiError(LabelNotesError):
    """GitHub API returned a non-2xx response or the request failed."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class NetworkTimeout(ApiError):
    """GitHub API request did not complete within the timeout."""
