"""Error types surfaced to the command line."""

from __future__ import annotations


class SyoRyoUmaError(Exception):
    """Base class for errors reported to the user."""


class ResourceUnavailable(SyoRyoUmaError):  # noqa: N818
    """Raised when a bundled art resource cannot be read at startup."""

    def __init__(self, name: str, cause: BaseException) -> None:
        self.name = name
        self.cause = cause
        super().__init__(f"could not load art file {name}: {cause}")


class UnexpectedFailure(SyoRyoUmaError):  # noqa: N818
    """Raised when the animation stops on any other error.

    The terminal has already been restored when this is raised.
    """
