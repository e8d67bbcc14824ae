from __future__ import annotations


class ArxivError(Exception):
    """Base class for arXiv client failures."""


class InvalidURLError(ArxivError, ValueError):
    """A request URL could not be parsed or resolved against the base URL."""


class ArxivParseError(ArxivError, ValueError):
    """arXiv API payload could not be parsed."""


class ResponseReadError(ArxivError):
    """The HTTP call failed or its body could not be decoded."""

    def __init__(self, method: str, uri: str, cause: BaseException) -> None:
        super().__init__(f"error reading response from {method} {uri}: {cause}")
        self.method = method
        self.uri = uri
        self.cause = cause


class EprintNotFoundError(ArxivError, LookupError):
    """arXiv returned no entries for the requested e-print."""

    def __init__(self, message: str = "e-print not found") -> None:
        super().__init__(message)


class NoMatchingEprintsError(EprintNotFoundError):
    """A list query matched no e-prints."""

    def __init__(self, message: str = "no e-prints matched the query") -> None:
        super().__init__(message)
