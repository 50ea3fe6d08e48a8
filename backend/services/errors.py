"""Exceptions raised by the search engine."""


class SearchError(Exception):
    """Base class for search failures."""


class CollaboratorUnavailable(SearchError):
    """The recommendation service or the profile store failed."""

    def __init__(self, collaborator: str, message: str = "") -> None:
        self.collaborator = collaborator
        super().__init__(f"{collaborator} unavailable" + (f": {message}" if message else ""))


class DegradedLookup(SearchError):
    """A badge lookup failed; results carry unknown badge status."""
