"""Exception types raised at the catalogue boundary."""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for catalogue errors."""


class FetchError(CatalogError):
    """The upstream catalogue request failed.

    Covers network failures, timeouts, non-2xx responses and bodies that are
    not valid JSON or lack a ``bodies`` array.  No partial data accompanies
    this error.
    """

    def __init__(self, message: str, status_code: int | None = None,
                 url: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.url = url


class CatalogUnavailableError(CatalogError):
    """The canonical dataset cannot be served (still loading, or failed)."""

    def __init__(self, status: str, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message
