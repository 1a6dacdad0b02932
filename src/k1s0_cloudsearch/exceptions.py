"""cloudsearch library exceptions."""

from __future__ import annotations


class CloudSearchError(Exception):
    """Base error for the cloudsearch library."""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.cause = cause
        self.status_code = status_code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class CloudSearchErrorCodes:
    """CloudSearchError code constants."""

    MISSING_SEARCH_DOMAIN: str = "MISSING_SEARCH_DOMAIN"
    INVALID_CONFIG: str = "INVALID_CONFIG"
    SEARCH_FAILED: str = "SEARCH_FAILED"
    DOCUMENT_UPDATE_FAILED: str = "DOCUMENT_UPDATE_FAILED"


class ConfigurationError(CloudSearchError):
    """Raised when the client configuration is missing or invalid."""


class SearchError(CloudSearchError):
    """Raised when a search request fails or the server rejects it."""

    def __init__(
        self,
        message: str,
        cause: Exception | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(
            code=CloudSearchErrorCodes.SEARCH_FAILED,
            message=message,
            cause=cause,
            status_code=status_code,
        )


class DocumentUpdateError(CloudSearchError):
    """Raised when a document batch request fails or the server rejects it."""

    def __init__(
        self,
        message: str,
        cause: Exception | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(
            code=CloudSearchErrorCodes.DOCUMENT_UPDATE_FAILED,
            message=message,
            cause=cause,
            status_code=status_code,
        )
