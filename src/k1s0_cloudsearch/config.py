"""CloudSearch client configuration."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from .exceptions import CloudSearchErrorCodes, ConfigurationError

DEFAULT_API_VERSION = "2013-01-01"
DEFAULT_AWS_REGION = "us-east-1"
DEFAULT_SERVICE_HOST = "cloudsearch.amazonaws.com"


class CloudSearchConfig(BaseModel):
    """Connection settings for one CloudSearch domain."""

    search_domain: str | None = None
    aws_region: str = DEFAULT_AWS_REGION
    api_version: str = DEFAULT_API_VERSION
    service_host: str = DEFAULT_SERVICE_HOST
    timeout_seconds: float = Field(default=10.0, gt=0)
    # No network calls are made while set; searches return an empty result set.
    sandbox: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> CloudSearchConfig:
        """Validate settings taken from the application's own configuration.

        Raises ConfigurationError when a value has the wrong type or is out of range.
        """
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise ConfigurationError(
                code=CloudSearchErrorCodes.INVALID_CONFIG,
                message=f"Invalid cloudsearch settings: {e}",
                cause=e,
            ) from e

    def require_search_domain(self) -> str:
        """Return the search domain, or raise ConfigurationError when unset."""
        if not self.search_domain:
            raise ConfigurationError(
                code=CloudSearchErrorCodes.MISSING_SEARCH_DOMAIN,
                message="search_domain is not configured",
            )
        return self.search_domain

    def _endpoint(self, prefix: str) -> str:
        return (
            f"http://{prefix}-{self.require_search_domain()}.{self.aws_region}."
            f"{self.service_host}/{self.api_version}"
        )

    @property
    def search_url(self) -> str:
        return f"{self._endpoint('search')}/search"

    @property
    def document_url(self) -> str:
        return f"{self._endpoint('doc')}/documents/batch"
