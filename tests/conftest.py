"""Shared fixtures for the cloudsearch tests."""

import pytest
from k1s0_cloudsearch.config import CloudSearchConfig

DOMAIN = "recipes-abc123"
SEARCH_URL = f"http://search-{DOMAIN}.us-east-1.cloudsearch.amazonaws.com/2013-01-01/search"
DOC_URL = f"http://doc-{DOMAIN}.us-east-1.cloudsearch.amazonaws.com/2013-01-01/documents/batch"


@pytest.fixture
def config() -> CloudSearchConfig:
    return CloudSearchConfig(search_domain=DOMAIN)


@pytest.fixture
def sandbox_config() -> CloudSearchConfig:
    return CloudSearchConfig(search_domain=DOMAIN, sandbox=True)
