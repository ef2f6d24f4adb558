"""Shared fixtures for the prep_pages test suite."""

from __future__ import annotations

import pytest

from prep_pages.composer import CarryForwardComposer
from prep_pages.config import PrepConfig
from prep_pages.localization import Catalog, load_catalog


@pytest.fixture(scope="session")
def catalog() -> Catalog:
    """Return the bundled English message catalog."""
    return load_catalog()


@pytest.fixture
def prep_config() -> PrepConfig:
    """Return a configuration with every default applied."""
    return PrepConfig()


@pytest.fixture
def composer(catalog: Catalog, prep_config: PrepConfig) -> CarryForwardComposer:
    """Return a composer wired to the bundled catalog and default config."""
    return CarryForwardComposer(catalog, prep_config)
