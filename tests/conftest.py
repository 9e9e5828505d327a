"""
Pytest configuration and shared fixtures.
"""

import logging
import sys
from pathlib import Path
import pytest

# Add the project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from burmese_transliterator.config import ENV_OVERRIDES, CONFIG_ENV_VAR, Settings
from burmese_transliterator.core import Transliterator
from burmese_transliterator.dictionary import build_dictionary, load_static_entries
from burmese_transliterator.log import PACKAGE_LOGGER
from burmese_transliterator.registry import CustomMappingRegistry
from tests.fixtures import ABC_ENTRIES, BURMESE_ENTRIES, SAMPLE_TABLE_JSON, SAMPLE_CONFIG_TOML


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")
    config.addinivalue_line("markers", "cli: mark as exercising the command-line interface")


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers and level changes made by setup_logging or the CLI."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level = list(logger.handlers), logger.level
    yield
    for handler in logger.handlers[:]:
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep settings overrides from the host environment out of tests."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    for env_var in ENV_OVERRIDES:
        monkeypatch.delenv(env_var, raising=False)


# ============================================================================
# Dictionary Fixtures
# ============================================================================


@pytest.fixture
def abc_dictionary():
    """Dictionary with "ABC", "AB" and "A"."""
    return build_dictionary(ABC_ENTRIES)


@pytest.fixture
def burmese_dictionary():
    """Small Burmese dictionary with phrases and consonants."""
    return build_dictionary(BURMESE_ENTRIES)


@pytest.fixture(scope="session")
def packaged_table():
    """Entries and version of the packaged mapping table."""
    return load_static_entries()


@pytest.fixture
def packaged_dictionary(packaged_table):
    entries, version = packaged_table
    return build_dictionary(entries, version=version)


# ============================================================================
# Registry / Engine Fixtures
# ============================================================================


@pytest.fixture
def registry():
    """Create an empty custom mapping registry."""
    return CustomMappingRegistry()


@pytest.fixture
def transliterator(packaged_table, registry):
    """Transliterator over the packaged table with an empty registry."""
    entries, _ = packaged_table
    return Transliterator(static_entries=entries, registry=registry)


@pytest.fixture
def abc_transliterator(registry):
    """Transliterator over the ABC table."""
    return Transliterator(static_entries=ABC_ENTRIES, registry=registry, settings=Settings())


# ============================================================================
# Temporary File Fixtures
# ============================================================================


@pytest.fixture
def temp_table_file(tmp_path):
    """Create a temporary mapping table."""
    file_path = tmp_path / "table.json"
    file_path.write_text(SAMPLE_TABLE_JSON, encoding="utf-8")
    return file_path


@pytest.fixture
def temp_config_file(tmp_path):
    """Create a temporary settings file."""
    file_path = tmp_path / "settings.toml"
    file_path.write_text(SAMPLE_CONFIG_TOML, encoding="utf-8")
    return file_path
