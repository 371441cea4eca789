"""Shared pytest fixtures; scripts/ modules are imported by name."""

import shutil
import sys
import tempfile
from pathlib import Path

import pytest

SCRIPTS_DIR = Path(__file__).parent.parent / "scripts"
sys.path.insert(0, str(SCRIPTS_DIR))


@pytest.fixture
def temp_dir():
    path = Path(tempfile.mkdtemp())
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def site_provider(monkeypatch):
    """Swap the module-level DNA provider so accessors read a test config."""
    import site_config

    def _install(config):
        provider = site_config.DesignDNAProvider(config=config)
        monkeypatch.setattr(site_config, "_default_provider", provider)
        return provider

    return _install
