"""Pytest configuration and shared fixtures."""

import json
import sys
from pathlib import Path

import pytest

# Add project root to path for all tests
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from mwgateway.gateway import WikiGateway


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's MW_* and LOG_DIR settings out of the tests."""
    for name in ("MW_CONFIG", "MW_URL", "MW_WIKI_NAME", "MW_USER_AGENT", "MW_LOG_LEVEL", "LOG_DIR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def temp_log_dir(tmp_path):
    """Provide a temporary directory for log files."""
    log_dir = tmp_path / "logs"
    log_dir.mkdir()
    return log_dir


@pytest.fixture
def config_file(tmp_path):
    """Write a sample config.json and return its path."""
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "url": "https://wiki.example.com/",
        "api_path": "/w/api.php",
        "article_path": "/wiki",
        "wiki_name": "TestWiki",
    }), encoding="utf-8")
    return path


@pytest.fixture
def gateway():
    """Gateway for a wiki at https://wiki.example.com."""
    return WikiGateway(
        api_url="https://wiki.example.com/api.php",
        article_url="https://wiki.example.com/wiki/",
        wiki_name="TestWiki",
    )
