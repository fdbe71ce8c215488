"""
Pytest configuration and shared fixtures for Polyglot tests.
"""
import os
import sys
import json
import pytest
from unittest.mock import MagicMock, AsyncMock, patch

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture
def translate_config():
    """Upstream settings used instead of env/config.json during tests."""
    return {
        "endpoint": "http://upstream.test/translate",
        "api_key": None,
        "timeout": None,
    }


@pytest.fixture
def mock_upstream(translate_config):
    """
    Patch httpx.AsyncClient inside polyglot.upstream.
    Yields the client instance; set ``post.return_value`` / ``post.side_effect``.
    """
    with patch('polyglot.upstream.get_translate_config', return_value=translate_config), \
         patch('polyglot.upstream.httpx') as mock_httpx:
        mock_client_instance = AsyncMock()
        mock_httpx.AsyncClient.return_value.__aenter__.return_value = mock_client_instance
        yield mock_client_instance


@pytest.fixture
def make_upstream_response():
    def _make(status_code=200, json_data=None, text=""):
        response = MagicMock()
        response.status_code = status_code
        response.text = text or (json.dumps(json_data) if json_data is not None else "")
        if json_data is None:
            response.json.side_effect = ValueError("No JSON body")
        else:
            response.json.return_value = json_data
        return response
    return _make


@pytest.fixture
def test_client():
    """Create a test client for the FastAPI app."""
    from fastapi.testclient import TestClient
    from polyglot.api_server import app

    with TestClient(app) as client:
        yield client


@pytest.fixture
def temp_config_dir(tmp_path):
    """Create a temporary config directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def sample_config():
    """Return sample config dictionary."""
    return {
        "system_settings": {
            "api_server": {
                "host": "0.0.0.0",
                "port": 9100
            },
            "translation_service": {
                "endpoint": "http://translate.example.com/translate",
                "api_key": "file-key",
                "timeout": 12
            }
        }
    }


@pytest.fixture
def clean_env(monkeypatch):
    """Remove Polyglot environment overrides so tests see file/default values."""
    for key in ("TRANSLATE_ENDPOINT", "TRANSLATE_API_KEY", "TRANSLATE_TIMEOUT",
                "POLYGLOT_HOST", "POLYGLOT_PORT", "ALLOWED_ORIGINS"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
