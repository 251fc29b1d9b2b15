"""Unit tests for client configuration."""

import pytest

from sonarqube.web.config import DEFAULT_TIMEOUT, ClientConfig, normalize_base_url


class TestClientConfig:
    def test_trailing_slash_removed(self):
        """Test base URL is normalized."""
        config = ClientConfig(base_url="https://sonar.example.com//")
        assert config.base_url == "https://sonar.example.com"
        assert config.timeout == DEFAULT_TIMEOUT

    def test_missing_base_url(self):
        with pytest.raises(ValueError, match="base_url is required"):
            ClientConfig(base_url="")

    def test_non_positive_timeout(self):
        with pytest.raises(ValueError, match="timeout must be positive"):
            ClientConfig(base_url="https://sonar.example.com", timeout=0)

    def test_normalize_base_url(self):
        assert normalize_base_url("http://localhost:9000/") == "http://localhost:9000"


class TestFromEnv:
    """Test reading configuration from environment variables."""

    def test_reads_all_variables(self):
        config = ClientConfig.from_env(
            {
                "SONARQUBE_URL": "http://localhost:9000/",
                "SONARQUBE_TOKEN": "squ_abc",
                "SONARQUBE_TIMEOUT": "5",
            }
        )
        assert config.base_url == "http://localhost:9000"
        assert config.token == "squ_abc"
        assert config.timeout == 5.0

    def test_empty_token_becomes_none(self):
        config = ClientConfig.from_env({"SONARQUBE_URL": "http://x", "SONARQUBE_TOKEN": ""})
        assert config.token is None
        assert config.timeout == DEFAULT_TIMEOUT

    def test_missing_url(self):
        with pytest.raises(ValueError, match="SONARQUBE_URL"):
            ClientConfig.from_env({})

    def test_invalid_timeout(self):
        with pytest.raises(ValueError, match="SONARQUBE_TIMEOUT"):
            ClientConfig.from_env({"SONARQUBE_URL": "http://x", "SONARQUBE_TIMEOUT": "soon"})

    def test_uses_os_environ(self, monkeypatch):
        """Test os.environ is read when no mapping is given."""
        monkeypatch.setenv("SONARQUBE_URL", "http://env-host:9000")
        monkeypatch.delenv("SONARQUBE_TOKEN", raising=False)
        monkeypatch.delenv("SONARQUBE_TIMEOUT", raising=False)
        config = ClientConfig.from_env()
        assert config.base_url == "http://env-host:9000"
        assert config.token is None
