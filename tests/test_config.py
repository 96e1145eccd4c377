"""Tests for client configuration."""

import json
import os
import tempfile

import pytest

from wkdclient.config import DEFAULT_USER_AGENT, ClientConfig
from wkdclient.resolver import ChainResolver, WKDResolver


class TestClientConfig:
    """Tests for ClientConfig."""

    def test_defaults(self):
        config = ClientConfig()
        assert config.timeout == 10
        assert config.user_agent == DEFAULT_USER_AGENT
        assert config.local_directory is None

    def test_load(self):
        """Load values from a JSON file, ignoring unknown keys."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "wkd.json")
            with open(path, "w") as f:
                json.dump({"timeout": 5, "log_level": "debug", "extra": True}, f)

            config = ClientConfig.load(path)
            assert config.timeout == 5
            assert config.log_level == "debug"

    def test_load_missing(self):
        with pytest.raises(FileNotFoundError):
            ClientConfig.load("/nonexistent/wkd.json")

    def test_invalid_timeout(self):
        with pytest.raises(ValueError, match="timeout"):
            ClientConfig.from_dict({"timeout": 0})

    def test_create_resolver(self):
        assert isinstance(ClientConfig().create_resolver(), WKDResolver)

    def test_create_resolver_with_local_directory(self):
        config = ClientConfig(local_directory="/srv/openpgpkey")
        assert isinstance(config.create_resolver(), ChainResolver)

    def test_create_fetcher_sets_user_agent(self):
        fetcher = ClientConfig(user_agent="agent/1").create_fetcher()
        assert fetcher._headers == {"User-Agent": "agent/1"}

    def test_top_level_must_be_object(self):
        """A JSON document that is not an object is rejected."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "wkd.json")
            with open(path, "w") as f:
                json.dump([1], f)

            with pytest.raises(ValueError, match="JSON object"):
                ClientConfig.load(path)

    @pytest.mark.parametrize("level", ["verbose", 10])
    def test_unknown_log_level(self, level):
        """Log levels must be logging level names."""
        with pytest.raises(ValueError, match="log_level"):
            ClientConfig.from_dict({"log_level": level})

    def test_log_level_case_insensitive(self):
        assert ClientConfig.from_dict({"log_level": "info"}).log_level == "info"
