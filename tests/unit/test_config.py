"""Tests for configuration."""

from pathlib import Path

import pytest

from arr_repair.config import (
    ArrRepairConfig,
    WaitPolicy,
    create_default_config,
    load_config_from_env,
)
from arr_repair.exceptions import ConfigError


class TestWaitPolicy:
    """Tests for WaitPolicy."""

    def test_defaults(self):
        policy = WaitPolicy()
        assert policy.poll_interval == 5.0
        assert policy.max_wait == 30.0
        assert policy.retries == 3

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"poll_interval": 0},
            {"poll_interval": 10, "max_wait": 5},
            {"retries": 0},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            WaitPolicy(**kwargs)


class TestArrRepairConfig:
    """Tests for ArrRepairConfig."""

    def test_string_paths_converted(self):
        config = ArrRepairConfig(download_folder="/tmp/dl")
        assert config.download_folder == Path("/tmp/dl")

    def test_normalizes_url_and_type(self):
        config = ArrRepairConfig(server_url="http://host:8989/", server_type="Radarr")
        assert config.server_url == "http://host:8989"
        assert config.server_type == "radarr"

    def test_wait_policy_from_config(self):
        config = create_default_config(poll_interval=1.0, max_wait=4.0, command_retries=2)
        assert config.wait_policy == WaitPolicy(poll_interval=1.0, max_wait=4.0, retries=2)

    def test_validate_ok(self, test_config):
        test_config.validate()

    def test_validate_missing_api_key(self, download_dir):
        config = ArrRepairConfig(download_folder=download_dir)
        with pytest.raises(ConfigError, match="API key"):
            config.validate()

    def test_validate_unknown_type(self, download_dir):
        config = ArrRepairConfig(api_key="k", server_type="lidarr", download_folder=download_dir)
        with pytest.raises(ConfigError, match="Unknown server type"):
            config.validate()

    def test_validate_missing_download_folder(self, tmp_path):
        config = ArrRepairConfig(api_key="k", download_folder=tmp_path / "missing")
        with pytest.raises(ConfigError, match="Download folder"):
            config.validate()

    def test_validate_bad_polling(self, download_dir):
        config = ArrRepairConfig(api_key="k", download_folder=download_dir, command_retries=0)
        with pytest.raises(ConfigError, match="polling"):
            config.validate()


class TestLoadConfigFromEnv:
    """Tests for load_config_from_env."""

    def test_reads_environment(self):
        config = load_config_from_env(
            {
                "ARR_URL": "http://radarr:7878",
                "ARR_API_KEY": "abc",
                "ARR_TYPE": "radarr",
                "ARR_DOWNLOAD_FOLDER": "/downloads",
                "ARR_RETRIES": "5",
                "ARR_POLL_INTERVAL": "2.5",
            }
        )

        assert config.server_url == "http://radarr:7878"
        assert config.api_key == "abc"
        assert config.server_type == "radarr"
        assert config.download_folder == Path("/downloads")
        assert config.command_retries == 5
        assert config.poll_interval == 2.5

    def test_overrides_win_and_none_is_ignored(self):
        config = load_config_from_env(
            {"ARR_API_KEY": "env", "ARR_URL": "http://env"},
            api_key="cli",
            server_url=None,
        )

        assert config.api_key == "cli"
        assert config.server_url == "http://env"

    def test_invalid_number(self):
        with pytest.raises(ConfigError, match="ARR_RETRIES"):
            load_config_from_env({"ARR_RETRIES": "many"})

    def test_empty_values_ignored(self):
        config = load_config_from_env({"ARR_API_KEY": ""})
        assert config.api_key == ""
