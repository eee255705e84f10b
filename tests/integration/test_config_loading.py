"""Integration tests for configuration loading."""

import pytest

from src.config.errors import ConfigError, ErrorKind
from src.config.loader import ConfigLoader
from src.config.metrics import ConfigMetrics
from src.config.state_machine import ConfigState, ConfigStateError


class TestConfigLoaderIntegration:
    """Integration tests for ConfigLoader."""

    @pytest.mark.integration
    def test_load_valid_environment(self, valid_environ: dict[str, str]) -> None:
        """Test loading a complete environment."""
        loader = ConfigLoader(environ=valid_environ)

        config = loader.load()

        assert loader.state == ConfigState.READY
        assert loader.error is None
        assert loader.loaded_sections == ["server", "events_manager", "auth_service"]
        assert config.get_events_manager_config().get_conn_str() == (
            "http://events.internal:4000"
        )
        assert config.get_auth_service_config().get_conn_str() == (
            "http://auth.internal:5000"
        )

    @pytest.mark.integration
    def test_load_from_process_environment(
        self, service_env: pytest.MonkeyPatch
    ) -> None:
        """Test loading from os.environ."""
        config = ConfigLoader().load()
        assert config.get_auth_service_config().port == 5000

    @pytest.mark.integration
    def test_load_duration_recorded(self, valid_environ: dict[str, str]) -> None:
        """Test that load duration is recorded."""
        loader = ConfigLoader(environ=valid_environ)
        loader.load()
        assert loader.load_duration_ms >= 0
        metrics = ConfigMetrics.get_instance().to_dict()
        assert metrics["config_load_attempts_total"] == 1
        assert metrics["config_load_failures_total"] == {}

    @pytest.mark.integration
    def test_load_missing_variable_fails(self, valid_environ: dict[str, str]) -> None:
        """Test that a missing variable fails the load."""
        del valid_environ["AUTH_SERVICE_HOST"]
        loader = ConfigLoader(environ=valid_environ)

        with pytest.raises(ConfigError) as exc_info:
            loader.load()

        assert loader.state == ConfigState.FAILED
        assert loader.error is exc_info.value
        assert loader.error.kind == ErrorKind.ENVIRONMENT_VARIABLE_MISSING
        assert loader.loaded_sections == ["server", "events_manager"]
        assert ConfigMetrics.get_instance().failures(
            ErrorKind.ENVIRONMENT_VARIABLE_MISSING
        ) == 1

    @pytest.mark.integration
    def test_load_malformed_port_fails(self, valid_environ: dict[str, str]) -> None:
        """Test that a malformed port fails the load."""
        valid_environ["EVENTS_MANAGER_PORT"] = "70000"
        loader = ConfigLoader(environ=valid_environ)

        with pytest.raises(ConfigError):
            loader.load()

        assert loader.error is not None
        assert loader.error.kind == ErrorKind.PARSE_FAILURE
        assert loader.loaded_sections == ["server"]

    @pytest.mark.integration
    def test_loader_is_single_use(self, valid_environ: dict[str, str]) -> None:
        """Test that a loader cannot reload."""
        loader = ConfigLoader(environ=valid_environ)
        loader.load()

        with pytest.raises(ConfigStateError):
            loader.load()

    @pytest.mark.integration
    def test_load_summary(self, valid_environ: dict[str, str]) -> None:
        """Test the load summary after a failure."""
        valid_environ["AUTH_SERVICE_PORT"] = "abc"
        loader = ConfigLoader(environ=valid_environ)
        with pytest.raises(ConfigError):
            loader.load()

        summary = loader.get_load_summary()
        assert summary["state"] == "FAILED"
        assert summary["loaded_sections"] == ["server", "events_manager"]
        assert summary["error"] == {
            "kind": "PARSE_FAILURE",
            "message": "AUTH_SERVICE_PORT: invalid digit found in string",
            "variable": "AUTH_SERVICE_PORT",
        }
