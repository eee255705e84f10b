"""Integration tests for the fatal configuration boundary."""

import pytest

from src.config.bootstrap import EXIT_CONFIG_ERROR, load_config_or_exit
from src.config.cell import ConfigCell, get_config_cell
from src.config.effective import Config
from src.config.loader import ConfigLoader


class TestLoadConfigOrExit:
    """Tests for load_config_or_exit."""

    @pytest.mark.integration
    def test_returns_config(self, service_env: pytest.MonkeyPatch) -> None:
        """Valid environment yields the shared configuration."""
        config = load_config_or_exit()
        assert isinstance(config, Config)
        assert get_config_cell().get() is config

    @pytest.mark.integration
    def test_exits_on_missing_variable(
        self,
        clean_env: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Missing variable terminates with a diagnostic."""
        with pytest.raises(SystemExit) as exc_info:
            load_config_or_exit()

        assert exc_info.value.code == EXIT_CONFIG_ERROR
        err = capsys.readouterr().err
        assert "Failed to load microservice configuration" in err
        assert "EVENTS_MANAGER_HOST" in err
        assert "ENVIRONMENT_VARIABLE_MISSING" in err

    @pytest.mark.integration
    def test_exits_on_malformed_port(
        self,
        valid_environ: dict[str, str],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Malformed port terminates naming the variable and cause."""
        valid_environ["EVENTS_MANAGER_PORT"] = "not_a_number"
        cell = ConfigCell(ConfigLoader(environ=valid_environ).load)

        with pytest.raises(SystemExit):
            load_config_or_exit(cell)

        err = capsys.readouterr().err
        assert "PARSE_FAILURE" in err
        assert "EVENTS_MANAGER_PORT: invalid digit found in string" in err
        assert "Hint:" in err
