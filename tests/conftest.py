"""Shared pytest fixtures for intcalc tests."""

from pathlib import Path

import pytest

from intcalc.core.config import LOG_LEVEL_ENV_VAR, ReplConfig


@pytest.fixture(autouse=True)
def _clear_log_level_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's INTCALC_LOG_LEVEL out of the tests."""
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.fixture
def quiet_config() -> ReplConfig:
    """Return a config with no banner and an empty prompt."""
    return ReplConfig(prompt="", banner="")


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write an intcalc.toml with every [repl] setting overridden."""
    path = tmp_path / "intcalc.toml"
    path.write_text(
        """
[repl]
prompt = "calc> "
banner = "hello"
show_ast = true
log_level = "info"
"""
    )
    return path
