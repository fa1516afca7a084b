from pathlib import Path
from typing import Any

import pytest

from longspan.config import load_config
from longspan.utils.errors import ConfigError


def test_env_level(monkeypatch: Any) -> None:
    monkeypatch.setenv("LONGSPAN_LOG_LEVEL", "debug")
    cfg = load_config()
    assert cfg.logging.level == "DEBUG"


def test_explicit_env_mapping_wins_over_process_env(monkeypatch: Any) -> None:
    monkeypatch.setenv("LONGSPAN_LOG_LEVEL", "DEBUG")
    cfg = load_config(env={})
    assert cfg.logging.level == "WARNING"


def test_custom_env_override(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text('logging:\n  level: INFO\n  level_env: "CUSTOM_LEVEL"\n')
    cfg = load_config(cfg_file, env={"CUSTOM_LEVEL": "error", "LONGSPAN_LOG_LEVEL": "DEBUG"})
    assert cfg.logging.level_env == "CUSTOM_LEVEL"
    assert cfg.logging.level == "ERROR"


def test_env_level_is_validated() -> None:
    with pytest.raises(ConfigError):
        load_config(env={"LONGSPAN_LOG_LEVEL": "chatty"})
