from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError

from wholefile.config import load_config
from wholefile.config.schema import deep_merge_dicts


def test_default_values() -> None:
    cfg = load_config(env={})
    assert cfg.schema_version == 1
    assert cfg.output.shape == "text"
    assert cfg.output.line_numbers is False
    assert cfg.logging.level == "WARNING"


def test_user_yaml_overrides(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("output:\n  line_numbers: true\n")
    cfg = load_config(cfg_file, env={})
    assert cfg.output.line_numbers is True
    assert cfg.output.shape == "text"


def test_env_overrides_yaml(tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("output:\n  shape: bytes\n")
    cfg = load_config(cfg_file, env={"WHOLEFILE_SHAPE": "Lines", "WHOLEFILE_LOG_LEVEL": "debug"})
    assert cfg.output.shape == "lines"
    assert cfg.logging.level == "DEBUG"


def test_process_environment_used(monkeypatch: Any) -> None:
    monkeypatch.setenv("WHOLEFILE_LOG_LEVEL", "info")
    monkeypatch.delenv("WHOLEFILE_SHAPE", raising=False)
    assert load_config().logging.level == "INFO"


def test_unknown_key(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("unknown:\n  foo: 1\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_invalid_shape(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("output:\n  shape: xml\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_non_mapping_yaml(tmp_path: Path) -> None:
    cfg_file = tmp_path / "list.yml"
    cfg_file.write_text("- a\n- b\n")
    with pytest.raises(ValueError, match="mapping"):
        load_config(cfg_file, env={})


def test_deep_merge_nested_and_list_replace() -> None:
    base = {
        "outer": {"a": 1, "b": {"c": 2}},
        "list": [1, 2],
    }
    override = {
        "outer": {"b": {"c": 3}},
        "list": [3],
    }
    merged = deep_merge_dicts(base, override)
    assert merged == {"outer": {"a": 1, "b": {"c": 3}}, "list": [3]}
    # ensure original not mutated
    assert base["list"] == [1, 2]
