"""Configuration loading tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from core.policy_runtime import (
    load_effective_config,
    load_yaml,
    merge_dicts,
    settings_from_config,
)


def test_missing_config_falls_back_to_defaults(tmp_path: Path) -> None:
    config = load_effective_config(tmp_path)
    settings = settings_from_config(config)

    assert config == {}
    assert settings.worker_count == 5
    assert settings.base_cost == 60
    assert settings.detect_cycles is True
    assert settings.logging.level == "WARNING"


def test_local_config_overrides_default(tmp_path: Path) -> None:
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "default.yaml").write_text(
        "scheduler:\n  worker_count: 5\n  base_cost: 60\nlogging:\n  level: WARNING\n",
        encoding="utf-8",
    )
    (config_dir / "local.yaml").write_text(
        "scheduler:\n  worker_count: 2\nlogging:\n  level: DEBUG\n",
        encoding="utf-8",
    )

    settings = settings_from_config(load_effective_config(tmp_path))

    assert settings.worker_count == 2
    assert settings.base_cost == 60
    assert settings.logging.level == "DEBUG"


def test_non_mapping_yaml_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ValueError, match="mapping"):
        load_yaml(path)


def test_invalid_worker_count_is_rejected() -> None:
    with pytest.raises(ValidationError):
        settings_from_config({"scheduler": {"worker_count": 0}})


def test_merge_dicts_is_recursive() -> None:
    merged = merge_dicts({"a": {"b": 1, "c": 2}, "d": 3}, {"a": {"c": 9}})

    assert merged == {"a": {"b": 1, "c": 9}, "d": 3}


def test_logging_level_is_normalized_and_restricted() -> None:
    assert settings_from_config({"logging": {"level": "debug"}}).logging.level == "DEBUG"

    with pytest.raises(ValidationError):
        settings_from_config({"logging": {"level": "LOUD"}})
