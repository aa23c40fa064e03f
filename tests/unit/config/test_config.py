"""Pruebas de carga de configuración por defecto y desde YAML."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from unwind import config
from unwind.config.constants import CONFIG_ENV_VAR


def test_defaults_match_prototype_values() -> None:
    cfg = config.load_default()

    assert cfg.session.clear_on_logout is False
    assert cfg.session.min_password_length == 6
    assert (cfg.calendar.initial_year, cfg.calendar.initial_month) == (2025, 8)
    assert cfg.calendar.active_days == [18, 19, 20, 21, 26, 28]


def test_from_yaml_merges_known_keys_and_ignores_unknown(tmp_path: Path) -> None:
    path = tmp_path / "unwind.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "session": {"clear_on_logout": True},
                "calendar": {"initial_month": 1, "active_days": [3, 4]},
                "auth": {"known_emails": ["me@unwind.app"]},
                "unknown_section": {"x": 1},
            }
        ),
        encoding="utf-8",
    )

    cfg = config.from_yaml(path)

    assert cfg.session.clear_on_logout is True
    assert cfg.session.min_password_length == 6
    assert cfg.calendar.initial_month == 1
    assert cfg.calendar.initial_year == 2025
    assert cfg.calendar.active_days == [3, 4]
    assert cfg.auth.known_emails == ["me@unwind.app"]
    assert not hasattr(cfg, "unknown_section")


def test_empty_yaml_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert config.from_yaml(path).to_dict() == config.load_default().to_dict()


def test_yaml_root_must_be_mapping(tmp_path: Path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")

    with pytest.raises(ValueError):
        config.from_yaml(path)


def test_load_config_reads_env_var(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "env.yaml"
    path.write_text("ui:\n  greeting: Good morning!\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    assert config.load_config().ui.greeting == "Good morning!"


def test_load_config_without_env_uses_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)

    assert config.load_config().to_dict() == config.load_default().to_dict()


def test_missing_yaml_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        config.from_yaml(tmp_path / "missing.yaml")


def test_copy_is_deep() -> None:
    cfg = config.load_default()
    clone = cfg.copy()

    clone.calendar.active_days.append(1)

    assert cfg.calendar.active_days == [18, 19, 20, 21, 26, 28]
