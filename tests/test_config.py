import json
from pathlib import Path

import pytest

from text_formatting.config import AppConfig, dump_config, load_config


def test_missing_file_gives_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TFS_ENABLE_LOCAL_API", raising=False)
    config = load_config(tmp_path / "absent.toml")
    assert config == AppConfig()
    assert config.runtime.output_dir == Path(".")
    assert config.runtime.log_path is None
    assert config.runtime.enable_local_api is True


def test_values_are_read_from_toml(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text(
        "[runtime]\n"
        'output_dir = "docs"\n'
        'log_file = "ops.jsonl"\n'
        "preview_chars = 200\n"
        "[api]\n"
        'host = "0.0.0.0"\n'
        "port = 9000\n",
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.runtime.output_dir == Path("docs")
    assert config.runtime.log_path == Path("ops.jsonl")
    assert config.runtime.preview_chars == 200
    assert config.api.host == "0.0.0.0"
    assert config.api.port == 9000


def test_dump_config_round_trips_values() -> None:
    payload = json.loads(dump_config(AppConfig()))
    assert payload == {
        "runtime": {
            "output_dir": ".",
            "log_file": "",
            "preview_chars": 0,
            "enable_local_api": True,
        },
        "api": {"host": "127.0.0.1", "port": 8000},
    }


def test_config_path_comes_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "elsewhere.toml"
    path.write_text("[api]\nport = 9100\n", encoding="utf-8")
    monkeypatch.setenv("TFS_CONFIG_PATH", str(path))
    assert load_config().api.port == 9100


def test_explicit_path_wins_over_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TFS_CONFIG_PATH", str(tmp_path / "ignored.toml"))
    (tmp_path / "ignored.toml").write_text("[api]\nport = 9100\n", encoding="utf-8")
    assert load_config(tmp_path / "absent.toml").api.port == 8000


def test_enable_flag_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "config.toml"
    path.write_text("[runtime]\nenable_local_api = true\n", encoding="utf-8")
    monkeypatch.setenv("TFS_ENABLE_LOCAL_API", "off")
    assert load_config(path).runtime.enable_local_api is False
    monkeypatch.setenv("TFS_ENABLE_LOCAL_API", "maybe")
    assert load_config(path).runtime.enable_local_api is True
