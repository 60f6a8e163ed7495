from __future__ import annotations

import json

import pytest

from explorer_network.config import DEFAULTS, get_network_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in (
        "EXPLORER_CONFIG_FILE",
        "EXPLORER_MAIN_BASE_URL",
        "EXPLORER_SEARCH_BASE_URL",
        "EXPLORER_SEARCH_PATH",
        "EXPLORER_DEBUG",
    ):
        monkeypatch.delenv(var, raising=False)


def test_defaults_only():
    assert get_network_config() == DEFAULTS  # nosec B101


def test_merge_order_file_env_overrides(monkeypatch, tmp_path):
    cfg_file = tmp_path / "explorer.json"
    cfg_file.write_text(
        json.dumps({"main_base_url": "https://file.test/", "search_path": "find", "unknown": 1}),
        encoding="utf-8",
    )
    monkeypatch.setenv("EXPLORER_CONFIG_FILE", str(cfg_file))
    monkeypatch.setenv("EXPLORER_SEARCH_PATH", "lookup")

    cfg = get_network_config({"search_base_url": "https://search.test/", "debug": None})

    assert cfg["main_base_url"] == "https://file.test/"  # nosec B101
    assert cfg["search_path"] == "lookup"  # nosec B101
    assert cfg["search_base_url"] == "https://search.test/"  # nosec B101
    assert "unknown" not in cfg  # nosec B101
    assert cfg["debug"] is False  # nosec B101


@pytest.mark.parametrize("raw, expected", [("1", True), ("on", True), ("TRUE", True), ("0", False), ("", False)])
def test_debug_flag_parsing(monkeypatch, raw, expected):
    monkeypatch.setenv("EXPLORER_DEBUG", raw)
    assert get_network_config()["debug"] is expected  # nosec B101


def test_yaml_file(monkeypatch, tmp_path):
    pytest.importorskip("yaml")
    cfg_file = tmp_path / "explorer.yaml"
    cfg_file.write_text("main_base_url: https://yaml.test/\ndebug: true\n", encoding="utf-8")
    monkeypatch.setenv("EXPLORER_CONFIG_FILE", str(cfg_file))

    cfg = get_network_config()
    assert cfg["main_base_url"] == "https://yaml.test/"  # nosec B101
    assert cfg["debug"] is True  # nosec B101


def test_missing_file_is_ignored(monkeypatch, tmp_path):
    monkeypatch.setenv("EXPLORER_CONFIG_FILE", str(tmp_path / "absent.json"))
    assert get_network_config() == DEFAULTS  # nosec B101


def _warnings(err: str):
    events = [json.loads(ln) for ln in err.splitlines() if ln.strip()]
    return [e for e in events if e.get("event") == "config.unreadable"]


def test_unparsable_file_warns_and_falls_back(monkeypatch, tmp_path, capsys):
    cfg_file = tmp_path / "explorer.yaml"
    cfg_file.write_text("main_base_url: [unclosed\n", encoding="utf-8")
    monkeypatch.setenv("EXPLORER_CONFIG_FILE", str(cfg_file))

    assert get_network_config() == DEFAULTS  # nosec B101
    found = _warnings(capsys.readouterr().err)
    assert len(found) == 1  # nosec B101
    assert found[0]["level"] == "WARNING"  # nosec B101
    assert found[0]["path"] == str(cfg_file)  # nosec B101


def test_non_mapping_file_warns(monkeypatch, tmp_path, capsys):
    cfg_file = tmp_path / "explorer.json"
    cfg_file.write_text("[1, 2, 3]", encoding="utf-8")
    monkeypatch.setenv("EXPLORER_CONFIG_FILE", str(cfg_file))

    assert get_network_config() == DEFAULTS  # nosec B101
    found = _warnings(capsys.readouterr().err)
    assert len(found) == 1 and "list" in found[0]["reason"]  # nosec B101


def test_missing_file_does_not_warn(monkeypatch, tmp_path, capsys):
    monkeypatch.setenv("EXPLORER_CONFIG_FILE", str(tmp_path / "absent.json"))
    get_network_config()
    assert _warnings(capsys.readouterr().err) == []  # nosec B101
