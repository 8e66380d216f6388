from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from sheetview.settings import Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SOURCES", "PAGE_SIZE", "REQUEST_TIMEOUT", "REFRESH_INTERVAL", "LOG_FORMAT", "LOG_LEVEL"):
        monkeypatch.delenv(f"SHEETVIEW_{name}", raising=False)


def test_defaults(tmp_path: Path) -> None:
    settings = Settings.load(cwd=tmp_path)

    assert settings.sources == {}
    assert settings.page_size == 10
    assert settings.refresh_interval == 900.0
    assert settings.log_format == "text"
    assert settings.log_level == logging.INFO


def test_toml_file_supplies_sources(tmp_path: Path) -> None:
    (tmp_path / "settings.toml").write_text(
        'page_size = 25\n\n[sources]\nto_listen = " https://example.test/a "\ndata = ""\n',
        encoding="utf-8",
    )

    settings = Settings.load(cwd=tmp_path)

    assert settings.page_size == 25
    assert settings.sources == {"to_listen": "https://example.test/a", "data": ""}


def test_env_overrides_toml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "settings.toml").write_text("page_size = 25\n", encoding="utf-8")
    monkeypatch.setenv("SHEETVIEW_PAGE_SIZE", "5")
    monkeypatch.setenv("SHEETVIEW_SOURCES", '{"one": "https://example.test/1"}')
    monkeypatch.setenv("SHEETVIEW_LOG_LEVEL", "debug")

    settings = Settings.load(cwd=tmp_path)

    assert settings.page_size == 5
    assert settings.sources == {"one": "https://example.test/1"}
    assert settings.log_level == logging.DEBUG


def test_explicit_overrides_win(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHEETVIEW_PAGE_SIZE", "5")

    settings = Settings.load(cwd=tmp_path, page_size=7)

    assert settings.page_size == 7


def test_invalid_values_rejected(tmp_path: Path) -> None:
    with pytest.raises(ValidationError):
        Settings.load(cwd=tmp_path, page_size=0)
    with pytest.raises(ValidationError):
        Settings.load(cwd=tmp_path, log_level="loud")
    with pytest.raises(ValidationError):
        Settings.load(cwd=tmp_path, sources={" ": "https://example.test"})
