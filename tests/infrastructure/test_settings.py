"""Tests for infrastructure settings."""

from pathlib import Path

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import SummarySettings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    for name in (
        "SUMMARY_BACKEND",
        "SUMMARY_SNAPSHOT_FILE",
        "SUMMARY_PLOTLYJS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)


def test_from_env_defaults(tmp_path) -> None:
    """Without env vars the SQL backend and CDN plotly.js are used."""
    settings = SummarySettings.from_env()

    assert settings == SummarySettings()


def test_from_env_reads_backend_and_snapshot(monkeypatch, tmp_path) -> None:
    snapshot = tmp_path / "snapshot.json"
    snapshot.write_text("{}", encoding="utf-8")
    monkeypatch.setenv("SUMMARY_BACKEND", " JSON ")
    monkeypatch.setenv("SUMMARY_SNAPSHOT_FILE", str(snapshot))

    settings = SummarySettings.from_env()

    assert settings.backend == "json"
    assert isinstance(settings.snapshot_file, Path)
    assert settings.snapshot_file == snapshot.resolve()


def test_from_env_accepts_file_uri(monkeypatch, tmp_path) -> None:
    snapshot = tmp_path / "my snapshot.json"
    snapshot.write_text("{}", encoding="utf-8")
    monkeypatch.setenv("SUMMARY_SNAPSHOT_FILE", snapshot.resolve().as_uri())

    settings = SummarySettings.from_env()

    assert settings.snapshot_file == snapshot.resolve()


def test_from_env_picks_single_snapshot_in_data_dir(tmp_path) -> None:
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    snapshot = data_dir / "expenses.json"
    snapshot.write_text("{}", encoding="utf-8")

    settings = SummarySettings.from_env()

    assert settings.snapshot_file == snapshot.resolve()


def test_from_env_ignores_ambiguous_data_dir(tmp_path) -> None:
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "a.json").write_text("{}", encoding="utf-8")
    (data_dir / "b.json").write_text("{}", encoding="utf-8")

    settings = SummarySettings.from_env()

    assert settings.snapshot_file is None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("inline", "inline"), ("CDN", "cdn"), ("directory", "cdn")],
)
def test_from_env_plotlyjs_mode(monkeypatch, raw, expected) -> None:
    monkeypatch.setenv("SUMMARY_PLOTLYJS", raw)

    assert SummarySettings.from_env().plotlyjs == expected
