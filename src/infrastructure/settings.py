"""Environment-driven settings for the record store and chart renderer.

Recognised variables:
    SUMMARY_BACKEND: ``sqlalchemy`` (default) or ``json``.
    SUMMARY_SNAPSHOT_FILE: Snapshot path or ``file://`` URI for ``json``.
    SUMMARY_PLOTLYJS: ``cdn`` (default) or ``inline``.
"""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root

PLOTLYJS_MODES = ("cdn", "inline")


@dataclass(frozen=True)
class SummarySettings:
    """Settings selecting the record store and how charts embed plotly.js.

    Attributes:
        backend: Record store identifier, validated by the store factory.
        snapshot_file: Snapshot used by the ``json`` backend.
        plotlyjs: ``cdn`` or ``inline``.
    """

    backend: str = "sqlalchemy"
    snapshot_file: Optional[Path] = None
    plotlyjs: str = "cdn"

    @classmethod
    def from_env(cls) -> "SummarySettings":
        """Read settings from the environment, falling back to defaults."""
        logger = get_app_logger()
        raw_snapshot = os.getenv("SUMMARY_SNAPSHOT_FILE")
        snapshot_file = (
            _snapshot_from_uri(raw_snapshot, logger)
            if raw_snapshot
            else _discover_snapshot(logger)
        )
        return cls(
            backend=_read_lower("SUMMARY_BACKEND", "sqlalchemy"),
            snapshot_file=snapshot_file,
            plotlyjs=_plotlyjs_mode(logger),
        )


def _read_lower(name: str, default: str) -> str:
    return os.getenv(name, default).strip().lower()


def _plotlyjs_mode(logger) -> str:
    mode = _read_lower("SUMMARY_PLOTLYJS", "cdn")
    if mode in PLOTLYJS_MODES:
        return mode
    logger.warning(f"Unknown SUMMARY_PLOTLYJS value '{mode}', using cdn")
    return "cdn"


def _snapshot_from_uri(raw: str, logger) -> Path:
    """Turn a snapshot path or ``file://`` URI into an absolute path.

    A missing file is only logged here; the JSON store raises when it is
    actually opened.
    """
    parsed = urlparse(raw)
    if parsed.scheme == "file":
        raw = unquote(parsed.path)
    path = Path(raw).expanduser().resolve()
    if not path.exists():
        logger.warning(f"Snapshot file does not exist at {path}")
    return path


def _discover_snapshot(logger) -> Path | None:
    """Return the only ``data/*.json`` file of the project, if unambiguous."""
    data_dir = get_project_root() / "data"
    candidates = sorted(data_dir.glob("*.json")) if data_dir.is_dir() else []
    if len(candidates) == 1:
        return candidates[0].resolve()
    if candidates:
        logger.warning(
            f"Found {len(candidates)} snapshots in {data_dir}; "
            "set SUMMARY_SNAPSHOT_FILE to choose one."
        )
    return None


__all__ = ["SummarySettings", "PLOTLYJS_MODES"]
