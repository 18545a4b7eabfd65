"""Factory helpers to select the record store backend."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.record_store import SummaryDataSourcePort
from src.infrastructure.json_record_store import JsonSnapshotRecordStore
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.record_store import SqlAlchemyRecordStore
from src.infrastructure.settings import SummarySettings


def create_record_store(
    db_port: DatabaseEnginePort,
    logger=None,
    settings: SummarySettings | None = None,
) -> SummaryDataSourcePort:
    """Return a record store implementation based on configuration.

    Args:
        db_port: Port providing access to the expenses engine (SQL backend).
        logger: Optional logger compatible with logging.Logger-like API.
        settings: Optional settings override, read from env when omitted.

    Returns:
        SummaryDataSourcePort: Concrete record store implementation.
    """
    resolved_logger = logger or get_app_logger()
    resolved_settings = settings or SummarySettings.from_env()
    backend = resolved_settings.backend

    if backend == "sqlalchemy":
        return SqlAlchemyRecordStore(db_port)

    if backend == "json":
        if resolved_settings.snapshot_file is None:
            resolved_logger.warning(
                "Missing snapshot file; set SUMMARY_SNAPSHOT_FILE "
                "to enable the json backend"
            )
            raise RuntimeError(
                "JSON backend requires a SUMMARY_SNAPSHOT_FILE path."
            )
        return JsonSnapshotRecordStore(
            resolved_settings.snapshot_file,
            logger=resolved_logger,
        )

    raise ValueError(
        "Unsupported record store backend: "
        f"{backend}. Expected sqlalchemy or json."
    )


__all__ = ["create_record_store"]
