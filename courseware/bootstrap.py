"""
Explicit application bootstrap

Called once by the entry point; nothing here runs on import.
"""
import logging
from sqlalchemy.orm import Session

from courseware.config import settings
from courseware.database import init_db
from courseware.services.achievement_service import achievement_service
from courseware.services.catalog_service import catalog_service, SyncReport

logger = logging.getLogger(__name__)


def bootstrap(db: Session, content_path: str = None) -> SyncReport:
    """
    Create tables, seed the badge catalog and synchronize chapters

    Each step is idempotent, so running bootstrap again is harmless.

    Returns:
        The catalog synchronization report (empty if sync is disabled)
    """
    init_db(bind=db.get_bind())

    if settings.SEED_BADGES_ON_STARTUP:
        achievement_service.seed_badges(db)

    if not settings.SYNC_CATALOG_ON_STARTUP:
        logger.info("Catalog synchronization on startup disabled")
        return SyncReport()

    report = catalog_service.sync(db, content_path or settings.CONTENT_PATH)
    for error in report.errors:
        logger.warning(f"Catalog directory skipped: {error.directory}: {error.message}")

    return report
