"""Background jobs that keep the geospatial index current."""

import structlog

from core.services.geospatial_index import geo_indexing_service

logger = structlog.get_logger(__name__)

SYNC_GEOSPATIAL_INDEX_JOB = "core.jobs.geospatial_jobs.sync_geospatial_index_job"


def index_user_job(user_id: str) -> None:
    """Recompute one user's geospatial entry.

    Args:
        user_id: UUID of the user, as a string.
    """
    logger.info("index_user_job_started", user_id=user_id)
    geo_indexing_service.index_user(user_id)


def index_center_job(center_id: str) -> None:
    """Write or drop one center's geospatial entry.

    Args:
        center_id: UUID of the center, as a string.
    """
    logger.info("index_center_job_started", center_id=center_id)
    geo_indexing_service.index_center(center_id)


def sync_geospatial_index_job() -> dict[str, int]:
    """Rebuild the whole index from users and centers."""
    users = geo_indexing_service.sync_all_users()
    centers = geo_indexing_service.index_all_centers()
    result = {
        "users_indexed": users.indexed_count,
        "users_total": users.total,
        "centers_indexed": centers.indexed_count,
    }
    logger.info("geospatial_index_synced", **result)
    return result
