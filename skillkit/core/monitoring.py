"""
Error reporting setup.
"""

import logging

import sentry_sdk

from skillkit.core.config import settings

logger = logging.getLogger(__name__)


def init_sentry() -> bool:
    """
    Initialize Sentry error reporting when a DSN is configured.

    Returns:
        True if the SDK was initialized, False when reporting is disabled
    """
    if not settings.SENTRY_DSN:
        logger.debug("SENTRY_DSN not set, error reporting disabled")
        return False

    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.ENVIRONMENT,
        release=f"{settings.PROJECT_NAME}@{settings.VERSION}",
        traces_sample_rate=1.0,
    )
    logger.debug("Sentry initialized")
    return True
