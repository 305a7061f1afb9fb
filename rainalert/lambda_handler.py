"""Scheduled trigger entry point.

The trigger supplies no payload; every activation is an independent run
configured from $CONFIG_PATH.
"""

import logging

from rainalert.models.run import RunStatus
from rainalert.pipeline.rain_alert_job import run_job

logger = logging.getLogger(__name__)

if not logging.getLogger().handlers:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def handler(event=None, context=None) -> str:
    """Run one rain check and return its status.

    A failed run re-raises its error so the trigger records the failure.
    """
    result = run_job()
    if result.status == RunStatus.FAILED and result.error is not None:
        raise result.error
    if result.notification_error:
        logger.warning("Run finished without notifying: %s", result.notification_error)
    return str(result.status)
