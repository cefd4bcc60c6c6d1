"""Load the bundled impact figures into the engagement context."""

from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from shared import dataset

from engagement.domain import logger
from engagement.impact.metrics import METRICS_ID, ImpactMetrics


def seed_impact_metrics(overwrite: bool = False) -> bool:
    """Create the metrics record from the dataset. Returns True if written.

    Existing figures are kept unless ``overwrite`` is set, so donations
    recorded since the last seed are not lost.
    """
    repo = current_domain.repository_for(ImpactMetrics)
    try:
        metrics = repo.get(METRICS_ID)
    except ObjectNotFoundError:
        metrics = None

    if metrics is not None and not overwrite:
        return False

    if metrics is None:
        metrics = ImpactMetrics(id=METRICS_ID, **dataset.IMPACT_METRICS)
    else:
        for field, value in dataset.IMPACT_METRICS.items():
            setattr(metrics, field, value)
    metrics.updated_at = datetime.now(UTC)
    repo.add(metrics)
    logger.info("Impact metrics seeded", **dataset.IMPACT_METRICS)
    return True
