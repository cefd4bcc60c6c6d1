"""ImpactMetrics aggregate: the program's running totals.

There is a single record, created with defaults the first time anyone
reads it. Donations raise ``current_campaign_raised_egp``.
"""

from datetime import UTC, datetime

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import DateTime, Float, Integer
from protean.utils.globals import current_domain

from engagement.domain import engagement, logger

METRICS_ID = "impact"
DEFAULT_CAMPAIGN_GOAL_EGP = 50000.0


@engagement.aggregate
class ImpactMetrics:
    textiles_diverted_kg: Float(default=0.0, min_value=0.0)
    women_trained: Integer(default=0, min_value=0)
    income_disbursed_egp: Float(default=0.0, min_value=0.0)
    current_campaign_goal_egp: Float(default=DEFAULT_CAMPAIGN_GOAL_EGP, min_value=0.0)
    current_campaign_raised_egp: Float(default=0.0, min_value=0.0)
    updated_at: DateTime()

    def record_donation(self, amount: float) -> None:
        if amount <= 0:
            raise ValidationError({"amount": ["Donation amount must be positive"]})
        self.current_campaign_raised_egp = (self.current_campaign_raised_egp or 0.0) + amount
        self.updated_at = datetime.now(UTC)

    @property
    def campaign_progress(self) -> float:
        if not self.current_campaign_goal_egp:
            return 0.0
        return min(self.current_campaign_raised_egp / self.current_campaign_goal_egp, 1.0)

    def to_record(self) -> dict:
        return {
            "_id": str(self.id),
            "textiles_diverted_kg": self.textiles_diverted_kg,
            "women_trained": self.women_trained,
            "income_disbursed_egp": self.income_disbursed_egp,
            "current_campaign_goal_egp": self.current_campaign_goal_egp,
            "current_campaign_raised_egp": self.current_campaign_raised_egp,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }


def current_metrics() -> ImpactMetrics:
    """Load the metrics record, creating it with defaults if missing."""
    repo = current_domain.repository_for(ImpactMetrics)
    try:
        return repo.get(METRICS_ID)
    except ObjectNotFoundError:
        metrics = ImpactMetrics(id=METRICS_ID, updated_at=datetime.now(UTC))
        repo.add(metrics)
        logger.info("Impact metrics initialised with defaults")
        return metrics
