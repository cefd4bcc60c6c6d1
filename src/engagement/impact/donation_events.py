"""Impact metrics react to donations by raising the campaign total."""

import structlog
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from engagement.domain import engagement
from engagement.donation.events import DonationReceived
from engagement.impact.metrics import ImpactMetrics, current_metrics

logger = structlog.get_logger(__name__)


@engagement.event_handler(part_of=ImpactMetrics, stream_category="engagement::donation")
class DonationImpactEventHandler:
    @handle(DonationReceived)
    def on_donation_received(self, event: DonationReceived) -> None:
        metrics = current_metrics()
        metrics.record_donation(event.amount)
        current_domain.repository_for(ImpactMetrics).add(metrics)
        logger.info(
            "Campaign total raised",
            donation_id=str(event.donation_id),
            raised=metrics.current_campaign_raised_egp,
        )
