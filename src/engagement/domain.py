"""Engagement bounded context: contact messages, volunteer and artisan
applications, textile donation inquiries, donations, newsletter
subscriptions and the impact metrics they feed."""

import structlog
from protean.domain import Domain

engagement = Domain(name="engagement")

logger = structlog.get_logger(__name__)
