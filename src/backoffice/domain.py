"""Backoffice bounded context: staff accounts for the admin endpoints."""

import structlog
from protean.domain import Domain

backoffice = Domain(name="backoffice")

logger = structlog.get_logger(__name__)
