"""Catalogue bounded context: handmade products, the artisans who make
them, blog posts and textile collection points."""

import structlog
from protean.domain import Domain

catalogue = Domain(name="catalogue")

logger = structlog.get_logger(__name__)
