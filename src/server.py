"""Protean Engine runner for the storefront domains.

Starts Engine workers that process events asynchronously in production:
- ordering: publishes OrderPlaced
- catalogue: decrements stock when an order is placed
- engagement: raises the campaign total when a donation is received

Usage:
    python src/server.py                      # Run every domain engine
    python src/server.py --domain catalogue   # Run only the catalogue engine
"""

import argparse
import asyncio

from protean.server.engine import Engine
from shared.logging import configure_logging

DOMAIN_NAMES = ["catalogue", "ordering", "engagement"]


def _get_domain(name):
    """Import and initialize a domain by name."""
    if name == "catalogue":
        from catalogue.domain import catalogue

        catalogue.init()
        return catalogue
    elif name == "ordering":
        from ordering.domain import ordering

        ordering.init()
        return ordering
    elif name == "engagement":
        from engagement.domain import engagement

        engagement.init()
        return engagement
    else:
        raise ValueError(f"Unknown domain: {name}")


async def run(domain_names):
    engines = []
    for name in domain_names:
        domain = _get_domain(name)
        engines.append(Engine(domain))

    await asyncio.gather(*(engine.run() for engine in engines))


def main():
    parser = argparse.ArgumentParser(description="Handmade storefront Engine runner")
    parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        help="Run a single domain engine (default: run all)",
    )
    args = parser.parse_args()
    configure_logging()

    domain_names = [args.domain] if args.domain else DOMAIN_NAMES

    asyncio.run(run(domain_names))


if __name__ == "__main__":
    main()
