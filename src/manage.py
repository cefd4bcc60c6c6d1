"""Handmade storefront management CLI.

Creates and drops database schemas, loads the bundled dataset and creates
staff accounts.

Usage:
    python src/manage.py setup-db                       # Create all tables
    python src/manage.py drop-db                        # Drop all tables
    python src/manage.py seed                           # Load catalogue + impact metrics
    python src/manage.py create-admin admin s3cretpass  # Add a staff account
"""

import argparse
import sys

DOMAIN_NAMES = ["catalogue", "ordering", "engagement", "backoffice"]


def _domains(names=None):
    from backoffice.domain import backoffice
    from catalogue.domain import catalogue
    from engagement.domain import engagement
    from ordering.domain import ordering

    all_domains = {
        "catalogue": catalogue,
        "ordering": ordering,
        "engagement": engagement,
        "backoffice": backoffice,
    }
    targets = {name: all_domains[name] for name in names} if names else all_domains

    for name, domain in targets.items():
        print(f"Initializing {name} domain...")
        domain.init()
    return targets


def setup_databases(domains=None):
    """Create database schemas for the specified (or all) domains."""
    from shared.db import setup_db

    for name, domain in _domains(domains).items():
        print(f"Creating {name} database schema...")
        setup_db(domain)
        print(f"  {name} schema ready.")

    print("Done.")


def drop_databases(domains=None):
    """Drop database schemas for the specified (or all) domains."""
    from shared.db import drop_db

    for name, domain in _domains(domains).items():
        print(f"Dropping {name} database schema...")
        drop_db(domain)
        print(f"  {name} schema dropped.")

    print("Done.")


def seed(overwrite_metrics=False):
    """Load the bundled catalogue and the impact metrics baseline."""
    from catalogue.seeding import seed_catalogue
    from engagement.seeding import seed_impact_metrics

    domains = _domains(["catalogue", "engagement"])

    with domains["catalogue"].domain_context():
        counts = seed_catalogue()
    for kind, count in counts.items():
        print(f"  {count} {kind} added.")

    with domains["engagement"].domain_context():
        written = seed_impact_metrics(overwrite=overwrite_metrics)
    print("  Impact metrics written." if written else "  Impact metrics already present.")

    print("Done.")


def create_admin(username, password, allow_short=False):
    from backoffice.admin.accounts import CreateAdminUser

    domain = _domains(["backoffice"])["backoffice"]
    with domain.domain_context():
        domain.process(
            CreateAdminUser(username=username, password=password, enforce_length=not allow_short),
            asynchronous=False,
        )
    print(f"Admin {username!r} created.")


def main():
    parser = argparse.ArgumentParser(description="Handmade storefront management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    setup_parser = subparsers.add_parser("setup-db", help="Create all database tables")
    setup_parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        nargs="*",
        help="Specific domain(s) to set up (default: all)",
    )

    drop_parser = subparsers.add_parser("drop-db", help="Drop all database tables")
    drop_parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        nargs="*",
        help="Specific domain(s) to drop (default: all)",
    )

    seed_parser = subparsers.add_parser("seed", help="Load the bundled dataset")
    seed_parser.add_argument(
        "--overwrite-metrics",
        action="store_true",
        help="Reset impact metrics to the dataset values",
    )

    admin_parser = subparsers.add_parser("create-admin", help="Create a staff account")
    admin_parser.add_argument("username")
    admin_parser.add_argument("password")
    admin_parser.add_argument(
        "--allow-short",
        action="store_true",
        help="Accept passwords shorter than 8 characters (local development only)",
    )

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_databases(args.domain)
    elif args.command == "drop-db":
        drop_databases(args.domain)
    elif args.command == "seed":
        seed(args.overwrite_metrics)
    elif args.command == "create-admin":
        create_admin(args.username, args.password, args.allow_short)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
