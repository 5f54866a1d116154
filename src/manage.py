"""Storefront management CLI.

Creates and drops the database schema, and records deliveries reported by
fulfilment.

Usage:
    python src/manage.py setup-db               # Create all tables
    python src/manage.py drop-db                # Drop all tables
    python src/manage.py deliver-order ORDER_ID # Mark an order as delivered
"""

import argparse
import sys


def setup_database():
    """Create the database schema for the ordering domain."""
    from ordering.domain import ordering
    from ordering.utils.db import setup_db

    print("Initializing ordering domain...")
    ordering.init()
    print("Creating ordering database schema...")
    setup_db(ordering)
    print("Done.")


def drop_database():
    """Drop the database schema for the ordering domain."""
    from ordering.domain import ordering
    from ordering.utils.db import drop_db

    print("Initializing ordering domain...")
    ordering.init()
    print("Dropping ordering database schema...")
    drop_db(ordering)
    print("Done.")


def deliver_order(order_id):
    """Move an order from ordered to delivered."""
    from ordering.domain import ordering
    from ordering.order.delivery import RecordDelivery

    ordering.init()
    with ordering.domain_context():
        ordering.process(RecordDelivery(order_id=order_id), asynchronous=False)
    print(f"Order {order_id} marked as delivered.")


def main():
    parser = argparse.ArgumentParser(description="Storefront management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    deliver_parser = subparsers.add_parser("deliver-order", help="Record delivery of an order")
    deliver_parser.add_argument("order_id", help="Identifier of the delivered order")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "deliver-order":
        deliver_order(args.order_id)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
