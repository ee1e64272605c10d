#!/usr/bin/env python3
"""
Create the fulfillment tables and optionally seed a demo order

Usage:
    export DATABASE_URL="postgresql://..."
    python3 backend/scripts/init_db.py [--seed]
"""
import argparse

from fulfillment.core.logging import configure_logging
from fulfillment.core.schema import create_schema, seed_demo_order


def main():
    parser = argparse.ArgumentParser(description="Initialize the fulfillment database")
    parser.add_argument("--seed", action="store_true", help="Insert demo products and one order")
    args = parser.parse_args()

    configure_logging()
    create_schema()

    if args.seed:
        order_id = seed_demo_order()
        print(f"✅ Demo order created: POST /orders/{order_id}/processOrder")


if __name__ == "__main__":
    main()
