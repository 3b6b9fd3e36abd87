#!/usr/bin/env python3
"""
Create the schema and optionally load demo data.

Usage:
  python scripts/init_db.py [--seed]

SEED_DEMO_DATA=1 in the environment has the same effect as --seed.
"""
from __future__ import annotations

import argparse
import sys

from fitclub.core.config import get_settings
from fitclub.core.logging_config import configure_logging
from fitclub.db.create_tables import create_all
from fitclub.db.seed import seed_demo_data


def main() -> None:
    ap = argparse.ArgumentParser(description="Create the fitclub schema")
    ap.add_argument("--seed", action="store_true", help="Load demo subscriptions and clients (wipes existing data)")
    args = ap.parse_args()

    configure_logging()
    create_all()
    print("OK: schema created")
    if args.seed or get_settings().seed_demo_data:
        seed_demo_data()
        print("OK: demo data loaded (admin/admin123, ivan/ivan123, maria/maria123)")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
