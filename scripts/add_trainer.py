#!/usr/bin/env python3
"""
Register a trainer together with its login credential.

Usage:
  python scripts/add_trainer.py --name "Пётр Сидоров" --username petr [--password secret1]
"""
from __future__ import annotations

import argparse
import secrets
import string
import sys

from fitclub.core.logging_config import configure_logging
from fitclub.domain.drafts import TrainerDraft
from fitclub.domain.errors import FitclubError
from fitclub.services.trainer_service import TrainerService


def gen_password(length: int = 10) -> str:
    alphabet = string.ascii_letters + string.digits
    return "".join(secrets.choice(alphabet) for _ in range(length))


def main() -> None:
    ap = argparse.ArgumentParser(description="Register a trainer")
    ap.add_argument("--name", required=True, help="Full name (Latin or Cyrillic letters)")
    ap.add_argument("--username", required=True, help="Login, 3-20 chars [A-Za-z0-9_]")
    ap.add_argument("--password", help="Password (default: random, 10 chars)")
    args = ap.parse_args()

    configure_logging()
    generated = not (args.password or "").strip()
    password = gen_password() if generated else args.password
    try:
        trainer = TrainerService().create_trainer(TrainerDraft(args.name, args.username, password))
    except FitclubError as exc:
        raise SystemExit(f"Error: {exc}")
    print("OK: trainer registered")
    print(f"  ID: {trainer.id}")
    print(f"  Username: {trainer.username}")
    if generated:
        print(f"  Password: {password}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
