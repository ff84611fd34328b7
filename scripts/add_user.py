#!/usr/bin/env python3
"""
Provision an account directly in the configured database.

Usage:
  python scripts/add_user.py --name "Jane Doe" --email jane@example.com --role Agent [--phone +94...] [--password ...]
"""
from __future__ import annotations

import argparse
import getpass
import sys

from agency_api.core.config import get_settings
from agency_api.core.logging import configure_logging
from agency_api.db.create_tables import init_database
from agency_api.db.session import Database
from agency_api.domain.errors import AccountError
from agency_api.domain.roles import ROLE_NAMES
from agency_api.repositories.sql_repository import SQLRepository
from agency_api.services.account_service import AccountService


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Create an account")
    ap.add_argument("--name", required=True, help="Full name")
    ap.add_argument("--email", required=True, help="Unique email address")
    ap.add_argument("--role", required=True, choices=ROLE_NAMES, help="Role name")
    ap.add_argument("--phone", help="Optional phone number")
    ap.add_argument("--password", help="Password (prompted when omitted)")
    args = ap.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)
    password = args.password or getpass.getpass("Password: ")

    database = Database(settings.database_url).open()
    try:
        init_database(database)
        svc = AccountService(SQLRepository(database))
        user_id = svc.create_account(args.name, args.email, args.role, password, phone=args.phone)
    finally:
        database.close()
    print("OK: account created")
    print(f"  ID: {user_id}")
    print(f"  Email: {args.email}")
    print(f"  Role: {args.role}")
    return 0


if __name__ == "__main__":
    try:
        raise SystemExit(main())
    except AccountError as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc.message}\n")
        raise SystemExit(1)
