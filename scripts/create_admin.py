"""Create an administrator account.

Admins are never self-registered over HTTP; this script is the only way in.
Without arguments it creates the DEFAULT_ADMIN from the active settings.

    python scripts/create_admin.py
    python scripts/create_admin.py --username jane --email jane@corp.com --password 'S3cret!' --role admin
"""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.employee_records.employee_records.container import build_container
from src.employee_records.employee_records.core.exceptions import ValidationError
from src.employee_records.employee_records.database.bootstrap import ensure_default_admin


def main(argv: list[str] | None = None) -> int:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    defaults = dict(settings.DEFAULT_ADMIN)

    parser = argparse.ArgumentParser(description="Create an administrator account")
    parser.add_argument("--username", default=defaults["username"])
    parser.add_argument("--email", default=defaults["email"])
    parser.add_argument("--password", default=defaults["password"])
    parser.add_argument("--role", default=defaults.get("role", "super_admin"), choices=["admin", "super_admin"])
    args = parser.parse_args(argv)

    container = build_container(
        jwt_secret=settings.JWT_SECRET,
        db_config=dict(settings.DB_CONFIG),
        store_backend=getattr(settings, "STORE_BACKEND", "mysql"),
    )
    try:
        admin = ensure_default_admin(
            container,
            {"username": args.username, "email": args.email, "password": args.password, "role": args.role},
        )
    except ValidationError as e:
        print(f"Error: {e.message}")
        for err in e.errors:
            print(f"  - {err['field']}: {err['message']}")
        return 1

    if admin is None:
        print(f"Admin '{args.username}' already exists. Use the existing account to login.")
        return 0

    print("OK: Admin created")
    print(f"Username: {admin.username}")
    print(f"Email: {admin.email}")
    print("Please change the password after first login!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
