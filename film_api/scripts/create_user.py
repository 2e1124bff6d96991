"""
Create a user (e.g. the first admin) without going through the HTTP API. Run from project root:
  python -m film_api.scripts.create_user USERNAME PASSWORD [role]
Example:
  python -m film_api.scripts.create_user admin your-secure-password admin
"""
import argparse
import logging
import sys

from film_api.core.database import SessionLocal
from film_api.core.errors import AppError
from film_api.core.security import PASSWORD_MIN_LEN, ROLE_USER, ROLES
from film_api.services.accounts import register_user

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Film API user.")
    parser.add_argument("username", help="Username (stored lowercased)")
    parser.add_argument("password", help=f"Password (min {PASSWORD_MIN_LEN} chars)")
    parser.add_argument("role", nargs="?", default=ROLE_USER, choices=list(ROLES))
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        user = register_user(db, args.username, args.password, role=args.role)
    except AppError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{user.username}' with role '{user.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
