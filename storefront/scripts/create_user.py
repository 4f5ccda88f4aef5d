"""
Create a user (e.g. the first admin). Run from project root:
  python -m storefront.scripts.create_user USERNAME EMAIL PASSWORD [role]
Example:
  python -m storefront.scripts.create_user admin admin@example.com your-secure-password admin
"""
import argparse
import sys

from pydantic import ValidationError

from storefront.core.database import SessionLocal
from storefront.core.errors import ValidationFailedError
from storefront.schemas.auth import RegisterRequest
from storefront.schemas.role import ALLOWED_ROLE_NAMES
from storefront.services.roles import ensure_default_roles
from storefront.services.users import register


def main() -> int:
    parser = argparse.ArgumentParser(description="Create a Storefront user from the command line.")
    parser.add_argument("username", help="Username (1-255 chars)")
    parser.add_argument("email", help="Email address")
    parser.add_argument("password", help="Password (1-128 chars)")
    parser.add_argument("role", nargs="?", default="user", choices=list(ALLOWED_ROLE_NAMES))
    args = parser.parse_args()

    try:
        body = RegisterRequest(
            username=args.username,
            email=args.email,
            password=args.password,
            role=args.role,
        )
    except ValidationError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        ensure_default_roles(db)
        user = register(db, body)
        print(f"Created user '{user.username}' with role '{args.role}'.")
        return 0
    except ValidationFailedError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
