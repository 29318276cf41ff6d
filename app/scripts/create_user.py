"""
Create a user (e.g. first admin). Run from project root:
  python -m app.scripts.create_user NAME EMAIL PASSWORD [role]
Example:
  python -m app.scripts.create_user "Shop Admin" admin@example.com your-secure-password admin
"""
import argparse
import logging
import sys

from pydantic import ValidationError

from app.core.config import get_settings
from app.core.database import MongoStore
from app.core.errors import DuplicateUserError, StoreUnavailableError
from app.core.logging import configure_logging
from app.repositories.users import UserRepository
from app.schemas.auth import RegisterRequest
from app.services.auth import AuthService

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None, store: MongoStore | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a shop user (e.g. the first admin).")
    parser.add_argument("name", help="Display name")
    parser.add_argument("email", help="Email used to log in")
    parser.add_argument("password", help="Password (1-128 chars)")
    parser.add_argument("role", nargs="?", default="customer", help="Role tag (customer, admin)")
    args = parser.parse_args(argv)

    try:
        body = RegisterRequest(
            name=args.name, email=args.email, role=args.role, password=args.password
        )
    except ValidationError as e:
        print(f"Invalid user details: {e.errors()[0]['msg']}", file=sys.stderr)
        return 1

    settings = get_settings()
    configure_logging(settings.LOG_LEVEL)
    store = store or MongoStore.from_settings(settings)
    try:
        store.connect(users_collection=settings.USERS_COLLECTION)
        auth = AuthService(UserRepository(store.collection(settings.USERS_COLLECTION)), settings)
        auth.register(body.name, body.email, body.role, body.password)
    except DuplicateUserError:
        print(f"User '{body.email}' already exists.", file=sys.stderr)
        return 1
    except StoreUnavailableError as e:
        logger.error("Could not create user: %s", e.message)
        return 1
    finally:
        store.close()
    print(f"Created user '{body.email}' with role '{body.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
