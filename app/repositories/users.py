"""Repository for users (the credential store)."""

from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from app.core.errors import DuplicateUserError
from app.models.user import User
from app.repositories.base import store_errors


class UserRepository:
    def __init__(self, collection: Collection) -> None:
        self.collection = collection

    def find_by_email(self, email: str) -> User | None:
        with store_errors():
            doc = self.collection.find_one({"email": email})
        if doc is None:
            return None
        return User.model_validate(doc)

    def insert(self, user: User) -> User:
        """Insert a new user. Raises DuplicateUserError when the email is taken."""
        try:
            with store_errors():
                result = self.collection.insert_one(user.to_mongo())
        except DuplicateKeyError as e:
            raise DuplicateUserError() from e
        return user.model_copy(update={"id": result.inserted_id})

