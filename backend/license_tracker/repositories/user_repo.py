"""User Repository - Data access for registered users"""
from typing import Optional
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from .mongo_client import USERS_COLLECTION, translate_store_errors
from ..domain.errors import AlreadyExistsError
from ..domain.models import User
from ..utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for user operations"""

    def __init__(self, db: Database):
        self._users: Collection = db[USERS_COLLECTION]

    @translate_store_errors
    def create_user(self, user: User) -> User:
        """Insert a user; email addresses are unique"""
        doc = user.model_dump()
        doc["_id"] = user.user_id

        try:
            self._users.insert_one(doc)
        except DuplicateKeyError:
            raise AlreadyExistsError(f"A user with email {user.email} already exists")

        logger.info(f"Created user: {user.user_id}", extra={"user_id": user.user_id})
        return user

    @translate_store_errors
    def get_by_email(self, email: str) -> Optional[User]:
        """Look up a user by email (stored lower-case)"""
        doc = self._users.find_one({"email": email.strip().lower()})
        if doc:
            doc.pop("_id", None)
            return User.model_validate(doc)
        return None
