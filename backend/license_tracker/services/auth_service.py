"""Auth Service - Registration and login"""
from typing import Tuple

from ..domain.models import User
from ..domain.errors import InvalidCredentialsError, UserNotFoundError
from ..repositories.user_repo import UserRepository
from ..utils.idgen import generate_user_id
from ..utils.jwt import JWTService
from ..utils.passwords import hash_password, verify_password
from ..utils.time import utc_now
from ..utils.logger import get_logger

logger = get_logger(__name__)


class AuthService:
    """Service for user registration and session tokens"""

    def __init__(self, repo: UserRepository, tokens: JWTService):
        self.repo = repo
        self.tokens = tokens

    def register(self, username: str, email: str, password: str) -> User:
        """
        Register a user

        Raises:
            AlreadyExistsError: If the email is already registered
        """
        user = User(
            user_id=generate_user_id(),
            username=username.strip(),
            email=email.strip().lower(),
            password_hash=hash_password(password),
            created_at=utc_now()
        )
        return self.repo.create_user(user)

    def login(self, login_id: str, password: str) -> Tuple[str, User]:
        """
        Verify credentials and issue a session token

        The login id is the registered email address.

        Raises:
            UserNotFoundError: If no user has that email
            InvalidCredentialsError: If the password does not match
        """
        user = self.repo.get_by_email(login_id)
        if user is None:
            raise UserNotFoundError("User not found")

        if not verify_password(password, user.password_hash):
            logger.warning("Login failed: invalid credentials", extra={"user_id": user.user_id})
            raise InvalidCredentialsError("Invalid credentials")

        token = self.tokens.issue_token(user)
        logger.info(f"User logged in: {user.username}", extra={"user_id": user.user_id})
        return token, user
