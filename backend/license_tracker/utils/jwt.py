"""JWT Session Tokens - HS256 tokens issued at login"""
import jwt
from datetime import timedelta
from typing import Any, Dict, Optional

from ..config.settings import Settings, settings as default_settings
from ..domain.errors import AuthenticationError
from ..domain.models import ActorContext, User
from .time import Clock, utc_now
from .logger import get_logger

logger = get_logger(__name__)


class JWTService:
    """Issue and validate signed, time-limited session tokens"""

    def __init__(self, config: Optional[Settings] = None, clock: Clock = utc_now):
        self._config = config or default_settings
        self._clock = clock

    def issue_token(self, user: User) -> str:
        """
        Issue a bearer token for a user

        Claims:
            id: user ID
            username: username at issue time
            iat / exp: issue and expiry timestamps
        """
        now = self._clock()
        payload = {
            "id": user.user_id,
            "username": user.username,
            "iat": now,
            "exp": now + timedelta(minutes=self._config.jwt_expire_minutes),
        }
        return jwt.encode(payload, self._config.jwt_secret, algorithm=self._config.jwt_algorithm)

    def validate_token(self, token: str) -> Dict[str, Any]:
        """
        Validate a bearer token

        Raises:
            AuthenticationError: If token is missing, expired or invalid
        """
        if not token:
            raise AuthenticationError("Token is missing")

        if token.startswith("Bearer "):
            token = token[7:]

        try:
            return jwt.decode(
                token,
                self._config.jwt_secret,
                algorithms=[self._config.jwt_algorithm],
                options={"require": ["exp", "id"]}
            )
        except jwt.ExpiredSignatureError:
            logger.warning("Token expired")
            raise AuthenticationError("Token has expired")
        except jwt.PyJWTError as e:
            logger.warning(f"JWT validation error: {e}")
            raise AuthenticationError("Invalid token")

    def get_actor_context(self, token: str) -> ActorContext:
        """Extract actor context from a validated token"""
        claims = self.validate_token(token)
        return ActorContext(user_id=str(claims["id"]), username=claims.get("username"))
