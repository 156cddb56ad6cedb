"""
Authentication service for the Chefs Table application.

Handles chef registration, login and logout. A successful login mints an
opaque random token and records it in the SessionStore; the token carries
nothing derived from the credentials.
"""

import secrets
from typing import Optional

from models import Chef, UnauthenticatedError
from utils import get_logger

from .chef_service import ChefService
from .session_store import SessionStore

logger = get_logger(__name__)

BEARER_SCHEME = "bearer"


class AuthService:
    """
    Session-based authentication.

    Owns exactly one SessionStore. Build one AuthService per process; a new
    instance starts with an empty store unless one is passed in.
    """

    def __init__(self, chef_service: ChefService, session_store: Optional[SessionStore] = None):
        self.chef_service = chef_service
        self.sessions = session_store if session_store is not None else SessionStore()

    # Registration and login

    def register_chef(self, chef: Chef) -> Chef:
        """Persist a new chef; ConflictError if the username is taken"""
        chef.id = 0
        registered = self.chef_service.save_chef(chef)
        logger.info(f"Chef registered successfully: {registered.username}")
        return registered

    def login(self, username: str, password: str) -> Optional[str]:
        """
        Log a chef in with an exact username and password match.
        Returns the new session token, or None when authentication fails.
        """
        if not username or password is None:
            return None

        chef = self.chef_service.find_chef_by_username(username)
        if chef is None or not secrets.compare_digest(chef.password.encode(), password.encode()):
            logger.warning(f"Authentication failed for username: {username}")
            return None

        token = self._generate_session_token()
        self.sessions.put(token, chef)
        logger.info(f"Chef logged in: {chef.get_display_name()}")
        return token

    def logout(self, token: Optional[str]) -> bool:
        """Drop a session. Unknown or repeated tokens are a no-op; returns whether one was removed"""
        token = self.extract_token(token)
        if not token:
            return False
        removed = self.sessions.remove(token)
        if removed:
            logger.info("Chef logged out successfully")
        return removed

    # Session lookup

    def get_chef_from_session_token(self, token: Optional[str]) -> Optional[Chef]:
        token = self.extract_token(token)
        if not token:
            return None
        return self.sessions.get(token)

    def require_chef(self, token: Optional[str]) -> Chef:
        """Chef for a live session; UnauthenticatedError otherwise"""
        chef = self.get_chef_from_session_token(token)
        if chef is None:
            raise UnauthenticatedError("Missing or invalid session token")
        return chef

    def close(self):
        """Drop every session (application shutdown)"""
        self.sessions.clear()

    # Utility Methods

    @staticmethod
    def extract_token(value: Optional[str]) -> Optional[str]:
        """Accept either a bare token or an 'Authorization: Bearer <token>' value"""
        parts = (value or "").split(None, 1)
        if not parts:
            return None
        if parts[0].lower() == BEARER_SCHEME:
            return parts[1].strip() if len(parts) == 2 else None
        return value.strip()

    def _generate_session_token(self) -> str:
        """Generate secure session token"""
        return secrets.token_urlsafe(32)
