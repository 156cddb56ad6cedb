"""
Chef (user account) model for the Chefs Table application.
"""

from dataclasses import dataclass
from typing import Dict, Any


@dataclass
class Chef:
    """
    Chef account used both as recipe author and as authenticated principal.
    Usernames are unique across all chefs. The password is an opaque string
    compared for equality.
    """
    id: int = 0
    username: str = ""
    email: str = ""
    password: str = ""
    is_admin: bool = False

    def get_display_name(self) -> str:
        """Get chef's display name"""
        if self.username:
            return self.username
        return self.email.split('@')[0]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for responses; the password never leaves the service layer"""
        return {
            'id': self.id,
            'username': self.username,
            'email': self.email,
            'isAdmin': self.is_admin,
        }
