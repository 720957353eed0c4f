"""
User
---------------------------
"""
from dataclasses import dataclass, field
from typing import Optional, Dict, Any


@dataclass
class User:
    """
    Represents a User in the ledger.

    The password is the plaintext until the user is registered,
    at which point it is replaced with its hash.
    """

    email: str
    password: str
    name: str = ""
    profile: Dict[str, Any] = field(default_factory=dict)
    id: Optional[str] = None

    def serialize(self):
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "profile": dict(self.profile)
        }

    def __str__(self):
        return f"[{self.id}] {self.name} ({self.email})"
