from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class User:
    """
    User record.

    Attributes:
        id: Identifier assigned by the repository (None until saved)
        name: Display name
        email: Email address, unique across users ignoring case
        role: Role name, "USER" unless stated otherwise
    """
    name: str
    email: str
    role: str = "USER"
    id: Optional[int] = None

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
