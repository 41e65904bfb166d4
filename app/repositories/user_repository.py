from typing import List, Optional

from app.models.user import User
from app.repositories.memory import InMemoryRepository


class UserRepository(InMemoryRepository[User]):
    """In-memory store for users with email and role lookups."""

    def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email, ignoring case."""
        wanted = email.lower()
        return self.find_first(lambda user: user.email.lower() == wanted)

    def find_by_role(self, role: str) -> List[User]:
        wanted = role.lower()
        return self.filter(lambda user: user.role.lower() == wanted)

    def find_all_active_users(self) -> List[User]:
        """Users holding the USER role followed by those holding ADMIN."""
        return self.find_by_role("USER") + self.find_by_role("ADMIN")

    def delete_by_email(self, email: str) -> bool:
        """
        Delete the user owning email.

        Returns:
            True if deleted, False if no user has that email
        """
        with self.atomic():
            user = self.find_by_email(email)
            if user is None:
                return False
            return self.delete_by_id(user.id)
