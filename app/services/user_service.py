from dataclasses import replace
from typing import Optional, List
import logging

from app.config import get_settings
from app.exceptions import DuplicateEmailError, InvalidArgumentError, NotFoundError
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.schemas.user import UserCreate, UserUpdate
from app.utils.text import is_blank

logger = logging.getLogger(__name__)


class UserService:
    """
    Service class for User operations.

    Emails are unique across users ignoring case. The uniqueness check and
    the write that depends on it run under the repository lock, so two
    concurrent requests for the same email cannot both succeed.
    """

    ENTITY = "User"

    def __init__(self, repository: UserRepository, default_role: Optional[str] = None):
        self.repository = repository
        self.default_role = default_role or get_settings().DEFAULT_USER_ROLE

    def create(self, user_data: UserCreate) -> User:
        """
        Create a new user.

        Args:
            user_data: User creation data

        Returns:
            Created user with its identifier

        Raises:
            InvalidArgumentError: If name or email is blank
            DuplicateEmailError: If the email already belongs to a user
        """
        if is_blank(user_data.name):
            raise InvalidArgumentError("User name cannot be empty")
        if is_blank(user_data.email):
            raise InvalidArgumentError("User email cannot be empty")

        role = self.default_role if is_blank(user_data.role) else user_data.role

        with self.repository.atomic():
            if self.repository.find_by_email(user_data.email) is not None:
                logger.warning(f"Rejected user with duplicate email {user_data.email}")
                raise DuplicateEmailError(user_data.email)
            user = self.repository.save(
                User(name=user_data.name, email=user_data.email, role=role)
            )

        logger.info(f"User #{user.id} created with role {user.role}")
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        """Get a user by ID, or None if not found."""
        return self.repository.find_by_id(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return self.repository.find_by_email(email)

    def get_by_role(self, role: str) -> List[User]:
        return self.repository.find_by_role(role)

    def get_all(self) -> List[User]:
        return self.repository.find_all()

    def count(self) -> int:
        return self.repository.count()

    def update(self, user_id: int, user_data: UserUpdate) -> User:
        """
        Update an existing user.

        Blank or omitted fields keep their current value. A new email is
        checked against the other users only, so changing the case of a
        user's own email is allowed.

        Raises:
            NotFoundError: If the user doesn't exist
            DuplicateEmailError: If the new email belongs to another user
        """
        with self.repository.atomic():
            user = self.repository.find_by_id(user_id)
            if user is None:
                raise NotFoundError(self.ENTITY, user_id)

            changes = {}
            if not is_blank(user_data.name):
                changes["name"] = user_data.name
            if not is_blank(user_data.email) and user_data.email != user.email:
                owner = self.repository.find_by_email(user_data.email)
                if owner is not None and owner.id != user_id:
                    logger.warning(f"Rejected email change for User #{user_id}: {user_data.email} in use")
                    raise DuplicateEmailError(user_data.email)
                changes["email"] = user_data.email
            if not is_blank(user_data.role):
                changes["role"] = user_data.role

            user = self.repository.save(replace(user, **changes))

        logger.info(f"User #{user_id} updated: {sorted(changes)}")
        return user

    def delete(self, user_id: int) -> bool:
        """
        Delete a user.

        Raises:
            NotFoundError: If the user doesn't exist
        """
        if not self.repository.delete_by_id(user_id):
            raise NotFoundError(self.ENTITY, user_id)
        logger.info(f"User #{user_id} deleted")
        return True
