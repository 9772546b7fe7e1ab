"""
User domain mappers.
Handles transformation between ORM models and DTOs for user-related entities.
"""

from domain.models import User
from domain.schemas import UserResponse, Link
from domain.mappers.links import resource_links


class UserMapper:
    """Mapper for user-related transformations."""

    @staticmethod
    def to_response(user: User, base_path: str = "") -> UserResponse:
        """
        Convert User ORM model to UserResponse DTO.

        Args:
            user: User ORM instance
            base_path: versioned API prefix used to build links

        Returns:
            UserResponse DTO with hypermedia links
        """
        links = resource_links(base_path, "users", user.id)
        links.append(Link(rel="meals", href=f"{base_path}/users/{user.id}/meals"))
        links.append(
            Link(rel="break-records", href=f"{base_path}/users/{user.id}/break-records")
        )
        return UserResponse(id=user.id, name=user.name, email=user.email, links=links)
