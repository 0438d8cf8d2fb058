"""
Repository for user records held by the remote users API.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from api.client import ApiClient, ApiError, ApiResponse
from models.user import User, UserData, UserList, UserSupport

logger = logging.getLogger(__name__)


class UserRepository(ABC):
    """Repository interface for user CRUD operations."""
    
    @abstractmethod
    def get_users(self, page: int, per_page: Optional[int] = None) -> UserList:
        """Fetch one page of users."""
    
    @abstractmethod
    def get_user_by_id(self, user_id: int) -> Tuple[UserData, UserSupport]:
        """Fetch a single user and the accompanying support info."""
    
    @abstractmethod
    def post_new_user(self, user: User) -> ApiResponse:
        """Create a user."""
    
    @abstractmethod
    def put_user(self, user_id: int, user: User) -> ApiResponse:
        """Replace a user's name and job."""
    
    @abstractmethod
    def delete_user(self, user_id: int) -> ApiResponse:
        """Delete a user."""


class HttpUserRepository(UserRepository):
    """UserRepository backed by the ``/api/users`` endpoints."""
    
    def __init__(self, client: Optional[ApiClient] = None):
        self.client = client or ApiClient()
    
    def get_users(self, page: int, per_page: Optional[int] = None) -> UserList:
        params = {"page": page}
        if per_page:
            params["per_page"] = per_page
        
        response = self.client.get("/api/users", params=params)
        if not response.ok or not isinstance(response.data, dict):
            raise ApiError(
                f"Could not load users page {page}",
                status=response.status,
                detail=response.error,
            )
        return UserList.from_dict(response.data)
    
    def get_user_by_id(self, user_id: int) -> Tuple[UserData, UserSupport]:
        response = self.client.get(f"/api/users/{user_id}")
        if not response.ok or not isinstance(response.data, dict) or not response.data.get("data"):
            raise ApiError(
                f"User {user_id} not found",
                status=response.status,
                detail=response.error,
            )
        return (
            UserData.from_dict(response.data["data"]),
            UserSupport.from_dict(response.data.get("support")),
        )
    
    def post_new_user(self, user: User) -> ApiResponse:
        return self.client.post("/api/users", user.to_dict())
    
    def put_user(self, user_id: int, user: User) -> ApiResponse:
        return self.client.put(f"/api/users/{user_id}", user.to_dict())
    
    def delete_user(self, user_id: int) -> ApiResponse:
        return self.client.delete(f"/api/users/{user_id}")
