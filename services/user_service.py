"""
Service for user management use cases.

Delegates to a UserRepository and logs the outcome of every write so the
controllers only deal with HTTP concerns.
"""

import logging
from typing import Optional, Tuple

from api.client import ApiResponse
from api.user_repository import HttpUserRepository, UserRepository
from models.user import User, UserData, UserList, UserSupport

logger = logging.getLogger(__name__)


class UserService:
    """Use cases over the users API."""
    
    def __init__(self, repository: Optional[UserRepository] = None):
        """Initialize service with optional repository injection
        
        Args:
            repository: UserRepository instance (or None for the HTTP one)
        """
        self.repository = repository or HttpUserRepository()
    
    def get_users(self, page: int, per_page: Optional[int] = None) -> UserList:
        return self.repository.get_users(page, per_page)
    
    def get_user_by_id(self, user_id: int) -> Tuple[UserData, UserSupport]:
        return self.repository.get_user_by_id(user_id)
    
    def create_user(self, user: User) -> ApiResponse:
        response = self.repository.post_new_user(user)
        self._log_write("create", user.name, response)
        return response
    
    def update_user(self, user_id: int, user: User) -> ApiResponse:
        response = self.repository.put_user(user_id, user)
        self._log_write("update", f"{user_id} ({user.name})", response)
        return response
    
    def delete_user(self, user_id: int) -> ApiResponse:
        response = self.repository.delete_user(user_id)
        self._log_write("delete", user_id, response)
        return response
    
    @staticmethod
    def _log_write(action: str, subject, response: ApiResponse) -> None:
        if response.ok:
            logger.info(f"User {action} succeeded for {subject} (status {response.status})")
        else:
            logger.error(f"User {action} failed for {subject}: {response.status} {response.error}")
