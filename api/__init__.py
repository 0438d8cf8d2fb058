from api.client import ApiClient, ApiError, ApiResponse
from api.user_repository import HttpUserRepository, UserRepository

__all__ = ["ApiClient", "ApiError", "ApiResponse", "HttpUserRepository", "UserRepository"]
