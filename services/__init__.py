from services.pagination_service import (
    InvalidPageRequest,
    PageEntry,
    PageWindowController,
    PaginationState,
    WindowDescriptor,
)
from services.user_service import UserService

__all__ = [
    "InvalidPageRequest",
    "PageEntry",
    "PageWindowController",
    "PaginationState",
    "WindowDescriptor",
    "UserService",
]
