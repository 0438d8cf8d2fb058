"""
View model for the user management screen.

Holds the screen's loading flag, the current page of users, the last error
message and the pagination state derived from the totals the server reports.
"""

import logging
from typing import Any, Dict, Optional

import config
from api.client import ApiError
from models import BaseModel
from models.user import UserList
from services.pagination_service import PageWindowController, PaginationState, WindowDescriptor
from services.user_service import UserService

logger = logging.getLogger(__name__)


class UsersViewModel(BaseModel):
    """State and actions behind the users table and its paginator."""

    def __init__(self, user_service: Optional[UserService] = None,
                 paginator: Optional[PageWindowController] = None,
                 page_size: Optional[int] = None):
        self.user_service = user_service or UserService()
        self.paginator = paginator or PageWindowController(config.PAGINATOR_WINDOW_SIZE)
        self.default_page_size = page_size or config.DEFAULT_PAGE_SIZE
        self.initialize()

    def initialize(self):
        self.loading: Optional[bool] = None
        self.data = UserList()
        self.message = ""
        self.pagination = PaginationState(0, self.default_page_size, 1)

    @property
    def current_page(self) -> int:
        return self.pagination.current_page

    @property
    def users(self):
        return self.data.data

    def mount(self, page: int = 1) -> PaginationState:
        """
        Load the screen at ``page`` and derive pagination from the server totals.

        A page past the last one is clamped to the last page and reloaded.

        Args:
            page: Requested page (1-indexed)

        Returns:
            The resulting pagination state
        """
        self.initialize()
        target = page if isinstance(page, int) and page >= 1 else 1
        self.pagination = PaginationState(0, self.default_page_size, target)
        if self.load_users(target):
            self._apply_totals()
        else:
            self.pagination = PaginationState(0, self.default_page_size, 1)
        return self.pagination

    def load_users(self, page: int) -> bool:
        """Fetch a page of users. Errors end up in ``message``, never raised."""
        self.loading = True
        try:
            self.data = self.user_service.get_users(page)
            self.message = ""
            return True
        except ApiError as e:
            self.message = e.message
            logger.error(f"Error loading users page {page}: {e}")
            return False
        finally:
            self.loading = False

    def refresh(self) -> PaginationState:
        """Reload the current page, reconciling any change in the total."""
        if self.load_users(self.current_page):
            self._apply_totals()
        return self.pagination

    def handle_page_click(self, target_page: Any, load: bool = True) -> bool:
        """
        Request a page change from the paginator.

        Args:
            target_page: Requested page number
            load: Fetch the new page once the change is accepted

        Returns:
            True if the change was accepted
        """
        def on_page_change(new_state: PaginationState):
            self.pagination = new_state
            if load:
                self.refresh()

        accepted = self.paginator.request_page_change(self.pagination, target_page, on_page_change)
        return accepted is not None

    def window(self) -> WindowDescriptor:
        return self.paginator.compute_window(self.pagination)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "users": [user.to_dict() for user in self.users],
            "pagination": {
                "total_items": self.pagination.total_items,
                "page_size": self.pagination.page_size,
                "current_page": self.pagination.current_page,
                "total_pages": self.pagination.total_pages,
                "offset": self.paginator.page_offset(self.pagination),
            },
            "window": self.window().to_dict(),
            "message": self.message,
        }

    def _apply_totals(self) -> None:
        page_size = self.data.per_page or self.pagination.page_size
        state = PaginationState(self.data.total, page_size, self.pagination.current_page)
        reconciled = self.paginator.reconcile(state, self.data.total)
        self.pagination = reconciled
        if reconciled.current_page != state.current_page:
            self.load_users(reconciled.current_page)
