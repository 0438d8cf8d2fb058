"""
Service for windowed pagination.

Provides pure, testable page window calculations independent of HTTP/Flask
context. Turns (total items, page size, current page) into the sequence of
page controls a paginator renders, and validates page-change requests.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_SIZE = 5

PAGE = "page"
ELLIPSIS = "ellipsis"


class InvalidPageRequest(ValueError):
    """Raised when a page number falls outside ``[1, total_pages]``."""

    def __init__(self, page: Any, total_pages: int):
        self.page = page
        self.total_pages = total_pages
        super().__init__(f"Page {page!r} is outside 1..{total_pages}")


@dataclass(frozen=True)
class PaginationState:
    """Pagination position of a list screen."""

    total_items: int
    """Total dataset size reported by the server."""

    page_size: int
    """Items per page."""

    current_page: int = 1
    """Current page (1-indexed)."""

    def __post_init__(self):
        if self.page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {self.page_size}")
        if self.total_items < 0:
            raise ValueError(f"total_items must be >= 0, got {self.total_items}")

    @property
    def total_pages(self) -> int:
        # Ceiling division, floored at one page for an empty dataset
        return max(1, (self.total_items + self.page_size - 1) // self.page_size)


@dataclass(frozen=True)
class PageEntry:
    """A single paginator control: a page button or an ellipsis marker."""

    kind: str
    number: Optional[int] = None
    is_current: bool = False

    @property
    def is_ellipsis(self) -> bool:
        return self.kind == ELLIPSIS

    def to_dict(self) -> Dict[str, Any]:
        if self.is_ellipsis:
            return {"kind": ELLIPSIS}
        return {"kind": PAGE, "number": self.number, "is_current": self.is_current}


@dataclass(frozen=True)
class WindowDescriptor:
    """Renderable paginator layout."""

    entries: List[PageEntry] = field(default_factory=list)
    has_previous: bool = False
    has_next: bool = False
    current_page: int = 1
    total_pages: int = 1

    def page_numbers(self) -> List[int]:
        """Page numbers in display order, ellipses skipped."""
        return [entry.number for entry in self.entries if not entry.is_ellipsis]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "entries": [entry.to_dict() for entry in self.entries],
            "has_previous": self.has_previous,
            "has_next": self.has_next,
            "current_page": self.current_page,
            "total_pages": self.total_pages,
        }


class PageWindowController:
    """Service for page window calculations and page-change validation."""

    def __init__(self, window_size: int = DEFAULT_WINDOW_SIZE):
        """Initialize the controller

        Args:
            window_size: Maximum number of contiguous page buttons (W)
        """
        if window_size < 1:
            raise ValueError(f"window_size must be >= 1, got {window_size}")
        self.window_size = window_size

    def compute_window(self, state: PaginationState) -> WindowDescriptor:
        """
        Calculate the page controls to render for a pagination state.

        The window is centred on the current page and slid back from the
        last page when it would run past it, so ``min(W, total_pages)``
        contiguous buttons are shown. A first-page button and ellipsis are
        prepended when the window does not start at page 1, and an ellipsis
        and last-page button appended when it does not reach the last page.

        Args:
            state: Pagination state to render

        Returns:
            WindowDescriptor with ordered entries and prev/next flags

        Raises:
            InvalidPageRequest: If ``state.current_page`` is out of range
        """
        total_pages = state.total_pages
        current = state.current_page
        if not 1 <= current <= total_pages:
            raise InvalidPageRequest(current, total_pages)

        width = self.window_size
        left = max(1, current - width // 2)
        right = min(total_pages, left + width - 1)

        # Slide left when the window hit the last page
        if right - left < width - 1:
            left = max(1, right - width + 1)

        entries = [
            PageEntry(PAGE, number, number == current)
            for number in range(left, right + 1)
        ]

        if left > 1:
            entries[:0] = [PageEntry(PAGE, 1), PageEntry(ELLIPSIS)]

        if right < total_pages:
            entries += [PageEntry(ELLIPSIS), PageEntry(PAGE, total_pages)]

        return WindowDescriptor(
            entries=entries,
            has_previous=current > 1,
            has_next=current < total_pages,
            current_page=current,
            total_pages=total_pages,
        )

    def request_page_change(
        self,
        state: PaginationState,
        target_page: Any,
        on_page_change: Optional[Callable[[PaginationState], None]] = None,
    ) -> Optional[PaginationState]:
        """
        Validate a page-change request.

        Args:
            state: Current pagination state (never mutated)
            target_page: Requested page number
            on_page_change: Called once with the new state when accepted

        Returns:
            New PaginationState, or None when the request is rejected
        """
        try:
            self.validate_page(target_page, state.total_pages)
        except InvalidPageRequest as e:
            logger.debug(f"Rejected page change: {e}")
            return None

        new_state = replace(state, current_page=target_page)
        if on_page_change is not None:
            on_page_change(new_state)
        return new_state

    def request_previous(
        self,
        state: PaginationState,
        on_page_change: Optional[Callable[[PaginationState], None]] = None,
    ) -> Optional[PaginationState]:
        """Request the page before the current one; None on the first page."""
        return self.request_page_change(state, state.current_page - 1, on_page_change)

    def request_next(
        self,
        state: PaginationState,
        on_page_change: Optional[Callable[[PaginationState], None]] = None,
    ) -> Optional[PaginationState]:
        """Request the page after the current one; None on the last page."""
        return self.request_page_change(state, state.current_page + 1, on_page_change)

    def validate_page(self, page: Any, total_pages: int) -> int:
        """
        Validate a page number against the page count.

        Args:
            page: Requested page number
            total_pages: Total number of pages

        Returns:
            The page number, unchanged

        Raises:
            InvalidPageRequest: If page is not an int in ``[1, total_pages]``
        """
        # bool is an int subclass but never a page number
        if isinstance(page, bool) or not isinstance(page, int):
            raise InvalidPageRequest(page, total_pages)
        if not 1 <= page <= total_pages:
            raise InvalidPageRequest(page, total_pages)
        return page

    def reconcile(self, state: PaginationState, total_items: int) -> PaginationState:
        """
        Apply a new server-reported total, clamping the current page.

        Args:
            state: Current pagination state
            total_items: Newly reported dataset size

        Returns:
            PaginationState whose current page is within the new page count
        """
        updated = replace(state, total_items=total_items)
        if updated.current_page > updated.total_pages:
            logger.info(
                f"Total changed to {total_items}; clamping page "
                f"{updated.current_page} to {updated.total_pages}"
            )
            updated = replace(updated, current_page=updated.total_pages)
        return updated

    def page_offset(self, state: PaginationState) -> int:
        """Zero-based index of the first item on the current page."""
        return (state.current_page - 1) * state.page_size
