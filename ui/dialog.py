"""
Modal dialogs rendered through the overlay host.

Each dialog is a small state machine: ``CLOSED -> OPEN -> CLOSED``. Entering
OPEN acquires the shared overlay mount; every way out of OPEN (close,
cancel, the screen going away) releases it.
"""

import logging
from enum import Enum
from typing import Optional, Union

from markupsafe import Markup

import config
from ui.document import Node
from ui.overlay import NOT_READY, OverlayHost, get_overlay_host

logger = logging.getLogger(__name__)


class DialogState(Enum):
    CLOSED = "closed"
    OPEN = "open"


class Dialog:
    """A modal dialog bound to an overlay mount id."""

    def __init__(self, name: str, title: str, host: Optional[OverlayHost] = None,
                 root_id: Optional[str] = None, width: Optional[str] = None,
                 max_width: Optional[str] = None, close_url: str = "#"):
        self.name = name
        self.title = title
        self.host = host if host is not None else get_overlay_host()
        self.root_id = root_id or config.MODAL_ROOT_ID
        self.width = width
        self.max_width = max_width
        self.close_url = close_url
        self.state = DialogState.CLOSED
        self._handle = NOT_READY
        self._container: Optional[Node] = None

    @property
    def is_open(self) -> bool:
        return self.state is DialogState.OPEN

    @property
    def handle(self):
        return self._handle

    def open(self) -> "Dialog":
        if self.is_open:
            return self
        self.state = DialogState.OPEN
        self._handle = self.host.acquire(self.root_id)
        logger.debug(f"Dialog {self.name!r} opened (mount ready={self._handle.ready})")
        return self

    def close(self) -> None:
        if not self.is_open:
            return
        if self._container is not None and self._container.parent is not None:
            self._container.parent.remove_child(self._container)
        self._container = None
        self.host.release(self._handle)
        self._handle = NOT_READY
        self.state = DialogState.CLOSED
        logger.debug(f"Dialog {self.name!r} closed")

    def render(self, content: Union[Node, Markup, str]) -> Optional[Node]:
        """Render the dialog into the overlay mount.

        Returns:
            The modal container node, or None when the dialog is closed or
            the mount point is not ready yet
        """
        if not self.is_open:
            return None
        if not self._handle:
            self._handle = self.host.acquire(self.root_id)
            if not self._handle:
                return None

        if self._container is not None and self._container.parent is not None:
            self._container.parent.remove_child(self._container)
        self._container = self._build(content)
        return self._handle.render(self._container)

    def _build(self, content) -> Node:
        if not isinstance(content, Node):
            content = Node.raw(content)

        overlay = Node("div", {"class": "modal-overlay", "data-dialog": self.name})
        container_attrs = {"class": "modal-container"}
        styles = []
        if self.width:
            styles.append(f"width: {self.width}")
        if self.max_width:
            styles.append(f"max-width: {self.max_width}")
        if styles:
            container_attrs["style"] = "; ".join(styles)
        container = overlay.append_child(Node("div", container_attrs))

        header = container.append_child(Node("div", {"class": "modal-header"}))
        header.append_child(Node("h2", text=self.title))
        header.append_child(Node("a", {
            "class": "close-button",
            "href": self.close_url,
            "aria-label": "Close",
        }, text="×"))

        body = container.append_child(Node("div", {"class": "modal-body"}))
        body.append_child(content)
        return overlay

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def __repr__(self):
        return f"<Dialog {self.name!r} {self.state.value}>"
