"""
Overlay host: shared mount points for modal dialogs.

Dialogs render into a single node per mount id (e.g. ``modal-root``) appended
to the end of the document body, so they sit above the normal page flow no
matter where the screen declares them. The node is created on the first
acquisition, shared by every later one, and detached once the last
acquisition is released.

The host is process-wide. Page compositions are serialised through
``paint()``, which binds the document being rendered as the surface and
holds the host lock until the page is done.
"""

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Union

from ui.document import Document, Node

logger = logging.getLogger(__name__)


class _NotReady:
    """Sentinel returned by ``acquire`` while no surface is attachable."""

    ready = False
    node = None

    def __bool__(self):
        return False

    def release(self) -> None:
        pass

    def __repr__(self):
        return "NOT_READY"


NOT_READY = _NotReady()


@dataclass
class _MountEntry:
    node: Node
    count: int = 0
    owned: bool = True
    """False when the node already existed in the document (adopted)."""


class MountHandle:
    """A single acquisition of an overlay mount point."""

    ready = True

    def __init__(self, host: "OverlayHost", mount_id: str, node: Node):
        self.host = host
        self.id = mount_id
        self.node = node
        self.released = False

    def render(self, content: Node) -> Node:
        """Append content to the shared mount node."""
        return self.node.append_child(content)

    def release(self) -> None:
        self.host.release(self)

    def __repr__(self):
        state = "released" if self.released else "held"
        return f"<MountHandle {self.id!r} {state}>"


class OverlayHost:
    """Process-wide registry of overlay mount nodes, keyed by id."""

    def __init__(self):
        self._lock = threading.RLock()
        self._registry: Dict[str, _MountEntry] = {}
        self._surface: Optional[Document] = None

    # ===== SURFACE =====

    @property
    def surface(self) -> Optional[Document]:
        return self._surface

    @property
    def is_ready(self) -> bool:
        return self._surface is not None

    @contextmanager
    def paint(self, document: Document) -> Iterator[Document]:
        """Bind a document as the surface for the duration of one page render.

        Nested paints of the same document are allowed; painting a different
        document blocks until the current paint finishes.
        """
        with self._lock:
            previous = self._surface
            if previous is not None and previous is not document:
                raise RuntimeError("Another document is already bound to the overlay host")
            self._surface = document
            try:
                yield document
            finally:
                if previous is None:
                    self._drain()
                    self._surface = None

    # ===== ACQUIRE / RELEASE =====

    def acquire(self, mount_id: str) -> Union[MountHandle, _NotReady]:
        """Claim the mount node for ``mount_id``, creating it on first use.

        Args:
            mount_id: Element id of the mount point

        Returns:
            MountHandle sharing the live node, or NOT_READY without a surface
        """
        with self._lock:
            surface = self._surface
            if surface is None:
                return NOT_READY

            entry = self._registry.get(mount_id)
            if entry is None:
                existing = surface.get_element_by_id(mount_id)
                if existing is not None:
                    entry = _MountEntry(node=existing, owned=False)
                else:
                    node = surface.create_element("div", id=mount_id)
                    surface.body.append_child(node)
                    entry = _MountEntry(node=node)
                self._registry[mount_id] = entry
                logger.debug(f"Overlay mount {mount_id!r} attached (owned={entry.owned})")

            entry.count += 1
            return MountHandle(self, mount_id, entry.node)

    def release(self, handle) -> None:
        """Give back an acquisition; the last release detaches the node.

        Releasing NOT_READY, an already released handle, or an id with no
        outstanding acquisitions does nothing.
        """
        if not handle:
            return
        with self._lock:
            if handle.released:
                logger.debug(f"Ignoring duplicate release of {handle.id!r}")
                return
            handle.released = True

            entry = self._registry.get(handle.id)
            if entry is None or entry.node is not handle.node:
                return

            entry.count -= 1
            if entry.count <= 0:
                self._teardown(handle.id, entry)

    # ===== INSPECTION =====

    def acquisition_count(self, mount_id: str) -> int:
        entry = self._registry.get(mount_id)
        return entry.count if entry else 0

    def is_attached(self, mount_id: str) -> bool:
        return mount_id in self._registry

    def node_for(self, mount_id: str) -> Optional[Node]:
        entry = self._registry.get(mount_id)
        return entry.node if entry else None

    def mount_ids(self) -> List[str]:
        return list(self._registry)

    def __len__(self):
        return len(self._registry)

    def reset(self) -> None:
        """Drop every mount and unbind the surface (test hook)."""
        with self._lock:
            for mount_id, entry in list(self._registry.items()):
                self._teardown(mount_id, entry)
            self._surface = None

    # ===== INTERNALS =====

    def _teardown(self, mount_id: str, entry: _MountEntry) -> None:
        if entry.owned and entry.node.parent is not None:
            entry.node.parent.remove_child(entry.node)
        del self._registry[mount_id]
        logger.debug(f"Overlay mount {mount_id!r} detached")

    def _drain(self) -> None:
        for mount_id, entry in list(self._registry.items()):
            logger.warning(
                f"Overlay mount {mount_id!r} still held {entry.count} time(s) "
                f"after paint; tearing down"
            )
            self._teardown(mount_id, entry)


_host: Optional[OverlayHost] = None


def get_overlay_host() -> OverlayHost:
    """Get the global overlay host instance."""
    global _host
    if _host is None:
        _host = OverlayHost()
    return _host


def reset_overlay_host(host: Optional[OverlayHost] = None) -> OverlayHost:
    """Reset (or replace) the global overlay host and return it."""
    global _host
    if _host is not None:
        _host.reset()
    _host = host if host is not None else OverlayHost()
    return _host
