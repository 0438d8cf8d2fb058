"""Paginator markup built from a WindowDescriptor."""

from typing import Callable

from services.pagination_service import PageWindowController, PaginationState, WindowDescriptor
from ui.document import Node


def render_paginator(state: PaginationState, page_url: Callable[[int], str],
                     controller: PageWindowController) -> Node:
    """
    Build the paginator navigation for a pagination state.

    Previous/next are asked of the controller like any other page change and
    rendered disabled when it rejects them.

    Args:
        state: Pagination state of the screen
        page_url: Maps a page number to its link
        controller: Window controller used for the layout and prev/next checks

    Returns:
        ``nav.paginator`` node
    """
    window = controller.compute_window(state)
    nav = Node("nav", {"class": "paginator", "aria-label": "Pagination"})

    previous = controller.request_previous(state)
    nav.append_child(_step_link("← Previous", "Previous Page", previous, page_url))

    for node in page_buttons(window, page_url):
        nav.append_child(node)

    following = controller.request_next(state)
    nav.append_child(_step_link("Next →", "Next Page", following, page_url))
    return nav


def page_buttons(window: WindowDescriptor, page_url: Callable[[int], str]):
    for entry in window.entries:
        if entry.is_ellipsis:
            yield Node("span", {"class": "dots", "aria-hidden": "true"}, text="...")
            continue
        attrs = {"class": "pageLink active" if entry.is_current else "pageLink",
                 "href": page_url(entry.number)}
        if entry.is_current:
            attrs["aria-current"] = "page"
        yield Node("a", attrs, text=str(entry.number))


def _step_link(label, aria_label, target_state, page_url) -> Node:
    if target_state is None:
        return Node("span", {"class": "pageLink disabled", "aria-disabled": "true",
                             "aria-label": aria_label}, text=label)
    return Node("a", {"class": "pageLink", "href": page_url(target_state.current_page),
                      "aria-label": aria_label}, text=label)
