"""Tests for OverlayHost acquire/release lifecycle"""
import logging

import pytest

from ui.document import Document
from ui.overlay import NOT_READY, OverlayHost, get_overlay_host, reset_overlay_host


@pytest.fixture
def host():
    return OverlayHost()


@pytest.fixture
def document():
    return Document(title="test")


class TestNotReady:

    def test_acquire_without_surface_is_not_ready(self, host):
        handle = host.acquire("modal-root")

        assert handle is NOT_READY
        assert not handle
        assert handle.ready is False
        assert handle.node is None
        assert len(host) == 0

    def test_release_not_ready_is_noop(self, host):
        host.release(NOT_READY)
        NOT_READY.release()
        assert len(host) == 0

    def test_not_ready_after_paint_ends(self, host, document):
        with host.paint(document):
            pass
        assert host.acquire("modal-root") is NOT_READY


class TestAcquireRelease:

    def test_first_acquire_creates_attached_node(self, host, document):
        with host.paint(document):
            handle = host.acquire("modal-root")

            assert handle.ready is True
            assert handle.node.tag == "div"
            assert handle.node.id == "modal-root"
            assert handle.node.parent is document.body
            assert document.get_element_by_id("modal-root") is handle.node
            assert host.acquisition_count("modal-root") == 1
            handle.release()

    def test_concurrent_acquisitions_share_one_node(self, host, document):
        with host.paint(document):
            first = host.acquire("modal-root")
            second = host.acquire("modal-root")

            assert first.node is second.node
            assert host.acquisition_count("modal-root") == 2
            assert len([n for n in document.body.children if n.id == "modal-root"]) == 1

            first.release()
            second.release()

    def test_two_acquires_one_release_stays_attached(self, host, document):
        with host.paint(document):
            first = host.acquire("modal-root")
            second = host.acquire("modal-root")
            node = first.node

            host.release(first)
            assert host.is_attached("modal-root")
            assert node.parent is document.body

            host.release(second)
            assert not host.is_attached("modal-root")
            assert node.parent is None
            assert document.get_element_by_id("modal-root") is None

    def test_balanced_pairs_drain_registry(self, host, document):
        with host.paint(document):
            handles = [host.acquire("modal-root") for _ in range(5)]
            for handle in handles:
                host.release(handle)

            assert host.mount_ids() == []
            assert host.acquisition_count("modal-root") == 0

    def test_reacquire_after_teardown_creates_fresh_node(self, host, document):
        with host.paint(document):
            first = host.acquire("modal-root")
            old_node = first.node
            first.release()

            second = host.acquire("modal-root")
            assert second.node is not old_node
            assert second.node.parent is document.body
            second.release()

    def test_ids_are_independent(self, host, document):
        with host.paint(document):
            modal = host.acquire("modal-root")
            toast = host.acquire("toast-root")

            assert modal.node is not toast.node
            modal.release()
            assert host.is_attached("toast-root")
            assert not host.is_attached("modal-root")
            toast.release()


class TestOverRelease:

    def test_duplicate_release_of_same_handle_is_noop(self, host, document):
        with host.paint(document):
            first = host.acquire("modal-root")
            second = host.acquire("modal-root")

            first.release()
            first.release()
            host.release(first)

            assert host.acquisition_count("modal-root") == 1
            assert second.node.parent is document.body
            second.release()

    def test_release_past_zero_never_raises(self, host, document):
        with host.paint(document):
            handle = host.acquire("modal-root")
            handle.release()
            handle.release()

            assert len(host) == 0

    def test_stale_handle_does_not_touch_new_mount(self, host, document):
        with host.paint(document):
            stale = host.acquire("modal-root")
        # The paint drained the mount while the handle was still held
        assert stale.released is False

        with host.paint(document):
            fresh = host.acquire("modal-root")
            host.release(stale)

            assert host.acquisition_count("modal-root") == 1
            assert fresh.node.parent is document.body
            fresh.release()


class TestAdoptedNode:

    def test_existing_element_is_reused_and_kept(self, host, document):
        existing = document.create_element("div", id="modal-root")
        document.body.append_child(existing)

        with host.paint(document):
            handle = host.acquire("modal-root")
            assert handle.node is existing
            handle.release()

            assert not host.is_attached("modal-root")
            assert existing.parent is document.body


class TestPaint:

    def test_paint_drains_leaked_acquisitions(self, host, document, caplog):
        with caplog.at_level(logging.WARNING, logger="ui.overlay"):
            with host.paint(document):
                handle = host.acquire("modal-root")
                node = handle.node

        assert len(host) == 0
        assert node.parent is None
        assert "still held 1 time(s)" in caplog.text

    def test_nested_paint_of_same_document(self, host, document):
        with host.paint(document):
            with host.paint(document):
                handle = host.acquire("modal-root")
            assert host.is_attached("modal-root")
            handle.release()

    def test_painting_another_document_while_bound_raises(self, host, document):
        with host.paint(document):
            with pytest.raises(RuntimeError):
                with host.paint(Document()):
                    pass
            assert host.surface is document

    def test_surface_unbound_after_exception(self, host, document):
        with pytest.raises(KeyError):
            with host.paint(document):
                host.acquire("modal-root")
                raise KeyError("boom")

        assert host.surface is None
        assert len(host) == 0


class TestGlobalHost:

    def test_get_overlay_host_is_singleton(self):
        assert get_overlay_host() is get_overlay_host()

    def test_reset_clears_registry(self, document):
        host = get_overlay_host()
        with host.paint(document):
            host.acquire("modal-root")
            fresh = reset_overlay_host()

        assert fresh is not host
        assert len(host) == 0
        assert get_overlay_host() is fresh

    def test_reset_accepts_replacement(self):
        replacement = OverlayHost()
        assert reset_overlay_host(replacement) is replacement
        assert get_overlay_host() is replacement
