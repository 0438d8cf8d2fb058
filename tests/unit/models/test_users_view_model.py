"""Tests for UsersViewModel"""
import pytest

from models.users_view_model import UsersViewModel
from services.pagination_service import PageWindowController, PaginationState
from services.user_service import UserService
from tests.utils.seed import FakeUserRepository


@pytest.fixture
def repository():
    return FakeUserRepository(count=12, per_page=6)


@pytest.fixture
def view_model(repository):
    return UsersViewModel(UserService(repository), paginator=PageWindowController(5), page_size=10)


class TestMount:

    def test_mount_derives_state_from_server_totals(self, view_model, repository):
        state = view_model.mount(1)

        assert state == PaginationState(12, 6, 1)
        assert state.total_pages == 2
        assert len(view_model.users) == 6
        assert view_model.loading is False
        assert repository.pages_loaded() == [1]

    def test_mount_past_last_page_clamps_and_reloads(self, view_model, repository):
        state = view_model.mount(5)

        assert state.current_page == 2
        assert repository.pages_loaded() == [5, 2]
        assert [u.id for u in view_model.users] == [7, 8, 9, 10, 11, 12]

    def test_mount_below_one_loads_first_page(self, view_model, repository):
        assert view_model.mount(0).current_page == 1
        assert repository.pages_loaded() == [1]

    def test_mount_with_api_failure_keeps_message(self, view_model, repository):
        repository.fail = True

        state = view_model.mount(2)

        assert view_model.message == "Users API unavailable"
        assert view_model.loading is False
        assert view_model.users == []
        assert state == PaginationState(0, 10, 1)
        assert view_model.window().page_numbers() == [1]

    def test_empty_dataset(self, repository):
        repository.users.clear()
        view_model = UsersViewModel(UserService(repository))

        state = view_model.mount(1)

        assert state.total_pages == 1
        window = view_model.window()
        assert window.has_previous is False
        assert window.has_next is False


class TestPageChange:

    def test_accepted_change_loads_page(self, view_model, repository):
        view_model.mount(1)

        assert view_model.handle_page_click(2) is True
        assert view_model.current_page == 2
        assert repository.pages_loaded() == [1, 2]
        assert view_model.users[0].id == 7

    @pytest.mark.parametrize("target", [0, 3, -1, None])
    def test_rejected_change_loads_nothing(self, view_model, repository, target):
        view_model.mount(1)

        assert view_model.handle_page_click(target) is False
        assert view_model.current_page == 1
        assert repository.pages_loaded() == [1]

    def test_change_without_load(self, view_model, repository):
        view_model.mount(1)

        assert view_model.handle_page_click(2, load=False) is True
        assert view_model.current_page == 2
        assert repository.pages_loaded() == [1]

    def test_repeated_click_same_result(self, view_model):
        view_model.mount(1)
        view_model.handle_page_click(2)
        first = view_model.pagination
        view_model.handle_page_click(2)

        assert view_model.pagination == first


class TestRefresh:

    def test_refresh_clamps_when_total_shrinks(self, view_model, repository):
        view_model.mount(2)
        for user_id in range(6, 13):
            del repository.users[user_id]

        state = view_model.refresh()

        assert state == PaginationState(5, 6, 1)
        assert repository.pages_loaded() == [2, 2, 1]
        assert len(view_model.users) == 5

    def test_refresh_picks_up_growth(self, view_model, repository):
        view_model.mount(2)
        for user_id in range(13, 20):
            repository.users[user_id] = repository.users[1]

        state = view_model.refresh()

        assert state.current_page == 2
        assert state.total_pages == 4


def test_to_dict(view_model):
    view_model.mount(2)
    data = view_model.to_dict()

    assert data["pagination"] == {
        "total_items": 12,
        "page_size": 6,
        "current_page": 2,
        "total_pages": 2,
        "offset": 6,
    }
    assert data["window"]["has_next"] is False
    assert data["users"][0]["id"] == 7
    assert data["message"] == ""
