"""UserController for the user management web UI

Composes the users screen (table, paginator, modal dialogs) onto a Document
painted through the overlay host, and handles the create/edit/delete forms.
It handles only routing and HTTP concerns; data access goes through
UserService and screen state through UsersViewModel.
"""

import logging

from flask import flash, jsonify, redirect, render_template, request, url_for

from api.client import ApiError
from forms import DeleteUserForm, PageJumpForm, UserForm
from models.user import User
from models.users_view_model import UsersViewModel
from services.user_service import UserService
from ui.dialog import Dialog
from ui.document import Document, Node
from ui.overlay import get_overlay_host
from ui.paginator import render_paginator

logger = logging.getLogger(__name__)

HEADER_TABLE = ["Id", "Email", "First Name", "Last Name", "Avatar", "Actions"]

DIALOG_TITLES = {
    "add": "Add User",
    "edit": "Edit User",
    "detail": "User Detail",
    "delete": "Delete User",
}


class UserController:
    """Controller for the users screen and its dialogs"""

    def __init__(self, user_service=None, overlay_host=None):
        """Initialize controller with optional service injection

        Args:
            user_service: UserService instance (or None for default)
            overlay_host: OverlayHost instance (or None for the global one)
        """
        self.user_service = user_service or UserService()
        self.overlay_host = overlay_host

    @property
    def host(self):
        return self.overlay_host if self.overlay_host is not None else get_overlay_host()

    def view_model(self) -> UsersViewModel:
        return UsersViewModel(self.user_service)

    def index(self):
        return redirect(url_for("users"))

    # ===== SCREEN =====

    def users(self, page=1):
        """Render the users screen

        Args:
            page: Requested page (clamped to the server-reported range)

        Returns:
            Flask Response (rendered template or redirect)
        """
        vm = self.view_model()
        state = vm.mount(page)
        if not vm.message and state.current_page != page:
            return redirect(self._page_url(state.current_page, keep_args=True))

        # Remote lookups happen here, never while the host lock is held
        requested = self._requested_dialogs(vm)
        table = render_template(
            "users/_table.html",
            vm=vm,
            headers=HEADER_TABLE,
            jump_form=PageJumpForm(current_page=vm.current_page),
            page=vm.current_page,
        )

        document = Document(title="User Management")
        dialogs = []
        with self.host.paint(document):
            document.body.append_child(Node.raw(table))
            document.body.append_child(render_paginator(vm.pagination, self._page_url, vm.paginator))
            try:
                for name, content in requested:
                    dialogs.append(self._open_dialog(name, content, vm))
                body = document.render_body()
            finally:
                # Screen unmount closes whatever is still open
                for dialog in reversed(dialogs):
                    dialog.close()

        return render_template("base.html", title=document.title, body=body)

    def api_users(self, page=1):
        vm = self.view_model()
        vm.mount(page)
        status = 502 if vm.message else 200
        return jsonify(vm.to_dict()), status

    def navigate(self):
        """Handle the jump-to-page form; rejected targets stay on the current page"""
        form = PageJumpForm()
        try:
            current = int(form.current_page.data or 1)
        except (TypeError, ValueError):
            current = 1

        vm = self.view_model()
        vm.mount(current)
        if form.validate_on_submit():
            vm.handle_page_click(form.page.data, load=False)
        return redirect(self._page_url(vm.current_page))

    # ===== DIALOGS =====

    def _requested_dialogs(self, vm):
        """Resolve the dialogs named in the query string to (name, content) pairs"""
        user_id = request.args.get("user_id", type=int)
        requested = []
        for name in request.args.getlist("dialog"):
            if name not in DIALOG_TITLES:
                logger.debug(f"Ignoring unknown dialog {name!r}")
                continue
            if name != "add" and user_id is None:
                logger.debug(f"Dialog {name!r} requested without user_id")
                continue
            requested.append((name, self._dialog_content(name, user_id, vm)))
        return requested

    def _open_dialog(self, name, content, vm):
        dialog = Dialog(
            name,
            DIALOG_TITLES[name],
            host=self.host,
            width="100%",
            max_width="400px",
            close_url=self._page_url(vm.current_page),
        )
        dialog.open()
        try:
            dialog.render(content)
        except Exception:
            dialog.close()
            raise
        return dialog

    def _dialog_content(self, name, user_id, vm):
        page = vm.current_page
        if name == "add":
            return render_template(
                "dialogs/user_form.html",
                form=UserForm(),
                action=url_for("create_user", page=page),
                submit_label="Create",
            )

        user = next((u for u in vm.users if u.id == user_id), None)
        support = None
        if user is None or name == "detail":
            try:
                user, support = self.user_service.get_user_by_id(user_id)
            except ApiError as e:
                logger.error(f"Could not load user {user_id}: {e}")
                return render_template("dialogs/error.html", message=e.message)

        if name == "edit":
            return render_template(
                "dialogs/user_form.html",
                form=UserForm(name=user.first_name, job=""),
                action=url_for("edit_user", user_id=user_id, page=page),
                submit_label="Save",
            )
        if name == "delete":
            return render_template(
                "dialogs/delete_user.html",
                form=DeleteUserForm(),
                user=user,
                action=url_for("delete_user", user_id=user_id, page=page),
                cancel_url=self._page_url(page),
            )
        return render_template("dialogs/user_detail.html", user=user, support=support)

    # ===== WRITES =====

    def create_user(self):
        page = request.args.get("page", 1, type=int)
        form = UserForm()
        if not form.validate_on_submit():
            flash("Error: Please ensure all fields are filled out.", "error")
            return redirect(self._page_url(page, dialog="add"))

        user = User(name=form.name.data, job=form.job.data)
        response = self.user_service.create_user(user)
        if response.ok:
            flash(f"User {user.name} was created successfully!", "success")
        else:
            flash("Error: The user cannot be created.", "error")
        return redirect(self._page_url(page))

    def edit_user(self, user_id):
        page = request.args.get("page", 1, type=int)
        form = UserForm()
        if not form.validate_on_submit():
            flash("Error: Please ensure all fields are filled out.", "error")
            return redirect(self._page_url(page, dialog="edit", user_id=user_id))

        user = User(name=form.name.data, job=form.job.data)
        response = self.user_service.update_user(user_id, user)
        if response.ok:
            flash(f"User {user.name} was edited successfully!", "success")
        else:
            flash("Error: The user cannot be edited.", "error")
        return redirect(self._page_url(page))

    def delete_user(self, user_id):
        page = request.args.get("page", 1, type=int)
        form = DeleteUserForm()
        if not form.validate_on_submit():
            flash("Error: The request could not be verified.", "error")
            return redirect(self._page_url(page))

        response = self.user_service.delete_user(user_id)
        if response.ok:
            flash(f"User {user_id} was deleted successfully!", "success")
        else:
            flash("Error: The user cannot be deleted.", "error")
        return redirect(self._page_url(page))

    # ===== HELPERS =====

    def _page_url(self, page, keep_args=False, **query):
        if keep_args:
            query = {
                key: values
                for key, values in request.args.to_dict(flat=False).items()
                if key != "page"
            }
        return url_for("users", page=page, **query)
