from flask import jsonify

from api.client import ApiError
from controllers.user_controller import UserController


def init_routes(app, user_service=None, overlay_host=None):
    """Initialize all Flask routes using MVC pattern"""
    
    user_controller = UserController(user_service=user_service, overlay_host=overlay_host)

    @app.route("/")
    def index():
        """Redirect to the users list"""
        return user_controller.index()

    @app.route("/users", methods=["GET"])
    @app.route("/users/<int:page>", methods=["GET"])
    def users(page=1):
        """Users table with paginator and any requested dialogs"""
        return user_controller.users(page)

    @app.route("/users/navigate", methods=["POST"])
    def navigate_users():
        """Jump-to-page form"""
        return user_controller.navigate()

    @app.route("/users/new", methods=["POST"])
    def create_user():
        return user_controller.create_user()

    @app.route("/users/<int:user_id>/edit", methods=["POST"])
    def edit_user(user_id):
        return user_controller.edit_user(user_id)

    @app.route("/users/<int:user_id>/delete", methods=["POST"])
    def delete_user(user_id):
        return user_controller.delete_user(user_id)

    @app.route("/api/users", methods=["GET"])
    @app.route("/api/users/<int:page>", methods=["GET"])
    def api_users(page=1):
        """Users page plus paginator window as JSON"""
        return user_controller.api_users(page)

    @app.errorhandler(ApiError)
    def handle_api_error(e):
        return jsonify({"error": e.message, "status": e.status}), 502
