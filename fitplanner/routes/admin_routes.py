# fitplanner/routes/admin_routes.py
from flask import Blueprint, jsonify

from ..controller import ScreenName, get_controller

admin_bp = Blueprint("admin", __name__)


@admin_bp.route("/users", methods=["GET"])
def list_users():
    """Admin dashboard table: every registered user."""
    controller = get_controller()
    controller.go_to(ScreenName.ADMIN_DASHBOARD)

    users = [
        {
            "name": u.name,
            "email": u.email,
            "role": u.role,
            "membershipType": u.membership_type,
        }
        for u in controller.directory
    ]
    return jsonify({"users": users, "screen": controller.screen.to_dict()}), 200


@admin_bp.route("/users/<path:email>", methods=["GET"])
def view_user(email):
    controller = get_controller()
    user = controller.view_user_profile(email)
    return (
        jsonify(
            {
                "profile": user.to_dict(include_password=False),
                "isEditingOwnProfile": user.same_user(controller.session_profile),
                "screen": controller.screen.to_dict(),
            }
        ),
        200,
    )
