# fitplanner/routes/profile_routes.py
from flask import Blueprint, current_app, jsonify, request

from ..controller import get_controller
from ..models.profile import UserProfile

profile_bp = Blueprint("profile", __name__)

# form keys the profile screen may submit
FORM_FIELDS = (
    "name",
    "email",
    "age",
    "gender",
    "weight",
    "height",
    "activityLevel",
    "fitnessGoals",
    "role",
    "membershipType",
)


def _profile_payload(controller):
    profile = controller.profile_on_screen
    return {
        "profile": profile.to_dict(include_password=False),
        "isEditingOwnProfile": profile.same_user(controller.session_profile),
        "screen": controller.screen.to_dict(),
    }


@profile_bp.route("", methods=["GET"])
def get_profile():
    return jsonify(_profile_payload(get_controller())), 200


@profile_bp.route("/me", methods=["POST"])
def view_own_profile():
    controller = get_controller()
    controller.view_own_profile()
    return jsonify(_profile_payload(controller)), 200


@profile_bp.route("", methods=["PUT"])
def update_profile():
    """
    Save the profile form for the profile on screen.

    Body: any of FORM_FIELDS plus optional newPassword / confirmNewPassword.
    Fields the caller's role may not change are ignored.
    """
    controller = get_controller()
    target = controller.profile_on_screen

    data = request.get_json(silent=True) or {}
    form = {k: data[k] for k in FORM_FIELDS if k in data}
    edited = UserProfile.from_dict({**target.to_dict(), **form})

    updated = controller.save_profile(
        edited,
        new_password=data.get("newPassword") or None,
        confirm_password=data.get("confirmNewPassword"),
    )
    current_app.logger.info(f"[profile] saved '{updated.email}'")

    return (
        jsonify(
            {
                "profile": updated.to_dict(include_password=False),
                "user": controller.session_profile.to_dict(include_password=False),
                "screen": controller.screen.to_dict(),
            }
        ),
        200,
    )
