# fitplanner/routes/history_routes.py
from flask import Blueprint, jsonify

from ..controller import ScreenName, get_controller
from ..history import history_summary, sorted_history

history_bp = Blueprint("history", __name__)


@history_bp.route("", methods=["GET"])
def training_history():
    controller = get_controller()
    controller.go_to(ScreenName.HISTORY)
    profile = controller.session_profile

    return (
        jsonify(
            {
                "workouts": [r.to_dict() for r in sorted_history(profile)],
                "summary": history_summary(profile),
                "screen": controller.screen.to_dict(),
            }
        ),
        200,
    )
