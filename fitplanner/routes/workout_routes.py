# fitplanner/routes/workout_routes.py
from flask import Blueprint, current_app, jsonify, request

from ..controller import get_controller
from ..errors import NoActiveWorkoutError, WorkoutNotCompleteError

workouts_bp = Blueprint("workouts", __name__)


def _safe_int(v, default=None):
    try:
        return int(v)
    except (TypeError, ValueError):
        return default


def _session_payload(controller):
    return {"workout": controller.workout.to_dict(), "screen": controller.screen.to_dict()}


# ------------------------------
# POST /api/workouts/start   {"day": "Monday"}
# ------------------------------
@workouts_bp.route("/start", methods=["POST"])
def start_workout():
    controller = get_controller()
    data = request.get_json(silent=True) or {}

    day = controller.current_plan().day(data.get("day") or "")
    if day is None:
        return jsonify({"message": "day not in plan"}), 404

    controller.start_workout(day)
    return jsonify(_session_payload(controller)), 201


@workouts_bp.route("/current", methods=["GET"])
def current_workout():
    controller = get_controller()
    if controller.workout is None:
        raise NoActiveWorkoutError()
    return jsonify(_session_payload(controller)), 200


@workouts_bp.route("/exercises/<exercise_id>/complete", methods=["POST"])
def complete_exercise(exercise_id):
    controller = get_controller()
    controller.complete_exercise(exercise_id)
    return jsonify(_session_payload(controller)), 200


@workouts_bp.route("/navigate", methods=["POST"])
def go_to_exercise():
    controller = get_controller()
    data = request.get_json(silent=True) or {}

    index = _safe_int(data.get("index"))
    if index is None:
        return jsonify({"message": "index is required"}), 400

    controller.go_to_exercise(index)
    return jsonify(_session_payload(controller)), 200


def _end(fully_completed: bool):
    controller = get_controller()
    if fully_completed:
        record = controller.finish_workout()
    else:
        record = controller.abandon_workout()

    current_app.logger.info(
        f"[workouts] {'finished' if fully_completed else 'abandoned'} "
        f"calories={record.calories_burned} minutes={record.duration}"
    )
    return (
        jsonify(
            {
                "record": record.to_dict(),
                "user": controller.session_profile.to_dict(include_password=False),
                "screen": controller.screen.to_dict(),
            }
        ),
        200,
    )


@workouts_bp.route("/finish", methods=["POST"])
def finish_workout():
    workout = get_controller().workout
    # "Finish" is offered once every exercise is marked; "abandon" covers the rest
    if workout is not None and workout.is_active and not workout.all_completed:
        raise WorkoutNotCompleteError()
    return _end(fully_completed=True)


@workouts_bp.route("/abandon", methods=["POST"])
def abandon_workout():
    return _end(fully_completed=False)
