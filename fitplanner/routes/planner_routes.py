# fitplanner/routes/planner_routes.py
from flask import Blueprint, jsonify, request

from ..catalog import list_exercises, new_exercise
from ..controller import ScreenName, get_controller
from ..models.workout import DayWorkout, Exercise

planner_bp = Blueprint("planner", __name__)


def _plan_payload(controller, plan):
    return {"plan": plan.to_dict(), "weekOf": controller.week_of, "screen": controller.screen.to_dict()}


@planner_bp.route("", methods=["GET"])
def current_plan():
    controller = get_controller()
    return jsonify(_plan_payload(controller, controller.current_plan())), 200


@planner_bp.route("/next-week", methods=["POST"])
def next_week():
    controller = get_controller()
    return jsonify(_plan_payload(controller, controller.show_next_week())), 200


@planner_bp.route("/previous-week", methods=["POST"])
def previous_week():
    controller = get_controller()
    return jsonify(_plan_payload(controller, controller.show_previous_week())), 200


@planner_bp.route("/days/<day>", methods=["PUT"])
def save_day(day):
    """
    Replace one day's exercises for the week on screen.

    Body:
    {
      "exercises": [
        {"name": "Squats"},                              # new catalog entry
        {"id": "...", "name": "Squats", "reps": 12, ...} # existing entry
      ]
    }
    """
    controller = get_controller()
    data = request.get_json(silent=True) or {}

    exercises = []
    for item in data.get("exercises") or []:
        if item.get("id"):
            exercises.append(Exercise.from_dict(item))
            continue
        exercise = new_exercise(item.get("name") or "")
        if exercise is None:
            return jsonify({"message": f"unknown exercise '{item.get('name')}'"}), 400
        exercises.append(exercise)

    plan = controller.save_day_workout(DayWorkout(day=day, exercises=exercises))
    return jsonify(_plan_payload(controller, plan)), 200


@planner_bp.route("/exercises", methods=["GET"])
def exercise_catalog():
    return jsonify({"exercises": list_exercises()}), 200


@planner_bp.route("/navigate", methods=["POST"])
def navigate():
    """Open the planner, admin dashboard or an informational screen."""
    data = request.get_json(silent=True) or {}
    try:
        name = ScreenName(data.get("screen"))
    except ValueError:
        return jsonify({"message": "unknown screen"}), 400

    screen = get_controller().go_to(name)
    return jsonify({"screen": screen.to_dict()}), 200
