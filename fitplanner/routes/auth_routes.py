# fitplanner/routes/auth_routes.py
import re

from flask import Blueprint, current_app, jsonify, request

from ..controller import get_controller

auth_bp = Blueprint("auth", __name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


# -----------------------------
# Routes
# -----------------------------
@auth_bp.route("/register", methods=["POST"])
def register():
    data = request.get_json(silent=True) or {}

    name = (data.get("name") or "").strip()
    email = (data.get("email") or "").strip()
    password = data.get("password") or ""  # do NOT strip passwords
    confirm_password = data.get("confirmPassword")
    role = data.get("role") or "user"

    if not name or not email or not password:
        return jsonify({"message": "name, email and password are required"}), 400

    if not EMAIL_RE.match(email):
        return jsonify({"message": "Invalid email format."}), 400

    if confirm_password is not None and password != confirm_password:
        return jsonify({"message": "Passwords do not match."}), 400

    if len(password) < 6:
        return jsonify({"message": "Password must be at least 6 characters long."}), 400

    if role not in ("user", "admin"):
        return jsonify({"message": "role must be user or admin"}), 400

    controller = get_controller()
    user = controller.register(name, email, password, role)
    current_app.logger.info(f"[auth/register] email='{email}' role={role}")

    return (
        jsonify({"user": user.to_dict(include_password=False), "screen": controller.screen.to_dict()}),
        201,
    )


@auth_bp.route("/login", methods=["POST"])
def login():
    data = request.get_json(silent=True) or {}

    email = (data.get("email") or "").strip()
    password = data.get("password") or ""  # do NOT strip passwords

    # do not log password
    current_app.logger.info(f"[auth/login] email='{email}'")

    if not email or not password:
        return jsonify({"message": "Email and password are required."}), 400

    controller = get_controller()
    user = controller.login(email, password)
    return jsonify({"user": user.to_dict(include_password=False), "screen": controller.screen.to_dict()}), 200


@auth_bp.route("/logout", methods=["POST"])
def logout():
    controller = get_controller()
    screen = controller.logout()
    return jsonify({"screen": screen.to_dict()}), 200


@auth_bp.route("/register-screen", methods=["POST"])
def show_registration():
    screen = get_controller().show_registration()
    return jsonify({"screen": screen.to_dict()}), 200


@auth_bp.route("/login-screen", methods=["POST"])
def show_login():
    screen = get_controller().show_login()
    return jsonify({"screen": screen.to_dict()}), 200


@auth_bp.route("/me", methods=["GET"])
def me():
    return jsonify(get_controller().to_dict()), 200
