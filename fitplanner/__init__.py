# fitplanner/__init__.py

from flask import Flask, jsonify
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy

from config import Config

db = SQLAlchemy()


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    # Init extensions
    db.init_app(app)

    # CORS: the browser front-end calls /api/*
    CORS(app, resources={r"/api/*": {"origins": "*"}})

    # -----------------------------
    # Error handlers
    # -----------------------------
    from .errors import FitPlannerError

    @app.errorhandler(FitPlannerError)
    def fitplanner_error(err):
        return jsonify(err.to_dict()), err.status_code

    # -----------------------------
    # IMPORT BLUEPRINTS (all screens)
    # -----------------------------
    from .routes.auth_routes import auth_bp
    from .routes.profile_routes import profile_bp
    from .routes.planner_routes import planner_bp
    from .routes.workout_routes import workouts_bp
    from .routes.admin_routes import admin_bp
    from .routes.history_routes import history_bp

    # -----------------------------
    # REGISTER BLUEPRINTS
    # -----------------------------
    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(profile_bp, url_prefix="/api/profile")
    app.register_blueprint(planner_bp, url_prefix="/api/planner")
    app.register_blueprint(workouts_bp, url_prefix="/api/workouts")
    app.register_blueprint(admin_bp, url_prefix="/api/admin")
    app.register_blueprint(history_bp, url_prefix="/api/history")

    @app.route("/api/health")
    def health():
        return {"status": "ok"}

    # -----------------------------
    # DB init
    # -----------------------------
    with app.app_context():
        db.create_all()

    return app
