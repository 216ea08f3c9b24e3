# config.py
import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-me")

    SQLALCHEMY_DATABASE_URI = os.environ.get(
        "DATABASE_URL",
        "sqlite:///fitplanner.db"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # ⏱ workout session ticker
    TICK_INTERVAL_SECONDS = float(os.environ.get("TICK_INTERVAL_SECONDS", "1.0"))

    # weekdays shown by the planner (the demo plans Monday-Friday)
    PLANNER_WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]
