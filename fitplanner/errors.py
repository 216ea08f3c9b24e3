# fitplanner/errors.py
"""
Recoverable errors reported back to the calling screen.

Every error carries the HTTP status the blueprints answer with and a
user-facing message; none of them is fatal to the session.
"""


class FitPlannerError(Exception):
    status_code = 400
    message = "Request could not be completed"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self):
        return {"message": self.message, "error": type(self).__name__}


class EmailExistsError(FitPlannerError):
    status_code = 409
    message = "A user with this email already exists"


class AuthError(FitPlannerError):
    # same text for unknown email and wrong password
    status_code = 401
    message = "Invalid email or password"


class PasswordMismatchError(FitPlannerError):
    message = "New passwords do not match."


class PasswordTooShortError(FitPlannerError):
    message = "New password must be at least 6 characters long."


class NotLoggedInError(FitPlannerError):
    status_code = 401
    message = "Not logged in"


class PermissionDeniedError(FitPlannerError):
    status_code = 403
    message = "Admin access required"


class UserNotFoundError(FitPlannerError):
    status_code = 404
    message = "User not found"


class WorkoutInProgressError(FitPlannerError):
    status_code = 409
    message = "A workout is already in progress"


class NoActiveWorkoutError(FitPlannerError):
    status_code = 409
    message = "No workout in progress"


class InvalidNavigationError(FitPlannerError):
    message = "That screen cannot be opened from here"


class WorkoutNotCompleteError(FitPlannerError):
    status_code = 409
    message = "Mark every exercise complete before finishing"
