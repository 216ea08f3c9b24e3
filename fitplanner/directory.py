# fitplanner/directory.py
"""
Keeps the logged-in profile and the directory of all users in step.

All functions are pure: they take the current profiles/directory and
return new values, leaving persistence to the caller. Every operation that
touches a profile returns both the new profile and the new directory so
the two can be written together.
"""
import logging
from dataclasses import replace
from typing import List, NamedTuple, Optional

from .errors import AuthError, EmailExistsError, PasswordMismatchError, PasswordTooShortError
from .models.profile import DEFAULT_ROLE, ROLES, UserProfile
from .models.workout import WorkoutRecord

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6

# fields a user may change on their own profile
SELF_EDITABLE_FIELDS = (
    "name",
    "age",
    "gender",
    "weight",
    "height",
    "activity_level",
    "fitness_goals",
)
# admins may additionally change these, on any profile
ADMIN_EDITABLE_FIELDS = SELF_EDITABLE_FIELDS + ("email", "role", "membership_type")


class DirectoryUpdate(NamedTuple):
    profile: UserProfile
    directory: List[UserProfile]


class ProfileEditResult(NamedTuple):
    session_profile: UserProfile
    viewed_profile: Optional[UserProfile]
    directory: List[UserProfile]


# ------------------------------
# Helpers
# ------------------------------
def find_user(directory: List[UserProfile], email: str) -> Optional[UserProfile]:
    for user in directory:
        if user.email == email:
            return user
    return None


def _replace_entry(directory: List[UserProfile], email: str, profile: UserProfile) -> List[UserProfile]:
    """Swap the entry keyed by `email` for `profile`; append when missing."""
    updated = []
    found = False
    for user in directory:
        if user.email == email and not found:
            updated.append(profile)
            found = True
        else:
            updated.append(user)
    if not found:
        updated.append(profile)
    return updated


def _checked_password(current: str, new_password: Optional[str], confirm_password: Optional[str]) -> str:
    if not new_password:
        return current
    if new_password != confirm_password:
        raise PasswordMismatchError()
    if len(new_password) < MIN_PASSWORD_LENGTH:
        raise PasswordTooShortError()
    return new_password


# ------------------------------
# Operations
# ------------------------------
def register(
    directory: List[UserProfile], name: str, email: str, password: str, role: str = DEFAULT_ROLE
) -> DirectoryUpdate:
    if find_user(directory, email) is not None:
        raise EmailExistsError()

    profile = UserProfile(
        name=name,
        email=email,
        password=password,
        role=role if role in ROLES else DEFAULT_ROLE,
    )
    logger.info("[directory] registered %s as %s", email, profile.role)
    return DirectoryUpdate(profile, list(directory) + [profile])


def authenticate(directory: List[UserProfile], email: str, password: str) -> UserProfile:
    user = find_user(directory, email)
    # plaintext comparison, demo only
    if user is None or not user.password or user.password != password:
        raise AuthError()
    return user


def reconcile_on_load(
    session_profile: Optional[UserProfile], directory: List[UserProfile]
) -> List[UserProfile]:
    """
    Put a persisted session profile back into the directory if it is missing.

    Older stored profiles are upgraded by UserProfile.from_dict before they
    reach this point.
    """
    if session_profile is None or find_user(directory, session_profile.email) is not None:
        return list(directory)
    logger.info("[directory] restoring %s from session state", session_profile.email)
    return list(directory) + [session_profile]


def apply_workout_completion(
    session_profile: UserProfile, record: WorkoutRecord, directory: List[UserProfile]
) -> DirectoryUpdate:
    profile = replace(
        session_profile, workout_history=list(session_profile.workout_history) + [record]
    )
    return DirectoryUpdate(profile, _replace_entry(directory, session_profile.email, profile))


def apply_profile_edit(
    editor_role: str,
    edited_profile: UserProfile,
    viewed_profile: Optional[UserProfile],
    session_profile: UserProfile,
    directory: List[UserProfile],
    new_password: Optional[str] = None,
    confirm_password: Optional[str] = None,
) -> ProfileEditResult:
    """
    Apply a saved profile form.

    An admin viewing someone else edits only that user's directory entry and
    the viewed profile. Anyone else edits their own session profile, its
    directory entry, and the viewed profile when it is the same user.

    Only the fields the editor's role allows are taken from edited_profile;
    email, role and membership changes from plain users are ignored.
    History is never taken from the form. The password changes only through
    new_password/confirm_password and the whole edit fails if they are invalid.
    """
    editing_other = viewed_profile is not None and not viewed_profile.same_user(session_profile)
    target = viewed_profile if editing_other else session_profile
    stored = find_user(directory, target.email) or target

    allowed = ADMIN_EDITABLE_FIELDS if editor_role == "admin" else SELF_EDITABLE_FIELDS
    changes = {name: getattr(edited_profile, name) for name in allowed}
    changes["password"] = _checked_password(stored.password, new_password, confirm_password)

    if changes.get("email", stored.email) != stored.email:
        if find_user(directory, changes["email"]) is not None:
            raise EmailExistsError()

    updated = replace(stored, **changes)
    new_directory = _replace_entry(directory, stored.email, updated)

    if editing_other:
        logger.info("[directory] admin %s edited %s", session_profile.email, stored.email)
        return ProfileEditResult(session_profile, updated, new_directory)

    new_viewed = updated if viewed_profile is not None and viewed_profile.same_user(session_profile) else viewed_profile
    return ProfileEditResult(updated, new_viewed, new_directory)
