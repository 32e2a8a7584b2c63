"""Access to the signed-in user.

Sign-in itself happens outside this application; the external flow stores the
authenticated user id in the Flask session under ``user_id``.
"""

from __future__ import annotations

from flask import g, session


def current_user_id() -> str | None:
    """Return the id of the signed-in user, or None."""
    return session.get("user_id")


def is_authenticated() -> bool:
    """Return True if a user is signed in."""
    return current_user_id() is not None


def current_nickname() -> str | None:
    """Return the signed-in user's nickname from their player profile."""
    user = g.get("user")
    if not user:
        return None
    return user.get("nickname")
