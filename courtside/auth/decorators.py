"""Decorators for authenticated views."""

from functools import wraps

from flask import jsonify

from .session import is_authenticated


def login_required(f):
    """Reject the request with 401 unless a user is signed in.

    Usage:
    @login_required
    def protected_view():
        ...
    """

    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not is_authenticated():
            return jsonify({"error": "Authentication required."}), 401
        return f(*args, **kwargs)

    return decorated_function
