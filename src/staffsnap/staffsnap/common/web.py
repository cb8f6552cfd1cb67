from __future__ import annotations

from functools import wraps

from flask import jsonify, session

from ..core.enums import Role
from ..core.exceptions import AuthorizationError


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def require_role(role: Role) -> None:
    if session.get("role") != role.value:
        raise AuthorizationError("You do not have permission")


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return fail("Please log in to continue", 401)
        return view(*args, **kwargs)

    return wrapper


def _role_required(role: Role):
    def decorator(view):
        @wraps(view)
        @login_required
        def wrapper(*args, **kwargs):
            try:
                require_role(role)
            except AuthorizationError as e:
                return fail(str(e), 403)
            return view(*args, **kwargs)

        return wrapper

    return decorator


admin_required = _role_required(Role.ADMIN)
staff_required = _role_required(Role.STAFF)
