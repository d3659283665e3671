from .jwt_handler import create_access_token, create_user_token, verify_access_token
from .dependencies import (
    Anonymous,
    AuthContext,
    AuthenticatedAdmin,
    AuthenticatedUser,
    get_auth_context,
    require_admin,
    require_user,
)
from .rate_limiter import limiter, user_id_or_ip

__all__ = [
    "create_access_token",
    "create_user_token",
    "verify_access_token",
    "Anonymous",
    "AuthContext",
    "AuthenticatedAdmin",
    "AuthenticatedUser",
    "get_auth_context",
    "require_admin",
    "require_user",
    "limiter",
    "user_id_or_ip"
]
