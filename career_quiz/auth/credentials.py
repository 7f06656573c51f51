# career_quiz/auth/credentials.py
import secrets

from fastapi import Cookie, Depends, HTTPException, status

from ..constants import ADMIN_COOKIE_NAME
from ..core.config import AdminSettings, admin_settings
from .token_store import AdminTokenStore, get_token_store


def verify_credentials(username: str, password: str, settings: AdminSettings = admin_settings) -> bool:
    """Constant-time comparison against the configured admin account."""
    user_ok = secrets.compare_digest(username.encode("utf-8"), settings.username.encode("utf-8"))
    password_ok = secrets.compare_digest(password.encode("utf-8"), settings.password.encode("utf-8"))
    return user_ok and password_ok


async def require_admin(
    admin_token: str | None = Cookie(default=None, alias=ADMIN_COOKIE_NAME),
    store: AdminTokenStore = Depends(get_token_store),
) -> str:
    """Dependency guarding admin routes. Raises 401 without a live token."""
    if not await store.is_valid(admin_token):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return admin_token
