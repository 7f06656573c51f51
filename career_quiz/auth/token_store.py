# career_quiz/auth/token_store.py
# Expiring store of issued admin console tokens.

import logging
import secrets
import time
from typing import Callable, Dict, Optional, Protocol

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from ..cache.connection import get_redis
from ..core.config import admin_settings

_log = logging.getLogger(__name__)

ADMIN_TOKEN_KEY_PREFIX = "career_quiz:admin"


def generate_admin_token() -> str:
    return secrets.token_hex(32)


class AdminTokenStore(Protocol):
    async def issue(self) -> str:
        ...

    async def is_valid(self, token: Optional[str]) -> bool:
        ...

    async def revoke(self, token: Optional[str]) -> None:
        ...


class InMemoryAdminTokenStore:
    """Process-local token set with per-token expiry. Tokens do not survive restarts."""

    def __init__(self, ttl_seconds: int = admin_settings.token_ttl_seconds,
                 clock: Callable[[], float] = time.monotonic):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._tokens: Dict[str, float] = {}

    def _purge_expired(self) -> None:
        now = self._clock()
        for token in [t for t, expires_at in self._tokens.items() if expires_at <= now]:
            del self._tokens[token]

    async def issue(self) -> str:
        self._purge_expired()
        token = generate_admin_token()
        self._tokens[token] = self._clock() + self.ttl_seconds
        return token

    async def is_valid(self, token: Optional[str]) -> bool:
        if not token:
            return False
        expires_at = self._tokens.get(token)
        if expires_at is None:
            return False
        if expires_at <= self._clock():
            self._tokens.pop(token, None)
            return False
        return True

    async def revoke(self, token: Optional[str]) -> None:
        if token:
            self._tokens.pop(token, None)


class RedisAdminTokenStore:
    """
    Tokens kept as Redis keys with a TTL, shared across workers.

    Validity checks fail closed: if Redis is unreachable the token is
    treated as invalid.
    """

    def __init__(self, ttl_seconds: int = admin_settings.token_ttl_seconds,
                 redis_getter: Callable = get_redis):
        self.ttl_seconds = ttl_seconds
        self._get_redis = redis_getter

    @staticmethod
    def _key(token: str) -> str:
        return f"{ADMIN_TOKEN_KEY_PREFIX}:{token}"

    async def issue(self) -> str:
        token = generate_admin_token()
        redis: aioredis.Redis | None = await self._get_redis()
        if not redis:
            raise RuntimeError("Redis connection unavailable; cannot issue admin token")
        try:
            await redis.set(self._key(token), b"1", ex=self.ttl_seconds)
        except RedisError as e:
            _log.error(f"Redis error storing admin token: {e}")
            raise
        _log.debug(f"Stored admin token with TTL {self.ttl_seconds}s")
        return token

    async def is_valid(self, token: Optional[str]) -> bool:
        if not token:
            return False
        redis: aioredis.Redis | None = await self._get_redis()
        if not redis:
            _log.error("Failed to check admin token: Redis connection unavailable.")
            return False
        try:
            return (await redis.exists(self._key(token))) > 0
        except RedisError as e:
            _log.error(f"Redis error checking admin token: {e}")
            return False

    async def revoke(self, token: Optional[str]) -> None:
        if not token:
            return
        redis: aioredis.Redis | None = await self._get_redis()
        if not redis:
            _log.error("Failed to revoke admin token: Redis connection unavailable.")
            return
        try:
            await redis.delete(self._key(token))
        except RedisError as e:
            _log.error(f"Redis error revoking admin token: {e}")


_token_store: Optional[AdminTokenStore] = None


def get_token_store() -> AdminTokenStore:
    """FastAPI dependency returning the process-wide store chosen by ADMIN_TOKEN_BACKEND."""
    global _token_store
    if _token_store is None:
        if admin_settings.token_backend == "redis":
            _token_store = RedisAdminTokenStore()
        else:
            _token_store = InMemoryAdminTokenStore()
        _log.info(f"Admin token store: {type(_token_store).__name__}")
    return _token_store
