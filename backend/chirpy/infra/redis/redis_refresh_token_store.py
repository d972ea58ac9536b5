"""Redis adapter for the refresh token port."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import UTC, datetime

import redis  # type: ignore[import-untyped]

from chirpy.services._shared.dto import UserOut
from chirpy.services._shared.ports import RefreshTokenStore, UserLoader


@dataclass(slots=True)
class RedisRefreshTokenStore(RefreshTokenStore):
    """
    Redis-backed refresh token store.

    Each token is a hash ``rt:<token>`` holding ``user_id``, ``expires_at`` and
    ``revoked_at`` (epoch seconds, ``"0"`` while active) with a key TTL equal
    to the remaining lifetime. Users are resolved through ``load_user`` so
    Redis only holds session state.

    :param r: A Redis client (already connected).
    :param load_user: Callable returning the user snapshot for an id.
    :param prefix: Key namespace.
    """

    r: redis.Redis
    load_user: UserLoader
    prefix: str = "rt"

    # -------------------- helpers --------------------

    def _k(self, token: str) -> str:
        return f"{self.prefix}:{token}"

    @staticmethod
    def _to_ts(dt: datetime) -> int:
        # Naive datetimes are treated as UTC
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC)
        return int(dt.timestamp())

    @staticmethod
    def _b(value: bytes | None, default: str = "") -> str:
        return value.decode() if value is not None else default

    # -------------------- API ------------------------

    def issue(self, *, token: str, user_id: uuid.UUID, expires_at: datetime) -> None:
        """Insert the token hash with a TTL matching its remaining lifetime."""
        key = self._k(token)
        now_ts = self._to_ts(datetime.now(UTC))
        ttl = max(1, self._to_ts(expires_at) - now_ts)

        pipe = self.r.pipeline(transaction=True)
        pipe.hset(
            key,
            mapping={
                "user_id": str(user_id),
                "expires_at": str(self._to_ts(expires_at)),
                "revoked_at": "0",
                "created_at": str(now_ts),
            },
        )
        pipe.expire(key, ttl)
        pipe.execute()

    def resolve_user(self, token: str, *, now: datetime) -> UserOut | None:
        """Read the hash in one round-trip and apply the validity predicate."""
        h = self.r.hgetall(self._k(token))
        if not h:
            return None
        if self._b(h.get(b"revoked_at"), "0") != "0":
            return None
        if int(self._b(h.get(b"expires_at"), "0")) <= self._to_ts(now):
            return None
        try:
            user_id = uuid.UUID(self._b(h.get(b"user_id")))
        except ValueError:
            return None
        return self.load_user(user_id)

    def revoke(self, token: str, *, now: datetime) -> bool:
        """
        Stamp ``revoked_at`` using WATCH/MULTI/EXEC (optimistic locking).

        Unknown or already-revoked tokens return ``False`` without writing.
        """
        key = self._k(token)
        stamp = str(self._to_ts(now))

        # Retry loop for optimistic locking in case of concurrent modifications
        while True:
            try:
                with self.r.pipeline() as p:
                    p.watch(key)
                    current = p.hget(key, "revoked_at")
                    if current is None or self._b(current, "0") != "0":
                        p.unwatch()
                        return False
                    p.multi()
                    p.hset(key, "revoked_at", stamp)
                    p.execute()
                return True
            except redis.WatchError:
                continue

    def purge_all(self) -> int:
        """Delete every token key under the store prefix."""
        keys = list(self.r.scan_iter(match=f"{self.prefix}:*"))
        if not keys:
            return 0
        return int(self.r.delete(*keys))
