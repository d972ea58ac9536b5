"""Process-local refresh token store for service tests."""

from __future__ import annotations

import threading
import uuid
from dataclasses import dataclass, replace
from datetime import datetime

from chirpy.services._shared.dto import UserOut
from chirpy.services._shared.ports import RefreshTokenStore, UserLoader


@dataclass(frozen=True)
class _Entry:
    user_id: uuid.UUID
    expires_at: datetime
    revoked_at: datetime | None = None


class InMemoryRefreshTokenStore(RefreshTokenStore):
    """Dictionary-backed store; a lock keeps check-and-stamp atomic."""

    def __init__(self, user_loader: UserLoader) -> None:
        self._load_user = user_loader
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()

    def issue(self, *, token: str, user_id: uuid.UUID, expires_at: datetime) -> None:
        with self._lock:
            self._entries[token] = _Entry(user_id=user_id, expires_at=expires_at)

    def resolve_user(self, token: str, *, now: datetime) -> UserOut | None:
        with self._lock:
            entry = self._entries.get(token)
            if entry is None or entry.revoked_at is not None or entry.expires_at <= now:
                return None
            user_id = entry.user_id
        return self._load_user(user_id)

    def revoke(self, token: str, *, now: datetime) -> bool:
        with self._lock:
            entry = self._entries.get(token)
            if entry is None or entry.revoked_at is not None:
                return False
            self._entries[token] = replace(entry, revoked_at=now)
            return True

    def purge_all(self) -> int:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
            return count
