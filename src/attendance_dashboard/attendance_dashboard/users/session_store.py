from __future__ import annotations

import json
import logging
from typing import MutableMapping, Optional

from ..core.constants import SESSION_KEY
from .model import SessionUser

logger = logging.getLogger(__name__)


class SessionStore:
    """Read/write access point for the persisted session.

    The value is kept as one JSON string under a fixed key so the stored shape
    stays ``{userId, name, role}`` whatever the backing mapping is (the Flask
    cookie session in the app, a plain dict in tests).
    """

    def __init__(self, storage: MutableMapping, *, key: str = SESSION_KEY):
        self._storage = storage
        self._key = key

    def restore(self) -> Optional[SessionUser]:
        raw = self._storage.get(self._key)
        if raw is None:
            return None
        try:
            data = json.loads(raw) if isinstance(raw, (str, bytes)) else raw
            if not isinstance(data, dict):
                raise ValueError("session value is not an object")
            return SessionUser.from_dict(data)
        except (TypeError, ValueError) as e:
            # Malformed value means "no session"; drop it so it is not re-read.
            logger.info("Discarding malformed persisted session: %s", e)
            self._storage.pop(self._key, None)
            return None

    def save(self, user: SessionUser) -> None:
        self._storage[self._key] = json.dumps(user.to_dict())

    def clear(self) -> None:
        self._storage.pop(self._key, None)
