"""
Server-side holding area for half-finished auth flows
The session cookie only carries the key, never the held data (passwords, OTPs).
"""
import secrets
import threading
import time


class PendingFlowStore:
    """In-memory key/value store whose entries expire after a fixed TTL"""

    def __init__(self, ttl_seconds=900, clock=time.time):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries = {}
        self._lock = threading.Lock()

    def put(self, data, key=None):
        key = key or secrets.token_urlsafe(24)
        with self._lock:
            self._purge_expired()
            self._entries[key] = (self._clock() + self.ttl_seconds, dict(data))
        return key

    def get(self, key):
        if not key:
            return None
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            expires_at, data = entry
            if expires_at < self._clock():
                del self._entries[key]
                return None
            return dict(data)

    def discard(self, key):
        with self._lock:
            self._entries.pop(key, None)

    def __len__(self):
        with self._lock:
            self._purge_expired()
            return len(self._entries)

    def _purge_expired(self):
        now = self._clock()
        expired = [key for key, (expires_at, _) in self._entries.items() if expires_at < now]
        for key in expired:
            del self._entries[key]
