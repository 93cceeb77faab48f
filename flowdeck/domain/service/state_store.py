"""OAuth state store for correlating Google callbacks with their start request."""

import secrets
import threading
import time
from collections.abc import Callable

from flowdeck.domain.value import StateEntry

DEFAULT_STATE_TTL_SECONDS = 600


def generate_state_token() -> str:
    """Random state token with 256 bits of entropy."""
    return secrets.token_urlsafe(32)


class OAuthStateStore:
    """In-memory, single-use, time-bound state store.

    Each authorization flow saves its PKCE verifier (and optional meta)
    under a fresh state token; the callback consumes it exactly once.
    Entries do not survive a restart: users simply start the flow again.

    Expired entries are evicted on every save rather than by a background
    timer. A lock guards the map so two concurrent consumes of the same
    token yield one entry and one None.

    Attributes:
        ttl_seconds: Maximum age of an entry before it is treated as absent
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_STATE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        token_factory: Callable[[], str] = generate_state_token,
    ) -> None:
        """Initialize empty state store.

        Args:
            ttl_seconds: Entry lifetime
            clock: Returns the current time in seconds; tests inject a fake
            token_factory: Produces state tokens; tests inject a seeded one
        """
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._token_factory = token_factory
        self._entries: dict[str, StateEntry] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def save(self, code_verifier: str, meta: str | None = None) -> str:
        """Store a pending flow and return its state token.

        Args:
            code_verifier: PKCE verifier for the later token exchange
            meta: Opaque flow data, returned untouched by consume()

        Returns:
            The new state token
        """
        with self._lock:
            now = self._clock()
            state = self._token_factory()
            while state in self._entries:
                state = self._token_factory()
            self._entries[state] = StateEntry(
                code_verifier=code_verifier, meta=meta, created_at=now
            )
            self._evict_expired(now)
        return state

    def consume(self, state: str | None) -> StateEntry | None:
        """Remove and return the entry for a state token.

        Unknown, expired and already-consumed tokens all return None, so
        callers cannot tell why a state was rejected.

        Args:
            state: State token from the callback

        Returns:
            The entry if it existed and was within TTL, None otherwise
        """
        if not state:
            return None
        with self._lock:
            entry = self._entries.pop(state, None)
            now = self._clock()
        if entry is None or self._is_expired(entry, now):
            return None
        return entry

    def _is_expired(self, entry: StateEntry, now: float) -> bool:
        return now - entry.created_at > self.ttl_seconds

    def _evict_expired(self, now: float) -> None:
        expired = [s for s, e in self._entries.items() if self._is_expired(e, now)]
        for s in expired:
            del self._entries[s]
