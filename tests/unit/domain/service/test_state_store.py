"""Unit tests for the OAuth state store."""

from concurrent.futures import ThreadPoolExecutor
from itertools import count
import threading

from flowdeck.domain.service.state_store import OAuthStateStore, generate_state_token


class FakeClock:
    """Manually advanced clock."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def sequential_tokens(prefix: str = "state"):
    counter = count(1)
    return lambda: f"{prefix}-{next(counter)}"


class TestGenerateStateToken:
    def test_has_at_least_128_bits(self):
        # token_urlsafe(32) gives 43 characters of base64url
        assert len(generate_state_token()) >= 43

    def test_tokens_differ(self):
        assert generate_state_token() != generate_state_token()


class TestOAuthStateStore:
    """Tests for OAuthStateStore."""

    def test_save_then_consume_returns_verifier_and_meta(self):
        store = OAuthStateStore(clock=FakeClock())

        state = store.save("verifier-abc", meta="42")
        entry = store.consume(state)

        assert entry is not None
        assert entry.code_verifier == "verifier-abc"
        assert entry.meta == "42"

    def test_meta_defaults_to_none(self):
        store = OAuthStateStore()

        entry = store.consume(store.save("v"))

        assert entry is not None
        assert entry.meta is None

    def test_second_consume_returns_none(self):
        store = OAuthStateStore()
        state = store.save("v")

        assert store.consume(state) is not None
        assert store.consume(state) is None

    def test_unknown_empty_and_none_tokens_return_none(self):
        store = OAuthStateStore()
        store.save("v")

        assert store.consume("never-issued") is None
        assert store.consume("") is None
        assert store.consume(None) is None
        assert len(store) == 1

    def test_consume_within_ttl_succeeds(self):
        clock = FakeClock()
        store = OAuthStateStore(ttl_seconds=600, clock=clock)
        state = store.save("v")

        clock.advance(600)

        assert store.consume(state) is not None

    def test_consume_after_ttl_returns_none(self):
        clock = FakeClock()
        store = OAuthStateStore(ttl_seconds=600, clock=clock)
        state = store.save("v")

        clock.advance(601)

        assert store.consume(state) is None
        assert len(store) == 0

    def test_save_evicts_expired_entries(self):
        clock = FakeClock()
        store = OAuthStateStore(ttl_seconds=10, clock=clock)
        old = store.save("old")
        clock.advance(5)
        kept = store.save("kept")

        clock.advance(6)
        fresh = store.save("fresh")

        assert len(store) == 2
        assert store.consume(old) is None
        assert store.consume(kept) is not None
        assert store.consume(fresh) is not None

    def test_uses_injected_token_factory(self):
        store = OAuthStateStore(token_factory=sequential_tokens())

        assert store.save("a") == "state-1"
        assert store.save("b") == "state-2"

    def test_retries_colliding_tokens(self):
        tokens = iter(["dup", "dup", "unique"])
        store = OAuthStateStore(token_factory=lambda: next(tokens))

        first = store.save("a")
        second = store.save("b")

        assert first == "dup"
        assert second == "unique"
        assert store.consume("dup").code_verifier == "a"
        assert store.consume("unique").code_verifier == "b"

    def test_concurrent_consume_succeeds_once(self):
        store = OAuthStateStore()
        state = store.save("v")
        workers = 16
        barrier = threading.Barrier(workers)

        def consume():
            barrier.wait()
            return store.consume(state)

        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(lambda _: consume(), range(workers)))

        assert sum(1 for r in results if r is not None) == 1

    def test_concurrent_saves_yield_distinct_states(self):
        store = OAuthStateStore()

        with ThreadPoolExecutor(max_workers=8) as pool:
            states = list(pool.map(lambda i: store.save(f"v{i}"), range(200)))

        assert len(set(states)) == 200
        assert len(store) == 200
