"""Deterministic, caller-seeded exercise shuffling.

seed = hash(caller identity) + call counter

The counter is shared by every caller in the process and advances on each
shuffle, so the sequence of calls across all users determines the ordering
any one user sees. Given the counter value, the permutation is fully
reproducible.

The permutation rule swaps position ``i-1`` with ``(seed + i - 1) mod i``
for ``i = N .. 2``. Unlike Fisher-Yates, the swap target is tied to the loop
index rather than drawn uniformly, so orderings are not uniformly
distributed. Selection behavior depends on this exact rule.
"""

from __future__ import annotations

import threading
from typing import Sequence, TypeVar

from workout_engine.models.enums import SHUFFLE_HASH_MODULUS, SHUFFLE_HASH_MULTIPLIER

T = TypeVar("T")


class CallCounter:
    """Thread-safe monotonically increasing shuffle counter."""

    def __init__(self, start: int = 0) -> None:
        self._value = start
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        """The value the next call to ``next()`` will return."""
        with self._lock:
            return self._value

    def next(self) -> int:
        """Return the current value and advance the counter by one."""
        with self._lock:
            current = self._value
            self._value += 1
            return current

    def reset(self, value: int = 0) -> None:
        with self._lock:
            self._value = value


# Process-wide counter shared by all callers
GLOBAL_CALL_COUNTER = CallCounter()


def identity_hash(identity: str | bytes) -> int:
    """Fold an identity's raw bytes into a non-negative hash.

    h = (h × 31 + byte) mod 1_000_000_007, starting from 0.
    Strings are hashed over their UTF-8 encoding.
    """
    raw = identity.encode("utf-8") if isinstance(identity, str) else bytes(identity)
    h = 0
    for byte in raw:
        h = (h * SHUFFLE_HASH_MULTIPLIER + byte) % SHUFFLE_HASH_MODULUS
    return h


def shuffle_with_seed(items: Sequence[T], seed: int) -> list[T]:
    """Permute a copy of ``items`` with the index-tied swap rule.

    Args:
        items: Candidates; not modified.
        seed: Non-negative seed.

    Returns:
        A new list holding the same elements in permuted order.
    """
    result = list(items)
    for i in range(len(result), 1, -1):
        j = (seed + i - 1) % i
        result[i - 1], result[j] = result[j], result[i - 1]
    return result


def deterministic_shuffle(
    items: Sequence[T],
    caller: str | bytes,
    counter: CallCounter = GLOBAL_CALL_COUNTER,
) -> list[T]:
    """Shuffle ``items`` for ``caller``, advancing ``counter`` by one.

    The counter advances even when ``items`` is empty.
    """
    seed = identity_hash(caller) + counter.next()
    return shuffle_with_seed(items, seed)
