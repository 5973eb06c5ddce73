"""
randomness.py — the single source of randomness used by the generator.

The generator never touches a global RNG directly: it receives an object
with a ``randbelow(bound)`` method. In production that is
``SystemRandomSource`` (the OS CSPRNG through :mod:`secrets`); tests pass a
seeded fake.

Quick start
>>> from pwstrength.randomness import default_source, shuffle
>>> default_source().randbelow(10)      # unbiased integer 0..9
>>> shuffle(list('abcdef'))             # new list, Fisher-Yates order
"""
import os
import secrets
from typing import List, MutableSequence, Optional, Protocol, Sequence, TypeVar

from pwstrength.errors import RandomnessUnavailable

T = TypeVar('T')


class RandomSource(Protocol):
    def randbelow(self, bound: int) -> int:
        """Return a uniformly distributed integer in [0, bound)."""
        ...


class SystemRandomSource:
    """
    Uniform integers from the operating system CSPRNG.

    ``secrets.randbelow`` uses rejection sampling, so there is no modulo
    bias. ``SystemRandom`` reads ``os.urandom`` on every draw and holds no
    state, which makes a shared instance safe across threads.
    """

    def __init__(self) -> None:
        try:
            os.urandom(1)
        except NotImplementedError as exc:
            raise RandomnessUnavailable(
                'No cryptographically secure random source is available on this platform.'
            ) from exc
        self._rng = secrets.SystemRandom()

    def randbelow(self, bound: int) -> int:
        if bound <= 0:
            raise ValueError('bound must be positive')
        return self._rng.randrange(bound)


# ── Module-level default ──────────────────────────────────────────────────────
_default_source: Optional[SystemRandomSource] = None


def default_source() -> SystemRandomSource:
    """Lazily create (and reuse) the process-wide system source."""
    global _default_source
    if _default_source is None:
        _default_source = SystemRandomSource()
    return _default_source


def choice(seq: Sequence[T], source: RandomSource) -> T:
    if not seq:
        raise ValueError('cannot choose from an empty sequence')
    return seq[source.randbelow(len(seq))]


def shuffle(items: Sequence[T], source: Optional[RandomSource] = None) -> List[T]:
    """Return a shuffled copy of ``items`` (unbiased Fisher-Yates)."""
    source = source or default_source()
    arr: MutableSequence[T] = list(items)
    for i in range(len(arr) - 1, 0, -1):
        j = source.randbelow(i + 1)
        arr[i], arr[j] = arr[j], arr[i]
    return list(arr)
