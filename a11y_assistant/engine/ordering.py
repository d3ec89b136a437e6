"""
Catalog Ordering
================
Turns draws from a SeededRandom into a permutation of the issue catalog.
The synthesizer takes the first N templates of the result.

Strategies:
    keyed       — one draw per template (in catalog order) becomes its sort
                  key; templates are stable-sorted by key ascending.
                  Consumes exactly len(catalog) draws.
    comparison  — replays `[...pool].sort(() => rng() - 0.5)` as V8 runs it.
                  Below 64 elements V8's TimSort is a single run: detect the
                  leading ascending/descending run, then binary-insert the
                  rest. Each comparison consumes one draw; a draw below 0.5
                  means "less than". Larger inputs would need TimSort's
                  merge phase and are rejected.

Neither strategy mutates its input.
"""
from typing import Callable, Sequence, TypeVar

from a11y_assistant.core.constants import (
    ORDERING_COMPARISON,
    ORDERING_KEYED,
    ORDERING_STRATEGIES,
)
from a11y_assistant.engine.seeded_random import SeededRandom

T = TypeVar("T")

# V8 TimSort sorts arrays shorter than this as one binary-insertion run.
COMPARISON_MAX_ITEMS = 63


class OrderingError(ValueError):
    """Raised for unknown strategies or inputs a strategy cannot order."""


def keyed_order(items: Sequence[T], rng: SeededRandom) -> list[T]:
    keys = [rng.random() for _ in items]
    ranked = sorted(range(len(items)), key=lambda i: keys[i])
    return [items[i] for i in ranked]


def comparison_order(items: Sequence[T], rng: SeededRandom) -> list[T]:
    if len(items) > COMPARISON_MAX_ITEMS:
        raise OrderingError(
            f"comparison ordering supports at most {COMPARISON_MAX_ITEMS} items, "
            f"got {len(items)}"
        )

    work = list(items)
    n = len(work)
    if n < 2:
        return work

    def less() -> bool:
        return rng.random() < 0.5

    # --- Run detection ---
    run_length = 2
    descending = less()
    for _ in range(2, n):
        if less() != descending:
            break
        run_length += 1
    if descending:
        work[:run_length] = reversed(work[:run_length])

    # --- Binary insertion of the remainder ---
    for start in range(run_length, n):
        pivot = work[start]
        left, right = 0, start
        while left < right:
            mid = left + ((right - left) >> 1)
            if less():
                right = mid
            else:
                left = mid + 1
        work[left + 1:start + 1] = work[left:start]
        work[left] = pivot

    return work


_STRATEGIES: dict[str, Callable[[Sequence, SeededRandom], list]] = {
    ORDERING_KEYED: keyed_order,
    ORDERING_COMPARISON: comparison_order,
}


def get_ordering(name: str) -> Callable[[Sequence, SeededRandom], list]:
    """Resolve an ordering strategy by name."""
    try:
        return _STRATEGIES[name]
    except KeyError:
        raise OrderingError(
            f"Unknown ordering strategy '{name}'. "
            f"Allowed: {', '.join(ORDERING_STRATEGIES)}"
        ) from None
