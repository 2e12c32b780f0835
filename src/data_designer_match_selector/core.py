# Pre-analysis for exact string search: picks one matching algorithm for a
# (text, pattern) pair, or declines so the caller can run every candidate.
#
# All checks are bounded: size gates are O(1) and the repetition scan looks at
# a fixed-size pattern prefix, so a decision never costs more than the search
# it is meant to skip.

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, Union

# ---------------------------------------------------------------------------
# Hyperparameters
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Hyperparameters:
    """Tunable thresholds used by the selection policies."""

    micro_text_limit: int = 64
    boyer_moore_crossover: int = 256
    repetition_window: int = 12
    kmp_min_pattern_length: int = 3
    naive_max_pattern_length: int = 2

    prefix_short_pattern_max: int = 3
    prefix_window: int = 5
    prefix_min_repeats: int = 3
    rabin_karp_min_pattern_length: int = 10
    rabin_karp_min_text_length: int = 1000


DEFAULT_HYPERPARAMETERS = Hyperparameters()


# ---------------------------------------------------------------------------
# Decisions
# ---------------------------------------------------------------------------


class AlgorithmId(str, Enum):
    NAIVE = "Naive"
    KMP = "KMP"
    RABIN_KARP = "RabinKarp"
    BOYER_MOORE = "BoyerMoore"
    GO_CRAZY = "GoCrazy"


@dataclass(frozen=True)
class NoDecision:
    """Opt out of selection: the caller should evaluate every registered algorithm."""

    def __repr__(self) -> str:
        return "NO_DECISION"


NO_DECISION = NoDecision()

Decision = Union[AlgorithmId, NoDecision]


# ---------------------------------------------------------------------------
# Pattern heuristics
# ---------------------------------------------------------------------------


def is_repetitive(pattern: str | None, window: int = DEFAULT_HYPERPARAMETERS.repetition_window) -> bool:
    """Score local repetition in the first ``window`` characters of ``pattern``.

    A position counts as a repeat when it matches either of the two characters
    before it, which covers runs ("AAAA") and period-2 alternation ("ABAB").
    The pattern is repetitive when repeats strictly exceed half the window.
    """
    if pattern is None or len(pattern) < 3:
        return False
    limit = min(len(pattern), window)
    repeats = 0
    for i in range(2, limit):
        current = pattern[i]
        if current == pattern[i - 1] or current == pattern[i - 2]:
            repeats += 1
    return repeats > limit // 2


def has_repeating_prefix(
    pattern: str | None,
    window: int = DEFAULT_HYPERPARAMETERS.prefix_window,
    min_repeats: int = DEFAULT_HYPERPARAMETERS.prefix_min_repeats,
) -> bool:
    """True when the first character recurs ``min_repeats`` times in a short prefix."""
    if pattern is None or len(pattern) < 2:
        return False
    first = pattern[0]
    return pattern[: min(len(pattern), window)].count(first) >= min_repeats


def classify_by_size(
    n: int,
    m: int,
    pattern: str | None = None,
    hyperparameters: Hyperparameters | None = None,
) -> AlgorithmId:
    """Ordered size gates; the first one that holds wins.

    ``pattern`` feeds the repetition check, which only runs once the pattern is
    long enough for KMP to be worth considering.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    if n < hp.micro_text_limit:
        return AlgorithmId.NAIVE
    if m > hp.kmp_min_pattern_length and is_repetitive(pattern, hp.repetition_window):
        return AlgorithmId.KMP
    if m <= hp.naive_max_pattern_length or n < hp.boyer_moore_crossover:
        return AlgorithmId.NAIVE
    return AlgorithmId.BOYER_MOORE


# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------


class Selector(Protocol):
    name: str

    def choose(self, text: str | None, pattern: str | None) -> Decision: ...

    def describe(self) -> str: ...


@dataclass(frozen=True)
class ReferenceSelector:
    """Tuned policy: micro texts go to Naive, repetitive patterns to KMP, long inputs to Boyer-Moore."""

    hp: Hyperparameters = DEFAULT_HYPERPARAMETERS
    name: str = "reference"

    def choose(self, text: str | None, pattern: str | None) -> Decision:
        if text is None or pattern is None:
            return AlgorithmId.NAIVE
        return classify_by_size(len(text), len(pattern), pattern, self.hp)

    def describe(self) -> str:
        return (
            "Tuned strategy: Naive for micro texts. KMP for repetitive or alternating patterns. "
            "Boyer-Moore for long texts."
        )


@dataclass(frozen=True)
class PrefixSelector:
    """Illustrative policy built on pattern length and a repeating first character."""

    hp: Hyperparameters = DEFAULT_HYPERPARAMETERS
    name: str = "illustrative"

    def choose(self, text: str | None, pattern: str | None) -> Decision:
        if text is None or pattern is None:
            return AlgorithmId.NAIVE
        hp = self.hp
        m = len(pattern)
        if m <= hp.prefix_short_pattern_max:
            return AlgorithmId.NAIVE
        if has_repeating_prefix(pattern, hp.prefix_window, hp.prefix_min_repeats):
            return AlgorithmId.KMP
        if m > hp.rabin_karp_min_pattern_length and len(text) > hp.rabin_karp_min_text_length:
            return AlgorithmId.RABIN_KARP
        return AlgorithmId.NAIVE

    def describe(self) -> str:
        return "Example strategy: Choose based on pattern length and characteristics"


@dataclass(frozen=True)
class PassThroughSelector:
    """Never decides; forces the full candidate run for baselines."""

    name: str = "pass-through"

    def choose(self, text: str | None, pattern: str | None) -> Decision:
        return NO_DECISION

    def describe(self) -> str:
        return "Pass-through strategy: run every registered algorithm and compare"


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

_ALIASES = {
    "student": "reference",
    "example": "illustrative",
    "instructor": "pass-through",
}

SELECTORS: dict[str, Selector] = {
    "reference": ReferenceSelector(),
    "illustrative": PrefixSelector(),
    "pass-through": PassThroughSelector(),
}
SELECTORS.update({alias: SELECTORS[target] for alias, target in _ALIASES.items()})


def available_selectors() -> list[str]:
    return sorted(SELECTORS)


def register_selector(name: str, selector: Selector) -> None:
    """Make ``selector`` available under ``name``."""
    if name in SELECTORS:
        raise ValueError(f"Selector {name!r} is already registered")
    SELECTORS[name] = selector


def get_selector(name: str, hyperparameters: Hyperparameters | None = None) -> Selector:
    """Look up a selector by name.

    With ``hyperparameters``, built-in tunable policies are rebuilt around the
    given thresholds; the registered instance itself is left untouched.

    Raises:
        KeyError: If no selector is registered under ``name``.
    """
    try:
        selector = SELECTORS[name]
    except KeyError:
        raise KeyError(f"Unknown selector {name!r}; available: {', '.join(available_selectors())}") from None
    if hyperparameters is not None and isinstance(selector, (ReferenceSelector, PrefixSelector)):
        return type(selector)(hp=hyperparameters, name=selector.name)
    return selector


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def select_algorithm(
    text: str | None,
    pattern: str | None,
    selector: str = "reference",
    hyperparameters: Hyperparameters | None = None,
) -> dict:
    """Pick the search algorithm for one (text, pattern) pair.

    Args:
        text: Text to be searched. ``None`` is treated as missing input.
        pattern: Pattern to search for. ``None`` is treated as missing input.
        selector: Registered selector name.
        hyperparameters: Optional threshold overrides.

    Returns:
        Dict with keys: selector, algorithm (None when every algorithm should
        run), run_all, strategy, text_length, pattern_length.
    """
    policy = get_selector(selector, hyperparameters)
    decision = policy.choose(text, pattern)
    run_all = isinstance(decision, NoDecision)
    return {
        "selector": policy.name,
        "algorithm": None if run_all else decision.value,
        "run_all": run_all,
        "strategy": policy.describe(),
        "text_length": 0 if text is None else len(text),
        "pattern_length": 0 if pattern is None else len(pattern),
    }
