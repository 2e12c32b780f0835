from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Mapping, Sequence, Union

from data_designer_match_selector.core import AlgorithmId, Decision, NoDecision, Selector

logger = logging.getLogger(__name__)

SearchFn = Callable[[str, str], Sequence[int]]
AlgorithmRegistry = Mapping[AlgorithmId, SearchFn]


class RunAllReason(str, Enum):
    NO_DECISION = "no_decision"
    UNREGISTERED = "unregistered"
    MALFORMED = "malformed"
    SELECTOR_ERROR = "selector_error"


@dataclass(frozen=True)
class SearchResult:
    algorithm: AlgorithmId
    positions: tuple[int, ...]


@dataclass(frozen=True)
class RunAll:
    """Signal to evaluate every registered algorithm instead of a single one."""

    reason: RunAllReason
    candidates: tuple[AlgorithmId, ...]


DispatchOutcome = Union[SearchResult, RunAll]


def normalize_decision(raw: object) -> Decision | None:
    """Coerce a selector's return value into a Decision.

    Plain strings naming an algorithm (e.g. ``"KMP"``) are accepted. Returns
    None for anything outside the known algorithms and the sentinel.
    """
    if isinstance(raw, (AlgorithmId, NoDecision)):
        return raw
    if isinstance(raw, str):
        try:
            return AlgorithmId(raw)
        except ValueError:
            return None
    return None


def dispatch(
    text: str | None,
    pattern: str | None,
    selector: Selector,
    algorithms: AlgorithmRegistry,
) -> DispatchOutcome:
    """Run the one algorithm the selector commits to, or ask for a full run.

    A concrete decision is trusted as-is. The sentinel, a malformed decision,
    a selector that raises, and an algorithm missing from ``algorithms`` all
    fall back to ``RunAll``. Errors raised by the search function itself
    propagate.
    """
    candidates = tuple(algorithms)
    try:
        raw = selector.choose(text, pattern)
    except Exception:
        logger.warning(f"Selector {selector.name!r} failed; running all algorithms", exc_info=True)
        return RunAll(RunAllReason.SELECTOR_ERROR, candidates)
    decision = normalize_decision(raw)

    if decision is None:
        logger.warning(f"Selector {selector.name!r} returned a malformed decision; running all algorithms")
        return RunAll(RunAllReason.MALFORMED, candidates)
    if isinstance(decision, NoDecision):
        logger.debug(f"Selector {selector.name!r} made no decision; running all algorithms")
        return RunAll(RunAllReason.NO_DECISION, candidates)

    search = algorithms.get(decision)
    if search is None:
        logger.info(f"Selector {selector.name!r} chose {decision.value}, which is not registered; running all algorithms")
        return RunAll(RunAllReason.UNREGISTERED, candidates)

    logger.debug(f"Selector {selector.name!r} chose {decision.value}")
    positions = search(text or "", pattern or "")
    return SearchResult(algorithm=decision, positions=tuple(positions))


def run_all(text: str | None, pattern: str | None, algorithms: AlgorithmRegistry) -> dict[AlgorithmId, tuple[int, ...]]:
    """Run every registered algorithm, in registry order."""
    return {algorithm: tuple(search(text or "", pattern or "")) for algorithm, search in algorithms.items()}
