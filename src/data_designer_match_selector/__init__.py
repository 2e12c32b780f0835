# SPDX-License-Identifier: Apache-2.0
"""Search algorithm selector plugin for NeMo Data Designer.

Adds an ``algorithm-selector`` column type that picks which exact
string-search algorithm (naive scan, KMP, Rabin-Karp, Boyer-Moore) should run
for each row's text and pattern, using bounded-cost heuristics instead of
running every candidate.

Usage::

    from data_designer_match_selector import AlgorithmSelectorColumnConfig

    builder.add_column(AlgorithmSelectorColumnConfig(
        name="search_plan",
        text_column="document",
        pattern_column="query",
    ))
"""

from data_designer_match_selector.config import AlgorithmSelectorColumnConfig
from data_designer_match_selector.core import (
    NO_DECISION,
    AlgorithmId,
    Hyperparameters,
    get_selector,
    register_selector,
    select_algorithm,
)
from data_designer_match_selector.dispatch import RunAll, SearchResult, dispatch

__all__ = [
    "AlgorithmSelectorColumnConfig",
    "AlgorithmId",
    "Hyperparameters",
    "NO_DECISION",
    "RunAll",
    "SearchResult",
    "dispatch",
    "get_selector",
    "register_selector",
    "select_algorithm",
]
