from types import SimpleNamespace

import numpy as np
import pandas as pd
import pytest

from data_designer_match_selector.config import AlgorithmSelectorColumnConfig
from data_designer_match_selector.generator import AlgorithmSelectorColumnGenerator, _cell

NON_REPETITIVE = "ABCDEFGHIJ"


def _generate(data: pd.DataFrame, **overrides) -> list[dict]:
    config = AlgorithmSelectorColumnConfig(name="plan", text_column="doc", pattern_column="query", **overrides)
    # generate only reads self.config
    out = AlgorithmSelectorColumnGenerator.generate(SimpleNamespace(config=config), data)
    return list(out["plan"])


class TestCell:
    @pytest.mark.parametrize("value", [None, np.nan, pd.NA, pd.NaT])
    def test_missing_markers_become_none(self, value):
        assert _cell(value) is None

    def test_values_are_stringified(self):
        assert _cell("abc") == "abc"
        assert _cell(42) == "42"


class TestAlgorithmSelectorColumnGenerator:
    def test_output_shape(self):
        data = pd.DataFrame({"doc": ["x" * 300], "query": [NON_REPETITIVE]})
        [row] = _generate(data)
        assert row == {"algorithm": "BoyerMoore", "run_all": False, "text_length": 300, "pattern_length": 10}

    def test_input_frame_is_not_mutated(self):
        data = pd.DataFrame({"doc": ["x" * 300], "query": [NON_REPETITIVE]})
        _generate(data)
        assert list(data.columns) == ["doc", "query"]

    def test_include_strategy(self):
        data = pd.DataFrame({"doc": ["x" * 300], "query": [NON_REPETITIVE]})
        [row] = _generate(data, include_strategy=True)
        assert "Boyer-Moore" in row["strategy"]
        [row] = _generate(data)
        assert "strategy" not in row

    def test_threshold_overrides_reach_the_policy(self):
        data = pd.DataFrame({"doc": ["x" * 200], "query": [NON_REPETITIVE]})
        assert _generate(data)[0]["algorithm"] == "Naive"
        assert _generate(data, boyer_moore_crossover=100)[0]["algorithm"] == "BoyerMoore"

    def test_repetitive_pattern_uses_kmp(self):
        data = pd.DataFrame({"doc": ["x" * 100], "query": ["ABABABABABAB"]})
        assert _generate(data)[0]["algorithm"] == "KMP"

    def test_missing_cells_resolve_to_naive(self):
        data = pd.DataFrame({"doc": ["q" * 300, "q" * 300, None], "query": [None, np.nan, NON_REPETITIVE]})
        rows = _generate(data)
        assert [row["algorithm"] for row in rows] == ["Naive", "Naive", "Naive"]
        assert rows[0]["pattern_length"] == 0
        assert rows[2]["text_length"] == 0

    def test_missing_cells_in_string_dtype_resolve_to_naive(self):
        data = pd.DataFrame({"doc": ["q" * 300], "query": [None]}, dtype="string")
        [row] = _generate(data)
        assert row["algorithm"] == "Naive"
        assert row["pattern_length"] == 0

    def test_pass_through_requests_full_run(self):
        data = pd.DataFrame({"doc": ["x" * 300, ""], "query": [NON_REPETITIVE, ""]})
        rows = _generate(data, selector="pass-through")
        assert all(row["run_all"] is True and row["algorithm"] is None for row in rows)
