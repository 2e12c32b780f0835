import pytest
from pydantic import ValidationError

from data_designer_match_selector.config import AlgorithmSelectorColumnConfig
from data_designer_match_selector.core import SELECTORS, Hyperparameters, PassThroughSelector, register_selector


class TestAlgorithmSelectorColumnConfig:
    def test_defaults(self):
        config = AlgorithmSelectorColumnConfig(name="plan", text_column="doc", pattern_column="query")
        assert config.column_type == "algorithm-selector"
        assert config.selector == "reference"
        assert config.required_columns == ["doc", "query"]
        assert config.hyperparameters() == Hyperparameters()

    def test_threshold_overrides(self):
        config = AlgorithmSelectorColumnConfig(
            name="plan", text_column="doc", pattern_column="query", micro_text_limit=16, boyer_moore_crossover=128
        )
        hp = config.hyperparameters()
        assert hp.micro_text_limit == 16
        assert hp.boyer_moore_crossover == 128
        assert hp.repetition_window == 12

    def test_rejects_unknown_selector(self):
        with pytest.raises(ValidationError):
            AlgorithmSelectorColumnConfig(name="plan", text_column="doc", pattern_column="query", selector="fastest")

    def test_rejects_tiny_repetition_window(self):
        with pytest.raises(ValidationError):
            AlgorithmSelectorColumnConfig(name="plan", text_column="doc", pattern_column="query", repetition_window=2)

    @pytest.mark.parametrize("selector", ["student", "example", "instructor", "illustrative", "pass-through"])
    def test_accepts_registry_names_and_aliases(self, selector):
        config = AlgorithmSelectorColumnConfig(name="plan", text_column="doc", pattern_column="query", selector=selector)
        assert config.selector == selector

    def test_accepts_registered_custom_selector(self, monkeypatch):
        monkeypatch.setattr("data_designer_match_selector.core.SELECTORS", dict(SELECTORS))
        register_selector("baseline", PassThroughSelector(name="baseline"))
        config = AlgorithmSelectorColumnConfig(name="plan", text_column="doc", pattern_column="query", selector="baseline")
        assert config.selector == "baseline"
