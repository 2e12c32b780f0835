from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator

from data_designer.config.column_configs import SingleColumnConfig

from data_designer_match_selector.core import Hyperparameters, available_selectors


class AlgorithmSelectorColumnConfig(SingleColumnConfig):
    """Choose an exact string-search algorithm for each row's (text, pattern) pair.

    Runs a bounded pre-analysis on the two input columns and records which
    algorithm should handle the search, or that every algorithm should be run
    and compared.

    Attributes:
        text_column: Column holding the text to be searched.
        pattern_column: Column holding the pattern to search for.
        selector: Registered selection policy. ``reference`` is the tuned policy,
            ``illustrative`` a simpler example and ``pass-through`` always
            defers to a full run. Names added with ``register_selector`` work too.
        micro_text_limit: Texts shorter than this always use the naive scan.
        boyer_moore_crossover: Minimum text length before Boyer-Moore is chosen.
        repetition_window: Pattern prefix length inspected for repetition.
        include_strategy: Include the selector's strategy description in output.
    """

    text_column: str
    pattern_column: str
    selector: str = "reference"
    micro_text_limit: int = Field(default=64, ge=1, description="Texts shorter than this use the naive scan")
    boyer_moore_crossover: int = Field(default=256, ge=1, description="Minimum text length for Boyer-Moore")
    repetition_window: int = Field(default=12, ge=3, description="Pattern prefix length checked for repetition")
    include_strategy: bool = Field(default=False, description="Include the strategy description in output")
    column_type: Literal["algorithm-selector"] = "algorithm-selector"

    @field_validator("selector")
    @classmethod
    def check_selector(cls, value: str) -> str:
        if value not in available_selectors():
            raise ValueError(f"Unknown selector {value!r}; available: {', '.join(available_selectors())}")
        return value

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001f9ed"

    @property
    def required_columns(self) -> list[str]:
        return [self.text_column, self.pattern_column]

    @property
    def side_effect_columns(self) -> list[str]:
        return []

    def hyperparameters(self) -> Hyperparameters:
        return Hyperparameters(
            micro_text_limit=self.micro_text_limit,
            boyer_moore_crossover=self.boyer_moore_crossover,
            repetition_window=self.repetition_window,
        )
