from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import data_designer.lazy_heavy_imports as lazy
from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from data_designer_match_selector.config import AlgorithmSelectorColumnConfig
from data_designer_match_selector.core import select_algorithm

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


def _cell(value: object) -> str | None:
    if lazy.pd.isna(value):
        return None
    return str(value)


class AlgorithmSelectorColumnGenerator(ColumnGeneratorFullColumn[AlgorithmSelectorColumnConfig]):
    """Column generator that picks a string-search algorithm for every row."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\U0001f9ed Selecting search algorithms for column {self.config.name!r}")
        logger.info(f"   text column: {self.config.text_column}, pattern column: {self.config.pattern_column}")
        logger.info(f"   selector: {self.config.selector}")

        hp = self.config.hyperparameters()
        results = []
        for text, pattern in zip(data[self.config.text_column], data[self.config.pattern_column]):
            selection = select_algorithm(_cell(text), _cell(pattern), self.config.selector, hp)
            output: dict = {
                "algorithm": selection["algorithm"],
                "run_all": selection["run_all"],
                "text_length": selection["text_length"],
                "pattern_length": selection["pattern_length"],
            }
            if self.config.include_strategy:
                output["strategy"] = selection["strategy"]
            results.append(output)

        data = data.copy()
        data[self.config.name] = results
        return data
