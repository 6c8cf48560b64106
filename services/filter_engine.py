# coinkard/services/filter_engine.py
import logging
from dataclasses import dataclass, replace
from typing import Sequence, Tuple

import pandas as pd

from services.records import AssetRecord

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "all"


@dataclass(frozen=True)
class FilterState:
    search_text: str = ""
    selected_category: str = ALL_CATEGORIES


def filter_assets(catalog: Sequence[AssetRecord], state: FilterState) -> Tuple[AssetRecord, ...]:
    """
    Returns the assets whose title contains the search text (case-insensitive, literal)
    and whose category matches the selection, in catalog order.
    :param catalog: The ordered catalog. Never modified.
    :param state: The current search text and category selection.
    :return: A tuple holding the matching subsequence of the catalog.
    """
    if not catalog:
        return ()

    df = pd.DataFrame(
        {
            "title": [asset.title for asset in catalog],
            "category": [asset.category for asset in catalog],
        },
        dtype=object,
    )

    # Both sides go through Python's str.lower; the pandas string accessor can fold differently.
    needle = state.search_text.lower()
    mask = df["title"].map(lambda title: needle in title.lower()).astype(bool)
    if state.selected_category != ALL_CATEGORIES:
        mask &= (df["category"] == state.selected_category).astype(bool)

    return tuple(asset for asset, keep in zip(catalog, mask.tolist()) if keep)


class FilterEngine:
    """Holds the search/category state for one session and answers which assets are visible."""

    def __init__(self, catalog: Sequence[AssetRecord]):
        self._catalog = tuple(catalog)
        self._state = FilterState()

    @property
    def catalog(self) -> Tuple[AssetRecord, ...]:
        return self._catalog

    @property
    def state(self) -> FilterState:
        return self._state

    def set_search_text(self, text: str) -> None:
        if text != self._state.search_text:
            logger.debug(f"Search text changed to {text!r}")
        self._state = replace(self._state, search_text=text)

    def set_category_selection(self, category: str) -> None:
        if category != self._state.selected_category:
            logger.debug(f"Category selection changed to {category!r}")
        self._state = replace(self._state, selected_category=category)

    def visible_assets(self) -> Tuple[AssetRecord, ...]:
        return filter_assets(self._catalog, self._state)
