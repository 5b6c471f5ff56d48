# engine/state.py
from typing import List, Tuple

from ..data_model import YearRow


class ResultState:
    """Holds the latest projection; each run replaces it as a whole."""

    def __init__(self) -> None:
        self._rows: Tuple[YearRow, ...] = ()

    def replace(self, rows: List[YearRow]) -> None:
        self._rows = tuple(rows)

    def clear(self) -> None:
        self._rows = ()

    def get(self) -> Tuple[YearRow, ...]:
        return self._rows

    def has_result(self) -> bool:
        return bool(self._rows)
