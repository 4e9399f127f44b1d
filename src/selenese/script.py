"""Script loaders: where the rows of a test case come from."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from selenese.models import Row

logger = logging.getLogger(__name__)

RowLike = Union[Row, Sequence[Any], Dict[str, Any]]


def _to_row(raw: RowLike) -> Row:
    return raw if isinstance(raw, Row) else Row.from_cells(raw)


class ScriptLoader(ABC):
    """The abstract script loader interface."""

    @abstractmethod
    def load_rows(self, target: str) -> List[Row]:
        """Return the rows of the script at ``target`` in document order."""


class StaticScriptLoader(ScriptLoader):
    """Serves rows held in memory, keyed by target URL."""

    def __init__(
        self,
        scripts: Optional[Dict[str, Iterable[RowLike]]] = None,
        default: Optional[Iterable[RowLike]] = None,
    ) -> None:
        self._scripts: Dict[str, List[Row]] = {
            target: [_to_row(raw) for raw in rows]
            for target, rows in (scripts or {}).items()
        }
        self._default = None if default is None else [_to_row(raw) for raw in default]

    def add_script(self, target: str, rows: Iterable[RowLike]) -> None:
        self._scripts[target] = [_to_row(raw) for raw in rows]

    def load_rows(self, target: str) -> List[Row]:
        rows = self._scripts.get(target, self._default)
        if rows is None:
            raise KeyError(f"No script registered for {target}")
        return list(rows)


class JsonScriptLoader(ScriptLoader):
    """Reads rows from a JSON file.

    The file holds a list whose items are ``[command, target, value]`` lists
    or objects with those keys. List items with fewer than three cells are
    skipped, the way short table rows are. The target URL is not consulted.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def load_rows(self, target: str = "") -> List[Row]:
        with self.path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"{self.path}: expected a JSON list of rows")

        rows = []
        for index, raw in enumerate(data):
            if not isinstance(raw, (list, dict)):
                raise ValueError(
                    f"{self.path}: row {index} must be a list or an object, got {raw!r}"
                )
            if isinstance(raw, list) and len(raw) < 3:
                logger.debug("Skipping short row %d in %s", index, self.path)
                continue
            rows.append(Row.from_cells(raw))
        return rows
