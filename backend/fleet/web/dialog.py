"""Driver dialog state: Closed, CreatingNew or Editing(driver_id)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Union


@dataclass(frozen=True)
class Closed:
    is_open = False
    title = ""


@dataclass(frozen=True)
class CreatingNew:
    is_open = True
    title = "New Driver"
    action = "/drivers"


@dataclass(frozen=True)
class Editing:
    driver_id: int
    is_open = True
    title = "Edit Driver"

    @property
    def action(self) -> str:
        return f"/drivers/{self.driver_id}"


DialogState = Union[Closed, CreatingNew, Editing]


def from_query(dialog: Optional[str], driver_id: Optional[int]) -> DialogState:
    if dialog == "new":
        return CreatingNew()
    if dialog == "edit" and driver_id is not None:
        return Editing(driver_id)
    return Closed()


def resolve(state: DialogState, rows: Iterable[Mapping[str, Any]]) -> tuple[DialogState, Optional[Mapping[str, Any]]]:
    """Bind an Editing state to its row; a stale id closes the dialog."""
    if isinstance(state, Editing):
        for row in rows:
            if row.get("id") == state.driver_id:
                return state, row
        return Closed(), None
    return state, None
