"""Searchable dropdown over grouped options."""

from typing import Callable, Iterable, List, Mapping, Tuple, Union

from pydantic import BaseModel, ConfigDict


class OptionGroup(BaseModel):
    """A category label with its options."""

    model_config = ConfigDict(frozen=True)

    label: str
    options: Tuple[str, ...] = ()


GroupInput = Union[OptionGroup, Mapping]


def as_option_groups(groups: Iterable[GroupInput]) -> Tuple[OptionGroup, ...]:
    return tuple(OptionGroup.model_validate(g) if not isinstance(g, OptionGroup) else g for g in groups)


class SearchableSelect:
    """
    Open dropdown with a live search box.

    Picking an option commits it. A click outside the dropdown also ends
    editing and commits whatever draft the owning field holds.
    """

    def __init__(
        self,
        groups: Iterable[GroupInput],
        on_change: Callable[[str], None],
        on_close: Callable[[], None],
    ):
        self.groups = as_option_groups(groups)
        self.search_term = ""
        self.is_open = True
        self._on_change = on_change
        self._on_close = on_close

    def set_search(self, term: str) -> None:
        self.search_term = term

    def filtered_groups(self) -> List[OptionGroup]:
        """Groups whose options match the search term, case-insensitively; empty groups are dropped."""
        needle = self.search_term.lower()
        filtered = [
            OptionGroup(label=group.label, options=tuple(o for o in group.options if needle in o.lower()))
            for group in self.groups
        ]
        return [group for group in filtered if group.options]

    def all_options(self) -> List[str]:
        return [option for group in self.groups for option in group.options]

    def select(self, option: str) -> None:
        self._on_change(option)
        self.search_term = ""
        self._close()

    def click_outside(self) -> None:
        self._close()

    def _close(self) -> None:
        if not self.is_open:
            return
        self.is_open = False
        self._on_close()
