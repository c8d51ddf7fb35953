"""Double-click-to-edit field state machine."""

import logging
from datetime import date
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from ..core.exceptions import ValidationError
from ..core.formatting import format_date_ddmmyyyy
from ..core.observability import metrics_collector
from .searchable_select import GroupInput, SearchableSelect, as_option_groups

logger = logging.getLogger(__name__)

PLACEHOLDER = "-"
SELECT_PROMPT = "Select..."

SaveCallback = Callable[[str, Any], None]


class FieldKind(str, Enum):
    """Input kind of an editable field."""
    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    EMAIL = "email"
    SELECT = "select"
    SEARCHABLE_SELECT = "searchable-select"
    TEXTAREA = "textarea"


class EditorState(str, Enum):
    VIEWING = "viewing"
    EDITING = "editing"


class SelectOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    label: str
    disabled: bool = False


def as_text(value: Any) -> str:
    """String form used to compare drafts with the stored value."""
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def parse_number(text: Any) -> int | float:
    """Parse a number draft. Raises ValueError for anything non-numeric."""
    if isinstance(text, (int, float)) and not isinstance(text, bool):
        return text
    stripped = str(text).strip()
    try:
        return int(stripped)
    except ValueError:
        return float(stripped)


class FieldEditor:
    """
    One editable field: VIEWING until double-clicked, then EDITING.

    The draft belongs to this editor alone. Committing an unchanged draft
    (compared by string form) does not call `on_save`.
    """

    def __init__(
        self,
        field_name: str,
        value: Any,
        on_save: SaveCallback,
        *,
        kind: FieldKind = FieldKind.TEXT,
        options: Sequence[str] = (),
        grouped_options: Iterable[GroupInput] = (),
        label: str = "",
        start_in_edit_mode: bool = False,
        display_transform: Optional[Callable[[Any], str]] = None,
    ):
        """
        Initialize the editor.

        Args:
            field_name: Name passed back to `on_save`
            value: Current stored value
            on_save: Called with (field_name, new_value) when a changed draft commits
            kind: Input kind
            options: Choices for the select kind
            grouped_options: Option groups for the searchable-select kind
            label: Human-readable field label
            start_in_edit_mode: Open in EDITING
            display_transform: Formats the stored value for display
        """
        self.field_name = field_name
        self.value = value
        self.kind = FieldKind(kind)
        self.options = tuple(options)
        self.grouped_options = as_option_groups(grouped_options)
        self.label = label or field_name
        self.display_transform = display_transform
        self.state = EditorState.VIEWING
        self.draft: Any = value
        self.error: Optional[str] = None
        self.dropdown: Optional[SearchableSelect] = None
        self._on_save = on_save
        if start_in_edit_mode:
            self.begin_edit()

    @property
    def is_editing(self) -> bool:
        return self.state == EditorState.EDITING

    # -- events ----------------------------------------------------------------

    def begin_edit(self) -> None:
        if self.is_editing:
            return
        self.state = EditorState.EDITING
        self.draft = self.value
        self.error = None
        if self.kind == FieldKind.SEARCHABLE_SELECT:
            self.dropdown = SearchableSelect(self.grouped_options, on_change=self.change, on_close=self.commit)

    def double_click(self) -> None:
        self.begin_edit()

    def key_down(self, key: str, shift: bool = False) -> bool:
        """
        Handle a key press.

        Returns:
            True if the key was consumed
        """
        if not self.is_editing:
            if key == "Enter":
                self.begin_edit()
                return True
            return False

        if key == "Enter":
            if self.kind == FieldKind.TEXTAREA and shift:
                self.draft = f"{as_text(self.draft)}\n"
                return False
            self.commit()
            return True
        if key == "Escape":
            self.cancel()
            return True
        return False

    def change(self, value: Any) -> None:
        if self.is_editing:
            self.draft = value
            self.error = None

    def blur(self) -> None:
        # The searchable select commits through its own select/outside-click handling
        if self.is_editing and self.kind != FieldKind.SEARCHABLE_SELECT:
            self.commit()

    def commit(self) -> bool:
        """
        Leave EDITING, saving the draft if it differs from the stored value.

        A non-numeric draft for a number field, or a value the owner rejects,
        keeps the editor in EDITING with `error` set.

        Returns:
            True if `on_save` was called
        """
        if not self.is_editing:
            return False
        if as_text(self.draft) == as_text(self.value):
            self._close()
            return False

        new_value = self.draft
        if self.kind == FieldKind.NUMBER:
            try:
                new_value = parse_number(self.draft)
            except ValueError:
                self.error = f"{self.label} must be a number"
                return False
            # "100.0" against a stored 100 is the same number
            if as_text(new_value) == as_text(self.value):
                self._close()
                return False

        try:
            self._on_save(self.field_name, new_value)
        except ValidationError as e:
            self.error = "; ".join(v.message for v in e.violations) or e.detail
            logger.info(
                "Field edit rejected",
                extra={"field": self.field_name, "error": self.error}
            )
            return False

        self.value = new_value
        self._close()
        metrics_collector.record_field_edit(self.field_name)
        return True

    def cancel(self) -> None:
        """Discard the draft and return to VIEWING."""
        self.draft = self.value
        self._close()

    def sync(self, value: Any) -> None:
        """Take a new stored value from the owner; an open draft is left alone."""
        self.value = value
        if not self.is_editing:
            self.draft = value

    def _close(self) -> None:
        self.state = EditorState.VIEWING
        self.error = None
        self.draft = self.value
        if self.dropdown is not None:
            dropdown, self.dropdown = self.dropdown, None
            dropdown.is_open = False

    # -- rendering -------------------------------------------------------------

    @property
    def display_value(self) -> str:
        if self.display_transform is not None:
            text = self.display_transform(self.value)
        elif self.kind == FieldKind.DATE and self.value:
            text = format_date_ddmmyyyy(self.value)
        else:
            text = as_text(self.value)
        return text or PLACEHOLDER

    def select_options(self) -> List[SelectOption]:
        """
        Options for the select kind.

        A draft missing from the option list is shown as a disabled leading
        option so legacy values do not blank out.
        """
        current = as_text(self.draft)
        result = [SelectOption(value=option, label=option) for option in self.options]
        if self.options and current not in self.options:
            result.insert(0, SelectOption(value=current, label=current or SELECT_PROMPT, disabled=True))
        return result


class FieldEditorGroup:
    """Independent editors for the fields of one record, sharing a save callback."""

    def __init__(self, on_save: SaveCallback):
        self._on_save = on_save
        self._editors: Dict[str, FieldEditor] = {}

    def editor(self, field_name: str, value: Any, **kwargs) -> FieldEditor:
        """Editor for `field_name`, created on first use."""
        existing = self._editors.get(field_name)
        if existing is not None:
            return existing
        editor = FieldEditor(field_name, value, self._on_save, **kwargs)
        self._editors[field_name] = editor
        return editor

    def get(self, field_name: str) -> Optional[FieldEditor]:
        return self._editors.get(field_name)

    def sync(self, read_value: Callable[[str], Any]) -> None:
        """Refresh every editor's stored value from the owning record."""
        for name, editor in self._editors.items():
            editor.sync(read_value(name))

    def editing_fields(self) -> List[str]:
        return [name for name, editor in self._editors.items() if editor.is_editing]

    def __iter__(self):
        return iter(self._editors.values())

    def __len__(self) -> int:
        return len(self._editors)
