"""In-place field editing."""

from .field_editor import EditorState, FieldEditor, FieldEditorGroup, FieldKind, SelectOption
from .inputs import FIELD_INPUTS, field_inputs
from .person_editor import MAIN_BOOKER, PersonEditor, ProfileEditor, apply_field_change
from .searchable_select import OptionGroup, SearchableSelect

__all__ = [
    "EditorState",
    "FIELD_INPUTS",
    "FieldEditor",
    "FieldEditorGroup",
    "FieldKind",
    "MAIN_BOOKER",
    "OptionGroup",
    "PersonEditor",
    "ProfileEditor",
    "SearchableSelect",
    "SelectOption",
    "apply_field_change",
    "field_inputs",
]
