"""Default input settings for the editable booking and room fields."""

from typing import Any, Dict

from ..reference.catalog import (
    BED_TYPES,
    GENDERS,
    GROUPED_PORTS_OF_ENTRY,
    GUEST_TYPES,
    NATIONALITIES,
    PAYMENT_STATUSES,
    ROOM_TYPES,
    TM30_STATUSES,
    VISA_TYPES,
)
from .field_editor import FieldKind

FIELD_INPUTS: Dict[str, Dict[str, Any]] = {
    # People
    "name": {"label": "Name"},
    "full_name": {"label": "Name"},
    "email": {"kind": FieldKind.EMAIL, "label": "Email"},
    "nationality": {"kind": FieldKind.SELECT, "options": NATIONALITIES, "label": "Nationality"},
    "gender": {"kind": FieldKind.SELECT, "options": GENDERS, "label": "Gender"},
    "guest_type": {"kind": FieldKind.SELECT, "options": GUEST_TYPES, "label": "Guest Type"},
    "dob": {"kind": FieldKind.DATE, "label": "Date of Birth"},
    "date_of_arrival": {"kind": FieldKind.DATE, "label": "Date of Arrival"},
    "check_in_date": {"kind": FieldKind.DATE, "label": "Check-in Date"},
    "check_out_date": {"kind": FieldKind.DATE, "label": "Check-out Date"},
    "expire_date_of_stay": {"kind": FieldKind.DATE, "label": "Expire Date of Stay"},
    "visa_type": {"kind": FieldKind.SELECT, "options": VISA_TYPES, "label": "Visa Type"},
    "port_of_entry": {
        "kind": FieldKind.SEARCHABLE_SELECT,
        "grouped_options": GROUPED_PORTS_OF_ENTRY,
        "label": "Port of Entry",
    },
    "current_address": {"kind": FieldKind.TEXTAREA, "label": "Current Address"},
    "remarks": {"kind": FieldKind.TEXTAREA, "label": "Remarks"},
    "adults": {"kind": FieldKind.NUMBER, "label": "Adults"},
    "children": {"kind": FieldKind.NUMBER, "label": "Children"},
    "total_price": {"kind": FieldKind.NUMBER, "label": "Total Price"},
    "payment_status": {"kind": FieldKind.SELECT, "options": PAYMENT_STATUSES, "label": "Payment Status"},
    "tm30_status": {"kind": FieldKind.SELECT, "options": TM30_STATUSES, "label": "TM30 Status"},
    # Rooms
    "type": {"kind": FieldKind.SELECT, "options": ROOM_TYPES, "label": "Room Type"},
    "bed_type": {"kind": FieldKind.SELECT, "options": BED_TYPES, "label": "Bed Type"},
    "price": {"kind": FieldKind.NUMBER, "label": "Price"},
}


def field_inputs(field_name: str, **overrides) -> Dict[str, Any]:
    """FieldEditor keyword arguments for `field_name`; explicit overrides win."""
    return {**FIELD_INPUTS.get(field_name, {}), **overrides}
