"""Folding single-field edits into whole bookings."""

import logging
from typing import Any, Dict, Optional, Union

from ..models.booking import Customer, Guest
from ..projections.customers import unique_customers
from ..services.entity_store import EntityStore
from .field_editor import FieldEditor, FieldEditorGroup
from .inputs import field_inputs

logger = logging.getLogger(__name__)

MAIN_BOOKER = "main"

# The details form uses guest field names; these differ on the booking itself
MAIN_BOOKER_FIELD_ALIASES: Dict[str, str] = {
    "name": "full_name",
    "date_of_arrival": "check_in_date",
}


def booker_field_name(field_name: str) -> str:
    return MAIN_BOOKER_FIELD_ALIASES.get(field_name, field_name)


def apply_field_change(customer: Customer, person_id: Optional[str], field_name: str, value: Any) -> Customer:
    """
    Return the next booking with one field of one person changed.

    Args:
        customer: Current booking
        person_id: MAIN_BOOKER (or None) for the booker, otherwise a guest id
        field_name: Field to change, in guest naming for the booker
        value: New value

    Returns:
        Full replacement booking; the guest list is rebuilt, never merged

    Raises:
        UnknownFieldError: If the person has no such field
        ValidationError: If the value is not valid for the field
    """
    if person_id in (None, MAIN_BOOKER):
        return customer.with_changes({booker_field_name(field_name): value})

    guest = customer.find_guest(person_id)
    if guest is None:
        logger.warning(
            "Guest not found in booking",
            extra={"customer_id": customer.id, "guest_id": person_id}
        )
        return customer

    updated = guest.with_changes({field_name: value})
    guest_list = [updated if g.id == person_id else g for g in customer.guest_list]
    return customer.with_changes({"guest_list": guest_list})


def read_person_field(person: Union[Customer, Guest], field_name: str) -> Any:
    if isinstance(person, Customer):
        field_name = booker_field_name(field_name)
    return getattr(person, field_name)


class PersonEditor:
    """
    Booking details editing for the main booker or one accompanying guest.

    Each selected person gets its own set of field editors, so drafts never
    cross between people or fields.
    """

    def __init__(self, store: EntityStore, customer_id: str):
        self.store = store
        self.customer_id = customer_id
        self.selected_person = MAIN_BOOKER
        self._groups: Dict[str, FieldEditorGroup] = {}

    @property
    def customer(self) -> Optional[Customer]:
        return self.store.get_booking(self.customer_id)

    @property
    def person(self) -> Union[Customer, Guest, None]:
        customer = self.customer
        if customer is None or self.selected_person == MAIN_BOOKER:
            return customer
        return customer.find_guest(self.selected_person)

    def select_person(self, person_id: str) -> None:
        self.selected_person = person_id

    def _group(self) -> FieldEditorGroup:
        person_id = self.selected_person
        group = self._groups.get(person_id)
        if group is None:
            group = FieldEditorGroup(lambda name, value: self.save(person_id, name, value))
            self._groups[person_id] = group
        return group

    def field(self, field_name: str, **kwargs) -> FieldEditor:
        """Editor for a field of the selected person."""
        person = self.person
        value = read_person_field(person, field_name) if person is not None else None
        editor = self._group().editor(field_name, value, **field_inputs(field_name, **kwargs))
        if person is not None:
            editor.sync(value)
        return editor

    def save(self, person_id: str, field_name: str, value: Any) -> Optional[Customer]:
        """Fold one field change into the booking and store it."""
        customer = self.customer
        if customer is None:
            logger.warning("Booking no longer exists", extra={"customer_id": self.customer_id})
            return None
        updated = self.store.update_booking(
            self.customer_id, apply_field_change(customer, person_id, field_name, value)
        )
        logger.info(
            "Booking field updated",
            extra={"customer_id": self.customer_id, "person_id": person_id, "field": field_name}
        )
        return updated


class ProfileEditor:
    """Customer profile editing; changes land on the person's latest booking."""

    def __init__(self, store: EntityStore, email: str):
        self.store = store
        self.email = email
        self.fields = FieldEditorGroup(self.save)

    @property
    def latest_record(self) -> Optional[Customer]:
        profile = next((c for c in unique_customers(self.store.customers) if c.email == self.email), None)
        return profile.latest_customer_record if profile is not None else None

    def field(self, field_name: str, **kwargs) -> FieldEditor:
        record = self.latest_record
        value = getattr(record, field_name) if record is not None else None
        editor = self.fields.editor(field_name, value, **field_inputs(field_name, **kwargs))
        if record is not None:
            editor.sync(value)
        return editor

    def save(self, field_name: str, value: Any) -> Optional[Customer]:
        record = self.latest_record
        if record is None:
            logger.warning("Customer profile no longer exists", extra={"email": self.email})
            return None
        updated = self.store.update_booking(record.id, record.with_changes({field_name: value}))
        if field_name == "email" and updated is not None:
            self.email = updated.email
        return updated
