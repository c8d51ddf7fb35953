"""Unique-customer roll-up keyed by email."""

from typing import Dict, Iterable, List

from ..models.booking import Customer
from ..schemas.customer import UniqueCustomer


def unique_customers(customers: Iterable[Customer]) -> List[UniqueCustomer]:
    """
    Collapse bookings sharing an email into one profile each.

    Groups keep the order in which their email first appears. The
    representative is the booking with the latest check-in; on a tie the
    first one encountered wins.
    """
    latest: Dict[str, Customer] = {}
    for customer in customers:
        current = latest.get(customer.email)
        if current is None or customer.check_in_date > current.check_in_date:
            latest[customer.email] = customer

    return [
        UniqueCustomer(
            id=email,
            full_name=record.full_name,
            email=email,
            passport_id=record.passport_id,
            nationality=record.nationality,
            gender=record.gender,
            latest_customer_record=record,
        )
        for email, record in latest.items()
    ]


def booking_history(customers: Iterable[Customer], email: str) -> List[Customer]:
    """Every booking made under `email`, latest check-in first."""
    return sorted(
        (c for c in customers if c.email == email),
        key=lambda c: c.check_in_date,
        reverse=True,
    )


def total_bookings(customers: Iterable[Customer], email: str) -> int:
    return sum(1 for c in customers if c.email == email)
