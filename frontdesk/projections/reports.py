"""Government register flattening: the R.R.4 guest register and the TM.30 list."""

from datetime import date
from typing import Iterable, List, Optional

from ..core.formatting import format_date_ddmmyyyy, gender_code, nationality_code, split_name
from ..models.booking import BookingStatus, Customer
from ..schemas.report import ReportRow, TM30Row


def in_date_range(value: Optional[date], start: Optional[date], end: Optional[date]) -> bool:
    """Inclusive range check; an unset bound does not restrict, a missing value fails any set bound."""
    if start is None and end is None:
        return True
    if value is None:
        return False
    return (start is None or value >= start) and (end is None or value <= end)


def report_rows(
    customers: Iterable[Customer],
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> List[ReportRow]:
    """
    Flatten bookings into the R.R.4 register.

    Bookings are filtered on check-in date. Each room stay yields the main
    booker followed by every accompanying guest. The check-out column is
    filled only for stays that are checked out.

    Returns:
        Rows ordered by check-in date, ties kept in booking order
    """
    rows: List[ReportRow] = []
    for customer in customers:
        if not in_date_range(customer.check_in_date, start, end):
            continue
        check_in = format_date_ddmmyyyy(customer.check_in_date)
        for stay in customer.room_stays:
            check_out = (
                format_date_ddmmyyyy(customer.check_out_date)
                if stay.booking_status == BookingStatus.CHECKED_OUT
                else None
            )
            rows.append(ReportRow(
                booking_id=customer.booking_id,
                check_in_date=customer.check_in_date,
                check_in_date_time=check_in,
                room_number=stay.room_number,
                full_name=customer.full_name,
                nationality=customer.nationality,
                id_number=customer.passport_id,
                issued_by=customer.issued_by,
                current_address=customer.current_address,
                occupation=customer.occupation,
                arriving_from=customer.arriving_from,
                going_to=customer.going_to,
                check_out_date_time=check_out,
                remarks=customer.remarks,
            ))
            for guest in customer.guest_list:
                rows.append(ReportRow(
                    booking_id=customer.booking_id,
                    check_in_date=customer.check_in_date,
                    check_in_date_time=check_in,
                    room_number=stay.room_number,
                    full_name=guest.name,
                    nationality=guest.nationality,
                    id_number=guest.passport_id,
                    issued_by=guest.issued_by,
                    current_address=guest.current_address,
                    occupation=guest.occupation,
                    arriving_from=guest.arriving_from,
                    going_to=guest.going_to,
                    check_out_date_time=check_out,
                    remarks=guest.remarks,
                ))

    rows.sort(key=lambda row: row.check_in_date)
    return rows


def tm30_rows(
    customers: Iterable[Customer],
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> List[TM30Row]:
    """Flatten bookings into the TM.30 list, one row per person, filtered on check-out date."""
    rows: List[TM30Row] = []
    for customer in customers:
        if not in_date_range(customer.check_out_date, start, end):
            continue
        check_out = format_date_ddmmyyyy(customer.check_out_date)
        people = [(customer.full_name, customer)] + [(g.name, g) for g in customer.guest_list]
        for name, person in people:
            first, middle, last = split_name(name)
            rows.append(TM30Row(
                id=f"{customer.booking_id}-{person.passport_id}",
                check_out_on=customer.check_out_date,
                first_name=first,
                middle_name=middle,
                last_name=last,
                gender=gender_code(person.gender),
                passport_id=person.passport_id,
                nationality=nationality_code(person.nationality),
                dob=format_date_ddmmyyyy(person.dob),
                check_out_date=check_out,
                phone=person.phone,
            ))
    return rows
