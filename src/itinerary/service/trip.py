# SPDX-License-Identifier: MIT

import pendulum

from itinerary.configuration import DEFAULT_LOCALE
from itinerary.model.selection import DateRangeSelection, RangeSelection, SelectionState
from itinerary.model.trip import Trip
from itinerary.service.date_range import range_between
from itinerary.service.validate import is_valid_email
from itinerary.time import datetime_to_local_date

MAX_DESTINATION_DISPLAY_LENGTH = 14
MIN_DESTINATION_LENGTH = 4


class TripFormError(ValueError):
    """A trip form is incomplete or holds an invalid value."""


def truncate_destination(
    destination: str, max_length: int = MAX_DESTINATION_DISPLAY_LENGTH
) -> str:
    if len(destination) > max_length:
        return destination[:max_length] + "..."
    return destination


def format_trip_when(trip: Trip, locale: str = DEFAULT_LOCALE) -> str:
    """One line summary, e.g. 'Florianópolis de 05 a 10 de mar.'"""
    starts_at = trip["starts_at"].in_tz("local")
    ends_at = trip["ends_at"].in_tz("local")
    destination = truncate_destination(trip["destination"])
    # some locales abbreviate with a trailing dot ("mar.")
    month = ends_at.format("MMM", locale=locale).rstrip(".")
    return (
        f"{destination} de {starts_at.format('DD')} a {ends_at.format('DD')}"
        f" de {month}."
    )


def trip_selection(trip: Trip) -> RangeSelection:
    return range_between(
        datetime_to_local_date(trip["starts_at"]),
        datetime_to_local_date(trip["ends_at"]),
    )


def check_trip_form(destination: str, selection: DateRangeSelection) -> None:
    """
    Raises:
        TripFormError: If the destination is missing or too short, or the
            date range is incomplete
    """
    if len(destination.strip()) == 0 or selection["state"] != SelectionState.RANGE:
        raise TripFormError("Preencha todas as informações da viagem para seguir.")
    if len(destination.strip()) < MIN_DESTINATION_LENGTH:
        raise TripFormError(
            f"O destino deve ter pelo menos {MIN_DESTINATION_LENGTH} caracteres."
        )


def check_new_guest(email: str, emails_to_invite: list[str]) -> str:
    """
    Normalize a guest email and make sure it can be added to the invite list.

    Returns:
        The lower-cased email

    Raises:
        TripFormError: If the email is invalid or already on the list
    """
    email = email.lower()
    if not is_valid_email(email):
        raise TripFormError(f"E-mail inválido: {email}")
    if email in emails_to_invite:
        raise TripFormError(f"Este e-mail já foi adicionado: {email}")
    return email


def trip_contains_day(trip: Trip, day: pendulum.Date) -> bool:
    """Whether day falls within the trip's local start and end days."""
    selection = trip_selection(trip)
    return selection["starts_at"] <= day <= selection["ends_at"]
