# app/services/validation.py
"""
Field rules shared by the repositories.

Each record type has an explicit rule list: (field, predicate, message).
check() walks the list in order and raises ValidationError with the message
of the first rule that fails.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Iterable

from email_validator import EmailNotValidError, validate_email

from app.services.exceptions import ValidationError

FUEL_TYPES = ("Petrol", "Diesel", "Hybrid", "Electric", "Lpg", "Cng")
GEARBOXES = ("Automatic", "Manual")
COLORS = ("White", "Black", "Red", "Blue", "Green", "Yellow", "Gray", "Silver", "Brown")
BODIES = ("Sedan", "Touring", "Hatchback", "Minivan", "Coupe", "Cabriolet", "Pickup", "Limousine")

MIN_VEHICLE_YEAR = 2010
PERSONAL_ID_DIGITS = 11
MIN_NAME_LENGTH = 3
MIN_PHONE_LENGTH = 7
MIN_EMAIL_LENGTH = 7
MIN_ADDRESS_LENGTH = 5

DATE_OF_BIRTH_RE = re.compile(r"(0[1-9]|[12][0-9]|3[01])\.(0[1-9]|1[0-2])\.([0-9]{4})", re.ASCII)


@dataclass(frozen=True)
class FieldRule:
    field: str
    predicate: Callable[[Any], bool]
    message: str


def check(record, rules: Iterable[FieldRule]) -> None:
    for rule in rules:
        if not rule.predicate(getattr(record, rule.field)):
            raise ValidationError(rule.message)


# ── Predicates ────────────────────────────────────────────────────────────────

def personal_id_length(number: int) -> int:
    """Decimal digit count, sign ignored. 0 has length 1."""
    return len(str(abs(number)))


def is_valid_personal_id(number: int) -> bool:
    return personal_id_length(number) == PERSONAL_ID_DIGITS


def one_of(choices: tuple) -> Callable[[str], bool]:
    """Case-insensitive membership: input is title-cased before the lookup."""
    return lambda value: value.title() in choices


def min_length(n: int) -> Callable[[str], bool]:
    return lambda value: len(value) >= n


def not_empty(value) -> bool:
    return value != ""


def is_valid_year(year: int) -> bool:
    return MIN_VEHICLE_YEAR <= year <= datetime.now().year


def is_valid_date_of_birth(date: str) -> bool:
    match = DATE_OF_BIRTH_RE.fullmatch(date)
    if not match:
        return False
    return int(match.group(3)) <= datetime.now().year


def has_no_letters(value: str) -> bool:
    return not any(ch.isalpha() for ch in value)


def is_valid_email(email: str) -> bool:
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


# ── Rule lists ────────────────────────────────────────────────────────────────

VEHICLE_RULES = (
    FieldRule("plate_number", not_empty, "invalid input: vehicle plate number may not be empty"),
    FieldRule("make", not_empty, "invalid input: vehicle make may not be empty"),
    FieldRule("model", not_empty, "invalid input: vehicle model may not be empty"),
    FieldRule("year", is_valid_year,
              f"invalid input: vehicle year may not be lower than {MIN_VEHICLE_YEAR} or greater than the current year"),
    FieldRule("fuel_type", not_empty, "invalid input: vehicle fuel type may not be empty"),
    FieldRule("fuel_type", one_of(FUEL_TYPES),
              "invalid input: vehicle fuel type may only be (Petrol / Diesel / Hybrid / Electric / LPG / CNG)"),
    FieldRule("gearbox", not_empty, "invalid input: vehicle gearbox may not be empty"),
    FieldRule("gearbox", one_of(GEARBOXES), "invalid input: vehicle gearbox may only be (Automatic or Manual)"),
    FieldRule("color", not_empty, "invalid input: vehicle color may not be empty"),
    FieldRule("color", one_of(COLORS), "invalid input: wrong vehicle color"),
    FieldRule("body", not_empty, "invalid input: vehicle body may not be empty"),
    FieldRule("body", one_of(BODIES), "invalid input: wrong vehicle body"),
)

FIRST_NAME_RULE = FieldRule("first_name", min_length(MIN_NAME_LENGTH),
                            "invalid input: first name cannot be empty or shorter than 3 characters")
LAST_NAME_RULE = FieldRule("last_name", min_length(MIN_NAME_LENGTH),
                           "invalid input: last name cannot be empty or shorter than 3 characters")
PHONE_LENGTH_RULE = FieldRule("phone_number", min_length(MIN_PHONE_LENGTH),
                              "invalid input: phone number cannot be empty or shorter than 7 numbers")
PHONE_DIGITS_RULE = FieldRule("phone_number", has_no_letters,
                              "invalid input: phone number cannot consist letters")
EMAIL_LENGTH_RULE = FieldRule("email", min_length(MIN_EMAIL_LENGTH),
                              "invalid input: email cannot be empty or shorter than 7 characters")
EMAIL_FORMAT_RULE = FieldRule("email", is_valid_email,
                              "invalid input: email must be a valid address")
ADDRESS_RULE = FieldRule("address", min_length(MIN_ADDRESS_LENGTH),
                         "invalid input: living address cannot be empty or shorter than 5 symbols")


def personal_id_rule(kind: str) -> FieldRule:
    return FieldRule("personal_id", is_valid_personal_id,
                     f"invalid input: personal id of the {kind} must be exactly 11 digits")


CUSTOMER_RULES = (
    FIRST_NAME_RULE,
    LAST_NAME_RULE,
    PHONE_LENGTH_RULE,
    PHONE_DIGITS_RULE,
    EMAIL_LENGTH_RULE,
    EMAIL_FORMAT_RULE,
    personal_id_rule("customer"),
)

EMPLOYEE_RULES = (
    FIRST_NAME_RULE,
    LAST_NAME_RULE,
    personal_id_rule("employee"),
    FieldRule("date_of_birth", is_valid_date_of_birth, "invalid input: wrong date format"),
    EMAIL_FORMAT_RULE,
    PHONE_LENGTH_RULE,
    ADDRESS_RULE,
)

EMPLOYEE_CONTACT_RULES = (
    EMAIL_FORMAT_RULE,
    PHONE_LENGTH_RULE,
    ADDRESS_RULE,
)
