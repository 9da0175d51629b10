"""
Certificate wording helpers.

Every helper tolerates missing values and returns the placeholder printed
on the certificate instead, so an incomplete record still produces a page.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Iterable, List, Optional, Tuple

DATE_PLACEHOLDER = "________"
LOCATION_PLACEHOLDER = "________"
DURATION_PLACEHOLDER = "____"
STUDENT_PLACEHOLDER = "Nombre del alumno/a"
TRAINING_NAME_PLACEHOLDER = "Nombre de la formación"
UNTITLED_TRAINING = "Formación sin título"

SPANISH_MONTHS = (
    "enero",
    "febrero",
    "marzo",
    "abril",
    "mayo",
    "junio",
    "julio",
    "agosto",
    "septiembre",
    "octubre",
    "noviembre",
    "diciembre",
)

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}")
_FILE_NAME_FORBIDDEN = re.compile(r'[\\/:*?"<>|]')
_WHITESPACE = re.compile(r"\s+")


def normalise_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def format_full_name(name: Any) -> str:
    return normalise_text(name) or STUDENT_PLACEHOLDER


def build_document_sentence(document_type: Any, document_number: Any) -> str:
    """Identity clause, e.g. ``"con DNI 12345678Z"``."""
    kind = normalise_text(document_type).upper()
    number = normalise_text(document_number)
    if not kind and not number:
        return "con documento de identidad"
    if not kind:
        return f"con documento {number}"
    if not number:
        return f"con {kind}"
    return f"con {kind} {number}"


def parse_date(value: Any) -> Optional[date]:
    """Parse an ISO date (a time part is ignored); ``None`` when not a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = normalise_text(value)
    if not _ISO_DATE.match(text):
        return None
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def _long_date(value: date) -> str:
    return f"{value.day} de {SPANISH_MONTHS[value.month - 1]} de {value.year}"


def format_training_date(value: Any) -> str:
    """
    Spanish long form of a date.

    Returns ``"________"`` for empty values and the text unchanged when it is
    not a date.
    """
    text = normalise_text(value)
    if not text:
        return DATE_PLACEHOLDER
    parsed = parse_date(value)
    if parsed is None:
        return text
    return _long_date(parsed)


def format_training_date_range(primary: Any, secondary: Any) -> str:
    """
    Join one or two training days.

    Examples:
        ``"12 y 13 de marzo de 2025"``, ``"30 de abril y 2 de mayo de 2025"``,
        ``"30 de diciembre de 2024 y 2 de enero de 2025"``.
    """
    if not normalise_text(secondary):
        return format_training_date(primary)
    if not normalise_text(primary):
        return format_training_date(secondary)

    first = parse_date(primary)
    second = parse_date(secondary)
    if first and second:
        if first.year == second.year:
            if first.month == second.month:
                return f"{first.day} y {second.day} de {SPANISH_MONTHS[first.month - 1]} de {first.year}"
            return (
                f"{first.day} de {SPANISH_MONTHS[first.month - 1]} y "
                f"{second.day} de {SPANISH_MONTHS[second.month - 1]} de {first.year}"
            )
        return f"{_long_date(first)} y {_long_date(second)}"

    return f"{format_training_date(primary)} y {format_training_date(secondary)}"


def format_location(value: Any) -> str:
    return normalise_text(value) or LOCATION_PLACEHOLDER


def format_duration(value: Any) -> str:
    """Hours as printed: ``8``, ``7,5`` or the text as given."""
    if value is None or value == "":
        return DURATION_PLACEHOLDER
    text = normalise_text(value)
    try:
        number = float(text.replace(",", ".")) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return text
    if number != number or number in (float("inf"), float("-inf")):
        return text
    if number.is_integer():
        return str(int(number))
    return f"{number:g}".replace(".", ",")


def format_training_name(value: Any) -> str:
    return normalise_text(value) or TRAINING_NAME_PLACEHOLDER


def resolve_training_title(value: Any) -> str:
    return normalise_text(value) or UNTITLED_TRAINING


def ensure_list(items: Optional[Iterable[Any]]) -> Tuple[str, ...]:
    """Trimmed, non-empty items; ``None`` and a bare string are accepted."""
    if items is None:
        return ()
    if isinstance(items, str):
        items = items.split("\n")
    cleaned: List[str] = []
    for item in items:
        text = normalise_text(item)
        if text:
            cleaned.append(text)
    return tuple(cleaned)


def _date_for_file_name(value: Any) -> str:
    parsed = parse_date(value)
    if parsed is not None:
        return parsed.strftime("%d-%m-%Y")
    text = normalise_text(value)
    if text:
        return _WHITESPACE.sub(" ", re.sub(r"[\\/]+", "-", text))
    return "Fecha sin definir"


def sanitise_file_name_component(value: Any, fallback: str) -> str:
    text = normalise_text(value).replace("\r", " ").replace("\n", " ")
    text = _FILE_NAME_FORBIDDEN.sub(" ", text)
    return _WHITESPACE.sub(" ", text).strip() or fallback


def build_file_name(record: Any) -> str:
    """``"<training> - <student> - <dd-mm-yyyy>.pdf"`` for a ``CertificateRecord``."""
    title = sanitise_file_name_component(resolve_training_title(record.training_title), "Formación")
    student = sanitise_file_name_component(format_full_name(record.student_full_name), "Alumno/a")
    day = sanitise_file_name_component(_date_for_file_name(record.primary_date), "Fecha sin definir")
    base = f"{title} - {student} - {day}".strip()
    return f"{base or 'Certificado'}.pdf"
