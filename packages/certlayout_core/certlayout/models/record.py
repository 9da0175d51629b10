"""Canonical certificate record produced by the upstream record resolver."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Tuple

_CAMEL_CASE_KEYS = {
    "studentFullName": "student_full_name",
    "documentTypeLabel": "document_type_label",
    "documentNumber": "document_number",
    "primaryDate": "primary_date",
    "secondaryDate": "secondary_date",
    "locationLabel": "location_label",
    "durationLabel": "duration_label",
    "trainingTitle": "training_title",
    "theoryItems": "theory_items",
    "practiceItems": "practice_items",
    "manualText": "manual_text",
    "organizationName": "organization_name",
    "trainerName": "trainer_name",
}

_LIST_FIELDS = ("theory_items", "practice_items")


@dataclass(frozen=True)
class CertificateRecord:
    """
    Resolved certificate fields.

    Every field is optional from the layout's point of view: missing values
    are rendered as placeholder text instead of failing. Validation of
    required fields belongs to the resolver upstream.
    """

    student_full_name: str = ""
    document_type_label: str = ""
    document_number: str = ""
    primary_date: str = ""
    secondary_date: str = ""
    location_label: str = ""
    duration_label: str = ""
    training_title: str = ""
    theory_items: Tuple[str, ...] = ()
    practice_items: Tuple[str, ...] = ()
    manual_text: str = ""
    organization_name: str = ""
    trainer_name: str = ""

    def __post_init__(self) -> None:
        for name in _LIST_FIELDS:
            value = getattr(self, name)
            object.__setattr__(self, name, tuple(value) if value else ())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CertificateRecord":
        """
        Build a record from a mapping with snake_case or camelCase keys.

        Unknown keys are ignored. ``None`` values become empty strings/lists.
        """
        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in data.items():
            name = _CAMEL_CASE_KEYS.get(key, key)
            if name not in known or value is None:
                continue
            if name in _LIST_FIELDS:
                values[name] = tuple(str(item) for item in value if item is not None)
            else:
                values[name] = str(value)
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            result[f.name] = list(value) if f.name in _LIST_FIELDS else value
        return result
