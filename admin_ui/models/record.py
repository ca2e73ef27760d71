"""Record base class.

Records are plain attribute holders built from store rows. The class
carries the human-readable names of its attributes, which the table
component uses for column headers.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Mapping, Tuple


def humanize(name: str) -> str:
    """Turn ``"created_at"`` into ``"Created at"``.

    A trailing ``_id`` is dropped, so ``"user_id"`` reads as ``"User"``.
    """
    text = name.strip("_")
    if text.endswith("_id"):
        text = text[:-3]
    text = text.replace("_", " ").strip()
    if not text:
        return ""
    return text[0].upper() + text[1:]


class Record:
    # Attribute names kept when building from a row; empty keeps every key.
    attributes: ClassVar[Tuple[str, ...]] = ()
    # Overrides for human_attribute_name, e.g. {"sku": "SKU"}.
    attribute_labels: ClassVar[Dict[str, str]] = {}

    def __init__(self, **values: Any) -> None:
        for key, value in values.items():
            setattr(self, key, value)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Record":
        if cls.attributes:
            return cls(**{key: row.get(key) for key in cls.attributes})
        return cls(**row)

    @classmethod
    def human_attribute_name(cls, name: str) -> str:
        for klass in cls.__mro__:
            labels = klass.__dict__.get("attribute_labels") or {}
            if name in labels:
                return labels[name]
        return humanize(name)

    def __repr__(self) -> str:
        values = ", ".join(f"{key}={value!r}" for key, value in vars(self).items())
        return f"{type(self).__name__}({values})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return vars(self) == vars(other)

    __hash__ = None  # type: ignore[assignment]
