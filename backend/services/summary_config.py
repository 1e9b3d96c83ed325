from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Type, Union

from pydantic import BaseModel, ConfigDict

from backend.core.exceptions import InvalidOption


class SummaryLength(str, Enum):
    CONCISE = "concise"
    BALANCED = "balanced"
    DETAILED = "detailed"


class SummaryTone(str, Enum):
    PROFESSIONAL = "professional"
    CASUAL = "casual"
    ACADEMIC = "academic"
    CREATIVE = "creative"


class SummaryFormat(str, Enum):
    PARAGRAPH = "paragraph"
    BULLETS = "bullets"


OPTION_FIELDS: Dict[str, Type[Enum]] = {
    "length": SummaryLength,
    "tone": SummaryTone,
    "format": SummaryFormat,
}


class SummaryConfig(BaseModel):
    """One valid combination of length, tone and format.

    Frozen: a change of one field produces a new config via `set`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    length: SummaryLength = SummaryLength.BALANCED
    tone: SummaryTone = SummaryTone.PROFESSIONAL
    format: SummaryFormat = SummaryFormat.PARAGRAPH

    def set(self, field: str, value: Union[str, Enum]) -> "SummaryConfig":
        return set_option(self, field, value)


def _coerce(field: str, value: Union[str, Enum]) -> Enum:
    enum_cls = OPTION_FIELDS.get(field)
    if enum_cls is None:
        raise InvalidOption(
            f"Unknown option '{field}'.",
            details={"field": field, "allowed_fields": list(OPTION_FIELDS)},
        )
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidOption(
            f"'{value}' is not a valid {field}.",
            details={"field": field, "allowed": [m.value for m in enum_cls]},
        ) from None


def set_option(config: SummaryConfig, field: str, value: Union[str, Enum]) -> SummaryConfig:
    """Return a copy of `config` with `field` replaced; the other two are kept."""
    member = _coerce(field, value)
    values = {name: getattr(config, name) for name in OPTION_FIELDS}
    values[field] = member
    return SummaryConfig(**values)


def option_label(value: Union[str, Enum]) -> str:
    raw = value.value if isinstance(value, Enum) else str(value)
    return raw[:1].upper() + raw[1:]


def option_choices() -> Dict[str, Dict[str, Any]]:
    defaults = SummaryConfig()
    out: Dict[str, Dict[str, Any]] = {}
    for field, enum_cls in OPTION_FIELDS.items():
        values: List[str] = [m.value for m in enum_cls]
        out[field] = {"values": values, "default": getattr(defaults, field).value}
    return out
