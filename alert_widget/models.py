"""
Data models for the alert widget.

Defines the ingestion models (events and their field values), the display
unit (ListItem) and the JSON snapshot returned by the API.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


NO_DATA_KEY = "no data!"

# Numbers in [1e-6, 1e21) are written out in full, others in exponent form
PLAIN_NUMBER_MIN = 1e-6
PLAIN_NUMBER_MAX = 1e21


def format_number(number: float) -> str:
    """
    Render a number the way JavaScript's String(number) does.

    5.0 -> "5", 1.5e-05 -> "0.000015", 1e21 -> "1e+21", 1e-07 -> "1e-7"
    """
    if number == 0:
        return "0"
    magnitude = abs(number)
    if PLAIN_NUMBER_MIN <= magnitude < PLAIN_NUMBER_MAX:
        if float(number).is_integer():
            return str(int(number))
        text = repr(float(number))
        if "e" in text:
            text = format(Decimal(text), "f")
        return text

    mantissa, exponent = repr(float(number)).split("e")
    if mantissa.endswith(".0"):
        mantissa = mantissa[:-2]
    sign = "-" if exponent.startswith("-") else "+"
    return f"{mantissa}e{sign}{int(exponent.lstrip('+-'))}"


class FieldValue(BaseModel):
    """A raw field value normalized at ingestion time"""
    model_config = ConfigDict(frozen=True)

    kind: Literal["text", "number"]
    text: str

    @classmethod
    def from_raw(cls, raw: Any) -> "FieldValue":
        """
        Normalize a primitive JSON value.

        Strings stay text, numbers keep their kind but are rendered the way
        a browser would render them (see format_number), booleans become
        "true" or "false" and null becomes an empty string.

        Raises:
            ValueError: If the value is an object or an array
        """
        if isinstance(raw, FieldValue):
            return raw
        if raw is None:
            return cls(kind="text", text="")
        if isinstance(raw, bool):
            return cls(kind="text", text="true" if raw else "false")
        if isinstance(raw, int):
            text = str(raw) if abs(raw) < PLAIN_NUMBER_MAX else format_number(float(raw))
            return cls(kind="number", text=text)
        if isinstance(raw, float):
            return cls(kind="number", text=format_number(raw))
        if isinstance(raw, str):
            return cls(kind="text", text=raw)
        raise ValueError(f"unsupported field value of type {type(raw).__name__}")

    def __str__(self):
        return self.text


class Event(BaseModel):
    """An event record as delivered in the Events array"""
    model_config = ConfigDict(frozen=True)

    # opaque: any JSON value is accepted and never interpreted
    event_id: Optional[Any] = Field(
        default=None,
        validation_alias=AliasChoices("event_id", "id", "_id"),
    )
    timestamp: Optional[Any] = Field(
        default=None,
        validation_alias=AliasChoices("timestamp", "@timestamp", "_timestamp"),
    )
    raw_data_fields: Dict[str, FieldValue] = Field(
        validation_alias=AliasChoices("raw_data_fields", "_rawDataFields"),
    )

    @field_validator("raw_data_fields", mode="before")
    @classmethod
    def _normalize_values(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            raise ValueError("_rawDataFields must be an object")
        return {key: FieldValue.from_raw(raw) for key, raw in value.items()}


@dataclass(frozen=True)
class FieldEntry:
    """A single key/value pair filed under a category"""
    key: str
    value: FieldValue


# category name -> field entries in event-then-field order
CategorizedData = Dict[str, List[FieldEntry]]


class ListItem(BaseModel):
    """Display unit: one field with its favorite status"""
    key: str
    value: str
    is_favorite: bool = False

    @classmethod
    def placeholder(cls) -> "ListItem":
        """The row shown when a filtered result set is empty"""
        return cls(key=NO_DATA_KEY, value="", is_favorite=False)

    @property
    def is_placeholder(self) -> bool:
        return self.key == NO_DATA_KEY


class DisplayRow(BaseModel):
    """A ListItem together with its display labels"""
    key: str
    value: str
    is_favorite: bool
    label: str
    value_label: str


class WidgetSnapshot(BaseModel):
    """Everything the display layer needs to render the widget"""
    title: str
    status: Literal["pending", "loaded", "failed"]
    error_message: Optional[str] = None
    error_category: Optional[str] = None
    categories: List[str] = Field(default_factory=list)
    category_labels: List[str] = Field(default_factory=list)
    selected_tab_index: int = 0
    selected_category: Optional[str] = None
    search_query: str = ""
    show_favorites: bool = False
    tab_width: str = "0px"
    tab_times: List[str] = Field(default_factory=list)
    rows: List[DisplayRow] = Field(default_factory=list)
