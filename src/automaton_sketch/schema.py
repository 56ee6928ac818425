"""Wire schema — pydantic models for the camelCase graph description.

These models only read the JSON-like shape handed over upstream. They coerce
scalars to strings (ids and symbols often arrive as numbers) and tolerate a
bare string where a list of symbols is expected. Semantic problems such as
dangling references or a missing edge endpoint pass through untouched; the
validator reports those.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _as_text(value: Any) -> Any:
    if value is None or isinstance(value, (dict, list, tuple)):
        return value
    return str(value)


def _as_symbol_list(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [_as_text(s) for s in value]
    return value


class NodeModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    label: str | None = None
    is_start: bool = Field(default=False, alias="isStart")
    is_accepting: bool = Field(default=False, alias="isAccepting")

    @field_validator("id", "label", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        return _as_text(value)

    @field_validator("is_start", "is_accepting", mode="before")
    @classmethod
    def _null_flag(cls, value: Any) -> Any:
        return False if value is None else value


class EdgeModel(BaseModel):
    """One transition. A missing endpoint is kept as ``None``."""

    model_config = ConfigDict(populate_by_name=True)

    from_id: str | None = Field(default=None, alias="from")
    to_id: str | None = Field(default=None, alias="to")
    symbols: list[str] = Field(default_factory=list)
    label: str | None = None

    @field_validator("from_id", "to_id", "label", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        return _as_text(value)

    @field_validator("symbols", mode="before")
    @classmethod
    def _coerce_symbols(cls, value: Any) -> Any:
        return _as_symbol_list(value)


class GraphModel(BaseModel):
    """Top-level description. Absent ``nodes``/``edges`` stay ``None``."""

    model_config = ConfigDict(populate_by_name=True)

    kind: str | None = Field(default=None, alias="type")
    alphabet: list[str] = Field(default_factory=list)
    nodes: list[NodeModel] | None = None
    edges: list[EdgeModel] | None = None

    @field_validator("kind", mode="before")
    @classmethod
    def _coerce_kind(cls, value: Any) -> Any:
        return _as_text(getattr(value, "value", value))

    @field_validator("alphabet", mode="before")
    @classmethod
    def _coerce_alphabet(cls, value: Any) -> Any:
        return _as_symbol_list(value)
