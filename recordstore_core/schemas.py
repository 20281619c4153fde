from __future__ import annotations

import json
import math
from collections.abc import Mapping
from typing import TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    StrictFloat,
    StrictInt,
    StrictStr,
    ValidationError,
    field_validator,
)

from .errors import ParseError, SchemaError


TBaseSchema = TypeVar("TBaseSchema", bound="BaseSchema")


def _describe_errors(exc: ValidationError) -> str:
    parts: list[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "record"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


class BaseSchema(BaseModel):
    def to_dict(self) -> dict[str, object]:
        return self.model_dump()

    @classmethod
    def from_dict(cls: type[TBaseSchema], data: Mapping[str, object]) -> TBaseSchema:
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise SchemaError(f"Invalid {cls.__name__.lower()}: {_describe_errors(exc)}") from exc

    @classmethod
    def from_json(cls: type[TBaseSchema], data: str) -> TBaseSchema:
        try:
            payload = json.loads(data)
        except json.JSONDecodeError as exc:
            raise ParseError(f"Invalid JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise ParseError(f"Expected a JSON object, got {type(payload).__name__}")
        return cls.from_dict(payload)


class Record(BaseSchema):
    """One stored item. Fields outside the schema are dropped on parse."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: StrictStr
    email: StrictStr
    age: StrictInt | StrictFloat

    @field_validator("id", "email")
    @classmethod
    def encodable_as_utf8(cls, value: str) -> str:
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ValueError(f"must be valid unicode text: {exc.reason}") from exc
        return value

    @field_validator("age")
    @classmethod
    def age_is_finite(cls, value: int | float) -> int | float:
        try:
            finite = math.isfinite(float(value))
        except OverflowError:
            finite = False
        if not finite:
            raise ValueError("age must be a finite number")
        return value
