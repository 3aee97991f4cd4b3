"""Session record and explicit operation outcomes."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic_core import PydanticCustomError

MIN_DURATION = 1
MAX_DURATION = 1440


class Session(BaseModel):
    """One practice session: the day it happened and how many minutes it lasted."""

    model_config = ConfigDict(frozen=True, strict=True)

    date: dt.date
    duration: int

    @field_validator("date", mode="before")
    @classmethod
    def _date_present(cls, value: Any) -> Any:
        if value is None:
            raise PydanticCustomError("date_missing", "Date cannot be null.")
        return value

    @field_validator("duration")
    @classmethod
    def _duration_in_range(cls, value: int) -> int:
        if value < MIN_DURATION or value > MAX_DURATION:
            raise PydanticCustomError(
                "duration_range",
                "Duration must be between {low} and {high} minutes.",
                {"low": MIN_DURATION, "high": MAX_DURATION},
            )
        return value

    def __str__(self) -> str:
        return f"Session{{date={self.date.isoformat()}, duration={self.duration}}}"


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    PARSE = "parse"
    IO = "io"


@dataclass(frozen=True)
class Outcome:
    """Result of an operation that may fail without raising.

    ``kind`` is None on success; on failure it says whether the caller
    should skip and continue (validation, parse) or abort and report (io).
    """

    session: Session | None = None
    kind: ErrorKind | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.kind is None

    @classmethod
    def success(cls, session: Session | None = None) -> Outcome:
        return cls(session=session)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> Outcome:
        return cls(kind=kind, message=message)


def validation_message(exc: ValidationError) -> str:
    """Flatten a pydantic ValidationError into a one-line message."""
    return " ".join(err["msg"] for err in exc.errors())


def create_session(date: dt.date | None, duration: int) -> Outcome:
    """Build a Session, returning a validation outcome instead of raising."""
    try:
        session = Session(date=date, duration=duration)
    except ValidationError as e:
        return Outcome.failure(ErrorKind.VALIDATION, validation_message(e))
    return Outcome.success(session)
