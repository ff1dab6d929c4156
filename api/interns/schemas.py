"""
Intern-record schemas.

Wire names are camelCase (`internId`, `fullName`, ...); attribute names match
the snake_case columns of the `interns` table.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

DATE_FIELDS = ("start_date", "end_date", "issue_date")


def parse_calendar_date(value: Any) -> date | None:
    """
    Normalize a date-typed input.

    Blank text and None mean "not supplied". Accepts `YYYY-MM-DD` or an
    ISO-8601 timestamp, in which case only the date part is kept.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError("must be a date string")

    text = value.strip()
    if not text:
        return None
    if len(text) == 10:
        return date.fromisoformat(text)
    return datetime.fromisoformat(text.replace("Z", "+00:00")).date()


class RawRecord(BaseModel):
    """
    One element of a bulk-upsert batch.

    Unknown fields are rejected so that a misspelt key is reported instead of
    silently stored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        extra="forbid",
        str_strip_whitespace=True,
        coerce_numbers_to_str=True,
    )

    intern_id: str = Field(..., min_length=1, max_length=200)
    email: str | None = Field(default=None, max_length=320)
    full_name: str | None = None
    gender: str | None = None
    mobile_number: str | None = None
    internship_track: str | None = None
    highest_academic_qualification: str | None = None
    college_name: str | None = None
    country: str | None = None
    joined_linked_in: str | None = None
    questions: str | None = None
    passing_year: int | None = None
    start_date: date | None = None
    end_date: date | None = None
    issue_date: date | None = None
    offer_letter_sent_status: str | None = None
    internship_completed: str | None = None
    certificate_sent_status: str | None = None

    @field_validator(*DATE_FIELDS, mode="before")
    @classmethod
    def _normalize_date(cls, value: Any) -> date | None:
        return parse_calendar_date(value)

    @field_validator("passing_year", mode="before")
    @classmethod
    def _normalize_year(cls, value: Any) -> Any:
        # bool is an int subclass; `true` must not become year 1.
        if isinstance(value, bool):
            raise ValueError("must be a year, not a boolean")
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def update_fields(self) -> dict[str, Any]:
        """
        Column -> value for every field the caller supplied with a value.

        `intern_id` is the match key and never part of the update.
        """
        data = self.model_dump(exclude_unset=True, exclude={"intern_id"})
        return {column: value for column, value in data.items() if value is not None}


class BulkUpsertRequest(BaseModel):
    # Shape is checked by the service so a bad batch gets one consistent 400.
    documents: Any = None


class BatchItemError(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    index: int
    intern_id: str | None = None
    message: str


class BatchResult(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    matched_count: int = 0
    modified_count: int = 0
    upserted_count: int = 0
    failed_count: int = 0
    errors: list[BatchItemError] = Field(default_factory=list)


class PublicRecordView(BaseModel):
    """
    What the public verification lookup may reveal about an intern.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str | None = None
    domain: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    issue_date: date | None = None
    intern_id: str
    college: str | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "PublicRecordView":
        return cls(
            name=row.get("full_name"),
            domain=row.get("internship_track"),
            start_date=row.get("start_date"),
            end_date=row.get("end_date"),
            issue_date=row.get("issue_date"),
            intern_id=str(row["intern_id"]),
            college=row.get("college_name"),
        )
