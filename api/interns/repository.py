"""
Intern-record persistence (raw SQL).

The only write path is `upsert_intern`: one atomic
INSERT ... ON CONFLICT (intern_id) DO UPDATE per record.
"""

from __future__ import annotations

from typing import Any, Literal

from core import db

UpsertOutcome = Literal["inserted", "modified", "matched"]

# Columns an upsert may set. Order is the order they appear in generated SQL.
UPSERT_COLUMNS = (
    "email",
    "full_name",
    "gender",
    "mobile_number",
    "internship_track",
    "highest_academic_qualification",
    "college_name",
    "country",
    "joined_linked_in",
    "questions",
    "passing_year",
    "start_date",
    "end_date",
    "issue_date",
    "offer_letter_sent_status",
    "internship_completed",
    "certificate_sent_status",
)


def _upsert_sql(columns: list[str]) -> str:
    """
    Build the upsert for one record that supplies `columns`.

    The DO UPDATE only fires when a supplied value actually differs, so an
    unchanged record returns no row ("matched", not "modified").
    `xmax = 0` holds only for a freshly inserted tuple.
    """
    insert_columns = ["intern_id", *columns]
    placeholders = ", ".join(f"${i}" for i in range(1, len(insert_columns) + 1))

    if not columns:
        return f"""
            INSERT INTO interns (intern_id)
            VALUES ({placeholders})
            ON CONFLICT (intern_id) DO NOTHING
            RETURNING true AS inserted
        """

    assignments = ",\n                ".join(f"{c} = EXCLUDED.{c}" for c in columns)
    current = ", ".join(f"interns.{c}" for c in columns)
    incoming = ", ".join(f"EXCLUDED.{c}" for c in columns)
    return f"""
        INSERT INTO interns ({", ".join(insert_columns)})
        VALUES ({placeholders})
        ON CONFLICT (intern_id) DO UPDATE
        SET {assignments},
            updated_at = now()
        WHERE ({current}) IS DISTINCT FROM ({incoming})
        RETURNING (xmax = 0) AS inserted
    """


async def upsert_intern(
    executor: db.Executor,
    intern_id: str,
    fields: dict[str, Any],
) -> UpsertOutcome:
    unknown = set(fields) - set(UPSERT_COLUMNS)
    if unknown:
        raise ValueError(f"Unknown intern columns: {sorted(unknown)}")

    columns = [c for c in UPSERT_COLUMNS if c in fields]
    row = await db.fetch_one(
        executor,
        _upsert_sql(columns),
        intern_id,
        *(fields[c] for c in columns),
    )
    if row is None:
        return "matched"
    return "inserted" if row["inserted"] else "modified"


async def get_intern_by_intern_id(executor: db.Executor, intern_id: str) -> dict[str, Any] | None:
    return await db.fetch_one(
        executor,
        """
        SELECT intern_id, full_name, internship_track, college_name,
               start_date, end_date, issue_date
        FROM interns
        WHERE intern_id = $1
        """,
        intern_id,
    )
