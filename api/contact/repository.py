"""
Contact-form persistence (raw SQL).
"""

from __future__ import annotations

from core import db

from .schemas import ContactSubmission


async def insert_contact(executor: db.Executor, submission: ContactSubmission) -> int:
    row = await db.fetch_one(
        executor,
        """
        INSERT INTO contacts (name, email, phone, subject, message)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING id
        """,
        submission.name,
        submission.email,
        submission.phone,
        submission.subject,
        submission.message,
    )
    if row is None or "id" not in row:
        raise RuntimeError("Failed to insert contact.")
    return int(row["id"])
