"""
Contact-form flow: validate -> persist -> notify.

The saved row is kept even when mail delivery fails afterwards.
"""

from __future__ import annotations

import asyncio
import logging

import asyncpg
from fastapi import HTTPException, status

from core import db, errors

from . import mailer, repository, schemas

logger = logging.getLogger(__name__)


def _require_fields(payload: schemas.ContactRequest) -> schemas.ContactSubmission:
    if not (payload.name and payload.email and payload.subject and payload.message):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing required fields",
        )
    return schemas.ContactSubmission(
        name=payload.name,
        email=payload.email,
        subject=payload.subject,
        message=payload.message,
        phone=payload.phone or None,
    )


async def submit_contact(pool: asyncpg.Pool, payload: schemas.ContactRequest) -> int:
    """
    Store the submission and send both emails. Returns the contact row id.
    """
    submission = _require_fields(payload)

    try:
        contact_id = await repository.insert_contact(pool, submission)
    except db.STORE_ERRORS as exc:
        raise errors.dependency_failure("contact_save_failed") from exc

    try:
        await asyncio.to_thread(mailer.send_contact_notifications, submission)
    except mailer.MAIL_ERRORS as exc:
        raise errors.dependency_failure("contact_mail_failed", contact_id=contact_id) from exc

    logger.info("contact_submitted contact_id=%s", contact_id)
    return contact_id
