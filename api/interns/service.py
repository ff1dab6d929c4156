"""
Intern-record reconciliation and verification.

- `reconcile`: bulk upsert keyed on `internId`, continue-on-error per element
- `verify`: single lookup returning the public projection
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any

import asyncpg
from fastapi import HTTPException, status
from pydantic import ValidationError

from core import db, errors

from . import repository, schemas

logger = logging.getLogger(__name__)

# Store rejections that only concern one record; the batch carries on.
RECORD_STORE_ERRORS = (asyncpg.DataError, asyncpg.IntegrityConstraintViolationError)

RECORD_STORE_MESSAGE = "Record could not be stored."


def _require_batch(batch: Any) -> list[Any]:
    if not isinstance(batch, list) or not batch:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="documents must be a non-empty array.",
        )
    return batch


def _raw_intern_id(raw: Any) -> str | None:
    if isinstance(raw, dict) and isinstance(raw.get("internId"), str):
        return raw["internId"].strip() or None
    return None


def _validation_summary(exc: ValidationError) -> str:
    first = exc.errors()[0]
    loc = ".".join(str(part) for part in first.get("loc", ()))
    msg = str(first.get("msg") or "invalid value")
    return f"{loc}: {msg}" if loc else msg


def _validate_batch(
    items: list[Any],
) -> tuple[list[tuple[int, schemas.RawRecord]], list[schemas.BatchItemError]]:
    records: list[tuple[int, schemas.RawRecord]] = []
    failures: list[schemas.BatchItemError] = []
    for index, raw in enumerate(items):
        try:
            records.append((index, schemas.RawRecord.model_validate(raw)))
        except ValidationError as exc:
            failures.append(
                schemas.BatchItemError(
                    index=index,
                    intern_id=_raw_intern_id(raw),
                    message=_validation_summary(exc),
                )
            )
    return records, failures


async def reconcile(pool: asyncpg.Pool, batch: Any) -> schemas.BatchResult:
    """
    Apply one upsert per record, in order, on a single pooled connection.

    There is no wrapping transaction: every upsert commits on its own, so a
    record rejected by validation or by the store does not undo its siblings.
    Losing the store itself aborts the whole call.
    """
    items = _require_batch(batch)
    records, failures = _validate_batch(items)

    outcomes: Counter[str] = Counter()
    if records:
        try:
            async with pool.acquire() as conn:
                for index, record in records:
                    try:
                        outcome = await repository.upsert_intern(
                            conn,
                            record.intern_id,
                            record.update_fields(),
                        )
                    except RECORD_STORE_ERRORS:
                        logger.exception(
                            "bulk_upsert_record_failed index=%s intern_id=%s",
                            index,
                            record.intern_id,
                        )
                        failures.append(
                            schemas.BatchItemError(
                                index=index,
                                intern_id=record.intern_id,
                                message=RECORD_STORE_MESSAGE,
                            )
                        )
                        continue
                    outcomes[outcome] += 1
        except db.STORE_ERRORS as exc:
            raise errors.dependency_failure("bulk_upsert_failed", size=len(items)) from exc

    failures.sort(key=lambda item: item.index)
    result = schemas.BatchResult(
        matched_count=outcomes["matched"] + outcomes["modified"],
        modified_count=outcomes["modified"],
        upserted_count=outcomes["inserted"],
        failed_count=len(failures),
        errors=failures,
    )
    logger.info(
        "bulk_upsert_complete size=%s matched=%s modified=%s upserted=%s failed=%s",
        len(items),
        result.matched_count,
        result.modified_count,
        result.upserted_count,
        result.failed_count,
    )
    return result


async def verify(pool: asyncpg.Pool, intern_id: str | None) -> schemas.PublicRecordView | None:
    """
    Look up one intern by `internId`. Returns None when there is no such record.
    """
    intern_id = (intern_id or "").strip()
    if not intern_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Intern ID is required.",
        )

    try:
        row = await repository.get_intern_by_intern_id(pool, intern_id)
    except db.STORE_ERRORS as exc:
        raise errors.dependency_failure("verify_failed", intern_id=intern_id) from exc

    if row is None:
        return None
    return schemas.PublicRecordView.from_row(row)
