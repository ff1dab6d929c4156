"""
Intern-record API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, HTTPException, Query, status

from auth import dependencies as auth_dependencies
from core import db

from . import schemas, service

router = APIRouter(
    prefix="/api/interns",
    dependencies=[Depends(auth_dependencies.require_api_key)],
)


@router.post("/bulk-upsert")
async def bulk_upsert(
    request: schemas.BulkUpsertRequest,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> dict:
    """
    Upsert a batch of intern records keyed on `internId`.
    """
    result = await service.reconcile(pool, request.documents)
    return {"success": True, **result.model_dump(mode="json", by_alias=True)}


@router.get("/verify")
async def verify_intern(
    intern_id: str = Query(default="", alias="id", max_length=200),
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> dict:
    view = await service.verify(pool, intern_id)
    if view is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Intern not found.")
    return {"success": True, "intern": view.model_dump(mode="json", by_alias=True)}
