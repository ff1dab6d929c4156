"""
Contact-form API endpoint.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends

from auth import dependencies as auth_dependencies
from core import db

from . import schemas, service

router = APIRouter(dependencies=[Depends(auth_dependencies.require_api_key)])


@router.post("/api/contact")
async def submit_contact(
    request: schemas.ContactRequest,
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> dict:
    await service.submit_contact(pool, request)
    return {"success": True, "message": "Message sent and saved!"}
