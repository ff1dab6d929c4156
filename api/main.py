from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from auth import dependencies as auth_dependencies
from contact import router as contact_router
from core import db, settings
from core.errors import install_exception_handlers
from core.logging import configure_logging
from interns import router as interns_router


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging()
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        if settings.env_bool("DB_BOOTSTRAP_SCHEMA", True):
            await db.ensure_schema(db.pool())
        yield
    finally:
        await db.close_pool()


app = FastAPI(lifespan=lifespan)

# Only the deployed frontend may call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

install_exception_handlers(app)

app.include_router(interns_router.router, tags=["interns"])
app.include_router(contact_router.router, tags=["contact"])


@app.get("/", dependencies=[Depends(auth_dependencies.require_api_key)])
def root() -> dict:
    return {"success": True, "message": "Accelrix contact API is running"}


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=settings.port())
