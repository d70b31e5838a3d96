import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from menuboard.api import menu_routes
from menuboard.auth.routes import auth_backend, fastapi_users
from menuboard.core.errors import register_exception_handlers
from menuboard.db import create_db_and_tables
from menuboard.schemas.user import UserRead, UserCreate

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger("menuboard")


# Create the FastAPI app
app = FastAPI(
    title="Menuboard API",
    version="1.0.0",
    description="Menu management for categories of a food-ordering service.",
)

register_exception_handlers(app)

# Allow frontend dev (CORS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ORIGINS", "*").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Auth routes
app.include_router(
    fastapi_users.get_auth_router(auth_backend),
    prefix="/auth/jwt",
    tags=["auth"],
)

app.include_router(
    fastapi_users.get_register_router(UserRead, UserCreate),
    prefix="/auth",
    tags=["auth"],
)

# Core app routers
app.include_router(menu_routes.router)


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.on_event("startup")
async def on_startup():
    log.info("Starting DB setup...")
    await create_db_and_tables()
    log.info("DB schema ready.")
