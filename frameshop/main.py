from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from alembic import command
from alembic.config import Config
from sqlalchemy import inspect
import logging
import os

from .config import settings
from .database import engine, Base
from . import models  # noqa: F401  (registers tables on Base.metadata)
from .routers import estimates, materials, orders

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("frameshop")

# Create tables (handles new tables but won't add columns to existing ones)
Base.metadata.create_all(bind=engine)


ALEMBIC_INI = os.path.join(os.path.dirname(__file__), "..", "alembic.ini")
# First revision; databases built by create_all() alone are stamped at it
BASE_REVISION = "5e2c1a9b7d40"


def alembic_config(database_url: str, ini_path: str = ALEMBIC_INI):
    if not os.path.exists(ini_path):
        return None
    cfg = Config(ini_path)
    cfg.set_main_option("script_location",
                        os.path.join(os.path.dirname(os.path.abspath(ini_path)), "alembic"))
    cfg.set_main_option("sqlalchemy.url", database_url)
    return cfg


def upgrade_schema(bind, database_url: str, ini_path: str = ALEMBIC_INI) -> bool:
    """Upgrade the database to the newest revision. False if there is no alembic.ini."""
    cfg = alembic_config(database_url, ini_path)
    if cfg is None:
        logger.info("No alembic.ini at %s, keeping the create_all schema", ini_path)
        return False

    tables = inspect(bind).get_table_names()
    if "orders" in tables and "alembic_version" not in tables:
        logger.info("Unversioned database, stamping %s", BASE_REVISION)
        command.stamp(cfg, BASE_REVISION)

    command.upgrade(cfg, "head")
    logger.info("Database schema at head")
    return True


app = FastAPI(
    title=f"{settings.SHOP_NAME} Orders",
    description="Custom picture framing: pricing, completion estimates and order intake",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(estimates.router, prefix="/api")
app.include_router(materials.router, prefix="/api")
app.include_router(orders.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "frameshop"}


@app.on_event("startup")
def auto_migrate():
    try:
        upgrade_schema(engine, settings.DATABASE_URL)
    except Exception:
        # The app still serves on the create_all schema
        logger.exception("Alembic upgrade failed")
