import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from finance_dashboard.api import finances, health
from finance_dashboard.core.config import CORS_ORIGINS, HOST, LOG_LEVEL, PORT
from finance_dashboard.core.errors import register_exception_handlers
from finance_dashboard.database import create_db_and_tables
from finance_dashboard.utils.upload_helpers import get_upload_dir

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

STATIC_DIR = os.path.join(os.path.dirname(__file__), "static")

@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db_and_tables()
    upload_dir = get_upload_dir()
    logger.info("Uploads stored temporarily in %s", upload_dir)
    yield

app = FastAPI(title="Financial Dashboard", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(health.router)
app.include_router(finances.router)

# Dashboard UI; mounted last so the API routes take precedence
app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="dashboard")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("finance_dashboard.main:app", host=HOST, port=PORT)
