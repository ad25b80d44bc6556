# backend/main.py
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from database import init_db
from errors import register_error_handlers
from log_setup import setup_logging
from routers import all_routers

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(log_level=settings.log_level, json_output=settings.json_logs)
    # Cria as tabelas
    init_db()
    logger.info("app_starting", database=settings.database_url.split("://")[0])
    yield
    logger.info("app_stopping")


app = FastAPI(title="Finanças Pro API", lifespan=lifespan)

register_error_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for router in all_routers:
    app.include_router(router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok"}
