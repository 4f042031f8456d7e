#run it with python -m easysolutions (or uvicorn easysolutions.main:app --reload)
from contextlib import asynccontextmanager
import asyncio
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import logging

from easysolutions.api.api_router import api_router
from easysolutions.api.error_handlers import register_error_handlers
from easysolutions.core.config import get_settings
from easysolutions.core.mailer import Mailer
from easysolutions.db.mongo import connect_to_mongo, ping
from easysolutions.db.init_db import verify_database_setup

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO"):
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Own the MongoDB client and the mailer for the lifetime of the process"""
    settings = get_settings()
    setup_logging(settings.log_level)

    client = connect_to_mongo(settings)
    try:
        app.state.db = client[settings.db_name]

        # An unreachable cluster is logged; requests will fail individually
        if await ping(client):
            verification = await verify_database_setup(app.state.db)
            logger.info(f"Database verification status: {verification.get('overall_status')}")

        # Relay check runs in the background; startup does not wait on SMTP
        app.state.mailer = Mailer.from_settings(settings)
        app.state.mail_check = asyncio.create_task(app.state.mailer.verify())

        logger.info("━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━")
        logger.info("🚀 Email & MongoDB Backend Started")
        logger.info(f"📡 Server running on: http://localhost:{settings.port}")
        logger.info(f"📧 Email User: {settings.email_user or 'Not configured'}")
        logger.info(f"📬 Receiver: {settings.receiver_email or 'Not configured'}")
        logger.info("━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━")

        yield
    finally:
        client.close()
        logger.info("MongoDB connections closed successfully")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Easy Solutions Backend", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info(f"{request.method} {request.url.path}")
        return await call_next(request)

    app.include_router(api_router)
    register_error_handlers(app)
    return app


app = create_app()
