import motor.motor_asyncio
import logging
from fastapi import Request
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from easysolutions.core.config import Settings

# Set up logger
logger = logging.getLogger(__name__)

# Collection names inside the contactForm database
CONTACT_COLLECTION = "senderInfo"
SERVICE_COLLECTION = "service"
PROJECT_COLLECTION = "project"


def mask_uri(uri: str) -> str:
    """Mask the password in a connection string for logging"""
    if '@' not in uri or '://' not in uri:
        return uri
    credentials_part = uri.split('@')[0]
    user_pass = credentials_part.split('://')[-1]
    if ':' not in user_pass:
        return uri
    user, password = user_pass.split(':', 1)
    return uri.replace(user_pass, f"{user}:{'*' * len(password)}", 1)


def connect_to_mongo(settings: Settings) -> motor.motor_asyncio.AsyncIOMotorClient:
    """
    Create the shared Motor client. No I/O happens until the first operation,
    so this never fails because the cluster is unreachable.
    """
    uri = settings.effective_mongo_uri
    logger.info(f"MongoDB URI configured: {mask_uri(uri)}")
    return motor.motor_asyncio.AsyncIOMotorClient(
        uri,
        server_api=ServerApi("1", strict=True, deprecation_errors=True),
        serverSelectionTimeoutMS=5000,
        connectTimeoutMS=10000
    )


async def ping(client) -> bool:
    """Round-trip to the server to confirm the connection works"""
    try:
        await client.admin.command("ping")
        logger.info("✅ Connected to MongoDB")
        return True
    except PyMongoError as e:
        logger.error(f"❌ MongoDB connection error: {str(e)}")
        return False


def get_db(request: Request):
    """Returns the database handle owned by the running application"""
    return request.app.state.db
