"""
Startup check of the collections used by the backend.
Reports, per collection, whether it exists and how many documents it holds.
Nothing is created: collections appear on first insert.
"""

import logging
from pymongo.errors import PyMongoError

from easysolutions.db.mongo import CONTACT_COLLECTION, SERVICE_COLLECTION, PROJECT_COLLECTION

# Set up logger
logger = logging.getLogger(__name__)

REQUIRED_COLLECTIONS = [
    {
        "name": CONTACT_COLLECTION,
        "description": "Stores contact form submissions"
    },
    {
        "name": SERVICE_COLLECTION,
        "description": "Stores service listings"
    },
    {
        "name": PROJECT_COLLECTION,
        "description": "Stores project listings (read-only for this backend)"
    }
]


async def verify_database_setup(db):
    """
    Verify that all collections the handlers use are reachable.

    Args:
        db: Motor database handle

    Returns:
        dict: Verification results with details about each collection
    """
    logger.info("🔍 Verifying database setup...")

    verification_results = {
        "database_name": db.name,
        "collections": {},
        "overall_status": "unknown"
    }

    try:
        existing = await db.list_collection_names()
    except PyMongoError as e:
        logger.error(f"❌ Error during database verification: {str(e)}")
        verification_results["overall_status"] = "❌ ERROR"
        verification_results["error"] = str(e)
        return verification_results

    all_good = True
    for collection_config in REQUIRED_COLLECTIONS:
        collection_name = collection_config["name"]

        if collection_name not in existing:
            # Not fatal: the first insert creates it
            verification_results["collections"][collection_name] = {
                "exists": False,
                "status": "⚠️ MISSING"
            }
            logger.warning(f"⚠️ {collection_name}: collection does not exist yet")
            all_good = False
            continue

        try:
            doc_count = await db[collection_name].count_documents({})
            verification_results["collections"][collection_name] = {
                "exists": True,
                "document_count": doc_count,
                "status": "✅ OK"
            }
            logger.info(f"✅ {collection_name}: {doc_count} documents")
        except PyMongoError as e:
            verification_results["collections"][collection_name] = {
                "exists": "unknown",
                "error": str(e),
                "status": "⚠️ ERROR"
            }
            logger.error(f"⚠️ {collection_name}: Error during verification - {str(e)}")
            all_good = False

    verification_results["overall_status"] = "✅ PASS" if all_good else "❌ FAIL"
    return verification_results
