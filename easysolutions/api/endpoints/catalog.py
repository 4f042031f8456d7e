"""
Service and project listing routes.
Documents are passed through as stored; only ObjectId and datetime values are
converted for JSON.
"""

from fastapi import APIRouter, Body, Depends, status
from typing import Dict, Any, List
from bson import ObjectId
from pymongo.errors import PyMongoError
from datetime import datetime
import logging

from easysolutions.core.errors import ApiError, InvalidIdentifier, NotFound
from easysolutions.db.mongo import PROJECT_COLLECTION, SERVICE_COLLECTION, get_db
from easysolutions.models.common import InsertAck

router = APIRouter()
logger = logging.getLogger(__name__)


def serialize_document(data):
    """Convert ObjectId and datetime values to strings for JSON serialization"""
    if isinstance(data, dict):
        return {key: serialize_document(value) for key, value in data.items()}
    elif isinstance(data, list):
        return [serialize_document(item) for item in data]
    elif isinstance(data, ObjectId):
        return str(data)
    elif isinstance(data, datetime):
        return data.isoformat()
    else:
        return data


async def list_documents(db, collection_name: str) -> List[Dict[str, Any]]:
    documents = await db[collection_name].find().to_list(length=None)
    return serialize_document(documents)


async def find_document(db, collection_name: str, document_id: str, label: str) -> Dict[str, Any]:
    """
    Look up a single document by its ObjectId.

    Args:
        db: Motor database handle
        collection_name: Collection to search
        document_id: Raw identifier from the path
        label: Human-readable kind used in error messages ("service", "project")

    Returns:
        dict: The stored document
    """
    if not ObjectId.is_valid(document_id):
        raise InvalidIdentifier(f"Invalid {label} ID")

    try:
        document = await db[collection_name].find_one({"_id": ObjectId(document_id)})
    except PyMongoError as e:
        logger.error(f"Error fetching {label} {document_id}: {str(e)}")
        raise ApiError(f"Failed to fetch {label}")

    if not document:
        raise NotFound(f"{label.capitalize()} not found")

    return serialize_document(document)


# Project related APIs

@router.get("/projects", status_code=status.HTTP_200_OK)
async def get_projects(db=Depends(get_db)):
    return await list_documents(db, PROJECT_COLLECTION)


@router.get("/project/{project_id}", status_code=status.HTTP_200_OK)
async def get_project(project_id: str, db=Depends(get_db)):
    return await find_document(db, PROJECT_COLLECTION, project_id, "project")


# Service related APIs

@router.get("/service", status_code=status.HTTP_200_OK)
async def get_services(db=Depends(get_db)):
    return await list_documents(db, SERVICE_COLLECTION)


@router.post("/service", status_code=status.HTTP_200_OK, response_model=InsertAck)
async def create_service(new_service: Dict[str, Any] = Body(...), db=Depends(get_db)):
    """Insert the request body as-is into the service collection."""
    result = await db[SERVICE_COLLECTION].insert_one(new_service)
    logger.info(f"Created service: {result.inserted_id}")
    return {
        "acknowledged": result.acknowledged,
        "insertedId": str(result.inserted_id),
    }


@router.get("/service/{service_id}", status_code=status.HTTP_200_OK)
async def get_service(service_id: str, db=Depends(get_db)):
    return await find_document(db, SERVICE_COLLECTION, service_id, "service")
