from fastapi import APIRouter, Body, Depends, Request
from app.database.connection import DESTINATION_COLLECTION, MongoConnection, get_connection
from app.models.destination import DESTINATION_REQUIRED_FIELDS, Destination, DestinationUpdate
from app.utils.crud_utils import (
    check_required_fields, create_record, get_record, list_records,
    parse_object_id, strip_protected, update_record, validate_payload,
)
from app.utils.query_builder import build_destination_query, build_pagination
from app.utils.responses import ApiError, reshape_document
import logging

logger = logging.getLogger(__name__)
router = APIRouter()


# get destinations with filtering, search and pagination
@router.get("")
async def list_destinations(request: Request, mongo: MongoConnection = Depends(get_connection)):
    try:
        query = build_destination_query(request.query_params)
        db = await mongo.get_database()
        destinations, total = await list_records(db[DESTINATION_COLLECTION], query)

        logger.info(f"Fetched {len(destinations)} of {total} destinations (page {query.page})")
        return {
            "success": True,
            "data": destinations,
            "pagination": build_pagination(query, total),
        }

    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error fetching destinations: {str(e)}")
        raise ApiError(500, "Failed to fetch destinations")


# add destination
@router.post("", status_code=201)
async def create_destination(body: dict = Body(...), mongo: MongoConnection = Depends(get_connection)):
    try:
        check_required_fields(body, DESTINATION_REQUIRED_FIELDS)
        record = validate_payload(Destination, body)

        db = await mongo.get_database()
        destination = await create_record(
            db[DESTINATION_COLLECTION],
            record,
            duplicate_message="A destination with these details already exists",
        )
        return {
            "success": True,
            "data": destination,
            "message": "Destination created successfully",
        }

    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error creating destination: {str(e)}")
        raise ApiError(500, "Failed to create destination")


# get destination by id
@router.get("/{destination_id}")
async def get_destination(destination_id: str, mongo: MongoConnection = Depends(get_connection)):
    try:
        oid = parse_object_id(destination_id, "destination")
        db = await mongo.get_database()
        destination = await get_record(db[DESTINATION_COLLECTION], {"_id": oid}, "Destination not found")
        return {"success": True, "data": reshape_document(destination)}

    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error fetching destination ID {destination_id}: {str(e)}")
        raise ApiError(500, "Failed to fetch destination")


# update destination by id
@router.put("/{destination_id}")
async def update_destination(
    destination_id: str,
    body: dict = Body(...),
    mongo: MongoConnection = Depends(get_connection),
):
    try:
        oid = parse_object_id(destination_id, "destination")
        changes = validate_payload(DestinationUpdate, strip_protected(body), partial=True)

        db = await mongo.get_database()
        destination = await update_record(
            db[DESTINATION_COLLECTION], {"_id": oid}, changes, "Destination not found"
        )
        logger.info(f"Updated destination ID {destination_id}")
        return {
            "success": True,
            "data": destination,
            "message": "Destination updated successfully",
        }

    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error updating destination ID {destination_id}: {str(e)}")
        raise ApiError(500, "Failed to update destination")


# delete destination (soft delete, hidden from listings)
@router.delete("/{destination_id}")
async def delete_destination(destination_id: str, mongo: MongoConnection = Depends(get_connection)):
    try:
        oid = parse_object_id(destination_id, "destination")
        db = await mongo.get_database()
        await update_record(db[DESTINATION_COLLECTION], {"_id": oid}, {"isActive": False}, "Destination not found")

        logger.info(f"Deactivated destination ID {destination_id}")
        return {"success": True, "message": "Destination deleted successfully"}

    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error deleting destination ID {destination_id}: {str(e)}")
        raise ApiError(500, "Failed to delete destination")
