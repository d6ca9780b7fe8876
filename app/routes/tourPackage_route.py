from fastapi import APIRouter, Body, Depends, Request
from app.database.connection import PACKAGE_COLLECTION, MongoConnection, get_connection
from app.models.tourPackage import PACKAGE_REQUIRED_FIELDS, TourPackage, TourPackageUpdate
from app.utils.crud_utils import (
    check_required_fields, create_record, delete_record, get_record, list_records,
    parse_object_id, strip_protected, update_record, validate_payload,
)
from app.utils.query_builder import build_package_query, build_pagination
from app.utils.responses import ApiError, reshape_document
import logging

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("")
async def list_packages(request: Request, mongo: MongoConnection = Depends(get_connection)):
    """List tour packages with filtering, search, sorting and pagination"""
    try:
        query = build_package_query(request.query_params)
        db = await mongo.get_database()
        packages, total = await list_records(db[PACKAGE_COLLECTION], query)

        logger.info(f"Fetched {len(packages)} of {total} tour packages (page {query.page})")
        return {
            "success": True,
            "data": packages,
            "pagination": build_pagination(query, total),
        }

    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error fetching tour packages: {str(e)}")
        raise ApiError(500, "Failed to fetch tour packages")


@router.post("", status_code=201)
async def create_package(body: dict = Body(...), mongo: MongoConnection = Depends(get_connection)):
    """Create a tour package; rating, reviewCount and featured start at their defaults"""
    try:
        check_required_fields(body, PACKAGE_REQUIRED_FIELDS)
        record = validate_payload(TourPackage, body)

        db = await mongo.get_database()
        package = await create_record(
            db[PACKAGE_COLLECTION],
            record,
            duplicate_message="A tour package with these details already exists",
        )
        return {
            "success": True,
            "data": package,
            "message": "Package created successfully",
        }

    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error creating package: {str(e)}")
        raise ApiError(500, "Failed to create package")


@router.get("/{package_id}")
async def get_package(package_id: str, mongo: MongoConnection = Depends(get_connection)):
    try:
        oid = parse_object_id(package_id, "package")
        db = await mongo.get_database()
        package = await get_record(db[PACKAGE_COLLECTION], {"_id": oid}, "Tour package not found")
        return {"success": True, "data": reshape_document(package)}

    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error fetching tour package ID {package_id}: {str(e)}")
        raise ApiError(500, "Failed to fetch tour package")


@router.put("/{package_id}")
async def update_package(
    package_id: str,
    body: dict = Body(...),
    mongo: MongoConnection = Depends(get_connection),
):
    try:
        oid = parse_object_id(package_id, "package")
        changes = validate_payload(TourPackageUpdate, strip_protected(body), partial=True)

        db = await mongo.get_database()
        package = await update_record(db[PACKAGE_COLLECTION], {"_id": oid}, changes, "Tour package not found")

        logger.info(f"Updated tour package ID {package_id}")
        return {
            "success": True,
            "data": package,
            "message": "Tour package updated successfully",
        }

    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error updating tour package ID {package_id}: {str(e)}")
        raise ApiError(500, "Failed to update tour package")


@router.delete("/{package_id}")
async def delete_package(package_id: str, mongo: MongoConnection = Depends(get_connection)):
    try:
        oid = parse_object_id(package_id, "package")
        db = await mongo.get_database()
        await delete_record(db[PACKAGE_COLLECTION], {"_id": oid}, "Tour package not found")
        return {"success": True, "message": "Tour package deleted successfully"}

    except ApiError:
        raise
    except Exception as e:
        logger.error(f"Error deleting tour package ID {package_id}: {str(e)}")
        raise ApiError(500, "Failed to delete tour package")
