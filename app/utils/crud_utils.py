import asyncio, logging, re
from datetime import datetime, timezone
from typing import Iterable, Optional, Type
from bson import ObjectId
from pydantic import BaseModel, ValidationError
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError
from app.utils.query_builder import ListQuery
from app.utils.responses import ApiError, reshape_document, validation_details

logger = logging.getLogger(__name__)

OBJECT_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")

# fields a client may never write directly
PROTECTED_FIELDS = ("id", "_id", "createdAt", "updatedAt")


def utc_now() -> datetime:
    # BSON dates keep millisecond precision
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def is_object_id(value: str) -> bool:
    return bool(OBJECT_ID_PATTERN.match(value or ""))


def parse_object_id(value: str, label: str) -> ObjectId:
    if not is_object_id(value):
        raise ApiError(400, f"Invalid {label} ID format")
    return ObjectId(value)


# ****************************************************
#  Write-path validation
# ****************************************************

def is_missing(value) -> bool:
    return value is None or (isinstance(value, (str, list, dict)) and len(value) == 0)


def check_required_fields(body: dict, required_fields: Iterable[str]):
    for field in required_fields:
        if is_missing(body.get(field)):
            raise ApiError(400, f"Missing required field: {field}")


def validate_payload(model: Type[BaseModel], body: dict, partial: bool = False) -> dict:
    """Validate `body` against `model` and return the storable fields."""
    try:
        record = model.model_validate(body)
    except ValidationError as e:
        raise ApiError(400, "Validation failed", details=validation_details(e))
    return record.model_dump(exclude_unset=partial)


def strip_protected(body: dict, extra: Iterable[str] = ()) -> dict:
    blocked = set(PROTECTED_FIELDS) | set(extra)
    return {key: value for key, value in body.items() if key not in blocked}


# ****************************************************
#  CRUD Utils
# ****************************************************

async def list_records(collection, query: ListQuery, date_fields: Iterable[str] = ()):
    """Fetch one page and the total match count concurrently."""
    mongo_filter = query.mongo_filter()
    cursor = collection.find(mongo_filter).sort(query.mongo_sort()).skip(query.skip).limit(query.limit)

    documents, total = await asyncio.gather(
        cursor.to_list(length=None),
        collection.count_documents(mongo_filter),
    )
    return [reshape_document(doc, date_fields) for doc in documents], total


async def create_record(collection, record: dict, duplicate_message: str, date_fields: Iterable[str] = ()) -> dict:
    now = utc_now()
    document = {**record, "createdAt": now, "updatedAt": now}
    try:
        await collection.insert_one(document)
    except DuplicateKeyError as e:
        logger.warning(f"Duplicate key on insert into {collection.name}: {str(e)}")
        raise ApiError(409, duplicate_message)

    logger.info(f"Created document ID: {document['_id']} in {collection.name}")
    return reshape_document(document, date_fields)


async def get_record(collection, query: dict, not_found: str) -> dict:
    document = await collection.find_one(query)
    if document is None:
        raise ApiError(404, not_found)
    return document


async def update_record(
    collection,
    query: dict,
    changes: dict,
    not_found: str,
    duplicate_message: Optional[str] = None,
    date_fields: Iterable[str] = (),
) -> dict:
    update = {"$set": {**changes, "updatedAt": utc_now()}}
    try:
        document = await collection.find_one_and_update(query, update, return_document=ReturnDocument.AFTER)
    except DuplicateKeyError as e:
        if duplicate_message is None:
            raise
        logger.warning(f"Duplicate key on update in {collection.name}: {str(e)}")
        raise ApiError(409, duplicate_message)

    if document is None:
        raise ApiError(404, not_found)
    return reshape_document(document, date_fields)


async def delete_record(collection, query: dict, not_found: str):
    document = await collection.find_one_and_delete(query)
    if document is None:
        raise ApiError(404, not_found)
    logger.info(f"Deleted document ID: {document['_id']} from {collection.name}")
    return document


async def increment_counter(collection, query: dict, field: str) -> Optional[dict]:
    return await collection.find_one_and_update(
        query, {"$inc": {field: 1}}, return_document=ReturnDocument.AFTER
    )
