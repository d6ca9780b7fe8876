from datetime import date, datetime, timezone
from fastapi import HTTPException
from pydantic import ValidationError
from typing import Iterable, List, Optional

INTERNAL_FIELDS = ("_id", "__v", "score")


class ApiError(HTTPException):
    """HTTP error rendered as {"success": false, "error": ..., "details": ...}"""

    def __init__(self, status_code: int, message: str, details: Optional[List[str]] = None):
        super().__init__(status_code=status_code, detail=message)
        self.message = message
        self.details = details


def error_body(message: str, details: Optional[List[str]] = None) -> dict:
    body = {"success": False, "error": message}
    if details:
        body["details"] = details
    return body


def validation_details(error: ValidationError) -> List[str]:
    details = []
    for err in error.errors():
        message = err["msg"].removeprefix("Value error, ")
        location = ".".join(str(part) for part in err["loc"])
        details.append(f"{location}: {message}" if location else message)
    return details


def format_timestamp(value: datetime) -> str:
    # stored timestamps are UTC, naive ones come back from the driver
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def reshape_document(document: dict, date_fields: Iterable[str] = ()) -> dict:
    """
    Convert a stored document into its public shape.

    `_id` becomes a string `id`, storage-internal fields are dropped,
    `date_fields` are cut down to YYYY-MM-DD and every other timestamp is
    rendered as a full ISO-8601 UTC string.
    """
    data = {"id": str(document["_id"])}
    for key, value in document.items():
        if key in INTERNAL_FIELDS:
            continue
        if isinstance(value, datetime):
            value = format_timestamp(value)
        data[key] = value

    for field in date_fields:
        value = document.get(field)
        if isinstance(value, datetime):
            data[field] = format_timestamp(value)[:10]
        elif isinstance(value, date):
            data[field] = value.isoformat()
        elif isinstance(value, str):
            data[field] = value[:10]
    return data
