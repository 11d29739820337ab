import hashlib
import re
import unicodedata
from datetime import date, datetime
from typing import Any, Optional, Union

from bson import ObjectId
from fastapi.responses import JSONResponse
from pymongo.database import Database

# Listings never ship the photo binary, it has its own endpoint
WITHOUT_PHOTO = {"photo": 0}


def serialize_doc(doc: Optional[dict]) -> Optional[dict]:
    if not doc:
        return doc
    d = doc.copy()
    if "_id" in d:
        d["id"] = str(d.pop("_id"))
    for k, v in list(d.items()):
        if isinstance(v, ObjectId):
            d[k] = str(v)
        elif isinstance(v, (datetime, date)):
            d[k] = v.isoformat()
        elif isinstance(v, dict):
            d[k] = serialize_doc(v)
        elif isinstance(v, list):
            d[k] = [serialize_doc(i) if isinstance(i, dict) else i for i in v]
    return d


def slugify(name: str, max_len: int = 80) -> str:
    norm = unicodedata.normalize("NFKD", (name or "").strip())
    chars = []
    for ch in norm:
        if unicodedata.category(ch) == "Mn":
            continue
        chars.append(ch if ord(ch) < 128 else "-")
    s = "".join(chars).lower()
    s = re.sub(r"[^a-z0-9]+", "-", s)
    s = re.sub(r"-{2,}", "-", s).strip("-")
    s = s[:max_len].rstrip("-")
    if not s and name:
        # names with no ascii letters or digits still need a routable slug
        s = hashlib.sha1(name.strip().encode("utf-8")).hexdigest()[:10]
    return s


def as_object_id(value: Any) -> Union[ObjectId, Any]:
    """ObjectId for valid hex ids, the raw value otherwise."""
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return value


def populate_category(database: Database, doc: dict) -> dict:
    """Replace the category id on a product document with the category itself."""
    category_id = doc.get("category")
    category = None
    if category_id is not None:
        category = database["category"].find_one({"_id": as_object_id(category_id)})
    doc = dict(doc)
    doc["category"] = serialize_doc(category)
    return doc


def failure(message: str, error: Exception, status_code: int = 500) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message, "error": str(error)},
    )
