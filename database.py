"""
Database Helper Functions

MongoDB helpers shared by the API routers. Connection settings come from
DATABASE_URL and DATABASE_NAME (a .env file is honoured).
"""
import os
from datetime import datetime, timezone
from typing import Optional, Union

from dotenv import load_dotenv
from fastapi import HTTPException
from pydantic import BaseModel
from pymongo import MongoClient
from pymongo.database import Database

load_dotenv()

# created_at is stored at millisecond precision, _id breaks ties
NEWEST_FIRST = [("created_at", -1), ("_id", -1)]

_client = None
db = None

database_url = os.getenv("DATABASE_URL")
database_name = os.getenv("DATABASE_NAME")

if database_url and database_name:
    _client = MongoClient(database_url)
    db = _client[database_name]


def get_db() -> Database:
    """FastAPI dependency returning the configured database."""
    if db is None:
        raise HTTPException(status_code=500, detail="Database not configured")
    return db


def create_document(database: Database, collection_name: str, data: Union[BaseModel, dict]) -> str:
    """Insert a single document with timestamps, return its id"""
    if isinstance(data, BaseModel):
        data_dict = data.model_dump()
    else:
        data_dict = data.copy()

    now = datetime.now(timezone.utc)
    data_dict["created_at"] = now
    data_dict["updated_at"] = now

    result = database[collection_name].insert_one(data_dict)
    return str(result.inserted_id)


def get_documents(
    database: Database,
    collection_name: str,
    filter_dict: Optional[dict] = None,
    limit: Optional[int] = None,
    newest_first: bool = False,
) -> list:
    """Get documents from collection"""
    cursor = database[collection_name].find(filter_dict or {})
    if newest_first:
        cursor = cursor.sort(NEWEST_FIRST)
    if limit:
        cursor = cursor.limit(limit)
    return list(cursor)
