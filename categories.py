import logging
from datetime import datetime, timezone

from bson import ObjectId
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pymongo import ReturnDocument
from pymongo.database import Database

from auth import is_admin
from database import create_document, get_db
from helpers import failure, serialize_doc, slugify
from schemas import Category, CategoryRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/category", tags=["category"])


@router.post("/create-category")
def create_category(payload: CategoryRequest, database: Database = Depends(get_db), admin: dict = Depends(is_admin)):
    if not payload.name:
        return JSONResponse(status_code=401, content={"message": "Name is required"})
    try:
        if database["category"].find_one({"name": payload.name}):
            return {"success": False, "message": "Category Already Exists"}
        new_id = create_document(database, "category", Category(name=payload.name, slug=slugify(payload.name)))
        category = database["category"].find_one({"_id": ObjectId(new_id)})
        return JSONResponse(
            status_code=201,
            content={"success": True, "message": "New Category Created", "category": serialize_doc(category)},
        )
    except Exception as e:
        logger.exception(f"Error in Category creation for {payload.name!r}")
        return failure("Error in Category", e)


@router.put("/update-category/{id}")
def update_category(
    id: str,
    payload: CategoryRequest,
    database: Database = Depends(get_db),
    admin: dict = Depends(is_admin),
):
    if not payload.name:
        return JSONResponse(status_code=401, content={"message": "Name is required"})
    try:
        category = database["category"].find_one_and_update(
            {"_id": ObjectId(id)},
            {"$set": {
                "name": payload.name,
                "slug": slugify(payload.name),
                "updated_at": datetime.now(timezone.utc),
            }},
            return_document=ReturnDocument.AFTER,
        )
        return {"success": True, "message": "Category Updated Successfully", "category": serialize_doc(category)}
    except Exception as e:
        logger.exception(f"Error while updating category {id}")
        return failure("Error while updating category", e)


@router.get("/get-category")
def list_categories(database: Database = Depends(get_db)):
    try:
        docs = database["category"].find({}).sort("name", 1)
        return {"success": True, "message": "All Categories List", "category": [serialize_doc(d) for d in docs]}
    except Exception as e:
        logger.exception("Error while getting all categories")
        return failure("Error while getting all categories", e)


@router.get("/single-category/{slug}")
def single_category(slug: str, database: Database = Depends(get_db)):
    try:
        category = database["category"].find_one({"slug": slug})
        return {"success": True, "message": "Get Single Category Successfully", "category": serialize_doc(category)}
    except Exception as e:
        logger.exception(f"Error While getting Single Category {slug!r}")
        return failure("Error While getting Single Category", e)


@router.delete("/delete-category/{id}")
def delete_category(id: str, database: Database = Depends(get_db), admin: dict = Depends(is_admin)):
    try:
        database["category"].delete_one({"_id": ObjectId(id)})
        return {"success": True, "message": "Category Deleted Successfully"}
    except Exception as e:
        logger.exception(f"Error while deleting category {id}")
        return failure("Error while deleting category", e)
