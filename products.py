import logging
import re
from datetime import datetime, timezone
from typing import Optional, Tuple

from bson import ObjectId
from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse, Response
from pymongo import ReturnDocument
from pymongo.database import Database

from auth import is_admin
from database import NEWEST_FIRST, create_document, get_db
from forms import ProductFields, ProductFormError, parse_product_form
from helpers import WITHOUT_PHOTO, as_object_id, failure, populate_category, serialize_doc, slugify
from schemas import FilterRequest, Product

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/product", tags=["product"])

PAGE_SIZE = 20
PER_PAGE = 6
RELATED_LIMIT = 3


def _read_photo(photo: Optional[UploadFile]) -> Tuple[Optional[bytes], Optional[str]]:
    if photo is None or not photo.filename:
        return None, None
    return photo.file.read(), photo.content_type


def _product_document(fields: ProductFields) -> dict:
    product = Product(
        name=fields.name,
        slug=slugify(fields.name),
        description=fields.description,
        price=fields.price,
        quantity=fields.quantity,
        category=fields.category,
        shipping=fields.shipping,
        photo=fields.photo,
    )
    return product.model_dump(exclude_none=True)


def _public(database: Database, doc: dict) -> dict:
    return serialize_doc(populate_category(database, doc))


@router.post("/create-product")
def create_product(
    name: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    quantity: Optional[str] = Form(None),
    shipping: Optional[str] = Form(None),
    photo: Optional[UploadFile] = File(None),
    database: Database = Depends(get_db),
    admin: dict = Depends(is_admin),
):
    try:
        fields = parse_product_form(name, description, price, category, quantity, shipping, *_read_photo(photo))
    except ProductFormError as e:
        return JSONResponse(status_code=500, content={"error": e.message})

    try:
        new_id = create_document(database, "product", _product_document(fields))
        saved = database["product"].find_one({"_id": ObjectId(new_id)}, WITHOUT_PHOTO)
        return JSONResponse(
            status_code=201,
            content={"success": True, "message": "Product Created Successfully", "products": serialize_doc(saved)},
        )
    except Exception as e:
        logger.exception(f"Error while creating product {fields.name!r}")
        return failure("Error while creating product", e)


@router.get("/get-product")
def get_products(database: Database = Depends(get_db)):
    try:
        docs = database["product"].find({}, WITHOUT_PHOTO).sort(NEWEST_FIRST).limit(PAGE_SIZE)
        products = [_public(database, d) for d in docs]
        return {
            "success": True,
            "countTotal": len(products),
            "message": "All Products Fetched",
            "products": products,
        }
    except Exception as e:
        logger.exception("Error while getting products")
        return failure("Error while getting products", e)


@router.get("/get-product/{slug}")
def get_single_product(slug: str, database: Database = Depends(get_db)):
    try:
        doc = database["product"].find_one({"slug": slug}, WITHOUT_PHOTO)
        if not doc:
            return JSONResponse(status_code=404, content={"success": False, "message": "Product not found"})
        return {"success": True, "message": "Single Product Fetched", "product": _public(database, doc)}
    except Exception as e:
        logger.exception(f"Error while getting single product {slug!r}")
        return failure("Error while getting single product", e)


@router.get("/product-photo/{pid}")
def product_photo(pid: str, database: Database = Depends(get_db)):
    try:
        doc = database["product"].find_one({"_id": ObjectId(pid)}, {"photo": 1})
        photo = (doc or {}).get("photo") or {}
        if not photo.get("data"):
            return JSONResponse(status_code=404, content={"success": False, "message": "Photo not found"})
        return Response(content=bytes(photo["data"]), media_type=photo.get("content_type"), status_code=200)
    except Exception as e:
        logger.exception(f"Error while getting photo for product {pid}")
        return failure("Error while getting photo", e)


@router.delete("/delete-product/{pid}")
def delete_product(pid: str, database: Database = Depends(get_db), admin: dict = Depends(is_admin)):
    try:
        database["product"].delete_one({"_id": ObjectId(pid)})
        return {"success": True, "message": "Product Deleted Successfully"}
    except Exception as e:
        logger.exception(f"Error while deleting product {pid}")
        return failure("Error while deleting product", e)


@router.put("/update-product/{pid}")
def update_product(
    pid: str,
    name: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    quantity: Optional[str] = Form(None),
    shipping: Optional[str] = Form(None),
    photo: Optional[UploadFile] = File(None),
    database: Database = Depends(get_db),
    admin: dict = Depends(is_admin),
):
    try:
        fields = parse_product_form(name, description, price, category, quantity, shipping, *_read_photo(photo))
    except ProductFormError as e:
        return JSONResponse(status_code=500, content={"error": e.message})

    try:
        changes = _product_document(fields)
        changes["updated_at"] = datetime.now(timezone.utc)
        updated = database["product"].find_one_and_update(
            {"_id": ObjectId(pid)},
            {"$set": changes},
            projection=WITHOUT_PHOTO,
            return_document=ReturnDocument.AFTER,
        )
        if not updated:
            return JSONResponse(status_code=404, content={"success": False, "message": "Product not found"})
        return JSONResponse(
            status_code=201,
            content={"success": True, "message": "Product Updated Successfully", "products": serialize_doc(updated)},
        )
    except Exception as e:
        logger.exception(f"Error while updating product {pid}")
        return failure("Error while updating product", e)


@router.post("/product-filters")
def product_filters(payload: FilterRequest, database: Database = Depends(get_db)):
    try:
        args = {}
        if payload.checked:
            args["category"] = {"$in": payload.checked}
        if len(payload.radio) >= 2:
            args["price"] = {"$gte": payload.radio[0], "$lte": payload.radio[1]}
        docs = database["product"].find(args, WITHOUT_PHOTO).sort(NEWEST_FIRST)
        return {"success": True, "products": [serialize_doc(d) for d in docs]}
    except Exception as e:
        logger.exception("Error while filtering products")
        return failure("Error while filtering products", e)


@router.get("/product-count")
def product_count(database: Database = Depends(get_db)):
    try:
        total = database["product"].count_documents({})
        return {"success": True, "total": total}
    except Exception as e:
        logger.exception("Error in product count")
        return failure("Error in product count", e)


@router.get("/product-list")
@router.get("/product-list/{page}")
def product_list(page: int = 1, database: Database = Depends(get_db)):
    try:
        page = max(page, 1)
        docs = (
            database["product"]
            .find({}, WITHOUT_PHOTO)
            .sort(NEWEST_FIRST)
            .skip((page - 1) * PER_PAGE)
            .limit(PER_PAGE)
        )
        return {"success": True, "products": [serialize_doc(d) for d in docs]}
    except Exception as e:
        logger.exception(f"Error in per page control (page {page})")
        return failure("Error in per page control", e)


@router.get("/search/{keyword}")
def search_products(keyword: str, database: Database = Depends(get_db)):
    try:
        pattern = {"$regex": re.escape(keyword), "$options": "i"}
        docs = database["product"].find({"$or": [{"name": pattern}, {"description": pattern}]}, WITHOUT_PHOTO)
        return [serialize_doc(d) for d in docs]
    except Exception as e:
        logger.exception(f"Error In Search Product API for {keyword!r}")
        return failure("Error In Search Product API", e, status_code=400)


@router.get("/related-product/{pid}/{cid}")
def related_products(pid: str, cid: str, database: Database = Depends(get_db)):
    try:
        docs = (
            database["product"]
            .find({"category": cid, "_id": {"$ne": as_object_id(pid)}}, WITHOUT_PHOTO)
            .limit(RELATED_LIMIT)
        )
        return {"success": True, "products": [_public(database, d) for d in docs]}
    except Exception as e:
        logger.exception(f"Error while getting related product for {pid}")
        return failure("Error while getting related product", e, status_code=400)


@router.get("/product-category/{slug}")
def products_by_category(slug: str, database: Database = Depends(get_db)):
    try:
        category = database["category"].find_one({"slug": slug})
        products = []
        if category:
            docs = database["product"].find({"category": str(category["_id"])}, WITHOUT_PHOTO).sort(NEWEST_FIRST)
            products = [_public(database, d) for d in docs]
        return {"success": True, "category": serialize_doc(category), "products": products}
    except Exception as e:
        logger.exception(f"Error while getting products for category {slug!r}")
        return failure("Error while getting products", e, status_code=400)
