import logging
from datetime import datetime, timezone

from bson import ObjectId
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pymongo import ReturnDocument
from pymongo.database import Database

from auth import is_admin, require_sign_in
from database import get_documents, get_db
from helpers import as_object_id, failure, serialize_doc
from schemas import OrderStatusRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/auth", tags=["order"])


def _with_buyer(database: Database, order: dict) -> dict:
    buyer = database["user"].find_one({"_id": as_object_id(order.get("buyer"))}, {"name": 1})
    out = serialize_doc(order)
    out["buyer"] = serialize_doc(buyer) if buyer else {"id": order.get("buyer")}
    return out


@router.get("/orders")
def user_orders(user: dict = Depends(require_sign_in), database: Database = Depends(get_db)):
    try:
        docs = get_documents(database, "order", {"buyer": str(user["_id"])}, newest_first=True)
        return [_with_buyer(database, d) for d in docs]
    except Exception as e:
        logger.exception(f"Error while getting orders for user {user['_id']}")
        return failure("Error While Getting Orders", e)


@router.get("/all-orders")
def all_orders(admin: dict = Depends(is_admin), database: Database = Depends(get_db)):
    try:
        docs = get_documents(database, "order", newest_first=True)
        return [_with_buyer(database, d) for d in docs]
    except Exception as e:
        logger.exception("Error while getting all orders")
        return failure("Error While Getting Orders", e)


@router.put("/order-status/{order_id}")
def order_status(
    order_id: str,
    payload: OrderStatusRequest,
    admin: dict = Depends(is_admin),
    database: Database = Depends(get_db),
):
    try:
        order = database["order"].find_one_and_update(
            {"_id": ObjectId(order_id)},
            {"$set": {"status": payload.status, "updated_at": datetime.now(timezone.utc)}},
            return_document=ReturnDocument.AFTER,
        )
        if not order:
            return JSONResponse(status_code=404, content={"success": False, "message": "Order not found"})
        logger.info(f"order {order_id} moved to {payload.status}")
        return _with_buyer(database, order)
    except Exception as e:
        logger.exception(f"Error while updating order {order_id}")
        return failure("Error While Updating Order", e)
