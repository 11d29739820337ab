"""
Bearer-token checks.

Tokens are issued elsewhere; here a token is valid when a session row holds
it and the session's user still exists.
"""
import logging
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId
from fastapi import APIRouter, Depends, Header, HTTPException
from pymongo.database import Database

from database import get_db

logger = logging.getLogger(__name__)


def _token_from_header(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    if authorization.lower().startswith("bearer "):
        return authorization[7:].strip() or None
    return authorization.strip() or None


def get_user_from_token(database: Database, token: str) -> Optional[dict]:
    sess = database["session"].find_one({"token": token})
    if not sess:
        return None
    try:
        return database["user"].find_one({"_id": ObjectId(sess["user_id"])})
    except InvalidId:
        logger.warning(f"Session {sess.get('_id')} points at malformed user id {sess.get('user_id')!r}")
        return None


def require_sign_in(
    authorization: Optional[str] = Header(None),
    database: Database = Depends(get_db),
) -> dict:
    token = _token_from_header(authorization)
    user = get_user_from_token(database, token) if token else None
    if not user:
        raise HTTPException(status_code=401, detail="Unauthorized access")
    return user


def is_admin(user: dict = Depends(require_sign_in)) -> dict:
    if user.get("role") != "admin":
        raise HTTPException(status_code=403, detail="Admin access required")
    return user


router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.get("/user-auth")
def user_auth(user: dict = Depends(require_sign_in)):
    return {"ok": True}


@router.get("/admin-auth")
def admin_auth(user: dict = Depends(is_admin)):
    return {"ok": True}

