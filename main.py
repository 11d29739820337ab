import logging
import os

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.database import Database

import auth
import categories
import orders
import payments
import products
from database import get_db

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger("storefront")

app = FastAPI(title="Storefront API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router)
app.include_router(orders.router)
app.include_router(categories.router)
app.include_router(payments.router)
app.include_router(products.router)


@app.get("/")
def read_root():
    return {"message": "Storefront API is running"}


@app.get("/test")
def database_status(database: Database = Depends(get_db)):
    """Report on the database the routers are using."""
    response = {
        "backend": "Running",
        "database": "Connected",
        "database_url": "Set" if os.getenv("DATABASE_URL") else "Not Set",
        "database_name": database.name,
        "collections": [],
    }
    try:
        response["collections"] = sorted(database.list_collection_names())[:10]
        response["database"] = "Connected & Working"
    except Exception as e:
        logger.exception("Database diagnostic failed")
        response["database"] = f"Connected but Error: {str(e)[:50]}"
    return response


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    logger.info(f"Starting Storefront API on port {port}")
    uvicorn.run(app, host="0.0.0.0", port=port)
