# pawmart/api/routes.py
from fastapi import APIRouter, Body, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse
from pymongo.database import Database
from typing import Any, Dict, Optional
from .. import crud, schemas
from ..db import get_db
from ..utils import logger

router = APIRouter()

@router.get("/", response_class=PlainTextResponse)
def banner():
    return "PawMart server is running"

# listings

@router.get("/listings")
def listings(
    limit: Optional[str] = Query(None),
    category: Optional[str] = Query(None),
    email: Optional[str] = Query(None),
    db: Database = Depends(get_db)
):
    try:
        return crud.list_listings(db, limit=limit, category=category, email=email)
    except Exception as e:
        logger.exception("Listing query failed: %s", e)
        raise HTTPException(status_code=500, detail="Failed to fetch listings")


@router.get("/listings/{listing_id}")
def get_listing(listing_id: str, db: Database = Depends(get_db)):
    try:
        obj = crud.get_listing(db, listing_id)
    except Exception as e:
        logger.exception("Fetching listing %s failed: %s", listing_id, e)
        raise HTTPException(status_code=500, detail="Failed to fetch listing")
    if not obj:
        raise HTTPException(status_code=404, detail="Listing not found")
    return obj


@router.post("/listings", response_model=schemas.InsertAck)
def create_listing(payload: Optional[Dict[str, Any]] = Body(None), db: Database = Depends(get_db)):
    try:
        return crud.create_listing(db, payload or {})
    except Exception as e:
        logger.exception("Creating listing failed: %s", e)
        raise HTTPException(status_code=500, detail="Failed to create listing")


@router.put("/listings/{listing_id}", response_model=schemas.UpdateAck)
def update_listing(listing_id: str, payload: Optional[Dict[str, Any]] = Body(None),
                   db: Database = Depends(get_db)):
    try:
        return crud.update_listing(db, listing_id, updates=payload or {})
    except Exception as e:
        logger.exception("Updating listing %s failed: %s", listing_id, e)
        raise HTTPException(status_code=500, detail="Failed to update listing")


@router.delete("/listings/{listing_id}", response_model=schemas.DeleteAck)
def delete_listing(listing_id: str, db: Database = Depends(get_db)):
    try:
        return crud.delete_listing(db, listing_id)
    except Exception as e:
        logger.exception("Deleting listing %s failed: %s", listing_id, e)
        raise HTTPException(status_code=500, detail="Failed to delete listing")

# orders

@router.get("/orders")
def orders(email: Optional[str] = Query(None), db: Database = Depends(get_db)):
    try:
        return crud.list_orders(db, email=email)
    except Exception as e:
        logger.exception("Order query failed: %s", e)
        raise HTTPException(status_code=500, detail="Failed to fetch orders")


@router.post("/orders", response_model=schemas.InsertAck)
def create_order(payload: Optional[Dict[str, Any]] = Body(None), db: Database = Depends(get_db)):
    try:
        return crud.create_order(db, payload or {})
    except Exception as e:
        logger.exception("Creating order failed: %s", e)
        raise HTTPException(status_code=500, detail="Failed to create order")


@router.get("/orders/{order_id}")
def get_order(order_id: str, db: Database = Depends(get_db)):
    try:
        obj = crud.get_order(db, order_id)
    except Exception as e:
        logger.exception("Fetching order %s failed: %s", order_id, e)
        raise HTTPException(status_code=500, detail="Failed to fetch order")
    if not obj:
        raise HTTPException(status_code=404, detail="Order not found")
    return obj


@router.delete("/orders/{order_id}", response_model=schemas.DeleteAck)
def delete_order(order_id: str, db: Database = Depends(get_db)):
    try:
        return crud.delete_order(db, order_id)
    except Exception as e:
        logger.exception("Deleting order %s failed: %s", order_id, e)
        raise HTTPException(status_code=500, detail="Failed to delete order")
