# pawmart/crud.py
"""Store operations for the `listings` and `orders` collections.

Every function takes the database handle explicitly and performs a single
round trip. Malformed identifiers raise `bson.errors.InvalidId`, which callers
treat like any other store failure.
"""
import re
from datetime import datetime, timezone
from bson import ObjectId
from pymongo import DESCENDING
from pymongo.database import Database
from typing import Dict, Any, List, Optional
from . import schemas

_LEADING_INT = re.compile(r"\s*([+-]?)(0[xX])?([0-9a-fA-F]*)")

def parse_limit(raw: Optional[str]) -> Optional[int]:
    """Read the leading integer of `raw` the way JavaScript's parseInt does.

    Decimal by default, hexadecimal after a `0x` prefix; only ASCII digits
    count. Returns None when there is no leading integer, e.g. "abc", "0x"
    or "".
    """
    if not raw:
        return None
    sign, hex_prefix, digits = _LEADING_INT.match(raw).groups()
    if hex_prefix:
        base = 16
    else:
        base = 10
        digits = re.match(r"[0-9]*", digits).group()
    if not digits:
        return None
    value = int(digits, base)
    return -value if sign == "-" else value

def build_filter(**fields: Optional[str]) -> Dict[str, str]:
    # empty or missing values impose no constraint
    return {k: v for k, v in fields.items() if v}

def serialize(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if doc is None:
        return None
    if isinstance(doc.get("_id"), ObjectId):
        doc["_id"] = str(doc["_id"])
    return doc

def _insert_ack(result) -> schemas.InsertAck:
    return schemas.InsertAck(acknowledged=result.acknowledged, inserted_id=str(result.inserted_id))

def _update_ack(result) -> schemas.UpdateAck:
    upserted = result.upserted_id
    return schemas.UpdateAck(
        acknowledged=result.acknowledged,
        matched_count=result.matched_count,
        modified_count=result.modified_count,
        upserted_count=0 if upserted is None else 1,
        upserted_id=None if upserted is None else str(upserted),
    )

def _delete_ack(result) -> schemas.DeleteAck:
    return schemas.DeleteAck(acknowledged=result.acknowledged, deleted_count=result.deleted_count)

def _stamped(payload: Dict[str, Any]) -> Dict[str, Any]:
    doc = dict(payload)
    doc["createdAt"] = datetime.now(timezone.utc)
    return doc

# listings

def list_listings(db: Database, limit: Optional[str] = None, category: Optional[str] = None,
                  email: Optional[str] = None) -> List[Dict[str, Any]]:
    cursor = db.listings.find(build_filter(category=category, email=email)).sort("_id", DESCENDING)
    parsed = parse_limit(limit)
    if parsed is not None:
        cursor = cursor.limit(parsed)
    return [serialize(d) for d in cursor]

def get_listing(db: Database, listing_id: str):
    return serialize(db.listings.find_one({"_id": ObjectId(listing_id)}))

def create_listing(db: Database, payload: Dict[str, Any]) -> schemas.InsertAck:
    return _insert_ack(db.listings.insert_one(_stamped(payload)))

def update_listing(db: Database, listing_id: str, updates: Dict[str, Any]) -> schemas.UpdateAck:
    result = db.listings.update_one({"_id": ObjectId(listing_id)}, {"$set": updates})
    return _update_ack(result)

def delete_listing(db: Database, listing_id: str) -> schemas.DeleteAck:
    return _delete_ack(db.listings.delete_one({"_id": ObjectId(listing_id)}))

def count_listings(db: Database) -> int:
    return db.listings.estimated_document_count()

# orders

def list_orders(db: Database, email: Optional[str] = None) -> List[Dict[str, Any]]:
    cursor = db.orders.find(build_filter(email=email)).sort("_id", DESCENDING)
    return [serialize(d) for d in cursor]

def get_order(db: Database, order_id: str):
    return serialize(db.orders.find_one({"_id": ObjectId(order_id)}))

def create_order(db: Database, payload: Dict[str, Any]) -> schemas.InsertAck:
    return _insert_ack(db.orders.insert_one(_stamped(payload)))

def delete_order(db: Database, order_id: str) -> schemas.DeleteAck:
    return _delete_ack(db.orders.delete_one({"_id": ObjectId(order_id)}))
