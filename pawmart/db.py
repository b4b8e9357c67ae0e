# pawmart/db.py
"""MongoDB client and database dependency.

A single `MongoClient` is created at import time and shared by every request;
the driver pools connections internally and is safe to use from the FastAPI
threadpool. `MongoClient` connects lazily, so importing this module never
touches the network.
"""
import os
from dotenv import load_dotenv
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi
from .utils import retry

load_dotenv()

MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
DB_NAME = os.getenv("DB_NAME", "pawmartDB")

client = MongoClient(
    MONGODB_URI,
    server_api=ServerApi("1", strict=True, deprecation_errors=True),
    maxPoolSize=int(os.getenv("DB_POOL_SIZE", 100)),
    serverSelectionTimeoutMS=int(os.getenv("DB_TIMEOUT_MS", 5000)),
    tz_aware=True,
)

def get_db() -> Database:
    return client[DB_NAME]

@retry(PyMongoError, attempts_env="DB_PING_RETRIES", default_attempts=3)
def ping_store():
    client.admin.command("ping")
