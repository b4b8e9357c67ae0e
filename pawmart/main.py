# pawmart/main.py
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from pawmart.api.routes import router as api_router
from pawmart.db import DB_NAME, client, get_db, ping_store
from pawmart.errors import register_error_handlers
from pawmart.seed import seed_listings
from pawmart.utils import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    # a store outage at startup is logged; routes keep serving and report 500s
    try:
        await run_in_threadpool(ping_store)
        logger.info("Connected to MongoDB database: %s", DB_NAME)
        await run_in_threadpool(seed_listings, get_db())
    except Exception as e:
        logger.exception("Mongo connection error: %s", e)
    yield
    client.close()


app = FastAPI(title="PawMart", lifespan=lifespan)

# reflect any origin so credentialed requests are accepted
app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=".*",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)
app.include_router(api_router)


def run():
    import uvicorn

    port = int(os.getenv("PORT", "5000"))
    logger.info("PawMart server is running on port %s", port)
    uvicorn.run("pawmart.main:app", host=os.getenv("HOST", "0.0.0.0"), port=port)


if __name__ == "__main__":
    run()
