# pawmart/utils.py
"""Shared utilities: logger factory and a retry decorator for startup calls."""
import os
import logging
import time
from functools import wraps
from dotenv import load_dotenv

load_dotenv()

def get_logger(name=__name__):
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        format="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        level=getattr(logging, level, logging.INFO)
    )
    return logging.getLogger(name)

logger = get_logger("pawmart")

def retry(exceptions, attempts_env="DB_PING_RETRIES", default_attempts=3, delay=1, backoff=2):
    """Call the wrapped function until it stops raising `exceptions`.

    The attempt count is read from `attempts_env` on every call, so it can be
    changed without re-importing. The last failure is re-raised.
    """
    def deco_retry(f):
        @wraps(f)
        def f_retry(*args, **kwargs):
            attempts = max(int(os.getenv(attempts_env, default_attempts)), 1)
            wait = delay
            for attempt in range(1, attempts + 1):
                try:
                    return f(*args, **kwargs)
                except exceptions as e:
                    if attempt == attempts:
                        raise
                    logger.warning("%s attempt %d/%d failed: %s, retrying in %s sec",
                                   f.__name__, attempt, attempts, e, wait)
                    time.sleep(wait)
                    wait *= backoff
        return f_retry
    return deco_retry
