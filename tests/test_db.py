# tests/test_db.py
import pytest
from pymongo.errors import PyMongoError, ServerSelectionTimeoutError
from pawmart import db as store, utils


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    monkeypatch.setattr(utils.time, "sleep", lambda seconds: None)

def _flaky(failures, exc=ServerSelectionTimeoutError):
    calls = []

    @utils.retry(PyMongoError)
    def ping():
        calls.append(1)
        if len(calls) <= failures:
            raise exc("no servers")
        return "ok"
    return ping, calls

def test_retry_recovers_after_transient_failures():
    ping, calls = _flaky(2)
    assert ping() == "ok"
    assert len(calls) == 3

def test_retry_reraises_after_configured_attempts(monkeypatch):
    monkeypatch.setenv("DB_PING_RETRIES", "2")
    ping, calls = _flaky(5)
    with pytest.raises(ServerSelectionTimeoutError):
        ping()
    assert len(calls) == 2

def test_retry_ignores_unrelated_errors():
    ping, calls = _flaky(1, exc=ValueError)
    with pytest.raises(ValueError):
        ping()
    assert len(calls) == 1

def test_client_fails_fast_on_server_selection():
    assert store.client.options.server_selection_timeout <= 5
