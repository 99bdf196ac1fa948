import httpx
import pytest
from fastapi.testclient import TestClient

from app.core.store_client import StoreClient
from app.main import app
from app.state import build_state, get_state
from tests.helpers import STORE_URL, FakeRemote


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def remote() -> FakeRemote:
    return FakeRemote()


@pytest.fixture
def store(remote: FakeRemote) -> StoreClient:
    return StoreClient(STORE_URL, transport=httpx.MockTransport(remote.handler))


@pytest.fixture
def state(store: StoreClient):
    return build_state(store)


@pytest.fixture
def client(state):
    app.dependency_overrides[get_state] = lambda: state
    yield TestClient(app)
    app.dependency_overrides.clear()
