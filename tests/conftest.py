import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.services.price_service import PriceService


@pytest.fixture
def service() -> PriceService:
    return PriceService()


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app) -> TestClient:
    with TestClient(app) as c:
        yield c
