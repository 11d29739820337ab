from decimal import Decimal
from types import SimpleNamespace

import mongomock
import pytest
from fastapi.testclient import TestClient

from database import create_document, get_db
from gateway import PaymentGateway, get_gateway
from main import app
from schemas import Session, User

ADMIN_TOKEN = "admin-token"
USER_TOKEN = "user-token"


class FakeClientToken:
    def __init__(self):
        self.behaviour = lambda params: "client-token"

    def generate(self, params=None):
        return self.behaviour(params)


class FakeTransaction:
    def __init__(self):
        self.calls = []
        self.behaviour = lambda params: SimpleNamespace(
            is_success=True,
            transaction=SimpleNamespace(id="txn-1", status="submitted_for_settlement", amount=Decimal(params["amount"])),
        )

    def sale(self, params):
        self.calls.append(params)
        return self.behaviour(params)


class FakeBraintree:
    """Stands in for braintree.BraintreeGateway."""

    def __init__(self):
        self.client_token = FakeClientToken()
        self.transaction = FakeTransaction()


@pytest.fixture
def mongo():
    return mongomock.MongoClient()["storefront_test"]


@pytest.fixture
def braintree_sdk():
    return FakeBraintree()


@pytest.fixture
def client(mongo, braintree_sdk):
    app.dependency_overrides[get_db] = lambda: mongo
    app.dependency_overrides[get_gateway] = lambda: PaymentGateway(braintree_sdk)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def _add_user(mongo, name, email, role, token):
    user_id = create_document(mongo, "user", User(name=name, email=email, phone="555", role=role))
    create_document(mongo, "session", Session(user_id=user_id, token=token))
    return user_id


@pytest.fixture
def admin_id(mongo):
    return _add_user(mongo, "Admin User", "admin@example.com", "admin", ADMIN_TOKEN)


@pytest.fixture
def user_id(mongo):
    return _add_user(mongo, "John Doe", "john@example.com", "customer", USER_TOKEN)


@pytest.fixture
def admin_headers(admin_id):
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest.fixture
def user_headers(user_id):
    return {"Authorization": USER_TOKEN}


@pytest.fixture
def fail_on(monkeypatch):
    """Make one mongomock collection method raise for a single collection."""

    def _fail_on(method, collection="product"):
        original = getattr(mongomock.collection.Collection, method)

        def boom(self, *args, **kwargs):
            if self.name == collection:
                raise RuntimeError(f"{method} failed")
            return original(self, *args, **kwargs)

        monkeypatch.setattr(mongomock.collection.Collection, method, boom)

    return _fail_on
