"""Shared test fixtures: in-memory database, fake collaborators, API client."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from vehicles_api.api.v1.vehicles import get_vehicle_service
from vehicles_api.core.database import Base
from vehicles_api.main import app
from vehicles_api.models import vehicle_model  # noqa: F401
from vehicles_api.schemas.vehicle_schema import Location
from vehicles_api.services.vehicle_service import VehicleService
from vehicles_api.stores.vehicle_store import SqlVehicleStore


class FakePriceClient:
    """Records calls and answers with a fixed price (None = unavailable)."""

    def __init__(self, price="USD 21500.00"):
        self.price = price
        self.calls = []

    def get_price(self, vehicle_id):
        self.calls.append(vehicle_id)
        return self.price


class FakeMapsClient:
    """Records calls and resolves every coordinate to one fixed address."""

    def __init__(self, address=None):
        self.address = address
        self.calls = []

    def get_address(self, location):
        self.calls.append((location.lat, location.lon))
        resolved = Location(lat=location.lat, lon=location.lon)
        if self.address:
            for field, value in self.address.items():
                setattr(resolved, field, value)
        return resolved


SAMPLE_ADDRESS = {
    "address": "777 Brockton Avenue",
    "city": "Abington",
    "state": "MA",
    "zip": "2351",
}


def make_payload(**overrides):
    """A request body for a vehicle; keyword args replace top-level keys."""
    payload = {
        "condition": "USED",
        "details": {
            "body": "sedan",
            "model": "Impala",
            "manufacturer": {"code": 101, "name": "Chevrolet"},
            "number_of_doors": 4,
            "fuel_type": "Gasoline",
            "engine": "3.6L V6",
            "mileage": 32280,
            "model_year": 2018,
            "production_year": 2018,
            "external_color": "white",
        },
        "location": {"lat": 40.73061, "lon": -73.935242},
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def db_session():
    """A fresh in-memory database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()
    engine.dispose()


@pytest.fixture()
def store(db_session):
    return SqlVehicleStore(db_session)


@pytest.fixture()
def price_client():
    return FakePriceClient()


@pytest.fixture()
def maps_client():
    return FakeMapsClient(SAMPLE_ADDRESS)


@pytest.fixture()
def service(store, price_client, maps_client):
    return VehicleService(store, price_client, maps_client)


@pytest.fixture()
def client(service):
    """API client whose routes use the test service."""
    app.dependency_overrides[get_vehicle_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()
