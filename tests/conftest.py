import pytest
from fastapi.testclient import TestClient

from vehicle_api.app.main import create_app
from vehicle_api.app.results import Failure, FailureKind, Found, NotFound
from vehicle_api.app.validation import ZeroPolicy


class InMemoryVehicleStore:
    """Stands in for the vehicle table: keyed by vin, insertion ordered."""

    def __init__(self):
        self.reset()

    def reset(self):
        self.rows = {}
        self.calls = []
        self.fail_with = None

    def _fail(self, operation):
        self.calls.append(operation)
        if self.fail_with is not None:
            return Failure(self.fail_with, 'relation "vehicle" does not exist at 10.0.0.5:5432')
        return None

    async def insert(self, vehicle):
        failure = self._fail("insert")
        if failure:
            return failure
        if vehicle.vin in self.rows:
            return Failure(FailureKind.CONFLICT, 'duplicate key value violates unique constraint "vehicle_pkey"')
        self.rows[vehicle.vin] = vehicle.model_dump()
        return Found(dict(self.rows[vehicle.vin]))

    async def select_all(self):
        failure = self._fail("select_all")
        if failure:
            return failure
        return Found([dict(row) for row in self.rows.values()])

    async def select_by_vin(self, vin):
        failure = self._fail("select_by_vin")
        if failure:
            return failure
        row = self.rows.get(vin)
        return Found(dict(row)) if row else NotFound()

    async def update_by_vin(self, vin, fields):
        failure = self._fail("update_by_vin")
        if failure:
            return failure
        if vin not in self.rows:
            return NotFound()
        self.rows[vin].update(fields.mutable_fields())
        return Found(dict(self.rows[vin]))

    async def delete_by_vin(self, vin):
        failure = self._fail("delete_by_vin")
        if failure:
            return failure
        if self.rows.pop(vin, None) is None:
            return NotFound()
        return Found(1)


@pytest.fixture(scope="session")
def store():
    return InMemoryVehicleStore()


@pytest.fixture(scope="session")
def client(store):
    return TestClient(create_app(store=store, zero_policy=ZeroPolicy.ZERO_IS_MISSING))


@pytest.fixture
def zero_valid_client(store):
    return TestClient(create_app(store=store, zero_policy=ZeroPolicy.ZERO_IS_VALID))


@pytest.fixture(autouse=True)
def _empty_store(store):
    store.reset()
    yield
    store.reset()


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def toyota_corolla():
    return {
        "vin": "1A2B3C4D5E6F7G8H9",
        "manufacturer_name": "Toyota",
        "description": "Compact car",
        "horse_power": 120,
        "model_name": "Corolla",
        "model_year": 2022,
        "purchase_price": 20000.08,
        "fuel_type": "Gasoline",
    }


@pytest.fixture
def bmw_x5():
    return {
        "vin": "ABCDEF",
        "manufacturer_name": "BMW",
        "description": "Luxury SUV",
        "horse_power": 300,
        "model_name": "X5",
        "model_year": 2014,
        "purchase_price": 50000.0,
        "fuel_type": "Gasoline",
    }


@pytest.fixture
def fleet(toyota_corolla, bmw_x5):
    return [
        toyota_corolla,
        {
            "vin": "7890AB",
            "manufacturer_name": "Toyota",
            "description": "Hybrid car",
            "horse_power": 120,
            "model_name": "Prius",
            "model_year": 2006,
            "purchase_price": 25000.0,
            "fuel_type": "Hybrid",
        },
        {
            "vin": "123456",
            "manufacturer_name": "Tesla",
            "description": "Electric car",
            "horse_power": 400,
            "model_name": "Model S",
            "model_year": 2023,
            "purchase_price": 70330.12,
            "fuel_type": "Electric",
        },
        bmw_x5,
    ]
