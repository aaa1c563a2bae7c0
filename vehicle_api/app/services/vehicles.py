import logging
from typing import Any, Mapping, Union

from ..results import Failure, FailureKind, Found, NotFound, Outcome, ServiceResult
from ..schemas import VehicleCandidate
from ..validation import ZeroPolicy, parse_vehicle
from .vehicle_store import VehicleStore

NOT_FOUND_MESSAGE = "Vehicle not found"
LIST_FAILED = "An error occurred retrieving the vehicles."
CREATE_FAILED = "An error occurred creating the vehicle."
GET_FAILED = "An error occurred retrieving the vehicle."
UPDATE_FAILED = "An error occurred updating the vehicle."
DELETE_FAILED = "An error occurred deleting the vehicle."

logger = logging.getLogger(__name__)

Body = Union[VehicleCandidate, Mapping[str, Any]]


def _failed(message: str) -> ServiceResult:
    return ServiceResult(Outcome.FAILED, message=message)


def _not_found() -> ServiceResult:
    return ServiceResult(Outcome.NOT_FOUND, message=NOT_FOUND_MESSAGE)


class VehicleService:
    """Validate, run one storage call, classify the outcome."""

    def __init__(self, store: VehicleStore, zero_policy: ZeroPolicy = ZeroPolicy.ZERO_IS_MISSING):
        self.store = store
        self.zero_policy = zero_policy

    async def list_vehicles(self) -> ServiceResult:
        result = await self.store.select_all()
        if isinstance(result, Found):
            return ServiceResult(Outcome.OK, payload=list(result.value))
        return _failed(LIST_FAILED)

    async def create_vehicle(self, body: Body) -> ServiceResult:
        vehicle, errors = parse_vehicle(body, self.zero_policy)
        if errors:
            return ServiceResult(Outcome.INVALID, errors=errors)

        result = await self.store.insert(vehicle)
        if isinstance(result, Found):
            logger.info("vehicle %s created", vehicle.vin)
            return ServiceResult(Outcome.CREATED, payload=result.value)
        if isinstance(result, Failure) and result.kind is FailureKind.CONFLICT:
            logger.info("vehicle %s already exists", vehicle.vin)
        return _failed(CREATE_FAILED)

    async def get_vehicle(self, vin: str) -> ServiceResult:
        result = await self.store.select_by_vin(vin)
        if isinstance(result, Found):
            return ServiceResult(Outcome.OK, payload=result.value)
        if isinstance(result, NotFound):
            return _not_found()
        return _failed(GET_FAILED)

    async def update_vehicle(self, vin: str, body: Body) -> ServiceResult:
        # full replace: the body must be a complete record, its vin is not used as the key
        vehicle, errors = parse_vehicle(body, self.zero_policy)
        if errors:
            return ServiceResult(Outcome.INVALID, errors=errors)

        result = await self.store.update_by_vin(vin, vehicle)
        if isinstance(result, Found):
            logger.info("vehicle %s updated", vin)
            return ServiceResult(Outcome.OK, payload=result.value)
        if isinstance(result, NotFound):
            return _not_found()
        return _failed(UPDATE_FAILED)

    async def delete_vehicle(self, vin: str) -> ServiceResult:
        result = await self.store.delete_by_vin(vin)
        if isinstance(result, Found):
            logger.info("vehicle %s deleted", vin)
            return ServiceResult(Outcome.NO_CONTENT)
        if isinstance(result, NotFound):
            return _not_found()
        return _failed(DELETE_FAILED)
