from typing import Any, Dict

from pydantic import BaseModel, ConfigDict

VEHICLE_FIELDS = (
    "vin",
    "manufacturer_name",
    "description",
    "horse_power",
    "model_name",
    "model_year",
    "purchase_price",
    "fuel_type",
)
MUTABLE_FIELDS = VEHICLE_FIELDS[1:]


# -------- Inbound --------
class VehicleCandidate(BaseModel):
    """Untrusted request body. Fields left out of the JSON are absent from
    ``model_fields_set``; fields sent as ``null`` or with the wrong type are
    present and get rejected by the validator."""

    model_config = ConfigDict(extra="ignore", protected_namespaces=())

    vin: Any = None
    manufacturer_name: Any = None
    description: Any = None
    horse_power: Any = None
    model_name: Any = None
    model_year: Any = None
    purchase_price: Any = None
    fuel_type: Any = None

    def is_present(self, field: str) -> bool:
        return field in self.model_fields_set


# -------- Stored --------
class VehicleUpdate(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    manufacturer_name: str
    description: str
    horse_power: int
    model_name: str
    model_year: int
    purchase_price: float
    fuel_type: str

    def mutable_fields(self) -> Dict[str, Any]:
        return self.model_dump(include=set(MUTABLE_FIELDS))


class Vehicle(VehicleUpdate):
    vin: str


class ErrorResponse(BaseModel):
    error: str


class ValidationErrorResponse(BaseModel):
    errors: Dict[str, str]
