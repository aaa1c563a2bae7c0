"""Field rules for inbound vehicle records.

Every rule runs on every request and all failures are reported together, so
a client fixing a payload sees the full list at once.
"""
import math
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

from .schemas import VehicleCandidate, Vehicle


class ZeroPolicy(str, Enum):
    """How a numeric ``0`` is treated by the required-field check.

    ``ZERO_IS_MISSING`` keeps the legacy truthiness behavior: zero horsepower,
    model year ``0`` or a price of ``0`` are reported as missing even though
    the range rule allows them. ``ZERO_IS_VALID`` applies the ``>= 0`` range
    rule only. Which one is correct is still an open product question.
    """

    ZERO_IS_MISSING = "zero_is_missing"
    ZERO_IS_VALID = "zero_is_valid"

    @classmethod
    def parse(cls, value: str) -> "ZeroPolicy":
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise RuntimeError(f"Unknown vehicle zero policy: {value!r}") from None


MESSAGES: Dict[str, str] = {
    "vin": "VIN is required and must be a string",
    "manufacturer_name": "Manufacturer name is required and must be a string",
    "description": "Description is required and must be a string",
    "horse_power": "Horsepower is required and must be an integer greater than or equal to 0",
    "model_name": "Model name is required and must be a string",
    "model_year": "Model year is required and must be an integer greater than or equal to 0",
    "purchase_price": "Purchase price is required and must be a number greater than or equal to 0",
    "fuel_type": "Fuel type is required and must be a string",
}


def _is_text(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _is_number(value: Any) -> bool:
    # bool subclasses int but JSON true/false are not numbers
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not isinstance(value, float) or math.isfinite(value)


def _is_whole_number(value: Any) -> bool:
    return _is_number(value) and (isinstance(value, int) or value.is_integer())


def _in_range(value: Any, policy: ZeroPolicy) -> bool:
    if value < 0:
        return False
    return not (policy is ZeroPolicy.ZERO_IS_MISSING and value == 0)


Rule = Callable[[Any, ZeroPolicy], bool]

RULES: Dict[str, Rule] = {
    "vin": lambda v, _: _is_text(v),
    "manufacturer_name": lambda v, _: _is_text(v),
    "description": lambda v, _: _is_text(v),
    "horse_power": lambda v, p: _is_whole_number(v) and _in_range(v, p),
    "model_name": lambda v, _: _is_text(v),
    "model_year": lambda v, p: _is_whole_number(v) and _in_range(v, p),
    "purchase_price": lambda v, p: _is_number(v) and _in_range(v, p),
    "fuel_type": lambda v, _: _is_text(v),
}


def _as_candidate(record: Union[VehicleCandidate, Mapping[str, Any]]) -> VehicleCandidate:
    if isinstance(record, VehicleCandidate):
        return record
    return VehicleCandidate.model_validate(dict(record))


def validate(
    record: Union[VehicleCandidate, Mapping[str, Any]],
    zero_policy: ZeroPolicy = ZeroPolicy.ZERO_IS_MISSING,
) -> Optional[Dict[str, str]]:
    """Return ``None`` for an acceptable record, otherwise a field -> message map."""
    candidate = _as_candidate(record)
    errors: Dict[str, str] = {}
    for field, rule in RULES.items():
        if not candidate.is_present(field) or not rule(getattr(candidate, field), zero_policy):
            errors[field] = MESSAGES[field]
    return errors or None


def parse_vehicle(
    record: Union[VehicleCandidate, Mapping[str, Any]],
    zero_policy: ZeroPolicy = ZeroPolicy.ZERO_IS_MISSING,
) -> Tuple[Optional[Vehicle], Optional[Dict[str, str]]]:
    candidate = _as_candidate(record)
    errors = validate(candidate, zero_policy)
    if errors:
        return None, errors
    vehicle = Vehicle(
        vin=candidate.vin,
        manufacturer_name=candidate.manufacturer_name,
        description=candidate.description,
        horse_power=int(candidate.horse_power),
        model_name=candidate.model_name,
        model_year=int(candidate.model_year),
        purchase_price=float(candidate.purchase_price),
        fuel_type=candidate.fuel_type,
    )
    return vehicle, None
