import json
from typing import List

from fastapi import APIRouter, Depends, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from ..middleware.errors import MalformedBodyError
from ..results import Outcome, ServiceResult
from ..schemas import ErrorResponse, ValidationErrorResponse, Vehicle, VehicleCandidate
from ..services.vehicles import VehicleService

router = APIRouter(prefix="/vehicle", tags=["vehicle"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    422: {"model": ValidationErrorResponse},
    500: {"model": ErrorResponse},
}
MISSING_RESPONSES = {
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def get_vehicle_service(request: Request) -> VehicleService:
    return request.app.state.vehicle_service


async def read_vehicle_body(request: Request) -> VehicleCandidate:
    raw = await request.body()
    if not raw.strip():
        return VehicleCandidate()
    try:
        data = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as exc:
        raise MalformedBodyError(str(exc)) from exc
    if not isinstance(data, dict):
        raise MalformedBodyError(f"expected a JSON object, got {type(data).__name__}")
    return VehicleCandidate.model_validate(data)


def _respond(result: ServiceResult) -> Response:
    if result.outcome is Outcome.NO_CONTENT:
        return Response(status_code=result.status_code)
    if result.outcome is Outcome.INVALID:
        return JSONResponse(status_code=result.status_code, content={"errors": result.errors})
    if not result.ok:
        return JSONResponse(status_code=result.status_code, content={"error": result.message})
    return JSONResponse(status_code=result.status_code, content=jsonable_encoder(result.payload))


@router.get("", response_model=List[Vehicle], responses={500: {"model": ErrorResponse}})
async def list_vehicles(service: VehicleService = Depends(get_vehicle_service)):
    return _respond(await service.list_vehicles())


@router.post("", status_code=201, response_model=Vehicle, responses=ERROR_RESPONSES)
async def create_vehicle(
    body: VehicleCandidate = Depends(read_vehicle_body),
    service: VehicleService = Depends(get_vehicle_service),
):
    return _respond(await service.create_vehicle(body))


@router.get("/{vin}", response_model=Vehicle, responses=MISSING_RESPONSES)
async def get_vehicle(vin: str, service: VehicleService = Depends(get_vehicle_service)):
    return _respond(await service.get_vehicle(vin))


@router.put("/{vin}", response_model=Vehicle, responses=ERROR_RESPONSES)
async def update_vehicle(
    vin: str,
    body: VehicleCandidate = Depends(read_vehicle_body),
    service: VehicleService = Depends(get_vehicle_service),
):
    return _respond(await service.update_vehicle(vin, body))


@router.delete("/{vin}", status_code=204, response_class=Response, responses=MISSING_RESPONSES)
async def delete_vehicle(vin: str, service: VehicleService = Depends(get_vehicle_service)):
    return _respond(await service.delete_vehicle(vin))
