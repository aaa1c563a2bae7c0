import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from . import config
from .db import create_pool
from .middleware.errors import register_error_handlers
from .middleware.request_log import register_request_logging
from .routers import vehicles
from .services.vehicle_store import PostgresVehicleStore, VehicleStore
from .services.vehicles import VehicleService
from .validation import ZeroPolicy

WELCOME_MESSAGE = "Welcome to the Vehicle Service API."

logger = logging.getLogger(__name__)


def create_app(store: Optional[VehicleStore] = None, zero_policy: Optional[ZeroPolicy] = None) -> FastAPI:
    """Build the API. Without a ``store`` the app owns a Postgres pool for its lifespan."""
    policy = zero_policy or ZeroPolicy.parse(config.VEHICLE_ZERO_POLICY)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if store is not None:
            yield
            return
        pool = create_pool()
        await pool.open()
        app.state.vehicle_service = VehicleService(PostgresVehicleStore(pool), policy)
        logger.info("vehicle store ready (zero policy: %s)", policy.value)
        try:
            yield
        finally:
            await pool.close()

    app = FastAPI(title="Vehicle Service API", lifespan=lifespan)
    if store is not None:
        app.state.vehicle_service = VehicleService(store, policy)

    origins = config.cors_origins()
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_request_logging(app)
    register_error_handlers(app)
    app.include_router(vehicles.router)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return WELCOME_MESSAGE

    return app


app = create_app()
