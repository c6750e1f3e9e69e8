"""FastAPI application factory."""

import asyncio
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.routes import health, ids, info
from config import load_config
from core.health import (
    HealthChecker,
    check_event_loop,
    create_entropy_check,
    create_horizon_check,
    create_roundtrip_check,
)
from internal.logging import get_logger, LogLevel, StructuredLogger
from rando import Rando
from utils.crash import create_async_handler


def create_app(config=None):
    """Create and configure the FastAPI application."""
    config = config or load_config()

    # Configure structured logging
    StructuredLogger.configure(min_level=LogLevel.parse(config.logging.level))
    logger_instance = get_logger().bind(component="app")

    # Invalid generator options fail here, before the app exists
    generator = Rando(**config.generator.to_options())
    health_checker = HealthChecker()
    health_checker.register("event_loop", check_event_loop, critical=True)
    health_checker.register("roundtrip", create_roundtrip_check(generator), critical=True)
    health_checker.register("entropy", create_entropy_check(generator), critical=False)
    health_checker.register("horizon", create_horizon_check(generator), critical=False)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        logger_instance.info("Application starting", version="1.0.0")
        loop = asyncio.get_running_loop()
        loop.set_exception_handler(create_async_handler(logger_instance))
        logger_instance.info("Application started successfully", total_length=generator.settings.total_length)

        yield

        # Shutdown
        logger_instance.info("Application shutdown complete")

    app = FastAPI(
        title="Rando",
        version="1.0.0",
        description="configurable random identifiers with optional timestamps",
        lifespan=lifespan,
    )
    app.state.generator = generator

    # Initialize route modules with dependencies
    ids.init(generator)
    info.init(generator)
    health.init(generator, health_checker)

    # Include routers
    app.include_router(ids.router)
    app.include_router(info.router)
    app.include_router(health.router)

    return app
