"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from fitness_tracker.api.schemas import (
    AdviceRequest,
    ProfilePayload,
    WorkoutPayload,
    WorkoutPlanRequest,
)
from fitness_tracker.app_logging import configure_logging
from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.errors import NotFoundError, StorageError, ValidationError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(ValidationError)
    async def validation_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.exception_handler(StorageError)
    async def storage_handler(request: Request, exc: StorageError) -> JSONResponse:
        logger.error(
            "Storage failure", exc_info=exc, extra={"path": request.url.path}
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Storage error"},
        )

    @app.exception_handler(Exception)
    async def unhandled_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled error", exc_info=exc, extra={"path": request.url.path}
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/api/profile")
    async def get_profile(request: Request) -> dict[str, object]:
        """Return the user profile."""
        state_container: AppContainer = request.app.state.container
        return asdict(state_container.profile_service.get_profile())

    @app.post("/api/profile")
    async def update_profile(
        payload: ProfilePayload, request: Request
    ) -> dict[str, bool]:
        """Replace every profile field."""
        state_container: AppContainer = request.app.state.container
        state_container.profile_service.update_profile(
            name=payload.name,
            weight=payload.weight,
            height=payload.height,
            goal=payload.goal,
        )
        return {"success": True}

    @app.get("/api/workouts")
    async def list_workouts(request: Request) -> list[dict[str, object]]:
        """Return all workouts, most recent first, without exercises."""
        state_container: AppContainer = request.app.state.container
        return [
            asdict(workout)
            for workout in state_container.workout_service.list_workouts()
        ]

    @app.post("/api/workouts")
    async def create_workout(
        payload: WorkoutPayload, request: Request
    ) -> dict[str, int]:
        """Log a workout with its exercises."""
        state_container: AppContainer = request.app.state.container
        workout_id = state_container.workout_service.create_workout(
            payload.to_domain()
        )
        return {"id": workout_id}

    @app.get("/api/workouts/{workout_id}")
    async def get_workout(workout_id: int, request: Request) -> dict[str, object]:
        """Return a workout including its exercises."""
        state_container: AppContainer = request.app.state.container
        return asdict(state_container.workout_service.get_workout_detail(workout_id))

    @app.get("/api/stats")
    async def weekly_stats(request: Request) -> list[dict[str, object]]:
        """Return calories per day for the trailing week."""
        state_container: AppContainer = request.app.state.container
        return [
            asdict(day) for day in state_container.stats_service.get_last_7_days()
        ]

    @app.post("/api/coach/plan")
    async def suggest_workout_plan(
        request: Request, payload: WorkoutPlanRequest | None = None
    ) -> dict[str, object]:
        """Ask the coach for a workout plan based on the stored profile."""
        state_container: AppContainer = request.app.state.container
        profile = state_container.profile_service.get_profile()
        plan = await state_container.coach_service.suggest_workout(
            profile, goal=payload.goal if payload else None
        )
        return {"plan": plan.model_dump() if plan else None}

    @app.post("/api/coach/advice")
    async def coach_advice(
        payload: AdviceRequest, request: Request
    ) -> dict[str, object]:
        """Ask the coach a free-text question."""
        state_container: AppContainer = request.app.state.container
        answer = await state_container.coach_service.get_advice(payload.query)
        return {"answer": answer}

    return app
