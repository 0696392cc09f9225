"""FastAPI REST adapter for Complex Obs.

Provides HTTP endpoints to attach text payloads to observations, read
them back and purge them. Observation records are held in memory by the
app; payloads go through the handler to its storage.

Usage:
    from complex_obs.adapters.inbound.rest_api import create_app

    app = create_app()
    # Run with: uvicorn module:app --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, HTTPException, Query, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from complex_obs.domain.entities.complex_data import ComplexData
from complex_obs.domain.entities.obs import Obs
from complex_obs.domain.services.text_handler import TextHandler
from complex_obs.ports.inbound import ComplexObsError


# Pydantic models for request/response serialization


class CreateObservationRequest(BaseModel):
    """Request to create an observation with a text payload."""

    title: str = Field(default="", description="Payload title, e.g. notes.txt")
    text: str = Field(..., description="Payload characters")
    concept: Optional[str] = Field(default=None, description="Observed concept")
    person_id: Optional[int] = Field(default=None, description="Patient identifier")


class ObservationResponse(BaseModel):
    """Observation details response."""

    uuid: str
    obs_id: Optional[int]
    concept: Optional[str]
    person_id: Optional[int]
    value_complex: Optional[str]


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    handler_type: str
    version: str = "0.1.0"


def _to_response(obs: Obs) -> ObservationResponse:
    return ObservationResponse(
        uuid=obs.uuid,
        obs_id=obs.obs_id,
        concept=obs.concept,
        person_id=obs.person_id,
        value_complex=obs.value_complex,
    )


def create_app(handler: TextHandler | None = None) -> FastAPI:
    """Create FastAPI application with Complex Obs endpoints.

    Args:
        handler: Optional TextHandler instance (container-wired if omitted).

    Returns:
        Configured FastAPI application.
    """
    if handler is None:
        from complex_obs.infrastructure.container import get_container

        handler = get_container().text_handler

    observations: dict[str, Obs] = {}
    next_obs_id = 1

    app = FastAPI(
        title="Complex Obs API",
        description="File-backed storage for text complex observations",
        version="0.1.0",
    )

    def _get_or_404(obs_uuid: str) -> Obs:
        obs = observations.get(obs_uuid)
        if obs is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Observation {obs_uuid} not found",
            )
        return obs

    @app.get("/health", response_model=HealthResponse, tags=["System"])
    async def health_check():
        """Check service health status."""
        return HealthResponse(status="healthy", handler_type=handler.get_handler_type())

    @app.post(
        "/observations",
        response_model=ObservationResponse,
        status_code=status.HTTP_201_CREATED,
        tags=["Observations"],
    )
    async def create_observation(request: CreateObservationRequest):
        """Create an observation and persist its text payload."""
        nonlocal next_obs_id

        obs = Obs(
            obs_id=next_obs_id,
            concept=request.concept,
            person_id=request.person_id,
            complex_data=ComplexData(title=request.title, data=request.text),
        )
        try:
            handler.save_obs(obs)
        except ComplexObsError as e:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=str(e),
            )

        next_obs_id += 1
        observations[obs.uuid] = obs
        return _to_response(obs)

    @app.get("/observations/{obs_uuid}", response_model=ObservationResponse, tags=["Observations"])
    async def get_observation(obs_uuid: str):
        """Get observation details."""
        return _to_response(_get_or_404(obs_uuid))

    @app.get(
        "/observations/{obs_uuid}/complex",
        response_class=PlainTextResponse,
        tags=["Observations"],
    )
    async def get_complex_data(obs_uuid: str, view: Optional[str] = Query(default=None)):
        """Get the stored text payload of an observation."""
        obs = _get_or_404(obs_uuid)
        handler.get_obs(obs, view)
        complex_data = obs.complex_data
        obs.complex_data = None
        if complex_data is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Complex data for observation {obs_uuid} could not be read",
            )
        return PlainTextResponse(
            content=complex_data.data,
            media_type=complex_data.mime_type,
            headers={"X-Complex-Obs-Title": complex_data.title.strip()},
        )

    @app.delete(
        "/observations/{obs_uuid}/complex",
        status_code=status.HTTP_204_NO_CONTENT,
        tags=["Observations"],
    )
    async def purge_complex_data(obs_uuid: str):
        """Delete the stored payload of an observation."""
        obs = _get_or_404(obs_uuid)
        if not handler.purge_complex_data(obs):
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"Complex data for observation {obs_uuid} could not be purged",
            )

    return app
