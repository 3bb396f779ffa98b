"""
Movie API — Health Check Route
===============================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Reports the version, how many movies the store holds, and uptime.
Who:   Called by container health checks and monitoring systems.

The store has no external dependencies, so a process that can answer this
request is considered healthy.
"""

import time

from fastapi import APIRouter, Depends

from movie_api import __version__
from movie_api.schemas.movie import HealthResponse
from movie_api.services.movie_service import MovieService, get_movie_service

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    service: MovieService = Depends(get_movie_service),
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        movie_count=len(service),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
