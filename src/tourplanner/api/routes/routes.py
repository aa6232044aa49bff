"""Routing endpoints."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from fastapi import APIRouter, HTTPException, Response, status

from ...schemas.routing import OptimizeRequest, OptimizeResponse
from ...services.export.geojson import route_to_geojson
from ...services.outputs.routing_formatter import result_to_csv
from ...services.routing.service import optimize_request, run_optimization

router = APIRouter(prefix="/routes", tags=["routes"])

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _handle(action: Callable[[], T]) -> T:
    try:
        return action()
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Error optimizing route: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to optimize route: {exc}",
        ) from exc


@router.post("/optimize", response_model=OptimizeResponse, status_code=status.HTTP_200_OK)
def optimize(payload: OptimizeRequest) -> OptimizeResponse:
    return _handle(lambda: optimize_request(payload))


@router.post("/optimize/csv", status_code=status.HTTP_200_OK)
def optimize_csv(payload: OptimizeRequest) -> Response:
    result, _ = _handle(lambda: run_optimization(payload))
    return Response(
        content=result_to_csv(result),
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="route.csv"'},
    )


@router.post("/optimize/geojson", status_code=status.HTTP_200_OK)
def optimize_geojson(payload: OptimizeRequest) -> dict:
    result, _ = _handle(lambda: run_optimization(payload))
    return route_to_geojson(result)
