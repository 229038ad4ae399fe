"""
Calculator API — the only thing the form talks to.

POST /api/resolve  — Resolve whatever the user has typed so far
GET  /api/sample   — The "fill sample" example, already resolved

The form re-posts on every field change. Each request stands alone.
"""

import logging

from fastapi import APIRouter, HTTPException

from .. import schemas
from ..display import ResultFormatter
from ..engine import InferenceEngine
from ..presets import SAMPLE_REQUEST, resolve_reference_size

logger = logging.getLogger(__name__)

router = APIRouter(tags=["calculator"])

# Stateless — safe to share across requests
engine = InferenceEngine()
formatter = ResultFormatter()


def run_resolve(request: schemas.ResolveRequest) -> schemas.ResolveResponse:
    """Resolve a request end to end: basis size → engine → conflicts → display."""
    try:
        reference = resolve_reference_size(request.preset, request.width_in, request.height_in)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    supplied = request.measurements()
    area = reference.area_sq_in
    # A negative side never reaches the engine, even if the product is positive
    usable_area = area if reference.is_valid else 0.0
    resolved = engine.resolve(supplied, usable_area)
    conflicts = engine.find_conflicts(supplied, usable_area)
    if conflicts:
        logger.info("Inconsistent input — %s", ", ".join(c.name for c in conflicts))

    return schemas.ResolveResponse(
        measurements=resolved,
        reference=reference,
        reference_area_sq_in=area,
        display=formatter.build(resolved, area),
        conflicts=conflicts,
    )


@router.post("/resolve", response_model=schemas.ResolveResponse)
def resolve(request: schemas.ResolveRequest):
    return run_resolve(request)


@router.get("/sample", response_model=schemas.ResolveResponse)
def sample():
    """80 lb woodfree (25×38) with bulk 1.35."""
    return run_resolve(schemas.ResolveRequest(**SAMPLE_REQUEST))
