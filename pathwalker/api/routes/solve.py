"""Solve route for walking a whole map in one call."""

import logging

from fastapi import APIRouter

from pathwalker.api.deps import AppSettings, Catalog, raise_path_error, resolve_map
from pathwalker.core.exceptions import PathWalkerError
from pathwalker.core.path_solver import solve
from pathwalker.schemas.solve import SolveRequest, SolveResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/solve", tags=["Solve"])


@router.post(
    "",
    response_model=SolveResponse,
)
async def solve_map(
    request: SolveRequest,
    catalog: Catalog,
    settings: AppSettings,
) -> SolveResponse:
    """Walk a map from start to end.

    Returns the full path string and the collected letters. Invalid maps
    and broken paths return 422 with an error code.
    """
    grid, map_name = resolve_map(request, catalog)

    try:
        result = solve(grid, max_steps=settings.max_steps)
    except PathWalkerError as e:
        logger.info(f"Solve failed ({e.code}): {e}")
        raise_path_error(e)

    return SolveResponse(path=result.path, letters=result.letters, map_name=map_name)
