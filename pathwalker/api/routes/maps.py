"""Map routes for listing and retrieving bundled maps."""

from fastapi import APIRouter, HTTPException, status

from pathwalker.api.deps import Catalog
from pathwalker.schemas.map import MapDetail, MapListItem, MapListResponse, MapPosition

router = APIRouter(prefix="/maps", tags=["Maps"])


@router.get(
    "",
    response_model=MapListResponse,
)
async def list_maps(catalog: Catalog) -> MapListResponse:
    """List all bundled maps.

    Rows are not included - use GET /v1/maps/{name} for full details.
    """
    items = [
        MapListItem(name=m.name, width=m.width, height=m.height)
        for m in catalog.list_maps()
    ]
    return MapListResponse(maps=items, total=len(items))


@router.get(
    "/{name}",
    response_model=MapDetail,
)
async def get_map(name: str, catalog: Catalog) -> MapDetail:
    """Get a bundled map including its rows, start and end positions."""
    parsed = catalog.get_map(name)
    if parsed is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Map not found: {name}",
        )

    return MapDetail(
        name=parsed.name,
        width=parsed.width,
        height=parsed.height,
        rows=parsed.rows,
        start=MapPosition(**parsed.start.to_dict()),
        ends=[MapPosition(**end.to_dict()) for end in parsed.ends],
    )
