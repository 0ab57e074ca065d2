"""API dependencies for dependency injection."""

from typing import Annotated, NoReturn, Optional

from fastapi import Depends, HTTPException, status

from pathwalker.config import Settings, get_settings
from pathwalker.core.exceptions import PathWalkerError
from pathwalker.core.grid import Grid, to_grid
from pathwalker.schemas.map import MapSource
from pathwalker.services.map_service import MapCatalog, get_map_catalog
from pathwalker.services.session_service import SessionService, get_session_service


def resolve_map(source: MapSource, catalog: MapCatalog) -> tuple[Grid, Optional[str]]:
    """Turn a request's map source into a grid and the bundled map name, if any."""
    if source.map_name is None:
        return to_grid(source.map), None

    parsed = catalog.get_map(source.map_name)
    if parsed is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Map not found: {source.map_name}",
        )
    return parsed.grid, parsed.name


def raise_path_error(error: PathWalkerError) -> NoReturn:
    """Convert a core failure into a 422 response carrying its error code."""
    raise HTTPException(
        status_code=422,
        detail={"code": error.code, "message": str(error)},
    ) from error


# Type aliases for cleaner route signatures
AppSettings = Annotated[Settings, Depends(get_settings)]
Catalog = Annotated[MapCatalog, Depends(get_map_catalog)]
Sessions = Annotated[SessionService, Depends(get_session_service)]
