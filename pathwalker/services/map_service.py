"""Map catalog service serving the bundled map files."""

import logging
from pathlib import Path
from typing import Optional

from pathwalker.config import get_settings
from pathwalker.core.map_parser import ParsedMap, load_all_maps

logger = logging.getLogger(__name__)


class MapCatalog:
    """Maps loaded from a directory, keyed by name (file stem)."""

    def __init__(self, maps_dir: Path | str):
        self.maps_dir = Path(maps_dir)
        self._maps: dict[str, ParsedMap] = {}
        self.reload()

    def reload(self) -> int:
        """Reload all maps from the directory. Returns the number loaded."""
        try:
            maps = load_all_maps(self.maps_dir)
        except FileNotFoundError:
            logger.warning(f"Maps directory not found: {self.maps_dir}")
            maps = []

        self._maps = {parsed.name: parsed for parsed in maps}
        logger.info(f"Loaded {len(self._maps)} maps from {self.maps_dir}")
        return len(self._maps)

    def list_maps(self) -> list[ParsedMap]:
        return list(self._maps.values())

    def get_map(self, name: str) -> Optional[ParsedMap]:
        return self._maps.get(name)


# Singleton instance
_map_catalog: Optional[MapCatalog] = None


def get_map_catalog() -> MapCatalog:
    """Get singleton map catalog."""
    global _map_catalog
    if _map_catalog is None:
        _map_catalog = MapCatalog(get_settings().maps_dir)
    return _map_catalog
