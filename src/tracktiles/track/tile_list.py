"""
Tile list - Ordered list of tiles forming a track.

The order of the tiles is the order in which they connect, from the start
of the track to its end. All tiles share the specifications of the list.
"""

import logging
import uuid
from typing import Any, Dict, Iterable, Iterator, List, Mapping

from tracktiles.tile.factory import create_tile, import_tile
from tracktiles.tile.model import TileModel
from tracktiles.tile.specs import TileSpecifications
from tracktiles.tile.types import TileDirection, TileType

logger = logging.getLogger(__name__)


class TileList:
    """Ordered list of tiles sharing one set of specifications.

    Each tile added to the list receives a unique id so it can be found
    again after the list is reordered.

    Usage:
        tiles = TileList(TileSpecifications(80, 5, 4))
        tiles.append("straight-tile")
        tiles.append("curved-tile", "left", 2)
        records = tiles.export()
    """

    def __init__(self, specs: TileSpecifications, records: Iterable[Mapping[str, Any]] | None = None):
        """Initialize tile list.

        Args:
            specs: Specifications shared by every tile of the list
            records: Optional exported tile records to load
        """
        self.specs = TileSpecifications.validate_instance(specs)
        self._tiles: List[TileModel] = []
        if records is not None:
            self.import_tiles(records)

    @property
    def tiles(self) -> List[TileModel]:
        return list(self._tiles)

    def set_specs(self, specs: TileSpecifications) -> "TileList":
        """Replace the specifications of the list and of all its tiles.

        Raises:
            TypeError: If specs is not a TileSpecifications
        """
        self.specs = TileSpecifications.validate_instance(specs)
        for tile in self._tiles:
            tile.set_specs(self.specs)
        logger.debug(f"Specifications propagated to {len(self._tiles)} tiles")
        return self

    def identify(self, tile: TileModel) -> TileModel:
        """Give a unique id to a tile still identified by its model id."""
        if tile.id == tile.model_id or tile.id is None:
            tile.id = f"{tile.model_id}-{uuid.uuid4().hex}"
        return tile

    def create(
        self,
        type: TileType | str = TileType.STRAIGHT,
        direction: TileDirection | str = TileDirection.RIGHT,
        ratio: float = 1,
    ) -> TileModel:
        """Create a tile bound to the specifications of the list."""
        return self.identify(create_tile(self.specs, type, direction, ratio))

    def _adopt(self, tile: TileModel) -> TileModel:
        TileModel.validate_instance(tile)
        if tile.specs is not self.specs:
            tile.set_specs(self.specs)
        return self.identify(tile)

    def append(
        self,
        type: TileModel | TileType | str = TileType.STRAIGHT,
        direction: TileDirection | str = TileDirection.RIGHT,
        ratio: float = 1,
    ) -> TileModel:
        """Add a tile at the end of the list.

        Args:
            type: A tile model, or the type of the tile to create
            direction: Direction of the tile to create
            ratio: Ratio of the tile to create

        Returns:
            The added tile
        """
        tile = self._make(type, direction, ratio)
        self._tiles.append(tile)
        return tile

    def prepend(
        self,
        type: TileModel | TileType | str = TileType.STRAIGHT,
        direction: TileDirection | str = TileDirection.RIGHT,
        ratio: float = 1,
    ) -> TileModel:
        """Add a tile at the start of the list."""
        tile = self._make(type, direction, ratio)
        self._tiles.insert(0, tile)
        return tile

    def insert(
        self,
        index: int,
        type: TileModel | TileType | str = TileType.STRAIGHT,
        direction: TileDirection | str = TileDirection.RIGHT,
        ratio: float = 1,
    ) -> TileModel:
        """Insert a tile before the given position.

        Raises:
            IndexError: If the position is out of the list
        """
        self._check_index(index, allow_end=True)
        tile = self._make(type, direction, ratio)
        self._tiles.insert(index, tile)
        return tile

    def replace(
        self,
        index: int,
        type: TileModel | TileType | str = TileType.STRAIGHT,
        direction: TileDirection | str = TileDirection.RIGHT,
        ratio: float = 1,
    ) -> TileModel:
        """Replace the tile at the given position.

        Raises:
            IndexError: If the position is out of the list
        """
        self._check_index(index)
        tile = self._make(type, direction, ratio)
        self._tiles[index] = tile
        return tile

    def remove(self, index: int) -> TileModel:
        """Remove the tile at the given position.

        Returns:
            The removed tile

        Raises:
            IndexError: If the position is out of the list
        """
        self._check_index(index)
        return self._tiles.pop(index)

    def clear(self) -> None:
        self._tiles.clear()

    def get(self, index: int) -> TileModel:
        return self._tiles[index]

    def get_by_id(self, tile_id: str) -> TileModel | None:
        for tile in self._tiles:
            if tile.id == tile_id:
                return tile
        return None

    def index_of(self, tile_id: str) -> int:
        """Get the position of a tile from its id, -1 if not found."""
        for index, tile in enumerate(self._tiles):
            if tile.id == tile_id:
                return index
        return -1

    def export(self) -> List[Dict[str, Any]]:
        """Export the tiles to a list of plain records, in track order."""
        return [tile.export() for tile in self._tiles]

    def import_tiles(self, records: Iterable[Mapping[str, Any]]) -> "TileList":
        """Replace the tiles of the list with tiles built from records.

        The list is left untouched if any record is invalid.

        Raises:
            TypeError: If records is not a list of valid tile records
        """
        if isinstance(records, (str, bytes, Mapping)) or not isinstance(records, Iterable):
            raise TypeError("A valid list of tiles is needed!")

        tiles = [self.identify(import_tile(self.specs, record)) for record in records]
        self._tiles = tiles
        logger.debug(f"Imported {len(tiles)} tiles")
        return self

    def _make(self, type, direction, ratio) -> TileModel:
        if isinstance(type, TileModel):
            return self._adopt(type)
        return self.create(type, direction, ratio)

    def _check_index(self, index: int, allow_end: bool = False) -> None:
        limit = len(self._tiles) + (1 if allow_end else 0)
        if not 0 <= index < limit:
            raise IndexError(f"Tile index out of range: {index}")

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[TileModel]:
        return iter(self._tiles)

    def __getitem__(self, index: int) -> TileModel:
        return self._tiles[index]

    @staticmethod
    def validate_instance(obj: Any) -> "TileList":
        """Check that an object is a TileList.

        Raises:
            TypeError: If it is not
        """
        if not isinstance(obj, TileList):
            raise TypeError("A valid list of tiles is needed!")
        return obj
