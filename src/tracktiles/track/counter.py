"""
Tile model counter - Count tiles by shape.
"""

from collections import Counter
from typing import Dict, Iterable, Iterator, List

from tracktiles.tile.model import TileModel
from tracktiles.tile.types import TileDirection


class TileModelCounter:
    """Counter of tiles keyed by model id.

    Alongside each count, keeps one reference model per shape, turned to
    the right, so that the counted shapes can be listed and drawn.

    Usage:
        stats = TileModelCounter(tiles)
        stats.get_count("curved-tile-1")
    """

    def __init__(self, tiles: Iterable[TileModel] | None = None):
        self._counts: Counter = Counter()
        self._models: Dict[str, TileModel] = {}
        for tile in tiles or []:
            self.add(tile)

    def add(self, tile: TileModel) -> int:
        """Count a tile.

        Returns:
            The new count for the tile shape
        """
        TileModel.validate_instance(tile)
        model_id = tile.model_id
        if model_id not in self._models:
            self._models[model_id] = tile.clone().set_direction(TileDirection.RIGHT)
        self._counts[model_id] += 1
        return self._counts[model_id]

    def remove(self, tile: TileModel) -> int:
        """Uncount a tile, never going below zero.

        Returns:
            The new count for the tile shape
        """
        TileModel.validate_instance(tile)
        model_id = tile.model_id
        if self._counts[model_id] > 0:
            self._counts[model_id] -= 1
        return self._counts[model_id]

    def get_count(self, tile: TileModel | str) -> int:
        if isinstance(tile, TileModel):
            tile = tile.model_id
        return self._counts[tile]

    def get_model(self, model_id: str) -> TileModel | None:
        return self._models.get(model_id)

    def models(self) -> List[TileModel]:
        """Get the reference models of the counted shapes, sorted."""
        return sorted(
            model for model_id, model in self._models.items() if self._counts[model_id] > 0
        )

    def clear(self) -> None:
        self._counts.clear()
        self._models.clear()

    @property
    def total(self) -> int:
        return sum(self._counts.values())

    def __len__(self) -> int:
        return sum(1 for count in self._counts.values() if count > 0)

    def __iter__(self) -> Iterator[str]:
        return (model_id for model_id, count in self._counts.items() if count > 0)

    def __getitem__(self, model_id: str) -> int:
        return self._counts[model_id]

    def __contains__(self, model_id: object) -> bool:
        return self._counts.get(model_id, 0) > 0

    def get_state(self) -> Dict[str, int]:
        return {model_id: count for model_id, count in self._counts.items() if count > 0}
