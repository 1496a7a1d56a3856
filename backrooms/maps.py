"""Reading the level maps from disk."""

from __future__ import annotations

from pathlib import Path

from .config import NUMBER_OF_MAPS


def map_path(index: int, root: str | Path = ".") -> Path:
    """Path of map number ``index`` (a single digit) below ``root``."""
    if not 0 <= index <= 9:
        raise ValueError(f"map index must be a single digit, got {index}")
    return Path(root) / "assets" / "maps" / f"map.{index}"


def read_map(path: str | Path) -> list[str]:
    """The rows of a map file, with line endings removed; blank lines are kept."""
    text = Path(path).read_text(encoding="latin-1")
    rows = text.split("\n")
    if rows and rows[-1] == "":
        rows.pop()
    return rows


def map_size(grid: list[str]) -> tuple[int, int]:
    """The (width, height) bounds of a map: last column index and last row index."""
    width = max((len(row) - 1 for row in grid), default=0)
    return max(width, 0), len(grid) - 1


def load_maps(root: str | Path = ".") -> tuple[list[list[str]], list[tuple[int, int]]]:
    """Load every level map and its size."""
    maps = [read_map(map_path(i, root)) for i in range(1, NUMBER_OF_MAPS + 1)]
    return maps, [map_size(grid) for grid in maps]