"""Stages built from CSV tile grids."""

from __future__ import annotations

import enum
import re
from pathlib import Path
from typing import Any, Iterable, Protocol

from jumpin.geometry import Vector3
from jumpin.objects import Block, Goal

DATA_DIRECTORY = "Resources/Data"
BLOCK_MODEL = "block.sdkmesh"
GOAL_MODEL = "flag.sdkmesh"

_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1

_HEADER = re.compile(r"\s*([+-]?\d+).\s*([+-]?\d+)", re.DOTALL)
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class ModelSource(Protocol):
    def request_model(self, filename: str) -> Any: ...


class StageType(enum.IntEnum):
    NONE = 0
    STAGE1 = 1
    STAGE2 = 2
    NUM = 3


class TileType(enum.IntEnum):
    NONE = 0
    WALL = 1
    GOAL = 2


def _parse_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    value = int(match.group(1))
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise OverflowError(f"integer out of range: {text!r}")
    return value


def parse_grid(lines: Iterable[str]) -> tuple[int, int, list[list[int]]]:
    """Parse a grid: a ``width,height`` header, then comma-separated rows.

    Rows beyond the height and fields beyond the width are ignored.
    Returns ``(width, height, rows)``.
    """
    records = iter(lines)
    header = next(records, None)
    if header is None:
        raise ValueError("grid header is missing")
    match = _HEADER.match(header)
    if match is None:
        raise ValueError(f"bad grid header: {header!r}")
    width, height = int(match.group(1)), int(match.group(2))
    if width < 0 or height < 0:
        raise ValueError("grid size must not be negative")

    rows: list[list[int]] = []
    for record in records:
        if len(rows) >= height:
            break
        fields = record.rstrip("\r\n").split(",")
        if fields[-1] == "":
            fields.pop()
        rows.append([_parse_int(field) for field in fields[:width]])
    return width, height, rows


class Stage:
    """The blocks and goal of one stage."""

    LEFT_TOP = Vector3(-5.0, 15.0, 0.0)

    def __init__(self, data_dir: str | Path = ".") -> None:
        self._data_dir = Path(data_dir)
        self.block_model: Any = None
        self.goal_model: Any = None
        self.blocks: list[Block] = []
        self.goal: Goal | None = None
        self.grid_width = 0
        self.grid_height = 0
        self.grid: list[list[int]] = []

    def initialize(self, resources: ModelSource, stage_type: int) -> bool:
        """Fetch the models and build the stage numbered ``stage_type``."""
        self.block_model = resources.request_model(BLOCK_MODEL)
        self.goal_model = resources.request_model(GOAL_MODEL)
        return self.load_csv(str(int(stage_type)))

    def load_csv(self, name: str) -> bool:
        """Read ``stage<name>.csv``; False when the file cannot be opened."""
        path = self._data_dir / DATA_DIRECTORY / f"stage{name}.csv"
        try:
            handle = path.open(encoding="utf-8")
        except OSError:
            return False
        with handle:
            width, height, rows = parse_grid(handle)

        self.grid_width, self.grid_height, self.grid = width, height, rows
        for cy, row in enumerate(rows):
            for cx, tile in enumerate(row):
                offset = Vector3(cx * Block.LENGTH.x, -cy * Block.LENGTH.y, 0.0)
                if tile == TileType.WALL:
                    block = Block()
                    block.initialize(self.block_model, self.LEFT_TOP + offset)
                    self.blocks.append(block)
                elif tile == TileType.GOAL:
                    goal = Goal()
                    goal.initialize(self.goal_model, self.LEFT_TOP + offset)
                    self.goal = goal
        return True

    def finalize(self) -> None:
        """Drop the grid, the blocks and the goal."""
        self.grid = []
        self.blocks.clear()
        self.goal = None