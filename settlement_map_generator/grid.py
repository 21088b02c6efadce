"""
Module A: Uniform chunk grid used to limit distance checks to nearby blocks.
"""

import math
from dataclasses import dataclass, field
from typing import List, Tuple

CHUNK_SIZE = 32.0


@dataclass
class Chunk:
    """One square tile of the grid and the blocks located inside it."""

    chunk_x: int
    chunk_y: int
    center_x: float
    center_y: float
    blocks: List[int] = field(default_factory=list)


class ChunkGrid:
    """
    Regular grid of square chunks covering the area [0, width] x [0, height].

    Chunks are stored row-major, so chunk (cx, cy) lives at
    ``cx + cy * x_chunks``.
    """

    def __init__(self, width: float, height: float, chunk_size: float = CHUNK_SIZE):
        """
        Initialize grid.

        Args:
            width: Area width
            height: Area height
            chunk_size: Side length of one chunk
        """
        if not (math.isfinite(width) and math.isfinite(height)):
            raise ValueError(f"Area must be finite, got {width} x {height}")
        if width < 0 or height < 0:
            raise ValueError(f"Area must be non-negative, got {width} x {height}")
        if not math.isfinite(chunk_size) or chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")

        self.width = float(width)
        self.height = float(height)
        self.chunk_size = float(chunk_size)
        self.x_chunks = math.ceil(self.width / self.chunk_size)
        self.y_chunks = math.ceil(self.height / self.chunk_size)

        self.chunks: List[Chunk] = []
        for i in range(self.x_chunks * self.y_chunks):
            chunk_x = i % self.x_chunks
            chunk_y = i // self.x_chunks
            self.chunks.append(Chunk(
                chunk_x=chunk_x,
                chunk_y=chunk_y,
                center_x=self.chunk_size * 0.5 + chunk_x * self.chunk_size,
                center_y=self.chunk_size * 0.5 + chunk_y * self.chunk_size,
            ))

    def __len__(self) -> int:
        return len(self.chunks)

    def contains(self, x: float, y: float) -> bool:
        """Check whether (x, y) lies in the closed area."""
        return 0.0 <= x <= self.width and 0.0 <= y <= self.height

    def locate(self, x: float, y: float) -> int:
        """
        Find the chunk owning a coordinate.

        Args:
            x: X coordinate inside the area
            y: Y coordinate inside the area

        Returns:
            Flattened chunk index

        Raises:
            ValueError: If the coordinate is outside the area (or NaN)
        """
        if not self.contains(x, y) or not self.chunks:
            raise ValueError(
                f"Point ({x}, {y}) is outside the area "
                f"{self.width} x {self.height}"
            )

        # Points on the far edge belong to the last column/row
        chunk_x = min(int(math.floor(x / self.chunk_size)), self.x_chunks - 1)
        chunk_y = min(int(math.floor(y / self.chunk_size)), self.y_chunks - 1)
        return chunk_x + chunk_y * self.x_chunks

    def neighbors(self, index: int) -> List[int]:
        """
        Get a chunk and its 8 surrounding chunks.

        Args:
            index: Chunk index

        Returns:
            Up to 9 chunk indices in row-major scan order
        """
        chunk = self.chunk(index)

        result = []
        for dy in (-1, 0, 1):
            ny = chunk.chunk_y + dy
            if ny < 0 or ny >= self.y_chunks:
                continue
            for dx in (-1, 0, 1):
                nx_ = chunk.chunk_x + dx
                if nx_ < 0 or nx_ >= self.x_chunks:
                    continue
                neighbor = nx_ + ny * self.x_chunks
                if neighbor not in result:
                    result.append(neighbor)
        return result

    def chunk(self, index: int) -> Chunk:
        """Get chunk by index, rejecting out-of-range (and negative) indices."""
        if not 0 <= index < len(self.chunks):
            raise IndexError(
                f"Chunk index {index} out of range [0, {len(self.chunks)})"
            )
        return self.chunks[index]

    def chunk_center(self, index: int) -> Tuple[float, float]:
        chunk = self.chunk(index)
        return chunk.center_x, chunk.center_y

    def chunk_blocks(self, index: int) -> List[int]:
        return self.chunk(index).blocks

    def register(self, index: int, block: int):
        """Record a block as located inside a chunk."""
        self.chunk(index).blocks.append(block)
