"""
Module B: Street map container holding settlement blocks and directed edges.
"""

import numpy as np
import networkx as nx
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from .grid import ChunkGrid, CHUNK_SIZE



@dataclass
class BlockData:
    """A placed block: its position, owning chunk and outgoing edge list head."""

    x: float
    y: float
    chunk_index: int
    first_edge: Optional[int] = None


@dataclass
class EdgeData:
    """Directed edge record; ``next_edge`` threads the source block's list."""

    target: int
    next_edge: Optional[int] = None


class StreetMap:
    """
    Blocks and edges placed over a rectangular area.

    Blocks and edges refer to each other only by index into ``blocks`` and
    ``edges``. Neither collection ever shrinks, so indices stay valid for
    the lifetime of the map.
    """

    def __init__(self, width: float, height: float, chunk_size: float = CHUNK_SIZE):
        """
        Initialize empty map.

        Args:
            width: Area width
            height: Area height
            chunk_size: Side length of the spatial index chunks
        """
        self.grid = ChunkGrid(width, height, chunk_size)
        self.blocks: List[BlockData] = []
        self.edges: List[EdgeData] = []

    @property
    def width(self) -> float:
        return self.grid.width

    @property
    def height(self) -> float:
        return self.grid.height

    @property
    def is_degenerate(self) -> bool:
        """True when the area has no extent to place blocks in."""
        return self.width <= 0 or self.height <= 0

    def __len__(self) -> int:
        return len(self.blocks)

    def add_block(self, x: float, y: float) -> int:
        """
        Add block and register it in its chunk.

        Args:
            x: X coordinate inside the area
            y: Y coordinate inside the area

        Returns:
            New block index
        """
        chunk = self.grid.locate(x, y)
        index = len(self.blocks)
        self.blocks.append(BlockData(x=float(x), y=float(y), chunk_index=chunk))
        self.grid.register(chunk, index)
        return index

    def add_edge(self, source: int, target: int):
        """
        Add directed edge source -> target at the head of source's edge list.

        Args:
            source: Source block index
            target: Target block index
        """
        self._check_block(source)
        self._check_block(target)

        edge_index = len(self.edges)
        block = self.blocks[source]
        self.edges.append(EdgeData(target=target, next_edge=block.first_edge))
        block.first_edge = edge_index

    def block_edges(self, block: int) -> Iterator[int]:
        """
        Iterate targets of a block's outgoing edges, most recent first.

        Each call starts a fresh walk from the block's list head.
        """
        self._check_block(block)
        return self._walk_edges(self.blocks[block].first_edge)

    def _walk_edges(self, current: Optional[int]) -> Iterator[int]:
        while current is not None:
            edge = self.edges[current]
            yield edge.target
            current = edge.next_edge

    def _check_block(self, index: int):
        if not 0 <= index < len(self.blocks):
            raise IndexError(
                f"Block index {index} out of range [0, {len(self.blocks)})"
            )

    def positions(self) -> Dict[int, Tuple[float, float]]:
        """Block positions {block_id: (x, y)} in placement order."""
        return {i: (b.x, b.y) for i, b in enumerate(self.blocks)}

    def coordinates(self) -> np.ndarray:
        """Block coordinates as an (N, 2) array."""
        if not self.blocks:
            return np.empty((0, 2))
        return np.array([(b.x, b.y) for b in self.blocks])

    def to_graph(self) -> nx.DiGraph:
        """
        Build a directed NetworkX graph of blocks and edges.

        Returns:
            Graph with node attributes x, y, chunk
        """
        graph = nx.DiGraph()
        for i, b in enumerate(self.blocks):
            graph.add_node(i, x=b.x, y=b.y, chunk=b.chunk_index)
        for source in range(len(self.blocks)):
            for target in self.block_edges(source):
                graph.add_edge(source, target)
        return graph
