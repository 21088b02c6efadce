"""
Settlement Map Generator

Blue-noise placement of settlement blocks over a rectangular area, the
seed layout for street map generation.
"""

__version__ = "0.1.0"

from .config import MapConfig
from .grid import CHUNK_SIZE, Chunk, ChunkGrid
from .sampler import BestCandidateSampler, create_map, populate
from .streetmap import BlockData, EdgeData, StreetMap

__all__ = [
    "CHUNK_SIZE",
    "BestCandidateSampler",
    "BlockData",
    "Chunk",
    "ChunkGrid",
    "EdgeData",
    "MapConfig",
    "StreetMap",
    "create_map",
    "populate",
]
