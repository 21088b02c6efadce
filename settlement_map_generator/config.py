"""
Configuration management for settlement map generation.
"""

import json
import math
from dataclasses import asdict, dataclass, field
from typing import Tuple

from .grid import CHUNK_SIZE


@dataclass
class MapConfig:
    """Configuration for settlement map generation."""

    # Reproducibility
    seed: int = 42

    # Area
    width: float = 300.0
    height: float = 300.0
    chunk_size: float = CHUNK_SIZE

    # Best-candidate sampling: round k tries candidate_base + k * candidate_step
    block_count: int = 300
    candidate_base: int = 10
    candidate_step: int = 10

    # Rendering
    plot_extent: float = 400.0
    figure_size: Tuple[float, float] = field(default_factory=lambda: (10.24, 7.68))
    output_path: str = "image-out/maps.png"

    @classmethod
    def from_json(cls, filepath: str) -> "MapConfig":
        """Load configuration from JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)
        if "figure_size" in data:
            data["figure_size"] = tuple(data["figure_size"])
        config = cls(**data)
        config.validate()
        return config

    def to_json(self, filepath: str) -> None:
        """Save configuration to JSON file."""
        data = asdict(self)
        data["figure_size"] = list(self.figure_size)
        with open(filepath, 'w') as f:
            json.dump(data, f, indent=2)

    def validate(self) -> None:
        """
        Check parameter ranges.

        Raises:
            ValueError: On the first invalid parameter found
        """
        for name in ("width", "height"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be finite and >= 0, got {value}")
        if not math.isfinite(self.chunk_size) or self.chunk_size <= 0:
            raise ValueError(f"chunk_size must be > 0, got {self.chunk_size}")
        if self.block_count < 0:
            raise ValueError(f"block_count must be >= 0, got {self.block_count}")
        if self.candidate_base < 1:
            raise ValueError(f"candidate_base must be >= 1, got {self.candidate_base}")
        if self.candidate_step < 0:
            raise ValueError(f"candidate_step must be >= 0, got {self.candidate_step}")

    def get_candidate_budget(self, round_index: int) -> int:
        """
        Number of candidates drawn in a given round.

        Args:
            round_index: Zero-based round number

        Returns:
            candidate_base + round_index * candidate_step
        """
        return self.candidate_base + round_index * self.candidate_step
