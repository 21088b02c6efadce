"""
Module D: Best-candidate ("blue noise") placement of settlement blocks.
"""

import logging
import numpy as np
from typing import Dict, Optional, Tuple

from .config import MapConfig
from .distance import candidate_score
from .streetmap import StreetMap

logger = logging.getLogger(__name__)


class BestCandidateSampler:
    """Place blocks one at a time, each the farthest of several random candidates."""

    def __init__(
        self,
        street_map: StreetMap,
        config: Optional[MapConfig] = None,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize sampler.

        Args:
            street_map: Map to populate
            config: Sampling configuration
            rng: Random generator (built from seed if None)
            seed: Random seed (uses config.seed if None)
        """
        self.street_map = street_map
        self.config = config if config is not None else MapConfig()

        if rng is None:
            if seed is None:
                seed = self.config.seed
            rng = np.random.default_rng(seed)
        self.rng = rng

        self.candidates_evaluated = 0

    def draw_candidates(self, num: int) -> np.ndarray:
        """
        Draw uniformly random candidate positions inside the area.

        Args:
            num: Number of candidates

        Returns:
            (num, 2) array of (x, y) rows
        """
        xs = self.rng.random(num) * self.street_map.width
        ys = self.rng.random(num) * self.street_map.height
        return np.column_stack((xs, ys))

    def add_best_candidate(self, num: int) -> Tuple[int, float]:
        """
        Run one round: score num candidates and commit the best one.

        Ties go to the earliest candidate.

        Args:
            num: Candidate budget (>= 1)

        Returns:
            (block_index, score) of the committed block
        """
        if num < 1:
            raise ValueError(f"Candidate budget must be >= 1, got {num}")

        candidates = self.draw_candidates(num)

        best_index = 0
        furthest_dist = None
        for i, (x, y) in enumerate(candidates):
            dist = candidate_score(self.street_map, float(x), float(y))
            if furthest_dist is None or dist > furthest_dist:
                furthest_dist = dist
                best_index = i

        self.candidates_evaluated += num

        x, y = candidates[best_index]
        logger.debug("x: %r, y: %r, dist: %r", float(x), float(y), furthest_dist)
        block = self.street_map.add_block(float(x), float(y))
        return block, furthest_dist

    def generate(self, block_count: int) -> Dict:
        """
        Place block_count blocks with an increasing candidate budget per round.

        Args:
            block_count: Number of blocks to add

        Returns:
            Metadata dict
        """
        if block_count < 0:
            raise ValueError(f"block_count must be >= 0, got {block_count}")

        score_history = []

        if block_count > 0 and self.street_map.is_degenerate:
            logger.warning(
                "Area %s x %s is empty, no blocks placed",
                self.street_map.width, self.street_map.height
            )
            block_count = 0

        logger.info("Placing %d blocks", block_count)
        for count in range(block_count):
            _, score = self.add_best_candidate(self.config.get_candidate_budget(count))
            score_history.append(score)

        logger.info(
            "Placed %d blocks (%d candidates evaluated)",
            len(score_history), self.candidates_evaluated
        )

        return {
            "blocks_added": len(score_history),
            "candidates_evaluated": self.candidates_evaluated,
            "final_score": score_history[-1] if score_history else None,
            "score_history": score_history,
        }


def create_map(
    width: float,
    height: float,
    config: Optional[MapConfig] = None
) -> StreetMap:
    """Create an empty map over [0, width) x [0, height)."""
    chunk_size = config.chunk_size if config is not None else MapConfig().chunk_size
    return StreetMap(width, height, chunk_size)


def populate(
    street_map: StreetMap,
    block_count: int,
    rng: Optional[np.random.Generator] = None,
    config: Optional[MapConfig] = None
) -> Dict:
    """
    Run best-candidate sampling to completion on a map.

    Args:
        street_map: Map to populate
        block_count: Number of blocks to add
        rng: Random generator (seeded from config if None)
        config: Sampling configuration

    Returns:
        Generation metadata
    """
    sampler = BestCandidateSampler(street_map, config=config, rng=rng)
    return sampler.generate(block_count)
