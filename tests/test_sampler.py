import unittest

import numpy as np

from settlement_map_generator import (
    BestCandidateSampler,
    MapConfig,
    StreetMap,
    create_map,
    populate,
)
from settlement_map_generator.metrics import compare_to_uniform


class FixedRandom:
    """Stand-in random source returning queued arrays from random()."""

    def __init__(self, *arrays):
        self.arrays = [np.asarray(a, dtype=float) for a in arrays]

    def random(self, size):
        values = self.arrays.pop(0)
        assert len(values) == size
        return values


class TestBestCandidate(unittest.TestCase):

    def test_ties_go_to_first_candidate(self):
        street_map = StreetMap(128.0, 128.0)
        sampler = BestCandidateSampler(street_map, rng=FixedRandom([0.25, 0.75], [0.5, 0.5]))
        block, score = sampler.add_best_candidate(2)
        self.assertEqual(block, 0)
        self.assertEqual(score, 1024.0)
        self.assertEqual(street_map.positions()[0], (32.0, 64.0))

        street_map = StreetMap(128.0, 128.0)
        sampler = BestCandidateSampler(street_map, rng=FixedRandom([0.75, 0.25], [0.5, 0.5]))
        sampler.add_best_candidate(2)
        self.assertEqual(street_map.positions()[0], (96.0, 64.0))

    def test_strictly_greatest_wins(self):
        street_map = StreetMap(128.0, 128.0)
        sampler = BestCandidateSampler(street_map, rng=FixedRandom([0.25, 0.5], [0.5, 0.5]))
        _, score = sampler.add_best_candidate(2)
        self.assertEqual(score, 4096.0)
        self.assertEqual(street_map.positions()[0], (64.0, 64.0))

    def test_zero_score_candidate_still_committed(self):
        street_map = StreetMap(128.0, 128.0)
        sampler = BestCandidateSampler(street_map, rng=FixedRandom([0.0], [0.5]))
        block, score = sampler.add_best_candidate(1)
        self.assertEqual((block, score), (0, 0.0))
        self.assertEqual(len(street_map), 1)

    def test_existing_blocks_push_candidates_away(self):
        street_map = StreetMap(128.0, 128.0)
        street_map.add_block(64.0, 64.0)
        # (64, 64) now scores 0, (32, 64) scores min(32^2, 32^2)
        sampler = BestCandidateSampler(street_map, rng=FixedRandom([0.5, 0.25], [0.5, 0.5]))
        block, score = sampler.add_best_candidate(2)
        self.assertEqual(block, 1)
        self.assertEqual(score, 1024.0)

    def test_invalid_budget(self):
        sampler = BestCandidateSampler(StreetMap(64.0, 64.0))
        with self.assertRaises(ValueError):
            sampler.add_best_candidate(0)


class TestGenerate(unittest.TestCase):

    def test_block_count(self):
        street_map = StreetMap(300.0, 200.0)
        metadata = BestCandidateSampler(street_map, seed=1).generate(30)
        self.assertEqual(len(street_map), 30)
        self.assertEqual(metadata["blocks_added"], 30)
        self.assertEqual(len(metadata["score_history"]), 30)

    def test_candidate_budget_grows(self):
        street_map = StreetMap(100.0, 100.0)
        metadata = BestCandidateSampler(street_map, seed=3).generate(3)
        self.assertEqual(metadata["candidates_evaluated"], 10 + 20 + 30)

    def test_custom_budget(self):
        config = MapConfig(candidate_base=4, candidate_step=0)
        street_map = StreetMap(100.0, 100.0)
        metadata = BestCandidateSampler(street_map, config=config).generate(5)
        self.assertEqual(metadata["candidates_evaluated"], 20)

    def test_zero_blocks(self):
        street_map = StreetMap(100.0, 100.0)
        metadata = BestCandidateSampler(street_map).generate(0)
        self.assertEqual(len(street_map), 0)
        self.assertIsNone(metadata["final_score"])

    def test_degenerate_area(self):
        street_map = StreetMap(0.0, 100.0)
        with self.assertLogs("settlement_map_generator.sampler", level="WARNING"):
            metadata = BestCandidateSampler(street_map).generate(5)
        self.assertEqual(metadata["blocks_added"], 0)
        self.assertEqual(len(street_map), 0)

    def test_negative_count(self):
        with self.assertRaises(ValueError):
            BestCandidateSampler(StreetMap(10.0, 10.0)).generate(-1)

    def test_blocks_inside_area_and_chunk(self):
        street_map = StreetMap(150.0, 90.0)
        BestCandidateSampler(street_map, seed=11).generate(40)
        for i, block in enumerate(street_map.blocks):
            self.assertTrue(0.0 <= block.x < 150.0)
            self.assertTrue(0.0 <= block.y < 90.0)
            self.assertEqual(block.chunk_index, street_map.grid.locate(block.x, block.y))
            self.assertIn(i, street_map.grid.chunk_blocks(block.chunk_index))
        self.assertEqual(sum(len(c.blocks) for c in street_map.grid.chunks), 40)

    def test_deterministic_with_seed(self):
        first = create_map(200.0, 200.0)
        second = create_map(200.0, 200.0)
        populate(first, 25, rng=np.random.default_rng(7))
        populate(second, 25, rng=np.random.default_rng(7))
        self.assertEqual(first.positions(), second.positions())

        third = create_map(200.0, 200.0)
        populate(third, 25, rng=np.random.default_rng(8))
        self.assertNotEqual(first.positions(), third.positions())

    def test_seed_from_config(self):
        config = MapConfig(seed=5)
        first = create_map(120.0, 120.0, config)
        second = create_map(120.0, 120.0, config)
        populate(first, 10, config=config)
        populate(second, 10, config=config)
        np.testing.assert_array_equal(first.coordinates(), second.coordinates())

    def test_spacing_beats_uniform(self):
        street_map = create_map(300.0, 300.0)
        populate(street_map, 100, rng=np.random.default_rng(2024))
        comparison = compare_to_uniform(street_map, rng=np.random.default_rng(99))
        self.assertGreater(
            comparison["generated_min_distance"],
            comparison["uniform_min_distance"]
        )
        self.assertGreater(comparison["ratio"], 1.0)


if __name__ == "__main__":
    unittest.main()
