import os
import tempfile
import unittest

import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt

from settlement_map_generator.streetmap import StreetMap
from settlement_map_generator.visualization import plot_blocks, save_map_image


class TestVisualization(unittest.TestCase):

    def setUp(self):
        self.street_map = StreetMap(100.0, 80.0)
        self.street_map.add_block(20.0, 20.0)
        self.street_map.add_block(70.0, 50.0)
        self.street_map.add_edge(0, 1)

    def test_plot_blocks(self):
        fig, ax = plt.subplots()
        plot_blocks(self.street_map, ax=ax, show_chunks=True, extent=400.0)
        self.assertEqual(len(ax.collections), 1)
        self.assertEqual(ax.get_xlim(), (0.0, 400.0))
        plt.close(fig)

    def test_plot_does_not_mutate_map(self):
        before = self.street_map.positions()
        fig, ax = plt.subplots()
        plot_blocks(self.street_map, ax=ax)
        plt.close(fig)
        self.assertEqual(self.street_map.positions(), before)
        self.assertEqual(len(self.street_map.edges), 1)

    def test_save_map_image(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = save_map_image(
                self.street_map,
                os.path.join(tmp, "image-out", "maps.png"),
                figsize=(4, 3),
            )
            self.assertTrue(path.exists())
            self.assertGreater(path.stat().st_size, 0)

    def test_plot_empty_map(self):
        fig, ax = plt.subplots()
        plot_blocks(StreetMap(50.0, 50.0), ax=ax)
        self.assertEqual(len(ax.collections), 0)
        plt.close(fig)


if __name__ == "__main__":
    unittest.main()
