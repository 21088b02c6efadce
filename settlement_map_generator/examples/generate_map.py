#!/usr/bin/env python3
"""
Example script for generating a blue-noise settlement map.

Usage:
    python generate_map.py --blocks 300 --output image-out/maps.png
    python generate_map.py --config custom_config.json --show-grid
"""

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from settlement_map_generator import MapConfig, create_map, populate
from settlement_map_generator.metrics import compute_all_metrics
from settlement_map_generator.visualization import save_map_image


def main():
    parser = argparse.ArgumentParser(
        description="Generate a blue-noise settlement map"
    )
    parser.add_argument("--width", type=float, default=None, help="Area width")
    parser.add_argument("--height", type=float, default=None, help="Area height")
    parser.add_argument("--blocks", type=int, default=None, help="Number of blocks to place")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to config JSON (optional)"
    )
    parser.add_argument("--output", type=str, default=None, help="Output image path")
    parser.add_argument("--show-grid", action="store_true", help="Draw chunk grid")
    parser.add_argument("--verbose", action="store_true", help="Log every placed block")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.config:
        print(f"Loading config from {args.config}")
        config = MapConfig.from_json(args.config)
    else:
        config = MapConfig()

    # Command line overrides
    for name, value in (
        ("width", args.width),
        ("height", args.height),
        ("block_count", args.blocks),
        ("seed", args.seed),
        ("output_path", args.output),
    ):
        if value is not None:
            setattr(config, name, value)

    try:
        config.validate()
    except ValueError as e:
        print(f"✗ Invalid configuration: {e}")
        return 1

    print(f"\n{'='*60}")
    print("Settlement Map Generator")
    print(f"{'='*60}")
    print(f"Area: {config.width} x {config.height}")
    print(f"Blocks: {config.block_count}")
    print(f"Seed: {config.seed}")
    print(f"Output: {config.output_path}")
    print(f"{'='*60}\n")

    street_map = create_map(config.width, config.height, config)
    metadata = populate(street_map, config.block_count, config=config)

    metrics = compute_all_metrics(street_map)
    print(f"✓ Placed {metadata['blocks_added']} blocks")
    print(f"  - Candidates evaluated: {metadata['candidates_evaluated']}")
    print(f"  - Min distance: {metrics['min_distance']:.3f}")
    print(f"  - Mean nearest-neighbor distance: {metrics['mean_nn_distance']:.3f}")

    path = save_map_image(
        street_map,
        config.output_path,
        figsize=config.figure_size,
        extent=config.plot_extent,
        show_chunks=args.show_grid,
    )
    print(f"\nImage saved to: {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
