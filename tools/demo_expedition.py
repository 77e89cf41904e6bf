#!/usr/bin/env python3
"""Print outcome bands for a sample expedition, with and without a loadout.

Usage:
    python tools/demo_expedition.py [SECTOR ...]

If no sectors are given, a mixed sample expedition is used.
"""

import sys

from expedition.estimator import estimate
from expedition.renderers import TextRenderer

SAMPLE = ["LANDING", "FOREST", "FOREST", "INTELLIGENT", "INTELLIGENT", "PREDATOR", "CAVE", "RUINS"]
LOADOUT = ["pilot", "defensive_signal", "navigation_aid", "scanning_aid"]


def main() -> None:
    sectors = sys.argv[1:] or SAMPLE
    renderer = TextRenderer()
    for effects in ([], LOADOUT):
        report = estimate(sectors, effects)
        print("\n".join(renderer.render_report(report)))
        print()


if __name__ == "__main__":
    main()
