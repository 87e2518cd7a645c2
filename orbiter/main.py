"""
main.py
-------
Entry point for the Orbiter game.

Usage:
    orbiter                          # Play with the bundled orbit.json
    orbiter --config my_orbit.json   # Use another config file
    orbiter --frames 600             # Run 600 frames then exit
"""

import argparse

from orbiter.core.debug.debug_logger import DebugLogger, LoggerConfig
from orbiter.core.runtime.main_loop import MainLoop
from orbiter.entities.orbit.orbit_config import ORBIT_CONFIG_FILE


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="One-button orbit game")
    parser.add_argument("--config", default=ORBIT_CONFIG_FILE,
                        help="Orbit config file (name or path)")
    parser.add_argument("--frames", type=int, default=0,
                        help="Exit after N frames (0 = run until quit)")
    parser.add_argument("--verbose", action="store_true",
                        help="Enable orbit/input state logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    if args.verbose:
        LoggerConfig.enable_verbose()

    DebugLogger.section("Orbiter")
    MainLoop(config_file=args.config, max_frames=args.frames).run()


if __name__ == "__main__":
    main()
