#!/usr/bin/env python3
#
# PROJECT: cube-scene-renderer
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import sys
import os

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from cube_scene_renderer.demo import DemoApp


def build_parser():
    epilog = """\
examples:
  %(prog)s                                    Demo cube as JSON primitives
  %(prog)s --all --preview                    Every feature, braille preview
  %(prog)s --all --preview --ascii --mono     Plain ASCII preview
  %(prog)s cube.json --options scene.json     Render a saved snapshot
  %(prog)s --all --per-axis-tags --indent 2   Distinct x-/y-/z- axis tags
"""
    parser = argparse.ArgumentParser(
        description="Cube scene renderer",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("snapshot", nargs='?',
                        help="Path to a projected cube snapshot (.json)")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--options",
                        help="Path to scene options (.json)")
    source.add_argument("--all", action="store_true",
                        help="Enable every optional feature with default styling")
    parser.add_argument("--per-axis-tags", action="store_true",
                        help="Tag axis lines x-/y-/z-<name> instead of x-<name>")
    parser.add_argument("--yaw", type=float, default=0.6,
                        help="Demo cube camera yaw in radians (default: 0.6)")
    parser.add_argument("--pitch", type=float, default=0.4,
                        help="Demo cube camera pitch in radians (default: 0.4)")
    parser.add_argument("--distance", type=float, default=8.0,
                        help="Demo cube camera distance (default: 8.0)")
    parser.add_argument("--preview", action="store_true",
                        help="Draw a text preview instead of printing JSON")
    parser.add_argument("--ascii", action="store_true",
                        help="Use ASCII characters instead of Braille")
    parser.add_argument("--mono", action="store_true",
                        help="Disable ANSI colors in the preview")
    parser.add_argument("--width", type=int, default=80,
                        help="Preview width in characters (default: 80)")
    parser.add_argument("--height", type=int, default=24,
                        help="Preview height in rows (default: 24)")
    parser.add_argument("--indent", type=int, default=None,
                        help="JSON indent (default: compact)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Print a per-tag summary to stderr")
    return parser


def parse_args(argv=None):
    return build_parser().parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    try:
        DemoApp(args).run()
    except (OSError, ValueError, KeyError, IndexError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
