#
# PROJECT: cube-scene-renderer
# MODULE: cube_scene_renderer/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import json
import sys
from collections import Counter
from dataclasses import replace

from .camera import Camera, project_demo_cube
from .config import SceneOptions, per_axis_tag, shared_axis_tag
from .preview import preview_lines
from .renderer import SceneCubeRenderer
from .snapshot import CubeSnapshot


class DemoApp:
    """
    Command-line harness: load or synthesize a cube snapshot, load options,
    render, then print either the primitive list as JSON or a text preview.
    """

    def __init__(self, args):
        self.args = args

        # ── Snapshot: file or projected demo cube ───────────────────────
        if args.snapshot:
            self.snapshot = CubeSnapshot.from_file(args.snapshot)
        else:
            camera = Camera(yaw=args.yaw, pitch=args.pitch, distance=args.distance)
            self.snapshot = project_demo_cube(camera)

        # ── Options: file, everything on, or bare defaults ──────────────
        axis_tag = per_axis_tag if args.per_axis_tags else shared_axis_tag
        if args.options:
            options = SceneOptions.from_file(args.options)
            if args.per_axis_tags:
                options = replace(options, axis_tag=axis_tag)
        elif args.all:
            options = SceneOptions.all_enabled(axis_tag=axis_tag)
        else:
            options = SceneOptions(axis_tag=axis_tag)
        self.options = options

        self.renderer = SceneCubeRenderer(self.snapshot, self.options)

    def run(self, out=None, err=None):
        out = out or sys.stdout
        err = err or sys.stderr
        primitives = self.renderer.render()

        if self.args.verbose:
            counts = Counter(p.tag for p in primitives)
            print(f"{len(primitives)} primitives", file=err)
            for tag, n in counts.items():
                print(f"  {tag}: {n}", file=err)

        if self.args.preview:
            rows = preview_lines(
                primitives,
                width=self.args.width,
                height=self.args.height,
                use_color=not self.args.mono,
                use_braille=not self.args.ascii,
            )
            for row in rows:
                print(row, file=out)
        else:
            json.dump([p.to_dict() for p in primitives], out, indent=self.args.indent)
            out.write("\n")
        return primitives
