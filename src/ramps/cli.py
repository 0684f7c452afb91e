"""
Command-line entry point for the ramp palette generator.

Loads a palette config (YAML or built-in defaults), applies command-line
overrides, generates the palette and prints a one-line summary followed by
either a truecolor terminal preview or an export listing.

Usage (from repo root):
    python -m ramps
    python -m ramps --format hex --ramps 6
    python -m ramps --config configs/default.yaml --hue 30 --value 0.8
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from common import settings
from common.logging import setup_default_logging

from util.color import to_u8_rgb

from .color_types import Color
from .config import RampConfig, load_ramp_config
from .errors import ConfigError
from .export import ExportFormat, describe_config, export_palette
from .generator import generate_palette
from .palette import Palette

logger = logging.getLogger(__name__)

_FORMATS = ["preview"] + [fmt.value for fmt in ExportFormat]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="ramps",
        description="Pixel art color palette generator built from hue-shifted ramps.",
    )
    p.add_argument("--config", default=None, help="YAML file with a 'palette:' section")
    p.add_argument("--format", choices=_FORMATS, default="preview")
    p.add_argument("--hue", type=float, default=None, help="base hue in degrees [0, 360)")
    p.add_argument("--saturation", type=float, default=None, help="base saturation [0, 1]")
    p.add_argument("--value", type=float, default=None, help="base value [0, 1]")
    p.add_argument(
        "--colors-per-ramp",
        type=int,
        default=None,
        help="odd, >= 3; the loaded config (see --config) must already have delta tables of this length",
    )
    p.add_argument("--ramps", type=int, default=None, help="hue-rotated ramps per palette")
    p.add_argument("--hue-step", type=float, default=None, help="hue drift per index (deg)")
    p.add_argument("--log-level", default=None)
    return p


def resolve_config(args: argparse.Namespace) -> RampConfig:
    """Load the base config and apply command-line overrides."""
    path = args.config or settings.get().CONFIG_PATH
    cfg = load_ramp_config(path)

    base = cfg.base_color
    if args.hue is not None or args.saturation is not None or args.value is not None:
        base = Color.from_hsv(
            base.hue if args.hue is None else args.hue,
            base.saturation if args.saturation is None else args.saturation,
            base.value if args.value is None else args.value,
        )

    changes = {}
    if base != cfg.base_color:
        changes["base_color"] = base
    if args.colors_per_ramp is not None:
        changes["colors_per_ramp"] = args.colors_per_ramp
    if args.ramps is not None:
        changes["ramps_per_palette"] = args.ramps
    if args.hue_step is not None:
        changes["hue_step_per_index"] = args.hue_step
    return cfg.replace(**changes) if changes else cfg


def render_preview(palette: Palette) -> str:
    """Render each ramp as a row of truecolor ANSI blocks."""
    lines = []
    for ramp in palette:
        blocks = []
        for color in ramp:
            r, g, b = to_u8_rgb(color.to_srgb())
            blocks.append(f"\x1b[48;2;{r};{g};{b}m  ")
        lines.append("".join(blocks) + "\x1b[0m")
    return "\n".join(lines)


def render_listing(palette: Palette, fmt: ExportFormat) -> str:
    rows = export_palette(palette, fmt)
    return "\n".join(" ".join(_format_entry(e) for e in row) for row in rows)


def _format_entry(entry: object) -> str:
    if isinstance(entry, tuple):
        parts = (f"{v:.3f}" if isinstance(v, float) else str(v) for v in entry)
        return "(" + ",".join(parts) + ")"
    return str(entry)


def main(argv: Optional[Sequence[str]] = None, out: TextIO | None = None) -> int:
    out = out or sys.stdout
    args = build_parser().parse_args(argv)
    setup_default_logging(args.log_level or settings.get().LOG_LEVEL)

    try:
        cfg = resolve_config(args)
    except ConfigError as exc:
        logger.debug("invalid config", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    palette = generate_palette(cfg)
    print(describe_config(cfg), file=out)

    if args.format == "preview":
        if settings.get().ANSI_PREVIEW:
            print(render_preview(palette), file=out)
        else:
            print(render_listing(palette, ExportFormat.HEX), file=out)
    else:
        print(render_listing(palette, ExportFormat.from_value(args.format)), file=out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
