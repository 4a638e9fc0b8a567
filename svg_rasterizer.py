#!/usr/bin/env python3
"""
SVG Rasterizer

This module turns the exported plan SVG into a PNG. rsvg-convert is used when
it is installed since it handles text and CSS properly; otherwise the drawing
is rendered in-process with svglib and ReportLab, which has limited text
support.
"""

import os
import shutil
import subprocess
import tempfile

from PIL import Image
from reportlab.graphics import renderPM
from svglib.svglib import svg2rlg

from svg_plan_config import CANVAS_HEIGHT, CANVAS_WIDTH, RASTER_BACKGROUND, RASTERIZER_COMMAND
from svg_plan_errors import RasterizerError
from svg_transform_stripper import has_mirror_transform, strip_mirror_transforms


def rasterize_with_rsvg(svg_path, png_path, width=CANVAS_WIDTH, background=RASTER_BACKGROUND,
                        command=RASTERIZER_COMMAND):
    """
    Convert an SVG file to PNG with rsvg-convert.

    Raises:
        RasterizerError: if the command is not installed or fails
    """
    executable = shutil.which(command)
    if executable is None:
        raise RasterizerError(f"{command} is not installed")

    cmd = [
        executable,
        '-w', str(width),
        '-b', background,
        '--keep-aspect-ratio',
        '-o', png_path,
        svg_path,
    ]

    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except OSError as e:
        raise RasterizerError(f"Could not run {command}: {e}") from e

    if result.returncode != 0:
        output = (result.stdout or '') + (result.stderr or '')
        raise RasterizerError(
            f"{command} failed with exit code {result.returncode}\nOutput: {output}"
        )


def rasterize_with_svglib(svg_path, png_path, width=CANVAS_WIDTH, height=CANVAS_HEIGHT):
    """
    Render an SVG file to PNG with svglib and ReportLab.

    The drawing is stretched to width x height on a white background.

    Raises:
        RasterizerError: if svglib cannot read the file or ReportLab cannot
            render it (for instance when no renderPM backend is installed)
    """
    try:
        drawing = svg2rlg(svg_path)
    except Exception as e:
        raise RasterizerError(f"svglib could not read {svg_path}: {e}") from e
    if drawing is None:
        raise RasterizerError(f"svglib could not read {svg_path}")

    scale_x = width / drawing.width if drawing.width else 1
    scale_y = height / drawing.height if drawing.height else 1
    drawing.width = width
    drawing.height = height
    drawing.scale(scale_x, scale_y)

    try:
        image = renderPM.drawToPIL(drawing, bg=0xFFFFFF)
    except Exception as e:
        raise RasterizerError(f"ReportLab could not render {svg_path}: {e}") from e

    try:
        image.save(png_path, 'PNG')
    except OSError as e:
        raise RasterizerError(f"Error writing PNG file {png_path}: {e}") from e


def describe_png(png_path):
    """Return (width, height) of a PNG file."""
    with Image.open(png_path) as image:
        return image.size


def render_png(svg_text, png_path, width=CANVAS_WIDTH, height=CANVAS_HEIGHT):
    """
    Rasterize a serialized plan SVG without its whole-canvas mirror flip.

    Returns:
        Name of the backend that produced the PNG ('rsvg-convert' or 'svglib')
    """
    if has_mirror_transform(svg_text):
        print("Removing the mirror flip before rasterizing")
    clean_svg = strip_mirror_transforms(svg_text)

    with tempfile.NamedTemporaryFile(mode='w', suffix='.svg', delete=False, encoding='utf-8') as f:
        f.write(clean_svg)
        temp_path = f.name

    try:
        try:
            rasterize_with_rsvg(temp_path, png_path, width)
            backend = RASTERIZER_COMMAND
        except RasterizerError as e:
            print(f"Warning: {e}")
            print("Falling back to svglib (limited text support)")
            print("For better quality install: sudo apt-get install librsvg2-bin")
            rasterize_with_svglib(temp_path, png_path, width, height)
            backend = 'svglib'
    finally:
        os.remove(temp_path)

    actual_width, actual_height = describe_png(png_path)
    print(f"\n--> Created PNG file with {backend}: {png_path} (size: {actual_width}x{actual_height})")
    return backend
