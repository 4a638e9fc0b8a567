#!/usr/bin/env python3
"""
Floor Plan Export

Extracts the plan <svg> from a (mirrored) HTML page, saves it as a standalone
SVG file and rasterizes it to PNG.
"""

import argparse

from svg_extractor import describe_document, find_first_svg, parse_html
from svg_plan_config import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    MIRROR_OUTPUT_FILE,
    PNG_OUTPUT_FILE,
    SVG_OUTPUT_FILE,
)
from svg_plan_errors import FloorPlanError
from svg_plan_io import ensure_file_exists, read_text_file, write_text_file
from svg_rasterizer import render_png
from svg_serializer import render_svg


def extract_and_save_svg(tree, output_path):
    """
    Find the first <svg> element of a parsed document and save it.

    Returns:
        The serialized SVG text
    """
    svg_node = find_first_svg(tree)
    svg_text = render_svg(svg_node)
    write_text_file(output_path, svg_text)

    print(f"\n--> Extracted SVG saved to: {output_path}")
    return svg_text


def export_plan(input_path=MIRROR_OUTPUT_FILE, svg_path=SVG_OUTPUT_FILE, png_path=PNG_OUTPUT_FILE,
                width=CANVAS_WIDTH, height=CANVAS_HEIGHT):
    """
    Run the export stages in order. The first failing stage stops the run;
    files written by earlier stages are kept.
    """
    ensure_file_exists(input_path)

    markup = read_text_file(input_path)
    print(f"File '{input_path}' opened successfully.")

    tree = parse_html(markup)
    describe_document(tree)

    svg_text = extract_and_save_svg(tree, svg_path)
    return render_png(svg_text, png_path, width, height)


def main():
    """Main function to run the script."""
    parser = argparse.ArgumentParser(description='Extract the plan SVG from an HTML page and render it to PNG')
    parser.add_argument('input', nargs='?', default=MIRROR_OUTPUT_FILE, help='HTML file with the plan')
    parser.add_argument('svg', nargs='?', default=SVG_OUTPUT_FILE, help='SVG file to write')
    parser.add_argument('png', nargs='?', default=PNG_OUTPUT_FILE, help='PNG file to write')
    args = parser.parse_args()

    try:
        export_plan(args.input, args.svg, args.png)
    except FloorPlanError as e:
        print(f"Error: {e}")
        return

    print("Processing complete!")


if __name__ == "__main__":
    main()
