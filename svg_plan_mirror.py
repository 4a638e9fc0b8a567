#!/usr/bin/env python3
"""
SVG Floor Plan Mirror

This module mirrors a floor plan drawn as SVG inside an HTML page. Each wing
of the building is a <g transform="translate(ox, oy)"> group; a wing listed in
the mirror table is flipped inside its own width and moved to the mirrored
position on the canvas. Room numbers are positioned in canvas coordinates and
are mirrored across the whole canvas instead.

Only polygon/polyline points, line x1/x2, the wing offset and room label x
are rewritten. Everything else, including circles and paths, is left as is.
"""

import argparse
import re
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from svg_markup_scanner import Edit, MarkupTag, apply_edits, find_block_end, iter_tags
from svg_plan_config import (
    CANVAS_WIDTH,
    MIRROR_OUTPUT_FILE,
    MIRROR_TABLE,
    PLAN_INPUT_FILE,
    ROOM_LABEL_GROUP_ID,
)
from svg_plan_errors import FloorPlanError
from svg_plan_io import read_text_file, write_text_file


_NUMBER = r'[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?'

_NUMBER_RE = re.compile(_NUMBER)

_TRANSLATE_RE = re.compile(
    rf'\s*translate\(\s*(?P<x>{_NUMBER})\s*(?:,\s*|\s+)(?P<y>{_NUMBER})\s*\)\s*'
)

_POINT_PAIR_RE = re.compile(r'(?P<x>[^\s,]+)(?P<sep>\s*,\s*)(?P<y>[^\s,]+)')


def parse_number(value: str) -> Optional[float]:
    """Convert an SVG number; None for anything else (nan, inf, 1_0, ...)."""
    if not _NUMBER_RE.fullmatch(value):
        return None
    return float(value)


def parse_translate(transform: Optional[str]) -> Optional[Tuple[str, str]]:
    """
    Split a transform consisting of a single translate(x, y) into its
    two offsets, returned as the original text.
    """
    if not transform:
        return None

    match = _TRANSLATE_RE.fullmatch(transform)
    if not match:
        return None
    return match.group('x'), match.group('y')


def mirror_offset(offset: float, width: float, canvas_width: float = CANVAS_WIDTH) -> float:
    """New x offset of a wing so that offset + width + new offset == canvas width."""
    return canvas_width - offset - width


def mirror_points(points: str, width: float) -> str:
    """
    Mirror every x of a points list inside a wing of the given width.

    x becomes width - x rounded to an integer; y and the separators keep
    their original text. Pairs whose x is not a number are left unchanged.
    """
    def mirror_pair(match):
        x = parse_number(match.group('x'))
        if x is None:
            return match.group(0)
        return f"{width - x:.0f}{match.group('sep')}{match.group('y')}"

    return _POINT_PAIR_RE.sub(mirror_pair, points)


def mirror_line_x(value: str, width: float) -> str:
    """Mirror a line endpoint; one decimal place, unparseable values unchanged."""
    x = parse_number(value)
    if x is None:
        return value
    return f"{width - x:.1f}"


def mirror_label_x(value: str, canvas_width: float = CANVAS_WIDTH) -> str:
    """Mirror a room label x across the whole canvas."""
    x = parse_number(value)
    if x is None:
        return value
    return f"{canvas_width - x:.0f}"


def _mirror_point_list(tag: MarkupTag, width: float) -> List[Edit]:
    attr = tag.attribute('points')
    if attr is None:
        return []
    return [(attr.value_start, attr.value_end, mirror_points(attr.value, width))]


def _mirror_line(tag: MarkupTag, width: float) -> List[Edit]:
    edits = []
    for name in ('x1', 'x2'):
        attr = tag.attribute(name)
        if attr is not None:
            edits.append((attr.value_start, attr.value_end, mirror_line_x(attr.value, width)))
    return edits


# Tag name -> function returning the edits that mirror that element in its wing
GEOMETRY_VISITORS: Dict[str, Callable[[MarkupTag, float], List[Edit]]] = {
    'polygon': _mirror_point_list,
    'polyline': _mirror_point_list,
    'line': _mirror_line,
}


def find_translate_groups(text: str) -> Iterator[Tuple[MarkupTag, Tuple[str, str], int]]:
    """
    Yield every outermost translate group in the markup.

    Yields:
        (open tag, (x offset text, y offset text), index just past the group)

    Groups that are never closed are skipped. Translate groups nested inside
    a yielded group belong to it and are not yielded on their own.
    """
    resume_at = 0
    for tag in iter_tags(text):
        if tag.start < resume_at or tag.closing or tag.name != 'g':
            continue

        offsets = parse_translate(tag.get('transform'))
        if offsets is None:
            continue

        end = find_block_end(text, tag)
        if end is None:
            continue

        resume_at = end
        yield tag, offsets, end


def _lookup_width(offset_text: str, mirror_table) -> Optional[float]:
    offset = parse_number(offset_text)
    if offset is None:
        return None
    return mirror_table.get(offset)


def mirror_wing_groups(text: str, mirror_table=MIRROR_TABLE, canvas_width: float = CANVAS_WIDTH) -> str:
    """Mirror the geometry and offset of every wing listed in the mirror table."""
    edits = []

    for open_tag, (x_text, y_text), end in find_translate_groups(text):
        width = _lookup_width(x_text, mirror_table)
        if width is None:
            continue

        for tag in iter_tags(text, open_tag.end, end):
            if tag.closing:
                continue
            visitor = GEOMETRY_VISITORS.get(tag.name)
            if visitor is not None:
                edits.extend(visitor(tag, width))

        new_offset = mirror_offset(float(x_text), width, canvas_width)
        transform = open_tag.attribute('transform')
        edits.append((transform.value_start, transform.value_end, f"translate({new_offset:.0f}, {y_text})"))

    return apply_edits(text, edits)


def _mirror_label(tag: MarkupTag, canvas_width: float) -> List[Edit]:
    x_attr = tag.attribute('x')
    if x_attr is None or parse_number(x_attr.value) is None:
        return []

    edits = [(x_attr.value_start, x_attr.value_end, mirror_label_x(x_attr.value, canvas_width))]

    anchor = tag.attribute('text-anchor')
    if anchor is None:
        edits.append((x_attr.end, x_attr.end, ' text-anchor="end"'))
    elif anchor.value != 'end':
        edits.append((anchor.value_start, anchor.value_end, 'end'))
    return edits


def mirror_room_labels(text: str, canvas_width: float = CANVAS_WIDTH, group_id: str = ROOM_LABEL_GROUP_ID) -> str:
    """
    Mirror the room labels of the room-number group across the whole canvas
    and right-align them.
    """
    edits = []

    resume_at = 0
    for open_tag in iter_tags(text):
        if open_tag.start < resume_at or open_tag.closing or open_tag.name != 'g':
            continue
        if open_tag.get('id') != group_id:
            continue

        end = find_block_end(text, open_tag)
        if end is None:
            continue
        resume_at = end

        for tag in iter_tags(text, open_tag.end, end):
            if tag.name == 'text' and not tag.closing:
                edits.extend(_mirror_label(tag, canvas_width))

    return apply_edits(text, edits)


def mirror_plan(text: str, mirror_table=MIRROR_TABLE, canvas_width: float = CANVAS_WIDTH,
                room_label_group_id: str = ROOM_LABEL_GROUP_ID) -> str:
    """
    Mirror a floor plan document.

    Args:
        text: HTML or SVG markup containing the plan
        mirror_table: Mapping of wing x offset -> wing width
        canvas_width: Width of the whole plan
        room_label_group_id: id of the group holding the room labels

    Returns:
        The mirrored markup. Wings whose offset is not in the mirror table
        come out byte-for-byte unchanged.
    """
    mirrored = mirror_wing_groups(text, mirror_table, canvas_width)
    return mirror_room_labels(mirrored, canvas_width, room_label_group_id)


def mirror_plan_file(input_path: str, output_path: str, mirror_table=MIRROR_TABLE,
                     canvas_width: float = CANVAS_WIDTH) -> str:
    """Read a plan, mirror it and write the result. Returns the mirrored markup."""
    print(f"Loading floor plan from {input_path}...")
    content = read_text_file(input_path)

    groups = list(find_translate_groups(content))
    print(f"Found {len(groups)} translate groups")
    for _, (x_text, y_text), _ in groups:
        width = _lookup_width(x_text, mirror_table)
        if width is None:
            print(f"  Skipping translate({x_text}, {y_text}): offset not in mirror table")
        else:
            new_offset = mirror_offset(float(x_text), width, canvas_width)
            print(f"  Mirroring translate({x_text}, {y_text}) -> translate({new_offset:.0f}, {y_text}), width {width:g}")

    mirrored = mirror_plan(content, mirror_table, canvas_width)
    write_text_file(output_path, mirrored)

    print(f"Mirrored plan written to {output_path}")
    print("   - polygon outlines mirrored")
    print("   - line endpoints recalculated")
    print("   - room labels moved and right-aligned")
    return mirrored


def main():
    """Main function to run the script."""
    parser = argparse.ArgumentParser(description='Mirror the wings of an SVG floor plan embedded in HTML')
    parser.add_argument('input', nargs='?', default=PLAN_INPUT_FILE, help='HTML file with the plan')
    parser.add_argument('output', nargs='?', default=MIRROR_OUTPUT_FILE, help='Mirrored HTML file to write')
    args = parser.parse_args()

    try:
        mirror_plan_file(args.input, args.output)
    except FloorPlanError as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
