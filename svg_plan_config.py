#!/usr/bin/env python3
"""
Floor Plan Configuration

Fixed settings shared by the mirror, export and rasterizer stages.
The values are compiled in; callers that need different ones pass them
explicitly to the functions that take them as keyword arguments.
"""

from types import MappingProxyType


def make_mirror_table(widths):
    """
    Build a read-only mirror table from an offset -> width mapping.

    Keys and values are stored as floats so that a parsed offset such as
    "50" or "50.0" finds the same entry.
    """
    return MappingProxyType({float(offset): float(width) for offset, width in widths.items()})


# Full horizontal extent of the plan, and the raster height used for PNG output
CANVAS_WIDTH = 2450
CANVAS_HEIGHT = 830

# translate() x offset of each wing -> width of that wing
MIRROR_TABLE = make_mirror_table({
    50: 920,
    970: 920,
    1890: 520,
})

ROOM_LABEL_GROUP_ID = 'room-numbers'

# Serializer tag sets
SELF_CLOSING_TAGS = frozenset({
    'circle', 'ellipse', 'line', 'path',
    'polygon', 'polyline', 'rect', 'use',
    'image', 'stop', 'animate', 'animateMotion',
    'animateTransform', 'set',
})
CONTAINER_TAGS = frozenset({'svg', 'g', 'defs', 'style', 'text'})
TEXT_CONTAINER_TAGS = frozenset({'text', 'style'})
INDENT = '    '

# Whole-canvas flip directives removed before rasterizing
MIRROR_TRANSFORM_ATTRIBUTES = (
    'transform="scale(-1, 1)"',
    'style="transform-origin: center;"',
)
MIRROR_CSS_DECLARATIONS = frozenset({
    'transform: scale(-1, 1);',
    'transform-box: fill-box;',
    'transform-origin: center;',
})

# Default file names
PLAN_INPUT_FILE = 'full.html'
MIRROR_OUTPUT_FILE = 'mirror.html'
SVG_OUTPUT_FILE = 'mirror.svg'
PNG_OUTPUT_FILE = 'mirror.png'

RASTERIZER_COMMAND = 'rsvg-convert'
RASTER_BACKGROUND = 'white'

PLACEHOLDER_HTML = """<!DOCTYPE html>
<html>
<head>
    <title>Sample Floor Plan</title>
</head>
<body>
    <h1>Sample Floor Plan</h1>

    <!-- Plan extracted by the export stage -->
    <svg id="plan" width="2450" height="830" viewBox="0 0 2450 830" xmlns="http://www.w3.org/2000/svg">
        <rect width="100%" height="100%" fill="#FFFFFF" />
        <g transform="translate(50, 100)">
            <polygon points="0,0 920,0 920,600 0,600" fill="none" stroke="#333" stroke-width="3" />
            <line x1="460" y1="0" x2="460" y2="600" stroke="#333" />
        </g>
        <g transform="translate(970, 100)">
            <polygon points="0,0 920,0 920,600 0,600" fill="none" stroke="#333" stroke-width="3" />
        </g>
        <g transform="translate(1890, 100)">
            <polygon points="0,0 520,0 520,600 0,600" fill="none" stroke="#333" stroke-width="3" />
        </g>
        <g id="room-numbers">
            <text x="280" y="420" font-family="Arial" font-size="24">101</text>
            <text x="1430" y="420" font-family="Arial" font-size="24">102</text>
            <text x="2150" y="420" font-family="Arial" font-size="24">103</text>
        </g>
    </svg>

    <p class="main-content">Placeholder plan created because the input file was missing.</p>
</body>
</html>
"""
