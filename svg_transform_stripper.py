"""
Removes the whole-canvas horizontal flip from a serialized SVG.

Mirrored plans are displayed through transform="scale(-1, 1)" on the <svg>
root plus CSS that flips the text back. A rasterizer needs the plain drawing,
so these exact directives are cut out. Only the exact spellings listed in
svg_plan_config are recognised.
"""

from svg_plan_config import MIRROR_CSS_DECLARATIONS, MIRROR_TRANSFORM_ATTRIBUTES


def has_mirror_transform(svg_text, attributes=MIRROR_TRANSFORM_ATTRIBUTES):
    """True if the SVG still carries the whole-canvas flip attribute."""
    return attributes[0] in svg_text


def strip_mirror_transforms(svg_text, attributes=MIRROR_TRANSFORM_ATTRIBUTES,
                            css_declarations=MIRROR_CSS_DECLARATIONS):
    """
    Remove the flip attributes and every line consisting only of one of the
    counter-transform CSS declarations.
    """
    result = svg_text

    for attribute in attributes:
        result = result.replace(attribute, '')

    lines = result.split('\n')
    kept = [line for line in lines if line.strip() not in css_declarations]
    return '\n'.join(kept)
