#!/usr/bin/env python3
"""
SVG Serializer

This module writes an SVG element taken from a parsed HTML tree back out as
standalone SVG/XML text. An HTML serializer would write <rect></rect> and
could add whitespace inside <text>; here geometry elements self-close, the
container elements (svg, g, defs, style, text) always keep an explicit close
tag, and nothing is added inside text and style content.

Attributes are written in the order the parsed tree holds them. html5lib moves
namespaced attributes (xmlns, xmlns:xlink, xlink:href) after the plain ones,
so they can come out later than in the source page.
"""

from bs4 import Tag
from bs4.element import Comment

from svg_extractor import find_first_svg, is_text_node, parse_html
from svg_plan_config import CONTAINER_TAGS, INDENT, SELF_CLOSING_TAGS, TEXT_CONTAINER_TAGS


def format_attributes(element: Tag) -> str:
    """Attributes as they appear in an open tag; values are written as is."""
    parts = []
    for name, value in element.attrs.items():
        if isinstance(value, list):
            value = ' '.join(value)
        parts.append(f' {name}="{value}"')
    return ''.join(parts)


def render_svg(node: Tag, self_closing_tags=SELF_CLOSING_TAGS, container_tags=CONTAINER_TAGS,
               text_container_tags=TEXT_CONTAINER_TAGS, indent_unit: str = INDENT) -> str:
    """
    Render an element and its subtree as SVG text.

    Args:
        node: Element to render, usually the <svg> root
        self_closing_tags: Geometry tags written as <tag ... /> when childless
        container_tags: Tags that keep open and close tags even when empty
        text_container_tags: Tags whose content is written inline, untouched
        indent_unit: Indentation added per nesting level

    Returns:
        The rendered SVG, ending with a newline
    """
    parts = []

    def render(current, depth, inline=False):
        indent = '' if inline else indent_unit * depth
        newline = '' if inline else '\n'

        if isinstance(current, Comment):
            parts.append(f"{indent}<!--{current}-->{newline}")

        elif isinstance(current, Tag):
            name = current.name
            children = list(current.children)
            parts.append(f"{indent}<{name}{format_attributes(current)}")

            if not children and (name in self_closing_tags or name not in container_tags):
                parts.append(f" />{newline}")

            elif inline or name in text_container_tags:
                parts.append(">")
                for child in children:
                    render(child, 0, inline=True)
                parts.append(f"</{name}>{newline}")

            else:
                parts.append(">\n")
                for child in children:
                    render(child, depth + 1)
                parts.append(f"{indent}</{name}>\n")

        elif is_text_node(current):
            if inline:
                parts.append(str(current))
            elif current.strip():
                parts.append(f"{indent}{current.strip()}\n")

    render(node, 0)
    return ''.join(parts)


def extract_svg(markup: str) -> str:
    """Parse an HTML document and render its first <svg> element."""
    return render_svg(find_first_svg(parse_html(markup)))
