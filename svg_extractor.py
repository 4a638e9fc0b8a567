#!/usr/bin/env python3
"""
SVG Extractor

This module parses an HTML page and locates the <svg> element holding the
floor plan, plus a couple of lookups used to describe the page while exporting.
"""

from typing import Iterator, Optional

from bs4 import BeautifulSoup, Tag
from bs4.element import NavigableString, PreformattedString

from svg_plan_errors import MissingElementError, ParseFailureError


def parse_html(markup: str) -> BeautifulSoup:
    """
    Parse an HTML document into a tree.

    html5lib follows the HTML parsing rules for embedded SVG, so camel-case
    names such as viewBox and linearGradient come back with their SVG spelling.
    Attribute values are kept as plain strings.
    """
    try:
        return BeautifulSoup(markup, 'html5lib', multi_valued_attributes=None)
    except (TypeError, ValueError) as e:
        raise ParseFailureError(f"Error parsing HTML: {e}") from e


def is_text_node(node) -> bool:
    """True for character data, False for comments, doctypes and elements."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def iter_elements(node: Tag) -> Iterator[Tag]:
    """Yield node and all its descendant elements in pre-order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        children = [child for child in current.children if isinstance(child, Tag)]
        stack.extend(reversed(children))


def find_first_svg(tree: Tag, tag_name: str = 'svg') -> Tag:
    """
    Return the first <svg> element of the document in pre-order.

    Raises:
        MissingElementError: if the document has no <svg> element
    """
    svg_node = next((element for element in iter_elements(tree) if element.name == tag_name), None)
    if svg_node is None:
        raise MissingElementError(f"Could not find a <{tag_name}> element in the HTML document")
    return svg_node


def find_tag_text(tree: Tag, tag_name: str) -> Optional[str]:
    """Text of the first element named tag_name that has a direct text child."""
    for element in iter_elements(tree):
        if element.name != tag_name:
            continue
        for child in element.children:
            if is_text_node(child):
                return str(child)
    return None


def find_paragraph_text(tree: Tag, css_class: str = 'main-content') -> Optional[str]:
    """Leading text of the first <p> with the given class, or None."""
    for element in iter_elements(tree):
        if element.name == 'p' and element.get('class') == css_class:
            first_child = next(iter(element.children), None)
            if first_child is not None and is_text_node(first_child):
                return str(first_child)
    return None


def describe_document(tree: Tag):
    """Print the page title and main paragraph of a parsed document."""
    print("--- Parsed document ---")

    title = find_tag_text(tree, 'title')
    if title:
        print(f"Found page title (<title>): {title}")

    paragraph = find_paragraph_text(tree)
    if paragraph:
        print(f"Found paragraph content: {paragraph}")
    else:
        print("No element with class 'main-content' found.")
