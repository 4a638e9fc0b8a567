#!/usr/bin/env python3
"""
SVG Markup Scanner

This module tokenizes HTML/SVG markup into tags with attribute spans so that
individual attribute values can be rewritten in place while every other
character of the document stays exactly as it was.
"""

import re
from typing import Iterator, List, NamedTuple, Optional, Tuple


# Comments are matched first so tags inside them are never reported
_TOKEN_RE = re.compile(
    r'<!--.*?-->'
    r'|<(?P<closing>/?)(?P<name>[A-Za-z][^\s/>]*)'
    r'(?P<attrs>(?:[^>"\']|"[^"]*"|\'[^\']*\')*?)'
    r'(?P<self_closing>/?)>',
    re.DOTALL,
)

_ATTRIBUTE_RE = re.compile(
    r'(?P<name>[^\s=/>"\']+)'
    r'(?:\s*=\s*(?:"(?P<dq>[^"]*)"|\'(?P<sq>[^\']*)\'|(?P<bare>[^\s"\'>]+)))?',
    re.DOTALL,
)


class Attribute(NamedTuple):
    """A tag attribute; spans are absolute offsets into the scanned text."""
    name: str
    value: str
    value_start: int
    value_end: int
    end: int


class MarkupTag(NamedTuple):
    """A start, end or self-closing tag found in the scanned text."""
    name: str
    start: int
    end: int
    closing: bool
    self_closing: bool
    attributes: Tuple[Attribute, ...]

    def attribute(self, name: str) -> Optional[Attribute]:
        for attr in self.attributes:
            if attr.name == name:
                return attr
        return None

    def get(self, name: str, default=None):
        attr = self.attribute(name)
        return attr.value if attr is not None else default


Edit = Tuple[int, int, str]


def parse_attributes(source: str, offset: int = 0) -> Tuple[Attribute, ...]:
    """
    Parse the attribute section of a tag.

    Args:
        source: Text between the tag name and the closing '>'
        offset: Absolute position of source in the scanned document

    Returns:
        Attributes in document order. Valueless attributes get an empty value
        whose span sits at the end of the attribute name.
    """
    attributes = []
    for match in _ATTRIBUTE_RE.finditer(source):
        for group in ('dq', 'sq', 'bare'):
            if match.group(group) is not None:
                value = match.group(group)
                value_start = match.start(group) + offset
                value_end = match.end(group) + offset
                break
        else:
            value = ''
            value_start = value_end = match.end('name') + offset

        attributes.append(Attribute(
            name=match.group('name'),
            value=value,
            value_start=value_start,
            value_end=value_end,
            end=match.end() + offset,
        ))
    return tuple(attributes)


def iter_tags(text: str, pos: int = 0, endpos: Optional[int] = None) -> Iterator[MarkupTag]:
    """Yield every tag in text[pos:endpos] in document order."""
    if endpos is None:
        endpos = len(text)

    for match in _TOKEN_RE.finditer(text, pos, endpos):
        if match.group('name') is None:
            continue  # comment

        yield MarkupTag(
            name=match.group('name'),
            start=match.start(),
            end=match.end(),
            closing=bool(match.group('closing')),
            self_closing=bool(match.group('self_closing')),
            attributes=parse_attributes(match.group('attrs'), match.start('attrs')),
        )


def find_block_end(text: str, open_tag: MarkupTag) -> Optional[int]:
    """
    Find the end of the element opened by open_tag.

    Nested elements with the same name are counted so that the matching
    close tag is found, not the first one.

    Returns:
        Index just past the matching close tag, or None if the element is
        never closed.
    """
    if open_tag.self_closing:
        return open_tag.end

    depth = 1
    for tag in iter_tags(text, open_tag.end):
        if tag.name != open_tag.name:
            continue
        if tag.closing:
            depth -= 1
            if depth == 0:
                return tag.end
        elif not tag.self_closing:
            depth += 1

    return None


def apply_edits(text: str, edits: List[Edit]) -> str:
    """
    Apply (start, end, replacement) edits to text.

    Edits must not overlap. An edit with start == end is an insertion.
    """
    if not edits:
        return text

    pieces = []
    position = 0
    for start, end, replacement in sorted(edits, key=lambda edit: (edit[0], edit[1])):
        pieces.append(text[position:start])
        pieces.append(replacement)
        position = end
    pieces.append(text[position:])
    return ''.join(pieces)
