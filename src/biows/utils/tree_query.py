"""
Tree query helpers shared by the data source clients.

JSON payloads are navigated with dotted/indexed paths such as
``query.redirects[0].to``; XML payloads with ElementTree paths such as
``.//Article/ArticleTitle`` or ``DocSum/Item[@Name='Division']``.
"""

from __future__ import annotations

import json
import re
import xml.etree.ElementTree as ET
from typing import Any

_PATH_TOKEN = re.compile(r"([^.\[\]]+)|\[(\d+)\]")


class PayloadParseError(ValueError):
    """Raised when a response body cannot be parsed into a tree."""


def parse_json(text: str) -> Any:
    """Parse a JSON document, raising PayloadParseError on malformed input."""
    try:
        return json.loads(text)
    except (json.JSONDecodeError, TypeError) as e:
        raise PayloadParseError(f"Failed to parse JSON: {e}") from e


def parse_xml(data: bytes | str) -> ET.Element:
    """Parse an XML document and return its root element."""
    try:
        return ET.fromstring(data)
    except ET.ParseError as e:
        raise PayloadParseError(f"Failed to parse XML: {e}") from e


def split_path(path: str) -> list[str | int]:
    """Split ``a.b[0].c`` into ``["a", "b", 0, "c"]``."""
    steps: list[str | int] = []
    for name, index in _PATH_TOKEN.findall(path):
        steps.append(int(index) if index else name)
    return steps


def find_path(tree: Any, path: str) -> Any | None:
    """Return the value at *path* in a parsed JSON tree, or None if any step is missing."""
    node = tree
    for step in split_path(path):
        if isinstance(step, int):
            if not isinstance(node, list) or step >= len(node):
                return None
            node = node[step]
        else:
            if not isinstance(node, dict) or step not in node:
                return None
            node = node[step]
    return node


def element_text(elem: ET.Element) -> str:
    """Full text content of an element, including text inside nested markup."""
    return "".join(elem.itertext())


def xml_text(elem: ET.Element, path: str) -> str | None:
    """Text content of the first element matching *path*, or None."""
    found = elem.find(path)
    return element_text(found) if found is not None else None


def xml_texts(elem: ET.Element, path: str) -> list[str]:
    """Text content of every element matching *path*, in document order."""
    return [element_text(found) for found in elem.iterfind(path)]
