"""Regex scanners for generator-produced page markup.

Extraction works on attribute text, not on a parsed document: the markup is
generator output and the contract is defined in terms of ``href``/``id``/
``name`` attribute values.
"""

from __future__ import annotations

import posixpath
import re

from .config import LinkRules
from .model import Link

HREF_RE = re.compile(r' href="([^"?#]*)(#([^"?]*))?([^"]*)?"')
ID_RE = re.compile(r' id="([^"]*)"')
NAME_RE = re.compile(r' name="([^"]*)"')
MARKDOWN_LINK_RE = re.compile(r".{0,30}\]\[.{0,30}")

_EXTERNAL_PREFIXES = ("https://", "http://", "mailto:", "&")


def extract_fragments(text: str) -> frozenset[str]:
    found = set(ID_RE.findall(text))
    found.update(NAME_RE.findall(text))
    return frozenset(found)


def find_markdown_artifacts(text: str) -> list[str]:
    return [f"Incorrect markdown link: {match.group(0)}" for match in MARKDOWN_LINK_RE.finditer(text)]


def is_skipped(path: str, rules: LinkRules) -> bool:
    if path.startswith(_EXTERNAL_PREFIXES):
        return True
    return path.startswith(tuple(rules.skip_prefixes))


def resolve_relative(page_path: str, subpath: str) -> str:
    base = posixpath.dirname(page_path)
    while subpath.startswith("../"):
        base = posixpath.dirname(base)
        subpath = subpath[3:]
    return posixpath.join(base, subpath)


def resolve_target(page_path: str, path: str, rules: LinkRules) -> str | None:
    """Map one href path part to a Page Path, or ``None`` when it is skipped."""
    if is_skipped(path, rules):
        return None
    if path.startswith("/"):
        return rules.with_extension(path)
    return rules.with_extension(resolve_relative(page_path, path))


def extract_links(text: str, page_path: str, rules: LinkRules | None = None) -> tuple[list[Link], list[str]]:
    rules = rules or LinkRules()
    links: list[Link] = []
    for match in HREF_RE.finditer(text):
        path, fragment = match.group(1), match.group(3)
        if not path:
            # same-page anchor
            if fragment:
                links.append(Link(rules.with_extension(page_path), fragment))
            continue
        target = resolve_target(page_path, path, rules)
        if target is not None:
            links.append(Link(target, fragment))
    return links, find_markdown_artifacts(text)
