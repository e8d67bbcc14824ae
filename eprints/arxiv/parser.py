from __future__ import annotations

from datetime import datetime, timezone
import xml.etree.ElementTree as ET

from eprints.arxiv.constants import ARXIV_ATOM_NS, ARXIV_EXTENSION_NS, ARXIV_OPENSEARCH_NS
from eprints.arxiv.errors import ArxivParseError
from eprints.arxiv.types import ArxivOpenSearchMeta, Author, Category, Eprint, EprintsFeed, Link

_NAMESPACES = {
    "atom": ARXIV_ATOM_NS,
    "opensearch": ARXIV_OPENSEARCH_NS,
    "arxiv": ARXIV_EXTENSION_NS,
}
_FEED_TAG = f"{{{ARXIV_ATOM_NS}}}feed"


def parse_eprints_feed(payload: bytes | str) -> EprintsFeed:
    root = _parse_xml_root(payload)
    if root.tag != _FEED_TAG:
        raise ArxivParseError(f"Unexpected root element {root.tag!r}, expected Atom feed")
    opensearch = ArxivOpenSearchMeta(
        total_results=_opensearch_int(root, "opensearch:totalResults"),
        start_index=_opensearch_int(root, "opensearch:startIndex"),
        items_per_page=_opensearch_int(root, "opensearch:itemsPerPage"),
    )
    return EprintsFeed(
        title=_text(root, "atom:title"),
        id=_text(root, "atom:id"),
        updated=_timestamp(root, "atom:updated"),
        links=_links(root),
        entries=tuple(_parse_entry(entry_elem) for entry_elem in root.findall("atom:entry", _NAMESPACES)),
        opensearch=opensearch,
    )


def _parse_xml_root(payload: bytes | str) -> ET.Element:
    try:
        return ET.fromstring(payload)
    except ET.ParseError as exc:
        raise ArxivParseError(f"Invalid arXiv XML payload: {exc}") from exc


def _parse_entry(entry_elem: ET.Element) -> Eprint:
    return Eprint(
        id=_text(entry_elem, "atom:id"),
        title=_text(entry_elem, "atom:title"),
        authors=_authors(entry_elem),
        links=_links(entry_elem),
        categories=_categories(entry_elem),
        published=_timestamp(entry_elem, "atom:published"),
        updated=_timestamp(entry_elem, "atom:updated"),
        abstract=_text(entry_elem, "atom:summary"),
        primary_category=_primary_category(entry_elem),
        comment=_optional_text(entry_elem, "arxiv:comment"),
        journal_ref=_optional_text(entry_elem, "arxiv:journal_ref"),
        doi=_optional_text(entry_elem, "arxiv:doi"),
    )


def _optional_text(elem: ET.Element, path: str) -> str | None:
    node = elem.find(path, _NAMESPACES)
    if node is None or node.text is None:
        return None
    return str(node.text).strip() or None


def _text(elem: ET.Element, path: str) -> str:
    return _optional_text(elem, path) or ""


def _opensearch_int(root: ET.Element, path: str) -> int:
    text = _optional_text(root, path)
    if text is None:
        return 0
    try:
        return int(text)
    except ValueError as exc:
        raise ArxivParseError(f"Invalid integer value at {path}: {text!r}") from exc


def _timestamp(elem: ET.Element, path: str) -> datetime | None:
    text = _optional_text(elem, path)
    if text is None:
        return None
    try:
        value = datetime.fromisoformat(text)
    except ValueError as exc:
        raise ArxivParseError(f"Invalid timestamp at {path}: {text!r}") from exc
    # arXiv timestamps without an offset are UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _authors(entry_elem: ET.Element) -> tuple[Author, ...]:
    authors: list[Author] = []
    for author in entry_elem.findall("atom:author", _NAMESPACES):
        name = _optional_text(author, "atom:name")
        if name:
            authors.append(Author(name=name))
    return tuple(authors)


def _links(elem: ET.Element) -> tuple[Link, ...]:
    values: list[Link] = []
    for link in elem.findall("atom:link", _NAMESPACES):
        href = str(link.attrib.get("href") or "").strip()
        if not href:
            continue
        values.append(
            Link(
                href=href,
                rel=link.attrib.get("rel"),
                type=link.attrib.get("type"),
                title=link.attrib.get("title"),
            )
        )
    return tuple(values)


def _categories(entry_elem: ET.Element) -> tuple[Category, ...]:
    values: list[Category] = []
    for cat in entry_elem.findall("atom:category", _NAMESPACES):
        term = str(cat.attrib.get("term") or "").strip()
        if term:
            values.append(Category(term=term, scheme=cat.attrib.get("scheme")))
    return tuple(values)


def _primary_category(entry_elem: ET.Element) -> str | None:
    node = entry_elem.find("arxiv:primary_category", _NAMESPACES)
    if node is None:
        return None
    value = str(node.attrib.get("term") or "").strip()
    return value or None
