from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import parse_qsl, urlencode

from eprints.arxiv.types import EprintListOptions, QueryOptions


@dataclass(frozen=True)
class QueryField:
    attr: str
    key: str
    omit_empty: bool = True
    comma: bool = False


_LIST_FIELDS = (
    QueryField(attr="search", key="search_query"),
    QueryField(attr="id_list", key="id_list", comma=True),
)
_QUERY_FIELDS = (
    QueryField(attr="max_results", key="max_results"),
    QueryField(attr="start", key="start"),
    QueryField(attr="sort_by", key="sortBy"),
    QueryField(attr="sort_order", key="sortOrder"),
)
_INT_ATTRS = frozenset({"max_results", "start"})


def encode_options(
    options: QueryOptions | None,
    *,
    default_max_results: int,
) -> list[tuple[str, str]]:
    """Serialize options into ordered query-string pairs after normalization."""
    if options is None:
        return []
    effective = options.normalized(default_max_results)
    pairs: list[tuple[str, str]] = []
    for query_field in _fields_for(effective):
        value = getattr(effective, query_field.attr)
        if query_field.omit_empty and not value:
            continue
        pairs.append((query_field.key, _format_value(value, comma=query_field.comma)))
    return pairs


def encode_query_string(options: QueryOptions | None, *, default_max_results: int) -> str:
    return urlencode(encode_options(options, default_max_results=default_max_results))


def decode_query_string(query: str) -> EprintListOptions:
    """Parse an encoded query string back into list options; unknown keys are ignored."""
    by_key = {query_field.key: query_field for query_field in (*_LIST_FIELDS, *_QUERY_FIELDS)}
    values: dict[str, object] = {}
    for key, raw in parse_qsl(query.lstrip("?")):
        query_field = by_key.get(key)
        if query_field is None:
            continue
        values[query_field.attr] = _parse_value(query_field, raw)
    return EprintListOptions(**values)


def _fields_for(options: QueryOptions) -> tuple[QueryField, ...]:
    if isinstance(options, EprintListOptions):
        return (*_LIST_FIELDS, *_QUERY_FIELDS)
    return _QUERY_FIELDS


def _format_value(value: object, *, comma: bool) -> str:
    if comma and isinstance(value, (list, tuple)):
        return ",".join(str(item) for item in value)
    return str(value)


def _parse_value(query_field: QueryField, raw: str) -> object:
    if query_field.comma:
        return tuple(item for item in raw.split(",") if item)
    if query_field.attr in _INT_ATTRS:
        return int(raw)
    return raw
