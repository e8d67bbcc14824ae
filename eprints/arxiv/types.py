from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Literal

from eprints.arxiv.constants import (
    ARXIV_DEFAULT_SORT_BY,
    ARXIV_DEFAULT_SORT_ORDER,
    ARXIV_DEFAULT_START,
    ARXIV_SORT_BY_ALLOWED,
    ARXIV_SORT_ORDER_ALLOWED,
)
from eprints.arxiv.identifiers import normalize_arxiv_id

ArxivSortBy = Literal["relevance", "lastUpdatedDate", "submittedDate"]
ArxivSortOrder = Literal["ascending", "descending"]


@dataclass(frozen=True)
class QueryOptions:
    """Pagination and ordering options shared by every arXiv query.

    Zero, negative or unknown values are legal here; ``normalized`` swaps
    them for the effective defaults instead of rejecting them.
    """

    max_results: int = 0
    start: int = ARXIV_DEFAULT_START
    sort_by: ArxivSortBy | str = ""
    sort_order: ArxivSortOrder | str = ""

    def normalized(self, default_max_results: int):
        return replace(
            self,
            max_results=self.max_results if self.max_results > 0 else default_max_results,
            start=max(self.start, ARXIV_DEFAULT_START),
            sort_by=self.sort_by if self.sort_by in ARXIV_SORT_BY_ALLOWED else ARXIV_DEFAULT_SORT_BY,
            sort_order=self.sort_order if self.sort_order in ARXIV_SORT_ORDER_ALLOWED else ARXIV_DEFAULT_SORT_ORDER,
        )


@dataclass(frozen=True)
class EprintListOptions(QueryOptions):
    search: str = ""
    id_list: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "id_list", _id_tuple(self.id_list))


def _id_tuple(id_list: Iterable[str] | str) -> tuple[str, ...]:
    # A bare string is one id, not a sequence of characters.
    if isinstance(id_list, str):
        return (id_list,) if id_list else ()
    return tuple(id_list)


# Clause prefixes in the order they are joined.
_SEARCH_FIELD_PREFIXES = (
    ("title", "ti"),
    ("author", "au"),
    ("abstract", "abs"),
    ("journal_reference", "jr"),
    ("category", "cat"),
)


@dataclass(frozen=True)
class SearchOptions:
    """Builds an arXiv ``search_query`` expression from named fields.

    ``all`` wins over every other field. Otherwise the non-empty fields are
    emitted as ``ti:``, ``au:``, ``abs:``, ``jr:``, ``cat:`` clauses, in that
    order, joined by ``AND``.
    """

    title: str = ""
    author: str = ""
    abstract: str = ""
    journal_reference: str = ""
    category: str = ""
    all: str = ""

    def clauses(self) -> list[tuple[str, str]]:
        if self.all:
            return [("all", self.all)]
        pairs: list[tuple[str, str]] = []
        for attr, prefix in _SEARCH_FIELD_PREFIXES:
            value = getattr(self, attr)
            if value:
                pairs.append((prefix, value))
        return pairs

    def __str__(self) -> str:
        return " AND ".join(f"{prefix}:{value}" for prefix, value in self.clauses())

    def to_list_options(
        self,
        *,
        max_results: int = 0,
        start: int = ARXIV_DEFAULT_START,
        sort_by: str = "",
        sort_order: str = "",
        id_list: Iterable[str] | str = (),
    ) -> EprintListOptions:
        return EprintListOptions(
            search=str(self),
            id_list=_id_tuple(id_list),
            max_results=max_results,
            start=start,
            sort_by=sort_by,
            sort_order=sort_order,
        )


@dataclass(frozen=True)
class Author:
    name: str


@dataclass(frozen=True)
class Category:
    term: str
    scheme: str | None = None


@dataclass(frozen=True)
class Link:
    href: str
    rel: str | None = None
    type: str | None = None
    title: str | None = None


@dataclass(frozen=True)
class Eprint:
    id: str
    title: str
    authors: tuple[Author, ...] = ()
    links: tuple[Link, ...] = ()
    categories: tuple[Category, ...] = ()
    published: datetime | None = None
    updated: datetime | None = None
    abstract: str = ""
    primary_category: str | None = None
    comment: str | None = None
    journal_ref: str | None = None
    doi: str | None = None

    @property
    def arxiv_id(self) -> str | None:
        return normalize_arxiv_id(self.id)

    @property
    def pdf_url(self) -> str | None:
        for link in self.links:
            if link.title == "pdf" or link.type == "application/pdf":
                return link.href
        return None

    def __str__(self) -> str:
        authors = ", ".join(author.name for author in self.authors)
        return f"Title: {self.title}\n\nAuthors: {authors}\n\nAbstract: {self.abstract}"


@dataclass(frozen=True)
class ArxivOpenSearchMeta:
    total_results: int = 0
    start_index: int = 0
    items_per_page: int = 0


@dataclass(frozen=True)
class EprintsFeed:
    title: str = ""
    id: str = ""
    updated: datetime | None = None
    links: tuple[Link, ...] = ()
    entries: tuple[Eprint, ...] = ()
    opensearch: ArxivOpenSearchMeta = field(default_factory=ArxivOpenSearchMeta)
