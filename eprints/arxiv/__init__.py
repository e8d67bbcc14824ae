from eprints.arxiv.client import ArxivClient
from eprints.arxiv.eprints import EprintsService
from eprints.arxiv.errors import (
    ArxivError,
    ArxivParseError,
    EprintNotFoundError,
    InvalidURLError,
    NoMatchingEprintsError,
    ResponseReadError,
)
from eprints.arxiv.parser import parse_eprints_feed
from eprints.arxiv.subjects import SUBCATEGORIES, SUBJECTS, is_known_category
from eprints.arxiv.types import (
    Author,
    Category,
    Eprint,
    EprintListOptions,
    EprintsFeed,
    Link,
    QueryOptions,
    SearchOptions,
)

__all__ = [
    "ArxivClient",
    "ArxivError",
    "ArxivParseError",
    "Author",
    "Category",
    "Eprint",
    "EprintListOptions",
    "EprintNotFoundError",
    "EprintsFeed",
    "EprintsService",
    "InvalidURLError",
    "Link",
    "NoMatchingEprintsError",
    "QueryOptions",
    "ResponseReadError",
    "SUBCATEGORIES",
    "SUBJECTS",
    "SearchOptions",
    "is_known_category",
    "parse_eprints_feed",
]
