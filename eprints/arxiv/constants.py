from __future__ import annotations

ARXIV_ATOM_NS = "http://www.w3.org/2005/Atom"
ARXIV_OPENSEARCH_NS = "http://a9.com/-/spec/opensearch/1.1/"
ARXIV_EXTENSION_NS = "http://arxiv.org/schemas/atom"

ARXIV_QUERY_ROUTE = "query"

ARXIV_SORT_BY_RELEVANCE = "relevance"
ARXIV_SORT_BY_LAST_UPDATED = "lastUpdatedDate"
ARXIV_SORT_BY_SUBMITTED = "submittedDate"
ARXIV_SORT_BY_ALLOWED = frozenset(
    {ARXIV_SORT_BY_RELEVANCE, ARXIV_SORT_BY_LAST_UPDATED, ARXIV_SORT_BY_SUBMITTED}
)
ARXIV_DEFAULT_SORT_BY = ARXIV_SORT_BY_RELEVANCE

ARXIV_SORT_ORDER_ASCENDING = "ascending"
ARXIV_SORT_ORDER_DESCENDING = "descending"
ARXIV_SORT_ORDER_ALLOWED = frozenset({ARXIV_SORT_ORDER_ASCENDING, ARXIV_SORT_ORDER_DESCENDING})
ARXIV_DEFAULT_SORT_ORDER = ARXIV_SORT_ORDER_DESCENDING

ARXIV_DEFAULT_START = 0
