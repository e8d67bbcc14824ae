from __future__ import annotations

import re
from urllib.parse import urlparse

ARXIV_ABS_RE = re.compile(r"\b(?:arxiv:\s*)?([a-z-]+(?:\.[a-z]{2})?/\d{7}|\d{4}\.\d{4,5})(v\d+)?\b", re.I)
ARXIV_PATH_RE = re.compile(
    r"^/(?:abs|pdf|html|ps|format)/([a-z-]+(?:\.[a-z]{2})?/\d{7}|\d{4}\.\d{4,5})(v\d+)?(?:\.pdf)?/?$",
    re.I,
)


def normalize_arxiv_id(value: str | None) -> str | None:
    """Extract a bare arXiv identifier from an id, ``arXiv:`` tag or abs/pdf URL.

    The version suffix is kept when present: ``http://arxiv.org/abs/2301.00001v2``
    becomes ``2301.00001v2`` and ``arXiv:hep-th/9901001`` becomes ``hep-th/9901001``.
    """
    text = (value or "").strip()
    if not text:
        return None
    parsed = urlparse(text)
    if parsed.scheme in {"http", "https"} and "arxiv.org" in parsed.netloc.lower():
        return _arxiv_from_path(parsed.path)
    match = ARXIV_ABS_RE.fullmatch(text)
    if not match:
        return None
    return _format_match(match)


def _arxiv_from_path(path: str) -> str | None:
    match = ARXIV_PATH_RE.match(path or "")
    if not match:
        return None
    return _format_match(match)


def _format_match(match: re.Match[str]) -> str:
    version = (match.group(2) or "").lower()
    return f"{match.group(1)}{version}"
