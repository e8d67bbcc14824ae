"""Reference tables of arXiv subjects and their subcategory codes.

These are exposed for callers that validate or display categories; the
client itself sends whatever category the caller supplies.
"""

from __future__ import annotations

from types import MappingProxyType

SUBJECTS = MappingProxyType(
    {
        "physics": "Physics",
        "math": "Mathematics",
        "cs": "Computer Science",
        "q-bio": "Quantitative Biology",
        "q-fin": "Quantitative Finance",
        "stat": "Statistics",
        "eess": "Electrical Engineering and Systems Science",
        "econ": "Economics",
    }
)

SUBCATEGORIES = MappingProxyType(
    {
        "physics": frozenset(
            {
                "acc-ph", "ao-ph", "app-ph", "atm-clus", "atom-ph", "bio-ph", "chem-ph",
                "class-ph", "comp-ph", "data-an", "ed-ph", "flu-dyn", "gen-ph", "geo-ph",
                "hist-ph", "ins-det", "med-ph", "optics", "plasm-ph", "pop-ph", "soc-ph",
                "space-ph",
            }
        ),
        "math": frozenset(
            {
                "AC", "AG", "AP", "AT", "CA", "CO", "CT", "CV", "DG", "DS", "FA", "GM",
                "GN", "GR", "GT", "HO", "IT", "KT", "LO", "MG", "MP", "NA", "NT", "OA",
                "OC", "PR", "QA", "RA", "RT", "SG", "SP", "ST",
            }
        ),
        "cs": frozenset(
            {
                "AI", "AR", "CC", "CE", "CG", "CL", "CR", "CV", "CY", "DB", "DC", "DL",
                "DM", "DS", "ET", "FL", "GL", "GR", "GT", "HC", "IR", "IT", "LG", "LO",
                "MA", "MM", "MS", "NA", "NE", "NI", "OH", "OS", "PF", "PL", "RO", "SC",
                "SD", "SE", "SI", "SY",
            }
        ),
        "q-bio": frozenset({"BM", "CB", "GN", "MN", "NC", "OT", "PE", "QM", "SC", "TO"}),
        "q-fin": frozenset({"CP", "EC", "GN", "MF", "PM", "PR", "RM", "ST", "TR"}),
        "stat": frozenset({"AP", "CO", "ME", "ML", "OT", "TH"}),
        "eess": frozenset({"AS", "IV", "SP"}),
        "econ": frozenset({"EM"}),
    }
)


def subject_name(code: str) -> str | None:
    return SUBJECTS.get(code)


def is_known_category(category: str) -> bool:
    """True for a bare subject (``cs``) or a ``subject.subcategory`` pair (``cs.AI``)."""
    subject, _, subcategory = category.strip().partition(".")
    if subject not in SUBCATEGORIES:
        return False
    if not subcategory:
        return True
    return subcategory in SUBCATEGORIES[subject]
