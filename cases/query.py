"""
Filter, sort and paginate the projected case list.

The pipeline runs over serialized cases (the dicts the list endpoint returns)
in a fixed order: status filter, paralegal filter, name search, sort, page.
It never mutates its input, and the same ``ListQuery`` over the same list
always yields the same page.
"""
import math
from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation

from django.utils.dateparse import parse_datetime

from .models import normalize_status

ALL = "All"
NOT_ASSIGNED = "Not Assigned"
ASC = "asc"
DESC = "desc"
SORT_DIRECTIONS = (ASC, DESC)
DEFAULT_PAGE_SIZE = 30


def _text_key(value):
    return value.casefold() if isinstance(value, str) else None


def _amount_key(value):
    if value is None or value == "":
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return None


def _date_key(value):
    if isinstance(value, str):
        return parse_datetime(value)
    return value


# Wire field -> sort key.
SORT_KEYS = {
    "clientName": _text_key,
    "caseType": _text_key,
    "status": lambda value: normalize_status(value).casefold(),
    "paralegal": _text_key,
    "createdAt": _date_key,
    "totalContract": _amount_key,
    "latestNote": _text_key,
}
SORT_FIELDS = tuple(SORT_KEYS)


@dataclass(frozen=True)
class ListQuery:
    status: str = ALL
    paralegal: str = ALL
    search: str = ""
    sort_field: str = None
    sort_direction: str = ASC
    page: int = 1

    def with_status(self, status):
        return replace(self, status=status, page=1)

    def with_paralegal(self, paralegal):
        return replace(self, paralegal=paralegal, page=1)

    def with_search(self, search):
        return replace(self, search=search, page=1)

    def toggle_sort(self, field):
        """Selecting the current field flips direction; a new field starts ascending."""
        if field not in SORT_KEYS:
            raise ValueError(f"Unknown sort field: {field}")
        if field == self.sort_field:
            direction = DESC if self.sort_direction == ASC else ASC
        else:
            direction = ASC
        return replace(self, sort_field=field, sort_direction=direction, page=1)

    def with_page(self, page):
        return replace(self, page=page)


@dataclass(frozen=True)
class ListPage:
    items: list
    page: int
    total_pages: int
    total_count: int


def matches_status(case, status):
    if not status or status == ALL:
        return True
    return normalize_status(case.get("status")) == status


def matches_paralegal(case, paralegal):
    if not paralegal or paralegal == ALL:
        return True
    assigned = case.get("paralegal") or None
    if paralegal == NOT_ASSIGNED:
        return assigned is None
    return assigned == paralegal


def matches_search(case, search):
    if not search:
        return True
    return search.casefold() in (case.get("clientName") or "").casefold()


def filter_cases(cases, query):
    return [
        case
        for case in cases
        if matches_status(case, query.status)
        and matches_paralegal(case, query.paralegal)
        and matches_search(case, query.search)
    ]


def sort_cases(cases, field, direction=ASC):
    """Stable sort; cases missing the field go last ascending and first descending."""
    if not field:
        return list(cases)
    key = SORT_KEYS[field]
    present, missing = [], []
    for case in cases:
        (missing if key(case.get(field)) is None else present).append(case)
    if direction == DESC:
        return missing + sorted(present, key=lambda case: key(case.get(field)), reverse=True)
    return sorted(present, key=lambda case: key(case.get(field))) + missing


def paginate(cases, page, page_size=DEFAULT_PAGE_SIZE):
    total_count = len(cases)
    total_pages = max(1, math.ceil(total_count / page_size))
    page = min(max(1, page), total_pages)
    start = (page - 1) * page_size
    return ListPage(
        items=cases[start:start + page_size],
        page=page,
        total_pages=total_pages,
        total_count=total_count,
    )


def apply_query(cases, query, page_size=DEFAULT_PAGE_SIZE):
    filtered = filter_cases(cases, query)
    ordered = sort_cases(filtered, query.sort_field, query.sort_direction)
    return paginate(ordered, query.page, page_size)
