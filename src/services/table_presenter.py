"""User table presentation: search, pagination and date formatting.

Pure functions over the normalized user list; the dashboard view model keeps
the search term and current page and calls into these on every render.
"""

import logging
import math
from dataclasses import dataclass, field
from datetime import date, datetime

from domain.model.user import UserRecord

logger = logging.getLogger(__name__)

USERS_PER_PAGE = 10
NOT_AVAILABLE = 'N/A'
INVALID_DATE = 'Invalid Date'


@dataclass(frozen=True)
class TablePage:
    """One page of the filtered user table."""
    rows: list[UserRecord] = field(default_factory=list)
    page: int = 1
    total_pages: int = 0
    total_matches: int = 0

    @property
    def start_index(self) -> int:
        """Zero-based index of the first row on this page."""
        return (self.page - 1) * USERS_PER_PAGE

    @property
    def end_index(self) -> int:
        """Exclusive end index of this page within the filtered list."""
        return min(self.start_index + USERS_PER_PAGE, self.total_matches)

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def filter_users(users: list[UserRecord], term: str) -> list[UserRecord]:
    """Case-insensitive substring match on "first last" or email."""
    needle = term.lower()
    return [
        user for user in users
        if needle in user.full_name.lower() or needle in user.email.lower()
    ]


def paginate(rows: list[UserRecord], page: int, page_size: int = USERS_PER_PAGE) -> TablePage:
    """Slice rows into the requested page, clamping page into range."""
    total_pages = math.ceil(len(rows) / page_size)
    page = max(1, min(page, max(total_pages, 1)))
    start = (page - 1) * page_size
    return TablePage(
        rows=rows[start:start + page_size],
        page=page,
        total_pages=total_pages,
        total_matches=len(rows),
    )


def present_table(users: list[UserRecord], term: str, page: int) -> TablePage:
    return paginate(filter_users(users, term), page)


def _parse_day_first(value: str) -> date:
    # "13/05/2025 20:11:41" -> 2025-05-13; the time part is not displayed
    date_part = value.split(' ')[0]
    day, month, year = date_part.split('/')
    return date.fromisoformat(f"{year}-{month.zfill(2)}-{day.zfill(2)}")


def format_date(value: str | None) -> str:
    """Format a creation timestamp as e.g. "May 13, 2025".

    Accepts "DD/MM/YYYY HH:mm:ss" (detected by the slash) or anything ISO-8601
    parseable. Returns "N/A" for missing input and "Invalid Date" when the
    value cannot be parsed.
    """
    if not value:
        return NOT_AVAILABLE

    try:
        if '/' in value:
            parsed = _parse_day_first(value)
        else:
            parsed = datetime.fromisoformat(value).date()
    except ValueError:
        logger.debug("Invalid date", extra={"value": value})
        return INVALID_DATE

    return f"{parsed:%b} {parsed.day}, {parsed.year}"
