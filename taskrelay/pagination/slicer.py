import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from taskrelay.core.config import get_settings
from taskrelay.pagination.cursor import decode_cursor
from taskrelay.pagination.errors import InvalidPaginationArgs
from taskrelay.pagination.order import OrderSpec
from taskrelay.pagination.predicate import SeekDirection, build_seek_predicate
from taskrelay.pagination.query import CollectionQuery

logger = logging.getLogger(__name__)


@dataclass
class PaginationArgs:
    """Connection arguments as received from the schema."""
    first: Optional[int] = None
    after: Optional[str] = None
    last: Optional[int] = None
    before: Optional[str] = None
    order_by: Any = None


@dataclass
class Slice:
    """Rows of one page in forward order, with the page boundary flags."""
    rows: List[Any]
    has_next_page: bool
    has_previous_page: bool


def _page_size(value: Optional[int], argument: str, max_page_size: int) -> Optional[int]:
    if value is None:
        return None
    if value < 0:
        raise InvalidPaginationArgs(f"Argument '{argument}' must be a non-negative integer, got {value}")
    return min(value, max_page_size)


async def slice_rows(
    collection: CollectionQuery,
    spec: OrderSpec,
    args: PaginationArgs,
    default_page_size: Optional[int] = None,
    max_page_size: Optional[int] = None,
) -> Slice:
    """Fetch one page of ``collection`` with a single bounded query.

    ``first`` reads forward from ``after`` (or the start); ``last`` reads
    backward from ``before`` (or the end) by fetching under the reversed
    ordering. One extra row is requested to tell whether more rows exist in
    the fetch direction. When both ``first`` and ``last`` are given the forward
    window of ``first`` rows is fetched and ``last`` keeps its tail.
    """
    settings = get_settings()
    if default_page_size is None:
        default_page_size = settings.DEFAULT_PAGE_SIZE
    if max_page_size is None:
        max_page_size = settings.MAX_PAGE_SIZE

    first = _page_size(args.first, "first", max_page_size)
    last = _page_size(args.last, "last", max_page_size)

    predicates = []
    if args.after is not None:
        anchor = decode_cursor(args.after, spec)
        predicates.append(build_seek_predicate(spec, anchor, SeekDirection.AFTER, collection.column))
    if args.before is not None:
        anchor = decode_cursor(args.before, spec)
        predicates.append(build_seek_predicate(spec, anchor, SeekDirection.BEFORE, collection.column))

    if first is None and last is None:
        first = default_page_size

    if first is not None:
        logger.debug(f"Fetching {first + 1} rows forward by {spec.selector} ({len(predicates)} seek predicates)")
        rows = await collection.fetch(spec, predicates, first + 1)

        has_next_page = len(rows) > first
        rows = rows[:first]
        has_previous_page = args.after is not None and len(rows) > 0

        if last is not None and len(rows) > last:
            rows = rows[len(rows) - last:]
            has_previous_page = True

        return Slice(rows=rows, has_next_page=has_next_page, has_previous_page=has_previous_page)

    logger.debug(f"Fetching {last + 1} rows backward by {spec.selector} ({len(predicates)} seek predicates)")
    rows = await collection.fetch(spec.reversed(), predicates, last + 1)

    has_previous_page = len(rows) > last
    rows = rows[:last]
    rows.reverse()
    has_next_page = args.before is not None and len(rows) > 0

    return Slice(rows=rows, has_next_page=has_next_page, has_previous_page=has_previous_page)
