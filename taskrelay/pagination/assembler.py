from typing import Any, Callable, Optional

from taskrelay.api.graphql.common.connection import Connection, Edge, PageInfo
from taskrelay.pagination.cursor import encode_cursor
from taskrelay.pagination.order import OrderSpec
from taskrelay.pagination.slicer import Slice


def assemble(page: Slice, spec: OrderSpec, node_factory: Optional[Callable[[Any], Any]] = None) -> Connection:
    """Build the connection envelope for a page of rows."""
    edges = []
    for row in page.rows:
        node = node_factory(row) if node_factory else row
        edges.append(Edge(node=node, cursor=encode_cursor(row, spec)))

    page_info = PageInfo(
        has_next_page=page.has_next_page,
        has_previous_page=page.has_previous_page,
        start_cursor=edges[0].cursor if edges else None,
        end_cursor=edges[-1].cursor if edges else None
    )
    return Connection(edges=edges, page_info=page_info)
