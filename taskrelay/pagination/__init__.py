# Seek-based Relay connection engine
from taskrelay.pagination.errors import InvalidCursor, InvalidOrder, InvalidPaginationArgs, PaginationError
from taskrelay.pagination.order import Direction, OrderField, OrderingSelector, OrderSpec
from taskrelay.pagination.cursor import decode_cursor, encode_cursor
from taskrelay.pagination.predicate import SeekDirection, build_seek_predicate
from taskrelay.pagination.query import CollectionQuery, RelationQuery
from taskrelay.pagination.slicer import PaginationArgs, Slice, slice_rows
from taskrelay.pagination.assembler import assemble
from taskrelay.pagination.connection import SQLAlchemyConnection

__all__ = [
    'PaginationError', 'InvalidCursor', 'InvalidOrder', 'InvalidPaginationArgs',
    'Direction', 'OrderField', 'OrderingSelector', 'OrderSpec',
    'encode_cursor', 'decode_cursor',
    'SeekDirection', 'build_seek_predicate',
    'CollectionQuery', 'RelationQuery',
    'PaginationArgs', 'Slice', 'slice_rows',
    'assemble',
    'SQLAlchemyConnection'
]
