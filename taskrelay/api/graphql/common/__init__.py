# Common module for shared Strawberry elements across features
from taskrelay.api.graphql.common.connection import Connection, Edge, PageInfo

__all__ = ['Connection', 'Edge', 'PageInfo']
