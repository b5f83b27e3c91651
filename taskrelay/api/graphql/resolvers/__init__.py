from taskrelay.api.graphql.resolvers.base import BaseResolver

__all__ = ['BaseResolver']
