from taskrelay.api.graphql.common.connection import Connection, Edge, PageInfo
from taskrelay.api.graphql.projects.types import Project
from taskrelay.api.graphql.projects.resolvers import ProjectResolver
from taskrelay.db.models import User as UserModel
from taskrelay.pagination import OrderingSelector, SQLAlchemyConnection

# Type aliases for Project connections
ProjectEdge = Edge[Project]
ProjectConnection = Connection[Project]

ProjectOrdering = OrderingSelector(
    "Project",
    {
        "ID": [("id", "ASC")],
        "LATEST": [("created_at", "DESC")],
    },
)
ProjectConnectionOrder = ProjectOrdering.enum

user_project_connection = SQLAlchemyConnection(
    name="Project",
    target=UserModel.projects,
    order_by=ProjectOrdering,
    node_factory=ProjectResolver.to_graphql_type
)

__all__ = [
    'ProjectEdge', 'ProjectConnection', 'PageInfo', 'ProjectOrdering', 'ProjectConnectionOrder',
    'user_project_connection'
]
