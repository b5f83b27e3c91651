from taskrelay.api.graphql.common.connection import Connection, Edge, PageInfo
from taskrelay.api.graphql.tasks.types import Task
from taskrelay.api.graphql.tasks.resolvers import TaskResolver
from taskrelay.db.models import Project as ProjectModel, User as UserModel
from taskrelay.pagination import OrderingSelector, SQLAlchemyConnection

# Type aliases for Task connections
TaskEdge = Edge[Task]
TaskConnection = Connection[Task]

TaskOrdering = OrderingSelector(
    "Task",
    {
        "ID": [("id", "ASC")],
        "LATEST": [("created_at", "DESC")],
        "NAME": [("name", "ASC")],
    },
)
TaskConnectionOrder = TaskOrdering.enum

user_task_connection = SQLAlchemyConnection(
    name="Task",
    target=UserModel.tasks,
    order_by=TaskOrdering,
    node_factory=TaskResolver.to_graphql_type
)

project_task_connection = SQLAlchemyConnection(
    name="Task",
    target=ProjectModel.tasks,
    order_by=TaskOrdering,
    node_factory=TaskResolver.to_graphql_type
)

__all__ = [
    'TaskEdge', 'TaskConnection', 'PageInfo', 'TaskOrdering', 'TaskConnectionOrder',
    'user_task_connection', 'project_task_connection'
]
