from datetime import datetime
from typing import Optional
import strawberry
from strawberry.scalars import ID
from strawberry.types import Info

from taskrelay.api.graphql.tasks.connection import TaskConnection, TaskConnectionOrder
from taskrelay.api.graphql.projects.connection import ProjectConnection, ProjectConnectionOrder
from taskrelay.db.models.user import User as UserModel

@strawberry.type
class User:
    id: ID
    created_at: datetime
    model: strawberry.Private[UserModel]
    name: Optional[str] = None

    @strawberry.field
    async def tasks(
        self,
        info: Info,
        first: Optional[int] = None,
        after: Optional[str] = None,
        last: Optional[int] = None,
        before: Optional[str] = None,
        order_by: TaskConnectionOrder = TaskConnectionOrder.ID
    ) -> TaskConnection:
        """Tasks assigned to this user, paginated."""
        from taskrelay.api.graphql.users.resolvers import UserResolver
        args = UserResolver.pagination_args(first, after, last, before, order_by)
        return await UserResolver.get_user_tasks_connection(self.model, args, info)

    @strawberry.field
    async def projects(
        self,
        info: Info,
        first: Optional[int] = None,
        after: Optional[str] = None,
        last: Optional[int] = None,
        before: Optional[str] = None,
        order_by: ProjectConnectionOrder = ProjectConnectionOrder.ID
    ) -> ProjectConnection:
        """Projects owned by this user, paginated."""
        from taskrelay.api.graphql.users.resolvers import UserResolver
        args = UserResolver.pagination_args(first, after, last, before, order_by)
        return await UserResolver.get_user_projects_connection(self.model, args, info)
