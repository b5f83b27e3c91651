from datetime import datetime
from typing import Optional
import strawberry
from strawberry.scalars import ID
from strawberry.types import Info

from taskrelay.api.graphql.tasks.connection import TaskConnection, TaskConnectionOrder
from taskrelay.db.models.project import Project as ProjectModel

@strawberry.type
class Project:
    id: ID
    created_at: datetime
    model: strawberry.Private[ProjectModel]
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
        """Tasks of this project, paginated."""
        from taskrelay.api.graphql.projects.resolvers import ProjectResolver
        args = ProjectResolver.pagination_args(first, after, last, before, order_by)
        return await ProjectResolver.get_project_tasks_connection(self.model, args, info)
