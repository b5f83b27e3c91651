from datetime import datetime
from typing import Annotated, Optional
import strawberry
from strawberry.scalars import ID
from strawberry.types import Info

@strawberry.type
class Task:
    id: ID
    name: str
    created_at: datetime
    project_id: strawberry.Private[Optional[int]] = None

    @strawberry.field
    async def project(
        self, info: Info
    ) -> Optional[Annotated["Project", strawberry.lazy("taskrelay.api.graphql.projects.types")]]:
        from taskrelay.api.graphql.tasks.resolvers import TaskResolver
        return await TaskResolver.get_task_project(self.project_id, info)
