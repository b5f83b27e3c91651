from typing import Optional
from strawberry.types import Info

from taskrelay.db.models.task import Task as TaskModel
from taskrelay.api.graphql.tasks.types import Task
from taskrelay.api.graphql.resolvers import BaseResolver

class TaskResolver(BaseResolver[TaskModel, Task]):
    """Resolver for Task-related operations."""

    model_class = TaskModel
    graphql_type_class = Task

    @classmethod
    def to_graphql_type(cls, model: TaskModel) -> Task:
        """Convert a TaskModel to a GraphQL Task type."""
        return Task(
            id=cls.to_global_id(model),
            name=model.name,
            created_at=model.created_at,
            project_id=model.project_id
        )

    @classmethod
    async def get_task_project(cls, project_id: Optional[int], info: Info):
        """Get the project a task belongs to, if any."""
        if project_id is None:
            return None
        from taskrelay.api.graphql.projects.resolvers import ProjectResolver
        db = cls.get_db_from_info(info)
        project_model = await ProjectResolver.get_by_id(project_id, db)
        if not project_model:
            return None
        return ProjectResolver.to_graphql_type(project_model)
