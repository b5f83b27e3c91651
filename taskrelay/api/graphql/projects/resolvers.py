from strawberry.types import Info

from taskrelay.db.models.project import Project as ProjectModel
from taskrelay.api.graphql.projects.types import Project
from taskrelay.api.graphql.resolvers import BaseResolver
from taskrelay.api.graphql.tasks.connection import TaskConnection, project_task_connection
from taskrelay.pagination import PaginationArgs

class ProjectResolver(BaseResolver[ProjectModel, Project]):
    """Resolver for Project-related operations."""

    model_class = ProjectModel
    graphql_type_class = Project

    @classmethod
    def to_graphql_type(cls, model: ProjectModel) -> Project:
        """Convert a ProjectModel to a GraphQL Project type."""
        return Project(
            id=cls.to_global_id(model),
            name=model.name,
            created_at=model.created_at,
            model=model
        )

    @classmethod
    async def get_project_tasks_connection(cls, project: ProjectModel, args: PaginationArgs, info: Info) -> TaskConnection:
        """Get a paginated connection of a project's tasks."""
        db = cls.get_db_from_info(info)
        return await project_task_connection.resolve(project, args, db)
