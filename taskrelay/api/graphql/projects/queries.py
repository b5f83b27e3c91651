import strawberry
from typing import Optional
from strawberry.scalars import ID
from strawberry.types import Info
from taskrelay.api.graphql.projects.types import Project

@strawberry.type
class ProjectQuery:
    @strawberry.field
    async def project(self, info: Info, id: ID) -> Optional[Project]:
        """Get a project by its global ID."""
        from taskrelay.api.graphql.projects.resolvers import ProjectResolver
        db = ProjectResolver.get_db_from_info(info)
        project_model = await ProjectResolver.get_by_global_id(id, db)
        if not project_model:
            return None
        return ProjectResolver.to_graphql_type(project_model)
