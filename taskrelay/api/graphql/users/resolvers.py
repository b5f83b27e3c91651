from strawberry.types import Info

from taskrelay.db.models.user import User as UserModel
from taskrelay.api.graphql.users.types import User
from taskrelay.api.graphql.resolvers import BaseResolver
from taskrelay.api.graphql.tasks.connection import TaskConnection, user_task_connection
from taskrelay.api.graphql.projects.connection import ProjectConnection, user_project_connection
from taskrelay.pagination import PaginationArgs

class UserResolver(BaseResolver[UserModel, User]):
    """Resolver for User-related operations."""

    model_class = UserModel
    graphql_type_class = User

    @classmethod
    def to_graphql_type(cls, model: UserModel) -> User:
        """Convert a UserModel to a GraphQL User type."""
        return User(
            id=cls.to_global_id(model),
            name=model.name,
            created_at=model.created_at,
            model=model
        )

    @classmethod
    async def get_user_tasks_connection(cls, user: UserModel, args: PaginationArgs, info: Info) -> TaskConnection:
        """Get a paginated connection of a user's tasks."""
        db = cls.get_db_from_info(info)
        return await user_task_connection.resolve(user, args, db)

    @classmethod
    async def get_user_projects_connection(cls, user: UserModel, args: PaginationArgs, info: Info) -> ProjectConnection:
        """Get a paginated connection of a user's projects."""
        db = cls.get_db_from_info(info)
        return await user_project_connection.resolve(user, args, db)
