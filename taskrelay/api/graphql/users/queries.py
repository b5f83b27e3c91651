import strawberry
from typing import Optional
from strawberry.scalars import ID
from strawberry.types import Info
from taskrelay.api.graphql.users.types import User

@strawberry.type
class UserQuery:
    @strawberry.field
    async def user(self, info: Info, id: ID) -> Optional[User]:
        """Get a user by its global ID."""
        from taskrelay.api.graphql.users.resolvers import UserResolver
        db = UserResolver.get_db_from_info(info)
        user_model = await UserResolver.get_by_global_id(id, db)
        if not user_model:
            return None
        return UserResolver.to_graphql_type(user_model)
