import strawberry

# Import feature queries
from taskrelay.api.graphql.users.queries import UserQuery
from taskrelay.api.graphql.projects.queries import ProjectQuery

# Define root Query type by combining all feature queries
@strawberry.type
class Query(UserQuery, ProjectQuery):
    pass

# Create schema
schema = strawberry.Schema(query=Query)
