"""
GraphQL package.

Builds the Strawberry schema and the FastAPI router serving it. Field and
argument names are exposed as written (``request_date``, ``date_sent``),
operation names are given explicitly (``allClients``, ``addClient``).
"""

from typing import Optional

import strawberry
from strawberry.fastapi import GraphQLRouter
from strawberry.schema.config import StrawberryConfig

from app.graphql.context import get_context
from app.graphql.mutations import Mutation
from app.graphql.queries import Query


schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
    config=StrawberryConfig(auto_camel_case=False),
)


def create_graphql_router(graphql_ide: Optional[str] = "graphiql") -> GraphQLRouter:
    """
    Create the GraphQL router for FastAPI.

    Args:
        graphql_ide: "graphiql", "apollo-sandbox", or None to disable

    Returns:
        GraphQLRouter configured with schema and context
    """
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide=graphql_ide,
    )


__all__ = ["schema", "create_graphql_router"]
