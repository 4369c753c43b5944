"""
Pytest configuration and fixtures.
"""

from typing import Any, AsyncGenerator, Awaitable, Callable, Optional
import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import NullPool

from app.core.config import Settings
from app.core.database import Base, get_db
from app.core.security import get_password_hash
from app.main import create_app
from app.models.user import User


TEST_PASSWORD = "testpassword123"

GraphQLExecutor = Callable[..., Awaitable[dict[str, Any]]]


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a per-test SQLite file."""
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path}/test.db",
        ENVIRONMENT="test",
        DEBUG=False,
        SECRET_KEY="test-secret-key-which-is-long-enough-for-hs256",
        GRAPHQL_IDE=None,
    )


@pytest.fixture
async def test_engine(settings: Settings):
    """Create test database engine with all tables."""
    engine = create_async_engine(
        settings.DATABASE_URL,
        poolclass=NullPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Session for arranging and inspecting data outside of requests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def app(settings: Settings, session_factory) -> FastAPI:
    """Application whose requests use the test database."""
    application = create_app(settings)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    application.dependency_overrides[get_db] = override_get_db
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Anonymous test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


@pytest.fixture
def graphql() -> GraphQLExecutor:
    """Post a GraphQL operation and return the decoded response body."""

    async def execute(
        http_client: AsyncClient,
        query: str,
        variables: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        response = await http_client.post(
            "/graphql",
            json={"query": query, "variables": variables or {}},
        )
        assert response.status_code == 200, response.text
        return response.json()

    return execute


@pytest.fixture
async def test_user(session_factory) -> User:
    """Create a test user."""
    async with session_factory() as session:
        user = User(
            name="Test User",
            email="test@example.com",
            hashed_password=get_password_hash(TEST_PASSWORD),
        )
        session.add(user)
        await session.commit()
        await session.refresh(user)
    return user


@pytest.fixture
async def auth_client(
    app: FastAPI,
    test_user: User,
    graphql: GraphQLExecutor,
) -> AsyncGenerator[AsyncClient, None]:
    """Create authenticated test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        # Login to get token
        body = await graphql(
            ac,
            """
            mutation Login($email: String!, $password: String!) {
              login(email: $email, password: $password) { value }
            }
            """,
            {"email": test_user.email, "password": TEST_PASSWORD},
        )

        # Set authorization header
        ac.headers["Authorization"] = f"Bearer {body['data']['login']['value']}"
        yield ac


@pytest.fixture
def store_snapshot(session_factory) -> Callable[[], Awaitable[dict]]:
    """Read every row of every table, to compare store state."""

    async def snapshot() -> dict:
        state = {}
        async with session_factory() as session:
            for table in Base.metadata.sorted_tables:
                result = await session.execute(select(table))
                state[table.name] = sorted((tuple(row) for row in result.all()), key=repr)
        return state

    return snapshot
