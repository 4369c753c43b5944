"""
Authentication tests: sign-up, login and the request context.
"""

from datetime import timedelta

import pytest
from httpx import AsyncClient
from sqlalchemy import select

from app.core.errors import CredentialsError
from app.core.security import create_access_token, decode_token
from app.models.user import User


TEST_PASSWORD = "testpassword123"

CREATE_USER = """
mutation CreateUser($name: String!, $email: String!, $password: String!) {
  createUser(name: $name, email: $email, password: $password) { id name email }
}
"""

LOGIN = """
mutation Login($email: String!, $password: String!) {
  login(email: $email, password: $password) { value }
}
"""

ME = "query { me { id name email } }"


@pytest.mark.asyncio
async def test_create_user(client: AsyncClient, graphql, db_session):
    """Test user registration stores a hash, never the password."""
    body = await graphql(client, CREATE_USER, {
        "name": "New User",
        "email": "newuser@example.com",
        "password": "password123",
    })

    assert "errors" not in body
    data = body["data"]["createUser"]
    assert data["id"]
    assert data["email"] == "newuser@example.com"
    assert data["name"] == "New User"

    user = (await db_session.execute(
        select(User).where(User.id == data["id"])
    )).scalar_one()
    assert user.hashed_password != "password123"
    assert user.hashed_password.startswith("$2")


@pytest.mark.asyncio
async def test_create_user_duplicate_email(client: AsyncClient, graphql, test_user):
    """Test registration with duplicate email."""
    body = await graphql(client, CREATE_USER, {
        "name": "Another User",
        "email": "test@example.com",  # Same as test_user
        "password": "password123",
    })

    assert body["data"]["createUser"] is None
    error = body["errors"][0]
    assert error["extensions"]["code"] == "BAD_USER_INPUT"
    assert error["extensions"]["invalidArgs"] == {
        "name": "Another User",
        "email": "test@example.com",
    }
    assert "password" not in error["extensions"]["invalidArgs"]


@pytest.mark.asyncio
async def test_create_user_too_short(client: AsyncClient, graphql, store_snapshot):
    before = await store_snapshot()

    body = await graphql(client, CREATE_USER, {
        "name": "Bob",
        "email": "a@b.c",
        "password": "secret",
    })

    error = body["errors"][0]
    assert error["extensions"]["code"] == "BAD_USER_INPUT"
    fields = {entry["field"] for entry in error["extensions"]["errors"]}
    assert fields == {"name", "email"}
    assert "password" not in error["extensions"]["invalidArgs"]
    assert await store_snapshot() == before


@pytest.mark.asyncio
async def test_login_success(client: AsyncClient, graphql, test_user, settings):
    """Test successful login returns a token bound to the user."""
    body = await graphql(client, LOGIN, {
        "email": "test@example.com",
        "password": TEST_PASSWORD,
    })

    token = body["data"]["login"]["value"]
    token_data = decode_token(token, settings)
    assert token_data is not None
    assert token_data.user_id == test_user.id
    assert token_data.email == "test@example.com"


@pytest.mark.asyncio
async def test_login_failures_are_indistinguishable(client: AsyncClient, graphql, test_user):
    """Wrong password and unknown email give the same error."""
    wrong_password = await graphql(client, LOGIN, {
        "email": "test@example.com",
        "password": "wrongpassword",
    })
    unknown_email = await graphql(client, LOGIN, {
        "email": "nobody@example.com",
        "password": TEST_PASSWORD,
    })

    assert wrong_password["data"]["login"] is None
    assert unknown_email["data"]["login"] is None
    first = wrong_password["errors"][0]
    second = unknown_email["errors"][0]
    assert first["message"] == second["message"] == CredentialsError.MESSAGE
    assert first["extensions"] == second["extensions"]


@pytest.mark.asyncio
async def test_password_whitespace_is_significant(client: AsyncClient, graphql):
    """The password is hashed and checked exactly as typed."""
    await graphql(client, CREATE_USER, {
        "name": "Spacey User",
        "email": "spacey@example.com",
        "password": "  secret  ",
    })

    trimmed = await graphql(client, LOGIN, {
        "email": "spacey@example.com",
        "password": "secret",
    })
    exact = await graphql(client, LOGIN, {
        "email": "spacey@example.com",
        "password": "  secret  ",
    })

    assert trimmed["data"]["login"] is None
    assert trimmed["errors"][0]["message"] == CredentialsError.MESSAGE
    assert exact["data"]["login"]["value"]


@pytest.mark.asyncio
async def test_me(auth_client: AsyncClient, graphql, test_user):
    """Test getting current user profile."""
    body = await graphql(auth_client, ME)

    assert body["data"]["me"] == {
        "id": test_user.id,
        "name": "Test User",
        "email": "test@example.com",
    }


@pytest.mark.asyncio
async def test_me_anonymous(client: AsyncClient, graphql):
    body = await graphql(client, ME)

    assert "errors" not in body
    assert body["data"]["me"] is None


@pytest.mark.asyncio
@pytest.mark.parametrize("scheme", ["bearer", "BEARER", "Bearer"])
async def test_bearer_prefix_is_case_insensitive(
    client: AsyncClient, graphql, test_user, settings, scheme
):
    token = create_access_token(test_user.id, test_user.email, settings)
    client.headers["Authorization"] = f"{scheme} {token}"

    body = await graphql(client, ME)

    assert body["data"]["me"]["id"] == test_user.id


@pytest.mark.asyncio
@pytest.mark.parametrize("header", [
    "Token abc",
    "Bearer",
    "Bearer not-a-jwt",
])
async def test_malformed_header_is_anonymous(client: AsyncClient, graphql, header):
    client.headers["Authorization"] = header

    body = await graphql(client, ME)

    assert "errors" not in body
    assert body["data"]["me"] is None


@pytest.mark.asyncio
async def test_token_signed_with_other_secret_is_anonymous(
    client: AsyncClient, graphql, test_user, settings
):
    forged = settings.model_copy(update={"SECRET_KEY": "another-secret-key-of-sufficient-length"})
    token = create_access_token(test_user.id, test_user.email, forged)
    client.headers["Authorization"] = f"Bearer {token}"

    body = await graphql(client, ME)

    assert body["data"]["me"] is None


@pytest.mark.asyncio
async def test_expired_token_is_anonymous(client: AsyncClient, graphql, test_user, settings):
    token = create_access_token(
        test_user.id,
        test_user.email,
        settings,
        expires_delta=timedelta(minutes=-5),
    )
    client.headers["Authorization"] = f"Bearer {token}"

    body = await graphql(client, ME)

    assert body["data"]["me"] is None


@pytest.mark.asyncio
async def test_token_for_missing_user_is_anonymous(client: AsyncClient, graphql, settings):
    token = create_access_token("00000000-0000-0000-0000-000000000000", "ghost@example.com", settings)
    client.headers["Authorization"] = f"Bearer {token}"

    body = await graphql(client, ME)

    assert body["data"]["me"] is None
