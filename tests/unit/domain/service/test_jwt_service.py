"""Unit tests for JWTService as the identity provider."""

from uuid import uuid4

import pytest

from gameon.domain.error import UnauthorizedError
from gameon.domain.service import IdentityProvider, JWTService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRequireAuth:
    """Tests for require_auth."""

    @pytest.mark.asyncio
    async def test_valid_token_resolves_user(self, unit_env):
        jwt_service = await unit_env.get(JWTService)
        identity_provider = await unit_env.get(IdentityProvider)
        user_id = str(uuid4())

        user = identity_provider.require_auth(jwt_service.create_token(user_id))

        assert user.id == user_id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
    async def test_missing_or_invalid_token(self, unit_env, token):
        identity_provider = await unit_env.get(IdentityProvider)

        with pytest.raises(UnauthorizedError):
            identity_provider.require_auth(token)

    @pytest.mark.asyncio
    async def test_token_for_non_uuid_subject(self, unit_env):
        jwt_service = await unit_env.get(JWTService)

        with pytest.raises(UnauthorizedError):
            jwt_service.require_auth(jwt_service.create_token("alice"))
