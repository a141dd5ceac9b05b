"""Tests for create link use case."""

import pytest

from rsvp.application.usecase.link import CreateLinkRequest, CreateLinkUseCase
from rsvp.domain.error import ValidationError
from rsvp.domain.service import LinkService
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateLinkUseCase:
    """Tests for CreateLinkUseCase."""

    @pytest.mark.asyncio
    async def test_returns_link_id_and_url(self, unit_env):
        """Response carries the new ID and a shareable URL."""
        # Arrange
        use_case = await unit_env.get(CreateLinkUseCase)
        link_service = await unit_env.get(LinkService)

        # Act
        response = await use_case.execute(
            CreateLinkRequest(email="ava@x.com", name="Ava")
        )

        # Assert
        assert response.link_id
        assert response.link_url.endswith(f"/date.html?id={response.link_id}")
        assert response.message == "Link generated successfully!"
        details = await link_service.get_link(response.link_id)
        assert details.name == "Ava"

    @pytest.mark.asyncio
    async def test_invalid_input_raises_validation_error(self, unit_env):
        """Validation failures propagate as domain errors."""
        use_case = await unit_env.get(CreateLinkUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(CreateLinkRequest(email="a@b.com", name=""))
