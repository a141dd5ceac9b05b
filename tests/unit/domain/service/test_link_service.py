"""Unit tests for LinkService."""

from datetime import timedelta

import pytest

from rsvp.domain.error import ExpiredError, NotFoundError, ValidationError
from rsvp.domain.repository import LinkRepository
from rsvp.domain.service import LinkService
from rsvp.domain.value import LinkId, LinkResponse
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


@pytest.fixture
def make_service(clock):
    """Build a LinkService on the test repository with a frozen clock."""

    def _make(repository: LinkRepository, **kwargs) -> LinkService:
        return LinkService(link_repository=repository, clock=clock, **kwargs)

    return _make


class TestCreateLink:
    """Tests for create_link method."""

    @pytest.mark.asyncio
    async def test_create_link_success(self, unit_env, make_service, clock):
        """Creating a link stores a normalized, unanswered link."""
        # Arrange
        repository = await unit_env.get(LinkRepository)
        service = make_service(repository)

        # Act
        link = await service.create_link("  Ava@X.com ", "  Ava ")

        # Assert
        assert link.recipient_email.root == "ava@x.com"
        assert link.recipient_name.root == "Ava"
        assert link.created_at == clock.now
        assert link.expires_at == clock.now + timedelta(days=30)
        assert link.response is None
        assert await repository.find_by_id(link.id) == link

    @pytest.mark.asyncio
    async def test_create_link_increments_registry_size(self, unit_env):
        """Each creation adds exactly one link."""
        service = await unit_env.get(LinkService)

        await service.create_link("a@b.com", "A")
        await service.create_link("c@d.com", "C")

        assert await service.count_links() == 2

    @pytest.mark.asyncio
    async def test_generated_ids_are_unique_random_tokens(self, unit_env):
        """IDs come from a large random token space."""
        service = await unit_env.get(LinkService)

        ids = {(await service.create_link("a@b.com", "A")).id for _ in range(50)}

        assert len(ids) == 50
        assert all(len(link_id) >= 22 for link_id in ids)

    @pytest.mark.asyncio
    async def test_create_link_rejects_invalid_email(self, unit_env):
        """Email without '@' is a validation error."""
        service = await unit_env.get(LinkService)

        with pytest.raises(ValidationError, match="Invalid email address"):
            await service.create_link("not-an-email", "Bob")

        assert await service.count_links() == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", ["", "   ", None])
    async def test_create_link_rejects_blank_name(self, unit_env, name):
        """Blank name is a validation error."""
        service = await unit_env.get(LinkService)

        with pytest.raises(ValidationError, match="Name is required"):
            await service.create_link("a@b.com", name)

    @pytest.mark.asyncio
    async def test_create_link_retries_on_id_collision(self, unit_env, make_service):
        """A colliding token is replaced by a fresh one."""
        repository = await unit_env.get(LinkRepository)
        tokens = iter(["same", "same", "fresh"])
        service = make_service(repository, id_factory=lambda: LinkId(next(tokens)))

        first = await service.create_link("a@b.com", "A")
        second = await service.create_link("c@d.com", "C")

        assert first.id == "same"
        assert second.id == "fresh"
        assert await repository.count() == 2


class TestGetLink:
    """Tests for get_link method."""

    @pytest.mark.asyncio
    async def test_get_link_returns_name_and_email(self, unit_env):
        """Lookup right after creation returns the stored identity."""
        service = await unit_env.get(LinkService)
        link = await service.create_link("ava@x.com", "Ava")

        details = await service.get_link(link.id)

        assert details.name == "Ava"
        assert details.email == "ava@x.com"

    @pytest.mark.asyncio
    async def test_get_link_unknown_id_raises_not_found(self, unit_env):
        """IDs that were never created are NotFound."""
        service = await unit_env.get(LinkService)

        with pytest.raises(NotFoundError):
            await service.get_link("never-created")

    @pytest.mark.asyncio
    async def test_get_link_expired_raises_expired(
        self, unit_env, make_service, clock
    ):
        """Lapsed links are Expired, not NotFound."""
        repository = await unit_env.get(LinkRepository)
        service = make_service(repository)
        link = await service.create_link("ava@x.com", "Ava")

        clock.advance(days=30, seconds=1)

        with pytest.raises(ExpiredError):
            await service.get_link(link.id)

    @pytest.mark.asyncio
    async def test_get_link_still_valid_at_expiry_instant(
        self, unit_env, make_service, clock
    ):
        """A link is readable up to and including expires_at."""
        repository = await unit_env.get(LinkRepository)
        service = make_service(repository)
        link = await service.create_link("ava@x.com", "Ava")

        clock.advance(days=30)

        details = await service.get_link(link.id)
        assert details.name == "Ava"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("link_id", ["", None])
    async def test_get_link_requires_id(self, unit_env, link_id):
        """Missing ID is a validation error."""
        service = await unit_env.get(LinkService)

        with pytest.raises(ValidationError, match="Link ID is required"):
            await service.get_link(link_id)

    @pytest.mark.asyncio
    async def test_get_link_does_not_mutate(self, unit_env):
        """Lookups leave the stored link untouched."""
        service = await unit_env.get(LinkService)
        repository = await unit_env.get(LinkRepository)
        link = await service.create_link("ava@x.com", "Ava")

        await service.get_link(link.id)

        assert await repository.find_by_id(link.id) == link


class TestRecordResponse:
    """Tests for record_response method."""

    @pytest.mark.asyncio
    async def test_record_response_sets_fields(self, unit_env, make_service, clock):
        """Recording sets response and responded_at."""
        repository = await unit_env.get(LinkRepository)
        service = make_service(repository)
        link = await service.create_link("ava@x.com", "Ava")
        clock.advance(hours=2)

        updated = await service.record_response(link.id, LinkResponse.YES)

        assert updated is not None
        assert updated.response == LinkResponse.YES
        assert updated.responded_at == clock.now
        stored = await repository.find_by_id(link.id)
        assert stored.response == LinkResponse.YES

    @pytest.mark.asyncio
    async def test_record_response_unknown_link_is_skipped(self, unit_env):
        """Missing links are skipped without error."""
        service = await unit_env.get(LinkService)

        assert await service.record_response("missing", LinkResponse.NO) is None

    @pytest.mark.asyncio
    async def test_record_response_expired_link_is_skipped(
        self, unit_env, make_service, clock
    ):
        """Expired links are not updated."""
        repository = await unit_env.get(LinkRepository)
        service = make_service(repository)
        link = await service.create_link("ava@x.com", "Ava")
        clock.advance(days=31)

        assert await service.record_response(link.id, LinkResponse.YES) is None
        assert (await repository.find_by_id(link.id)).response is None

    @pytest.mark.asyncio
    async def test_record_response_keeps_first_answer(self, unit_env):
        """An answered link is never re-answered."""
        service = await unit_env.get(LinkService)
        link = await service.create_link("ava@x.com", "Ava")
        await service.record_response(link.id, LinkResponse.YES)

        assert await service.record_response(link.id, LinkResponse.NO) is None
        stored = await service.find_link(link.id)
        assert stored.response == LinkResponse.YES
