"""Unit tests for in-process email senders."""

import pytest

from rsvp.adapter.email import MockEmailSender, SentEmail, UnconfiguredEmailSender
from rsvp.adapter.error import EmailDeliveryError


class TestUnconfiguredEmailSender:
    @pytest.mark.asyncio
    async def test_send_always_fails(self):
        """Without credentials every send fails with guidance."""
        sender = UnconfiguredEmailSender()

        with pytest.raises(EmailDeliveryError, match="EMAIL__API_KEY"):
            await sender.send("me@x.com", "S", "<p>h</p>", "h")


class TestMockEmailSender:
    @pytest.mark.asyncio
    async def test_records_sent_messages(self):
        sender = MockEmailSender()

        await sender.send("me@x.com", "S", "<p>h</p>", "h")

        assert sender.sent == [
            SentEmail(to="me@x.com", subject="S", html="<p>h</p>", text="h")
        ]

    @pytest.mark.asyncio
    async def test_fail_with_raises_and_records_nothing(self):
        sender = MockEmailSender(fail_with="boom")

        with pytest.raises(EmailDeliveryError, match="boom"):
            await sender.send("me@x.com", "S", "<p>h</p>", "h")

        assert sender.sent == []
