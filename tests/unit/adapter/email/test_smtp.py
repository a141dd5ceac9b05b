"""Unit tests for the SMTP email sender."""

import smtplib
from unittest.mock import patch

import pytest

from rsvp.adapter.email import SmtpEmailSender
from rsvp.adapter.error import EmailDeliveryError


@pytest.fixture
def sender() -> SmtpEmailSender:
    return SmtpEmailSender(
        host="smtp.example.com",
        port=587,
        username="me@example.com",
        password="app-password",
        from_name="Date Invite",
    )


class TestBuildMessage:
    """Tests for SmtpEmailSender.build_message."""

    def test_builds_multipart_alternative(self, sender):
        """Message carries plain-text and HTML alternatives."""
        message = sender.build_message("you@x.com", "Hello", "<p>Hi</p>", "Hi")

        assert message["To"] == "you@x.com"
        assert message["Subject"] == "Hello"
        assert message["From"] == "Date Invite <me@example.com>"
        assert message.get_content_type() == "multipart/alternative"
        parts = [part.get_content_type() for part in message.iter_parts()]
        assert parts == ["text/plain", "text/html"]

    def test_from_defaults_to_username(self):
        sender = SmtpEmailSender("smtp.example.com", 587, "me@example.com", "pw")

        message = sender.build_message("you@x.com", "Hello", "<p>Hi</p>", "Hi")

        assert message["From"] == "me@example.com"


class TestSend:
    """Tests for SmtpEmailSender.send."""

    @pytest.mark.asyncio
    async def test_starttls_login_and_send(self, sender):
        """Default mode upgrades with STARTTLS before logging in."""
        with patch("smtplib.SMTP") as mock_smtp:
            server = mock_smtp.return_value.__enter__.return_value

            await sender.send("you@x.com", "Hello", "<p>Hi</p>", "Hi")

        mock_smtp.assert_called_once_with("smtp.example.com", 587, timeout=30.0)
        server.starttls.assert_called_once()
        server.login.assert_called_once_with("me@example.com", "app-password")
        server.send_message.assert_called_once()

    @pytest.mark.asyncio
    async def test_ssl_mode_uses_smtp_ssl(self):
        """use_ssl connects with implicit TLS."""
        sender = SmtpEmailSender(
            "smtp.example.com", 465, "me@example.com", "pw", use_ssl=True
        )

        with patch("smtplib.SMTP_SSL") as mock_smtp_ssl:
            server = mock_smtp_ssl.return_value.__enter__.return_value

            await sender.send("you@x.com", "Hello", "<p>Hi</p>", "Hi")

        server.login.assert_called_once_with("me@example.com", "pw")
        server.send_message.assert_called_once()

    @pytest.mark.asyncio
    async def test_authentication_failure_raises(self, sender):
        """Bad credentials become EmailDeliveryError."""
        with patch("smtplib.SMTP") as mock_smtp:
            server = mock_smtp.return_value.__enter__.return_value
            server.login.side_effect = smtplib.SMTPAuthenticationError(
                535, b"Username and Password not accepted"
            )

            with pytest.raises(EmailDeliveryError, match="authentication failed"):
                await sender.send("you@x.com", "Hello", "<p>Hi</p>", "Hi")

    @pytest.mark.asyncio
    async def test_connection_failure_raises(self, sender):
        """Unreachable servers become EmailDeliveryError."""
        with patch("smtplib.SMTP", side_effect=ConnectionRefusedError("refused")):
            with pytest.raises(EmailDeliveryError, match="refused"):
                await sender.send("you@x.com", "Hello", "<p>Hi</p>", "Hi")

    @pytest.mark.asyncio
    async def test_line_break_in_header_raises_without_connecting(self, sender):
        """Headers that cannot be encoded fail before any connection."""
        with patch("smtplib.SMTP") as mock_smtp:
            with pytest.raises(EmailDeliveryError, match="Invalid message headers"):
                await sender.send(
                    "you@x.com\nBcc: a@b.com", "Hello", "<p>Hi</p>", "Hi"
                )

        mock_smtp.assert_not_called()
