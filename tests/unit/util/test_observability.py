"""Unit tests for startup observability."""

from unittest.mock import patch

from rsvp.config import EmailSettings, Settings
from rsvp.util.observability import log_email_configuration


class TestLogEmailConfiguration:
    """Tests for log_email_configuration."""

    def test_missing_credentials_warns(self):
        """Startup without credentials warns instead of failing."""
        settings = Settings(email=EmailSettings())

        with patch("rsvp.util.observability.logfire") as mock_logfire:
            log_email_configuration(settings)

        mock_logfire.warn.assert_called_once()
        mock_logfire.info.assert_not_called()

    def test_smtp_credentials_reported(self):
        settings = Settings(email=EmailSettings(user="me@gmail.com", password="pw"))

        with patch("rsvp.util.observability.logfire") as mock_logfire:
            log_email_configuration(settings)

        mock_logfire.info.assert_called_once_with(
            "Email credentials found", transport="smtp", sender="me@gmail.com"
        )

    def test_api_key_reported_as_sendgrid(self):
        settings = Settings(email=EmailSettings(api_key="SG.key", from_email="a@x.com"))

        with patch("rsvp.util.observability.logfire") as mock_logfire:
            log_email_configuration(settings)

        assert mock_logfire.info.call_args.kwargs["transport"] == "sendgrid"

    def test_api_key_without_sender_address_warns(self):
        """An API key alone leaves SendGrid without a From address."""
        settings = Settings(email=EmailSettings(api_key="SG.key"))

        with patch("rsvp.util.observability.logfire") as mock_logfire:
            log_email_configuration(settings)

        mock_logfire.info.assert_called_once()
        mock_logfire.warn.assert_called_once()
        assert "sender address missing" in mock_logfire.warn.call_args.args[0]

    def test_configured_sender_does_not_warn(self):
        settings = Settings(email=EmailSettings(api_key="SG.key", from_email="a@x.com"))

        with patch("rsvp.util.observability.logfire") as mock_logfire:
            log_email_configuration(settings)

        mock_logfire.warn.assert_not_called()
