"""Email sender adapters."""

from .client import MockEmailSender, SentEmail, UnconfiguredEmailSender
from .sendgrid import SendGridEmailSender
from .smtp import SmtpEmailSender

__all__ = [
    "MockEmailSender",
    "SendGridEmailSender",
    "SentEmail",
    "SmtpEmailSender",
    "UnconfiguredEmailSender",
]
