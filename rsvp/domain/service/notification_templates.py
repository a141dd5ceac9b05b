"""Notification email templates.

Subject and bodies depend only on the response, the responder's name and
the send time, so the same inputs always render the same email.
"""

from datetime import datetime
from html import escape

from rsvp.domain.value import LinkResponse, Notification

YES_SUBJECT = "💖 {name} Said YES!"
NO_SUBJECT = "💔 {name} Said No"

YES_TEXT = (
    "Great news! {name} accepted your date invite! 💕\n\n"
    "Time to plan that perfect date! 🥰"
)
NO_TEXT = (
    "{name} clicked the No button after 20 attempts... "
    "but don't worry, the right person is out there! 💪"
)

HTML_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
  <style>
    body {{
      font-family: Arial, sans-serif;
      margin: 0;
      padding: 0;
      background-color: #f5f5f5;
    }}
    .container {{
      max-width: 600px;
      margin: 40px auto;
      background: linear-gradient(135deg, #ffdde1, #ee9ca7);
      border-radius: 20px;
      padding: 40px;
      box-shadow: 0 10px 30px rgba(0,0,0,0.2);
    }}
    h1 {{
      color: #b30059;
      font-size: 2rem;
      margin-bottom: 20px;
      text-align: center;
    }}
    .message {{
      background: white;
      padding: 30px;
      border-radius: 15px;
      font-size: 1.1rem;
      color: #333;
      line-height: 1.6;
    }}
    .emoji {{
      font-size: 4rem;
      text-align: center;
      margin: 20px 0;
    }}
    .timestamp {{
      margin-top: 20px;
      padding-top: 20px;
      border-top: 2px solid #ffdde1;
      color: #666;
      font-size: 0.9rem;
      text-align: center;
    }}
    .footer {{
      text-align: center;
      margin-top: 30px;
      color: #b30059;
      font-size: 0.9rem;
    }}
  </style>
</head>
<body>
  <div class="container">
    <div class="emoji">{emoji}</div>
    <h1>{subject}</h1>
    <div class="message">
      <p>{text}</p>
      <div class="timestamp">
        📅 {timestamp}
      </div>
    </div>
    <div class="footer">
      Made with ❤️ by your Cute Date Invite system
    </div>
  </div>
</body>
</html>
"""


def format_timestamp(moment: datetime) -> str:
    """Human-readable send time, e.g. "Monday, October 19, 2026 at 03:04 PM UTC".

    Aware datetimes carry their zone name so the reader knows which clock
    the time is on.
    """
    text = f"{moment:%A, %B} {moment.day}, {moment:%Y} at {moment:%I:%M %p}"
    zone = moment.strftime("%Z")
    return f"{text} {zone}" if zone else text


def render_notification(
    response: LinkResponse, to: str, name: str, sent_at: datetime
) -> Notification:
    """Render the notification email for a response.

    Args:
        response: The recorded answer
        to: Address the notification goes to
        name: Responder's display name
        sent_at: Send time shown in the HTML body

    Returns:
        Notification with subject, text and HTML bodies
    """
    is_yes = response is LinkResponse.YES
    subject_template = YES_SUBJECT if is_yes else NO_SUBJECT
    text_template = YES_TEXT if is_yes else NO_TEXT

    subject = subject_template.format(name=name)
    text = text_template.format(name=name)

    safe_name = escape(name)
    html = HTML_TEMPLATE.format(
        emoji="🎉" if is_yes else "😢",
        subject=subject_template.format(name=safe_name),
        text=text_template.format(name=safe_name).replace("\n", "<br>"),
        timestamp=format_timestamp(sent_at),
    )

    return Notification(to=to, subject=subject, html=html, text=text)
