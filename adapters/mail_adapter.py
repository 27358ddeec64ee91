"""SMTP mail delivery."""

import logging
import smtplib
import ssl
from email.message import EmailMessage
from typing import Optional

from app.config import settings

logger = logging.getLogger("nutritrack.mail")


def build_message(to: str, subject: str, html: str, text: Optional[str] = None) -> EmailMessage:
    msg = EmailMessage()
    msg["From"] = settings.mail_from
    msg["To"] = to
    msg["Subject"] = subject
    msg.set_content(text or "This message requires an HTML capable mail client.")
    msg.add_alternative(html, subtype="html")
    return msg


def send_mail(to: str, subject: str, html: str, text: Optional[str] = None) -> bool:
    """
    Deliver one message over SMTP.

    Returns False without contacting any server when mail credentials are not
    configured; the message is only logged in that case. SMTP errors propagate
    to the caller.
    """
    if not settings.mail_configured:
        logger.info("mail_not_configured to=%s subject=%r (not sent)", to, subject)
        return False

    msg = build_message(to, subject, html, text)
    context = ssl.create_default_context()
    with smtplib.SMTP(
        settings.mail_server, settings.mail_port, timeout=settings.mail_timeout_sec
    ) as smtp:
        if settings.mail_use_tls:
            smtp.starttls(context=context)
        smtp.login(settings.mail_username, settings.mail_password)
        smtp.send_message(msg)

    logger.info("mail_sent to=%s subject=%r", to, subject)
    return True
