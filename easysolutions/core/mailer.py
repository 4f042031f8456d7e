"""
Mail dispatcher for contact form submissions.
Wraps an authenticated SMTP relay (Gmail by default) and sends one
composed message per call.
"""

import logging
from datetime import datetime
from email.message import EmailMessage
from email.utils import formataddr, make_msgid
from typing import Optional

import aiosmtplib
from fastapi import Request

from easysolutions.core.config import Settings

logger = logging.getLogger(__name__)


BODY_TEMPLATE = """
New Contact Form Submission

Name: {name}
Email: {email}
Subject: {subject}

Message:
{message}

---
{company_name}
Received: {received}
"""


def single_line(value: str) -> str:
    """Fold CR/LF out of a value destined for a mail header"""
    return " ".join(value.splitlines())


def build_contact_message(
    name: str,
    email: str,
    subject: str,
    message: str,
    receiver: str,
    company_name: str,
    received_at: Optional[datetime] = None,
) -> EmailMessage:
    """
    Compose the notification mail for a contact submission.

    The From header pairs the submitter's name with the receiver address and
    Reply-To points back at the submitter, so replying from the inbox reaches
    the person who filled in the form.
    """
    received_at = received_at or datetime.now()

    msg = EmailMessage()
    # NOTE: display name of the submitter with the receiver's own address
    msg["From"] = formataddr((single_line(name), receiver))
    msg["To"] = receiver
    msg["Reply-To"] = email
    msg["Subject"] = single_line(subject)
    msg["Message-ID"] = make_msgid()
    msg.set_content(
        BODY_TEMPLATE.format(
            name=name,
            email=email,
            subject=subject,
            message=message,
            company_name=company_name,
            received=received_at.strftime("%m/%d/%Y, %I:%M:%S %p"),
        )
    )
    return msg


class Mailer:
    """Sends messages through the configured SMTP relay."""

    def __init__(
        self,
        hostname: str,
        port: int,
        username: Optional[str],
        password: Optional[str],
        use_tls: bool = True,
    ):
        self.hostname = hostname
        self.port = port
        self.username = username
        self.password = password
        self.use_tls = use_tls

    @classmethod
    def from_settings(cls, settings: Settings) -> "Mailer":
        return cls(
            hostname=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.email_user,
            password=settings.email_pass,
            use_tls=settings.smtp_use_tls,
        )

    async def verify(self) -> bool:
        """Connect and authenticate once to check the relay configuration."""
        smtp = aiosmtplib.SMTP(hostname=self.hostname, port=self.port, use_tls=self.use_tls)
        try:
            await smtp.connect()
            if self.username and self.password:
                await smtp.login(self.username, self.password)
            await smtp.quit()
            logger.info("✅ Email server is ready to send messages")
            return True
        except aiosmtplib.SMTPException as e:
            logger.error(f"❌ Email configuration error: {str(e)}")
            return False
        except OSError as e:
            logger.error(f"❌ Email server unreachable: {str(e)}")
            return False
        finally:
            smtp.close()

    async def send(self, message: EmailMessage) -> str:
        """
        Send a single message.

        Returns:
            str: The Message-ID of the sent message
        """
        if message["Message-ID"] is None:
            message["Message-ID"] = make_msgid()

        # Envelope addresses are explicit: the From header is not a reliable sender
        await aiosmtplib.send(
            message,
            sender=self.username or message["To"],
            recipients=[message["To"]],
            hostname=self.hostname,
            port=self.port,
            username=self.username,
            password=self.password,
            use_tls=self.use_tls,
        )
        return message["Message-ID"]


def get_mailer(request: Request) -> Mailer:
    """Returns the mail dispatcher owned by the running application"""
    return request.app.state.mailer
