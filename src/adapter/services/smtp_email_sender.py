"""
SMTP email adapter.

Sends over implicit TLS on port 465 and STARTTLS otherwise. smtplib is
blocking, so delivery runs in a worker thread.
"""

import asyncio
import logging
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from src.app.services.email_sender import EmailDeliveryError, IEmailSender

logger = logging.getLogger(__name__)


class SmtpEmailSender(IEmailSender):
    def __init__(self, host: str, port: int, user: str, password: str, from_name: str):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.from_name = from_name

    @classmethod
    def from_config(cls, config) -> "SmtpEmailSender":
        return cls(
            host=config.EMAIL_HOST,
            port=config.EMAIL_PORT,
            user=config.EMAIL_USER,
            password=config.EMAIL_PASS,
            from_name=config.EMAIL_FROM_NAME,
        )

    def _build_message(self, to: str, subject: str, html: str) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = f'"{self.from_name}" <{self.user}>'
        msg["To"] = to
        msg.attach(MIMEText(html, "html", "utf-8"))
        return msg

    def _deliver(self, to: str, msg: MIMEMultipart) -> None:
        context = ssl.create_default_context()
        if self.port == 465:
            with smtplib.SMTP_SSL(self.host, self.port, context=context) as server:
                server.login(self.user, self.password)
                server.sendmail(self.user, [to], msg.as_string())
        else:
            with smtplib.SMTP(self.host, self.port) as server:
                server.ehlo()
                server.starttls(context=context)
                server.login(self.user, self.password)
                server.sendmail(self.user, [to], msg.as_string())

    async def send(self, to: str, subject: str, html: str) -> None:
        if not (self.host and self.user and self.password):
            raise EmailDeliveryError("SMTP credentials are not configured")

        msg = self._build_message(to, subject, html)
        try:
            await asyncio.to_thread(self._deliver, to, msg)
        except (smtplib.SMTPException, OSError) as exc:
            logger.error(f"Email delivery failed: {exc.__class__.__name__}: {exc}")
            raise EmailDeliveryError("Email could not be sent") from exc

        logger.info(f"Email sent: subject={subject!r}")
