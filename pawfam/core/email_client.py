# pawfam/core/email_client.py
"""
SMTP email client for PawFam.

Responsibilities:
  - Hold SMTP configuration (taken from Settings at construction).
  - Provide a single send_email(...) method for services to use.
  - Support both TLS (STARTTLS) and SSL connections.

Typical .env configuration (Gmail example with App Password):

    SMTP_HOST=smtp.gmail.com
    SMTP_PORT=465
    SMTP_USERNAME=pawfam.notifications@gmail.com
    SMTP_PASSWORD=<app password>
    SMTP_FROM_EMAIL=pawfam.notifications@gmail.com
    SMTP_FROM_NAME=PawFam
    SMTP_USE_TLS=false
    SMTP_USE_SSL=true
"""
from __future__ import annotations

import logging
import smtplib
from email.message import EmailMessage

from pawfam.core.config import Settings

logger = logging.getLogger(__name__)


class EmailNotConfiguredError(RuntimeError):
    """Raised when SMTP host or credentials are missing."""


class EmailClient:
    def __init__(
        self,
        host: str | None,
        port: int,
        username: str | None,
        password: str | None,
        from_email: str | None = None,
        from_name: str = "PawFam",
        use_tls: bool = True,
        use_ssl: bool = False,
        timeout: float = 30.0,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        # Fallback: if FROM_EMAIL is not set, default to username
        self.from_email = from_email or username or ""
        self.from_name = from_name
        self.use_tls = use_tls
        self.use_ssl = use_ssl
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> EmailClient:
        return cls(
            host=settings.SMTP_HOST,
            port=settings.SMTP_PORT,
            username=settings.SMTP_USERNAME,
            password=settings.SMTP_PASSWORD,
            from_email=settings.SMTP_FROM_EMAIL,
            from_name=settings.SMTP_FROM_NAME,
            use_tls=settings.SMTP_USE_TLS,
            use_ssl=settings.SMTP_USE_SSL,
            timeout=settings.SMTP_TIMEOUT,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.host and self.username and self.password)

    def _create_smtp_client(self) -> smtplib.SMTP:
        """
        Open a connection to the relay.

        Priority:
          - use_ssl → smtplib.SMTP_SSL (e.g., Gmail on 465).
          - else → plain smtplib.SMTP; send_email upgrades it with
            STARTTLS if use_tls.
        """
        if self.use_ssl:
            return smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout)
        return smtplib.SMTP(self.host, self.port, timeout=self.timeout)

    def build_message(
        self,
        to_email: str,
        subject: str,
        text_body: str,
        html_body: str | None = None,
    ) -> EmailMessage:
        msg = EmailMessage()
        msg["From"] = (
            f"{self.from_name} <{self.from_email}>" if self.from_email else self.username
        )
        msg["To"] = to_email
        msg["Subject"] = subject

        # Always add a plain-text part
        msg.set_content(text_body)
        if html_body:
            msg.add_alternative(html_body, subtype="html")
        return msg

    def send_email(
        self,
        to_email: str,
        subject: str,
        text_body: str,
        html_body: str | None = None,
    ) -> None:
        """
        Send an email to a single recipient.

        Raises
        ------
        EmailNotConfiguredError:
            If required SMTP configuration is missing.
        smtplib.SMTPException / OSError:
            If the underlying SMTP connection or send fails.
        """
        if not self.is_configured:
            raise EmailNotConfiguredError(
                "SMTP is not configured. Set SMTP_HOST, SMTP_USERNAME and SMTP_PASSWORD."
            )

        msg = self.build_message(to_email, subject, text_body, html_body)

        server = self._create_smtp_client()
        try:
            if self.use_tls and not self.use_ssl:
                server.starttls()
            server.login(self.username, self.password)
            server.send_message(msg)
        finally:
            try:
                server.quit()
            except (smtplib.SMTPException, OSError):
                server.close()
        logger.info("Email sent to %s (%s)", to_email, subject)
