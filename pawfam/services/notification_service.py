# pawfam/services/notification_service.py
import logging
import smtplib
from html import escape

from pawfam.core.email_client import EmailClient, EmailNotConfiguredError
from pawfam.core.errors import MailDeliveryError

logger = logging.getLogger(__name__)

_FOOTER_TEXT = "This is an automated email from PawFam. Please do not reply to this email."

_FOOTER_HTML = (
    '<hr style="margin: 30px 0; border: none; border-top: 1px solid #e5e7eb;">'
    '<p style="color: #6b7280; font-size: 12px;">' + _FOOTER_TEXT + "</p>"
)


class NotificationService:
    """
    Templated account emails.

    Both sends are synchronous: a slow relay stalls the request and a
    failing one fails it. Transport errors are logged and re-raised as
    MailDeliveryError, whose message does not carry the relay's details.
    """

    def __init__(self, email_client: EmailClient, otp_ttl_minutes: int = 10):
        self.email_client = email_client
        self.otp_ttl_minutes = otp_ttl_minutes

    def send_otp_email(self, address: str, code: str) -> None:
        subject = "PawFam - Password Reset OTP"
        text_body = (
            "Hello,\n\n"
            "You have requested to reset your password. "
            "Please use the following OTP to verify your identity:\n\n"
            f"    {code}\n\n"
            f"This OTP will expire in {self.otp_ttl_minutes} minutes.\n"
            "If you did not request this password reset, please ignore this email.\n\n"
            f"{_FOOTER_TEXT}\n"
        )
        html_body = f"""
        <div style="font-family: Arial, sans-serif; padding: 20px; max-width: 600px; margin: 0 auto;">
          <h2 style="color: #1e40af;">PawFam Password Reset</h2>
          <p>Hello,</p>
          <p>You have requested to reset your password. Please use the following OTP to verify your identity:</p>
          <div style="background-color: #f3f4f6; padding: 20px; border-radius: 8px; text-align: center; margin: 20px 0;">
            <h1 style="color: #1e40af; letter-spacing: 8px; margin: 0;">{escape(code)}</h1>
          </div>
          <p>This OTP will expire in {self.otp_ttl_minutes} minutes.</p>
          <p>If you did not request this password reset, please ignore this email.</p>
          {_FOOTER_HTML}
        </div>
        """
        self._deliver(address, subject, text_body, html_body)

    def send_temporary_password_email(
        self,
        address: str,
        password: str,
        display_name: str,
    ) -> None:
        subject = "PawFam - Your Temporary Password"
        text_body = (
            f"Hello {display_name},\n\n"
            "Your identity has been verified. Here is your temporary password:\n\n"
            f"    {password}\n\n"
            "We recommend changing your password immediately after logging in. "
            "Never share your password with anyone.\n\n"
            f"{_FOOTER_TEXT}\n"
        )
        html_body = f"""
        <div style="font-family: Arial, sans-serif; padding: 20px; max-width: 600px; margin: 0 auto;">
          <h2 style="color: #1e40af;">PawFam Password Recovery</h2>
          <p>Hello {escape(display_name)},</p>
          <p>Your identity has been verified. Here is your temporary password:</p>
          <div style="background-color: #f3f4f6; padding: 20px; border-radius: 8px; margin: 20px 0;">
            <p style="margin: 0;"><strong>Password:</strong> {escape(password)}</p>
          </div>
          <p style="color: #ef4444;"><strong>Important Security Notice:</strong></p>
          <ul style="color: #6b7280;">
            <li>We recommend changing your password immediately after logging in</li>
            <li>Never share your password with anyone</li>
            <li>Use a strong, unique password for your account</li>
          </ul>
          <p>You can now log in to your account using this password.</p>
          {_FOOTER_HTML}
        </div>
        """
        self._deliver(address, subject, text_body, html_body)

    def _deliver(self, address: str, subject: str, text_body: str, html_body: str) -> None:
        try:
            self.email_client.send_email(
                to_email=address,
                subject=subject,
                text_body=text_body,
                html_body=html_body,
            )
        except (EmailNotConfiguredError, smtplib.SMTPException, OSError) as exc:
            logger.exception("Failed to send '%s' to %s", subject, address)
            raise MailDeliveryError() from exc
