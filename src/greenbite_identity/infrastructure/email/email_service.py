import asyncio
import logging
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from fastapi.concurrency import run_in_threadpool

from greenbite_config.settings import Settings
from greenbite_identity.exceptions import MailDispatchError

logger = logging.getLogger(__name__)

PASSWORD_RESET_SUBJECT = "Your Password Reset Code"

PASSWORD_RESET_TEXT = """Hello,

Your reset code is: {code}

The code is valid for {ttl_minutes} minutes. If you didn't request a
password reset, you can safely ignore this email.

-- GreenBite
"""

PASSWORD_RESET_HTML = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
</head>
<body style="font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; background-color: #f9fafb; margin: 0; padding: 20px;">
    <div style="max-width: 600px; margin: 0 auto; background-color: #ffffff; border-radius: 8px; padding: 40px;">
        <h2 style="color: #111827; margin-top: 0;">Password Reset Code</h2>
        <p style="color: #374151; line-height: 1.6;">Use the code below to reset your GreenBite password. It is valid for {ttl_minutes} minutes.</p>
        <p style="margin: 30px 0; text-align: center; font-size: 32px; letter-spacing: 8px; font-weight: 700; color: #15803d;">{code}</p>
        <p style="color: #9ca3af; font-size: 13px;">If you didn't request this, you can safely ignore this email.</p>
    </div>
</body>
</html>
"""


class EmailService:
    """SMTP mail dispatcher.

    Delivery happens on the worker thread pool and is bounded by
    ``smtp_timeout``; any failure surfaces as MailDispatchError.
    """

    def __init__(self, settings: Settings):
        self._settings = settings

    def _create_message(
        self,
        to_email: str,
        subject: str,
        text_body: str,
        html_body: str | None = None,
    ) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        from_email = self._settings.smtp_from_email or self._settings.smtp_user
        msg["From"] = f"{self._settings.smtp_from_name} <{from_email}>"
        msg["To"] = to_email

        msg.attach(MIMEText(text_body, "plain"))
        if html_body:
            msg.attach(MIMEText(html_body, "html"))

        return msg

    def _send_email(self, to_email: str, message: MIMEMultipart) -> None:
        if not self._settings.smtp_host:
            raise MailDispatchError(to_email, "SMTP host not configured")

        smtp_password = (
            self._settings.smtp_password.get_secret_value()
            if self._settings.smtp_password
            else ""
        )
        timeout = self._settings.smtp_timeout

        if self._settings.smtp_use_tls and not self._settings.smtp_starttls:
            # Implicit TLS (port 465)
            context = ssl.create_default_context()
            with smtplib.SMTP_SSL(
                self._settings.smtp_host,
                self._settings.smtp_port,
                context=context,
                timeout=timeout,
            ) as server:
                if self._settings.smtp_user:
                    server.login(self._settings.smtp_user, smtp_password)
                server.send_message(message)
        else:
            # STARTTLS (port 587) or plain
            with smtplib.SMTP(
                self._settings.smtp_host,
                self._settings.smtp_port,
                timeout=timeout,
            ) as server:
                if self._settings.smtp_starttls:
                    context = ssl.create_default_context()
                    server.starttls(context=context)
                if self._settings.smtp_user:
                    server.login(self._settings.smtp_user, smtp_password)
                server.send_message(message)

    async def send(
        self,
        to_email: str,
        subject: str,
        text_body: str,
        html_body: str | None = None,
    ) -> None:
        """Deliver a message, raising MailDispatchError on any failure."""
        message = self._create_message(
            to_email=to_email,
            subject=subject,
            text_body=text_body,
            html_body=html_body,
        )

        try:
            await asyncio.wait_for(
                run_in_threadpool(self._send_email, to_email, message),
                timeout=self._settings.smtp_timeout,
            )
        except MailDispatchError:
            logger.error("SMTP host not configured, email not sent to %s", to_email)
            raise
        except asyncio.TimeoutError as e:
            logger.error("Timed out sending email to %s", to_email)
            raise MailDispatchError(to_email, "timed out") from e
        except (smtplib.SMTPException, OSError) as e:
            logger.error("Failed to send email to %s: %s", to_email, e)
            raise MailDispatchError(to_email, str(e)) from e

        logger.info("Email sent to %s", to_email)

    async def send_password_reset_code(
        self,
        to_email: str,
        code: str,
        ttl_minutes: int,
    ) -> None:
        if not self._settings.smtp_enabled:
            if self._settings.is_production:
                logger.error("SMTP disabled in production, reset code not sent")
                raise MailDispatchError(to_email, "SMTP is disabled")
            logger.warning(
                "SMTP disabled, skipping password reset email to %s (code: %s)",
                to_email,
                code,
            )
            return

        await self.send(
            to_email=to_email,
            subject=PASSWORD_RESET_SUBJECT,
            text_body=PASSWORD_RESET_TEXT.format(code=code, ttl_minutes=ttl_minutes),
            html_body=PASSWORD_RESET_HTML.format(code=code, ttl_minutes=ttl_minutes),
        )
