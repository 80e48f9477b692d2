"""Transactional email over an HTTP email API (Resend-compatible JSON body)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from petconnect.core.config import Settings

logger = logging.getLogger(__name__)

PASSWORD_RESET_SUBJECT = "PetConnect - Password Reset Request"


class EmailService:
    """
    Sends account emails. Delivery failures are logged and reported as False;
    they never fail the request that triggered them.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def is_configured(self) -> bool:
        s = self._settings
        if not s.EMAIL_API_URL:
            return False
        if s.EMAIL_API_KEY is None or not s.EMAIL_API_KEY.get_secret_value().strip():
            return False
        return True

    def send_password_reset_email(
        self, recipient_email: str, recipient_name: str, reset_token: str
    ) -> bool:
        reset_url = f"{self._settings.FRONTEND_BASE_URL}/reset-password?token={reset_token}"
        hours = self._settings.PASSWORD_RESET_EXPIRE_HOURS
        html = (
            f"<p>Hello {recipient_name},</p>"
            "<p>You requested a password reset for your PetConnect account.</p>"
            "<p>Click the link below to set a new password:</p>"
            f'<p><a href="{reset_url}">Reset Password</a></p>'
            f"<p>This link will expire in {hours} hour{'s' if hours != 1 else ''}.</p>"
            "<p>If you didn't request this, please ignore this email.</p>"
            "<br><p>Thanks,<br>The PetConnect Team</p>"
        )
        return self._send(recipient_email, PASSWORD_RESET_SUBJECT, html, "password reset email")

    def _send(self, to: str, subject: str, html: str, context: str) -> bool:
        if not self.is_configured():
            logger.warning("Email API not configured; skipping %s to %s", context, to)
            return False

        logger.info("Attempting to send %s to %s", context, to)
        api_key = self._settings.EMAIL_API_KEY.get_secret_value()
        try:
            with httpx.Client(timeout=self._settings.EMAIL_REQUEST_TIMEOUT_SEC) as client:
                response = client.post(
                    self._settings.EMAIL_API_URL,
                    headers={"Authorization": f"Bearer {api_key}"},
                    json={
                        "from": self._settings.EMAIL_FROM,
                        "to": [to],
                        "subject": subject,
                        "html": html,
                    },
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Email API rejected %s to %s: status=%s body=%s",
                context,
                to,
                e.response.status_code,
                e.response.text[:500],
            )
            return False
        except httpx.HTTPError as e:
            logger.error("Failed to send %s to %s: %s", context, to, e)
            return False

        logger.info("%s sent successfully to %s", context, to)
        return True
