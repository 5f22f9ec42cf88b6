"""
Thin smtplib wrapper.

The Mailer is built lazily from app config on first use. Outside production,
with no SMTP user configured, messages are logged instead of sent so local
password resets still work.
"""
from __future__ import annotations

import logging
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formatdate, make_msgid
from html import escape
from typing import Optional

from flask import current_app

from utils.text import strip_html

logger = logging.getLogger(__name__)


class Mailer:
    def __init__(self, host: str, port: int, user: Optional[str], password: Optional[str],
                 sender: str, dry_run: bool = False, timeout: int = 30):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.sender = sender
        self.dry_run = dry_run
        self.timeout = timeout

    @classmethod
    def from_config(cls, config) -> "Mailer":
        user = config.get("SMTP_USER") or None
        dry_run = not user and config.get("APP_ENV") not in ("prod", "production")
        return cls(
            host=config.get("SMTP_HOST", "localhost"),
            port=int(config.get("SMTP_PORT", 587)),
            user=user,
            password=config.get("SMTP_PASS") or None,
            sender=config.get("SMTP_FROM", "noreply@growthvalley.com"),
            dry_run=dry_run,
        )

    def _build(self, to: str, subject: str, html: str, text: Optional[str]) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["From"] = self.sender
        msg["To"] = to
        msg["Subject"] = subject
        msg["Date"] = formatdate(localtime=False)
        msg["Message-ID"] = make_msgid()
        msg.attach(MIMEText(text or strip_html(html), "plain", "utf-8"))
        msg.attach(MIMEText(html, "html", "utf-8"))
        return msg

    def send(self, to: str, subject: str, html: str, text: Optional[str] = None) -> bool:
        """True when the message was handed to the server (or logged in dry-run mode)."""
        msg = self._build(to, subject, html, text)
        if self.dry_run:
            logger.info("Email (dry run) to=%s subject=%s\n%s", to, subject, text or strip_html(html))
            return True
        try:
            if self.port == 465:
                server = smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout,
                                          context=ssl.create_default_context())
            else:
                server = smtplib.SMTP(self.host, self.port, timeout=self.timeout)
            with server:
                if self.port != 465:
                    server.starttls(context=ssl.create_default_context())
                if self.user:
                    server.login(self.user, self.password or "")
                server.sendmail(self.sender, [to], msg.as_string())
        except (smtplib.SMTPException, OSError) as exc:
            logger.error("Email to %s failed: %s", to, exc)
            return False
        logger.info("Email sent to %s: %s", to, subject)
        return True


_mailer: Optional[Mailer] = None


def get_mailer() -> Mailer:
    global _mailer
    if _mailer is None:
        _mailer = Mailer.from_config(current_app.config)
    return _mailer


def reset_mailer() -> None:
    """Drop the cached instance (config changes, tests)."""
    global _mailer
    _mailer = None


def send_password_reset_email(email: str, reset_url: str) -> bool:
    minutes = int(current_app.config["RESET_TOKEN_EXPIRES"]) // 60000
    html = f"""
    <h2>Password Reset Request</h2>
    <p>You requested a password reset for your Growth Valley admin account.</p>
    <p><a href="{reset_url}">Reset your password</a></p>
    <p>This link expires in {minutes} minutes. If you did not request it, you can ignore this email.</p>
    """
    return get_mailer().send(email, "Password Reset Request - Growth Valley", html)


def send_enquiry_notification(enquiry, admin_email: str) -> bool:
    html = f"""
    <h2>New Enquiry</h2>
    <p><strong>Name:</strong> {escape(enquiry.name)}</p>
    <p><strong>Email:</strong> {escape(enquiry.email)}</p>
    <p><strong>Company:</strong> {escape(enquiry.company or "-")}</p>
    <p><strong>Service:</strong> {escape(enquiry.service or "-")}</p>
    <p><strong>Message:</strong></p>
    <p>{escape(enquiry.message)}</p>
    """
    return get_mailer().send(admin_email, f"New Enquiry from {enquiry.name}", html)
