"""
SMTP delivery for contact-form notifications.

Blocking (smtplib); callers run it in a worker thread. Failures propagate to
the caller, which logs them. Nothing is retried.
"""

from __future__ import annotations

import logging
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage
from email.utils import formataddr
from pathlib import Path

from core import settings

from . import templates
from .schemas import ContactSubmission

logger = logging.getLogger(__name__)

TEAM_NAME = "Accelrix Team"


class MailConfigError(RuntimeError):
    pass


MAIL_ERRORS = (smtplib.SMTPException, OSError, MailConfigError)


@dataclass(frozen=True)
class SmtpSettings:
    host: str
    port: int
    use_ssl: bool
    user: str
    password: str
    admin_to: str
    site_url: str
    banner_path: Path
    timeout_s: float = 30.0


def smtp_settings() -> SmtpSettings:
    user = settings.env_str("EMAIL_USER")
    password = settings.env_str("EMAIL_PASS")
    if not user or not password:
        raise MailConfigError("EMAIL_USER and EMAIL_PASS must be set.")

    return SmtpSettings(
        host=settings.env_str("SMTP_HOST", "smtp.gmail.com"),
        port=settings.env_int("SMTP_PORT", 465),
        use_ssl=settings.env_bool("SMTP_USE_SSL", True),
        user=user,
        password=password,
        admin_to=settings.env_str("EMAIL_TO", user),
        site_url=settings.site_url(),
        banner_path=Path(settings.env_str("CONTACT_BANNER_PATH", "assets/banner.png")),
    )


def build_admin_notification(submission: ContactSubmission, config: SmtpSettings) -> EmailMessage:
    msg = EmailMessage()
    msg["From"] = formataddr((templates.single_line(submission.name), config.user))
    msg["To"] = config.admin_to
    msg["Reply-To"] = templates.single_line(submission.email)
    msg["Subject"] = templates.admin_subject(submission)
    msg.set_content(templates.admin_text(submission))
    msg.add_alternative(templates.admin_html(submission), subtype="html")
    return msg


def build_auto_reply(submission: ContactSubmission, config: SmtpSettings) -> EmailMessage:
    banner = config.banner_path.read_bytes() if config.banner_path.is_file() else None
    if banner is None:
        logger.warning("contact_banner_missing path=%s", config.banner_path)

    msg = EmailMessage()
    msg["From"] = formataddr((TEAM_NAME, config.user))
    msg["To"] = templates.single_line(submission.email)
    msg["Subject"] = templates.AUTO_REPLY_SUBJECT
    msg.set_content(templates.auto_reply_text(submission, site_url=config.site_url))
    msg.add_alternative(
        templates.auto_reply_html(
            submission,
            site_url=config.site_url,
            with_banner=banner is not None,
        ),
        subtype="html",
    )
    if banner is not None:
        html_part = msg.get_payload()[1]
        html_part.add_related(
            banner,
            maintype="image",
            subtype="png",
            cid=f"<{templates.BANNER_CID}>",
            filename="banner.png",
        )
    return msg


def _open_smtp(config: SmtpSettings) -> smtplib.SMTP:
    if config.use_ssl:
        return smtplib.SMTP_SSL(config.host, config.port, timeout=config.timeout_s)
    smtp = smtplib.SMTP(config.host, config.port, timeout=config.timeout_s)
    try:
        smtp.starttls()
    except BaseException:
        smtp.close()
        raise
    return smtp


def send_contact_notifications(submission: ContactSubmission) -> None:
    """
    Send the admin notification, then the auto-reply, over one SMTP session.
    """
    config = smtp_settings()
    admin_msg = build_admin_notification(submission, config)
    reply_msg = build_auto_reply(submission, config)

    with _open_smtp(config) as smtp:
        smtp.login(config.user, config.password)
        smtp.send_message(admin_msg)
        smtp.send_message(reply_msg)

    logger.info("contact_mail_sent admin_to=%s", config.admin_to)
