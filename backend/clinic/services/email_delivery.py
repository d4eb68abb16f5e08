"""Template-driven email delivery through the Resend HTTP API."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Sequence

import requests
from flask import current_app, render_template
from jinja2 import TemplateError

from clinic.domain.invariants.exceptions import ClinicError


class EmailDeliveryError(ClinicError):
    """Base error for email delivery failures."""


class TemplateMissingError(EmailDeliveryError):
    """Raised when the requested template is not known."""


@dataclass(frozen=True)
class EmailTemplate:
    """Subject plus the Jinja template and the props it requires."""

    subject: str
    path: str
    required: Sequence[str] = ()


TEMPLATES: Dict[str, EmailTemplate] = {
    "otp": EmailTemplate("Password Reset OTP", "email/otp.html", ("otp",)),
    "magic-link": EmailTemplate(
        "Log in with this magic link",
        "email/magic_link.html",
        ("supabase_url", "email_action_type", "redirect_to", "token_hash", "token"),
    ),
    "welcome": EmailTemplate(
        "Welcome to Eyefem Healthcare",
        "email/welcome.html",
        ("user_email",),
    ),
}


class EmailDeliveryClient:
    def __init__(
        self,
        api_key: str,
        *,
        api_url: str,
        sender: str,
        timeout: int = 15,
    ) -> None:
        self.api_key = api_key
        self.api_url = api_url
        self.sender = sender
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: Optional[Mapping[str, Any]] = None) -> "EmailDeliveryClient":
        config = config or current_app.config
        return cls(
            config.get("RESEND_API_KEY") or "",
            api_url=config["RESEND_API_URL"],
            sender=config["EMAIL_FROM"],
            timeout=config.get("EMAIL_TIMEOUT", 15),
        )

    def send(self, *, to: str, subject: str, html: str) -> Dict[str, Any]:
        if not self.api_key:
            raise EmailDeliveryError("Email delivery is not configured")

        body = {"from": self.sender, "to": [to], "subject": subject, "html": html}
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        try:
            r = requests.post(self.api_url, json=body, headers=headers, timeout=self.timeout)
        except requests.RequestException as exc:
            raise EmailDeliveryError(f"Failed to send email: {exc}") from exc

        try:
            data = r.json()
        except ValueError:
            data = {}

        if r.status_code >= 400:
            message = data.get("message") if isinstance(data, dict) else None
            raise EmailDeliveryError(f"Failed to send email: {message or r.status_code}")
        return data


def render_email(template_key: str, props: Mapping[str, Any]) -> str:
    template = TEMPLATES.get(template_key)
    if template is None:
        raise TemplateMissingError(f"Unknown email template: {template_key}")

    missing = [name for name in template.required if not props.get(name)]
    if missing:
        raise EmailDeliveryError(f"Missing template props: {', '.join(missing)}")

    try:
        return render_template(
            template.path,
            logo_url=current_app.config.get("EMAIL_LOGO_URL"),
            **props,
        )
    except TemplateError as exc:
        raise EmailDeliveryError(f"Failed to render {template_key}: {exc}") from exc


def send_template_email(
    template_key: str,
    *,
    to: str,
    props: Mapping[str, Any],
    client: Optional[EmailDeliveryClient] = None,
) -> Dict[str, Any]:
    html = render_email(template_key, props)
    client = client or EmailDeliveryClient.from_config()

    current_app.logger.info("Sending %s email to %s", template_key, to)
    details = client.send(to=to, subject=TEMPLATES[template_key].subject, html=html)
    current_app.logger.info("Email sent successfully via Resend: %s", details)
    return details
