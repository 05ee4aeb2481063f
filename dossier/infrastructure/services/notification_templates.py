"""Notification email templates: template key -> subject/body (Jinja)."""

from __future__ import annotations

from typing import Any

from jinja2 import Environment, Template

# key -> (subject_template, html_body_template)
_DEFAULT_TEMPLATES: dict[str, tuple[str, str]] = {
    "credentials": (
        "Your access credentials",
        "<p>Hello {{ full_name }},</p>\n"
        "<p>Your access credentials are:</p>\n"
        "<p>Email: {{ email }}</p>\n"
        "<p>Password: {{ password }}</p>\n"
        "<p>You can sign in here:</p>\n"
        '<a href="{{ login_link }}">Sign in</a>',
    ),
    "expiration_digest": (
        "Documents expired or about to expire",
        "<p>Hello {{ full_name }},</p>\n"
        "<p>"
        "{% for message in messages %}{{ message }}"
        "{% if not loop.last %}<br>{% endif %}{% endfor %}"
        "</p>",
    ),
    "expiration_update": (
        "Updates about your documents",
        "<p>Hello,</p>\n<p>{{ message }}</p>",
    ),
    "review_collaborator": (
        "Documents uploaded successfully",
        "<p>The user with the following details: {{ details }} has uploaded "
        "their documents and they are ready for review.</p>\n"
        "<p>You can review them here:</p>\n"
        '<a href="{{ link }}">Review documents</a>',
    ),
    "review_revisor": (
        "Documents need review",
        "<p>Some of the documents you uploaded were not approved. Please check "
        "the comments and upload the corrected documents.</p>\n"
        "<p>You can see the details here:</p>\n"
        '<a href="{{ link }}">View documents</a>',
    ),
}


class NotificationTemplateRenderer:
    """Renders subject and HTML body for a notification template key."""

    def __init__(
        self,
        templates: dict[str, tuple[str, str]] | None = None,
    ) -> None:
        self._templates = templates or _DEFAULT_TEMPLATES
        self._env = Environment(autoescape=True)
        self._compiled: dict[str, tuple[Template, Template]] = {}
        for key, (sub_str, body_str) in self._templates.items():
            self._compiled[key] = (
                self._env.from_string(sub_str),
                self._env.from_string(body_str),
            )

    def render(self, template_key: str, **context: Any) -> tuple[str, str]:
        """Render subject and body for the template key. Raises KeyError if key unknown."""
        if template_key not in self._compiled:
            raise KeyError(f"Unknown notification template: {template_key}")
        subject_tpl, body_tpl = self._compiled[template_key]
        return subject_tpl.render(**context), body_tpl.render(**context)
