"""Email Rendering: escapes user text and renders the fixed notification fragment.

Invariants:
    - escape_html replaces & first, then < and >, so no entity is double-escaped
    - name, email and message are escaped before they reach the HTML body
    - The mailto: target is percent-encoded like JavaScript's encodeURIComponent
"""

from urllib.parse import quote

from contact_relay.core.submission import Submission


# quote() already keeps A-Z a-z 0-9 - _ . ~
_MAILTO_SAFE = "!*'()"

_HTML_TEMPLATE = """
<h2>New {site_name} Contact Form Submission</h2>
<p><strong>Name:</strong> {name}</p>
<p><strong>Email:</strong> <a href="mailto:{mailto}">{email}</a></p>
<p><strong>Message:</strong></p>
<div style="padding:10px;border-left:4px solid #0078D7;background:#f4f4f4;white-space:pre-wrap;">{message}</div>
"""


def escape_html(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )


def encode_mailto(email: str) -> str:
    return quote(email, safe=_MAILTO_SAFE)


def build_subject(name: str, site_name: str) -> str:
    return f"📬 New {site_name} Contact Form Submission from {name}"


def render_html_body(submission: Submission, site_name: str) -> str:
    """Render the notification HTML. Every user-supplied value is escaped."""
    return _HTML_TEMPLATE.format(
        site_name=escape_html(site_name),
        name=escape_html(submission.name),
        mailto=encode_mailto(submission.email),
        email=escape_html(submission.email),
        message=escape_html(submission.message),
    )
