"""Text highlighting utilities."""

import re

import gi

gi.require_version("GLib", "2.0")
from gi.repository import GLib


def highlight_text(text: str, query: str) -> str:
    """Pango markup for ``text`` with every match of ``query`` highlighted.

    Matching mirrors the repository search: one case-insensitive substring,
    surrounding whitespace ignored.
    """
    if not text:
        return ""

    escape = GLib.markup_escape_text
    query = query.strip() if query else ""
    if not query:
        return escape(text)

    # Matches come from the raw text; each piece is escaped on its own
    parts = []
    position = 0
    for match in re.finditer(re.escape(query), text, flags=re.IGNORECASE):
        parts.append(escape(text[position:match.start()]))
        parts.append(
            f'<span background="yellow" foreground="black">'
            f"{escape(match.group(0))}</span>"
        )
        position = match.end()
    parts.append(escape(text[position:]))
    return "".join(parts)
