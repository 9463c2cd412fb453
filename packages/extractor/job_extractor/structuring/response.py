"""Model response normalization.

Models frequently wrap JSON in a markdown code fence. ``strip_code_fence``
removes exactly one enclosing fence using this grammar::

    response := WS* [open] body [close] WS*
    open     := "```" [lang-tag] (NEWLINE | WS+ | &("{" | "["))
    close    := "```" WS*                      (only at the very end)

Backtick runs inside the body are left untouched, so JSON string values that
contain "```" survive.
"""

from __future__ import annotations

import re

FENCE = "```"

# A language tag alone on the opening fence line, e.g. "json", "JSON", "" or "json5"
_LANG_LINE_RE = re.compile(r"[^\s`{\[\"]*")
# A language tag on a single-line fence, followed by whitespace or the JSON
# body itself: ```json {...}``` or ```json{...}```
_INLINE_TAG_RE = re.compile(r"[A-Za-z][\w+.-]*(?:\s+|(?=[{\[]))")


def _strip_opening_fence(text: str) -> str:
    rest = text[len(FENCE):]
    newline = rest.find("\n")
    if newline != -1 and _LANG_LINE_RE.fullmatch(rest[:newline].strip()):
        return rest[newline + 1:]
    inline_tag = _INLINE_TAG_RE.match(rest)
    if inline_tag:
        return rest[inline_tag.end():]
    return rest


def strip_code_fence(text: str) -> str:
    """Return *text* with a surrounding markdown code fence removed.

    Unfenced input is returned trimmed but otherwise unchanged.
    """
    body = text.strip()
    if not body.startswith(FENCE):
        return body

    body = _strip_opening_fence(body).rstrip()
    if body.endswith(FENCE):
        body = body[: -len(FENCE)]
    return body.strip()
