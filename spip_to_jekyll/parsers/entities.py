"""
Conversion of non-ASCII characters to HTML named character references.

Jekyll sites imported from older SPIP installs are often served with a
non-UTF-8 charset, so titles, keywords and comments can be rewritten
with named references (``é`` → ``&eacute;``).  Markup characters are
never encoded: article bodies and comments carry raw HTML, and encoding
``<`` or ``&`` would break every tag in them.
"""

from __future__ import annotations

from html.entities import codepoint2name
from typing import Dict, Optional, Union

# Characters kept literal so embedded HTML survives cleaning.
PRESERVED_CHARACTERS = "&<>\"'/"

_NAMED_REFERENCES: Dict[int, str] = {
    codepoint: f"&{name};"
    for codepoint, name in codepoint2name.items()
    if chr(codepoint) not in PRESERVED_CHARACTERS
}


def clean_entities(text: Optional[Union[str, bytes]]) -> str:
    """Encode every character that has a named reference, keeping markup.

    ``bytes`` input is interpreted as UTF-8.  Characters without a named
    reference are left untouched, so plain ASCII text comes back
    unchanged and cleaning an already cleaned string is a no-op.
    """
    if text is None:
        return ""
    if isinstance(text, bytes):
        text = text.decode("utf-8", errors="replace")
    return text.translate(_NAMED_REFERENCES)
