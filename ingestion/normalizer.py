"""
Text normalization applied to every extracted document before storage.

Word characters are ASCII only (``A-Z a-z 0-9 _``), so accented and
non-Latin letters are dropped along with symbols.
"""
import re

_WHITESPACE_RE = re.compile(r"\s+")
# Anything that is not an ASCII word character, whitespace or basic punctuation
_DISALLOWED_RE = re.compile(r"[^A-Za-z0-9_\s.,!?;:()\-]")


def normalize_text(text: str) -> str:
    """
    Collapse whitespace runs to single spaces, drop characters outside
    ASCII words/whitespace/``. , ! ? ; : ( ) -`` and trim.

    Disallowed characters are removed before whitespace is collapsed, so the
    result never contains two adjacent spaces and
    ``normalize_text(normalize_text(x)) == normalize_text(x)``.
    """
    text = _DISALLOWED_RE.sub("", text)
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()
