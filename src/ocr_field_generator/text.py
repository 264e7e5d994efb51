import re

_APOSTROPHE_RE = re.compile(r"['’]")
_WORD_RE = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")


def normalize_text(text: str) -> str:
    """Collapse whitespace in OCR-derived strings."""
    return " ".join(text.split())


def camel_case(text: str) -> str:
    """Convert free text into a camelCase identifier.

    Used by field inference to turn a nearby OCR label such as
    ``"Invoice Number:"`` into a field name (``"invoiceNumber"``). Words are
    split on punctuation, whitespace, case changes and digit runs.
    """
    words = _WORD_RE.findall(_APOSTROPHE_RE.sub("", text))
    if not words:
        return ""
    head, *tail = (word.lower() for word in words)
    return head + "".join(word.capitalize() for word in tail)
