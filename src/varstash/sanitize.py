"""Map arbitrary entry names onto valid Python identifiers."""

from __future__ import annotations

import keyword
import unicodedata

IDENTIFIER_PREFIX = "Var_"
FALLBACK_IDENTIFIER = "UnnamedVar"
MAX_IDENTIFIER_LENGTH = 63


def _is_identifier_char(ch: str) -> bool:
    # identifiers are NFKC-normalized by the parser, so e.g. "µ" would be reachable only as "μ"
    return (
        ord(ch) < 255
        and ch.isalnum()
        and ("_" + ch).isidentifier()
        and unicodedata.normalize("NFKC", ch) == ch
    )


def sanitize_name(name: str) -> str:
    """Return a valid identifier derived from ``name``.

    1. Every character that is not alphanumeric, has a code point >= 255, or
       changes under NFKC normalization (e.g. ``µ``) becomes ``_``.
    2. A result that does not start with a letter gets the ``Var_`` prefix.
    3. The result is cut to 63 characters.
    4. An empty result becomes ``UnnamedVar``; a keyword gets a trailing ``_``.

    Distinct names can map to the same identifier; binding order decides
    which value survives.
    """
    safe = "".join(ch if _is_identifier_char(ch) else "_" for ch in name)

    if safe and not safe[0].isalpha():
        safe = IDENTIFIER_PREFIX + safe

    safe = safe[:MAX_IDENTIFIER_LENGTH]

    if not safe:
        return FALLBACK_IDENTIFIER
    if keyword.iskeyword(safe):
        safe += "_"
    return safe
