# heroes/common/naming/slugger.py
from __future__ import annotations

import re
import unicodedata

_slug_re = re.compile(r"[^a-z0-9]+")


def slugify(text: str, *, max_len: int = 64) -> str:
    """
    Deterministic, human-readable ASCII slug:
      - lowercases
      - NFKD normalize and strip to ASCII
      - collapse separators to single '-'
      - trim leading/trailing '-'
      - truncate to `max_len`

    Examples:
      "Hudson Taylor"       -> "hudson-taylor"
      "  Ida  Scudder!! "   -> "ida-scudder"
      "Éxämple"             -> "example"
    """
    if text is None:
        return ""

    value = str(text).strip().lower()
    value = unicodedata.normalize("NFKD", value)
    value = value.encode("ascii", "ignore").decode("ascii")
    value = _slug_re.sub("-", value).strip("-")

    if max_len > 0 and len(value) > max_len:
        value = value[:max_len].rstrip("-")

    return value
