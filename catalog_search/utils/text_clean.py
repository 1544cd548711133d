# catalog_search/utils/text_clean.py
from __future__ import annotations
import re
from typing import Optional


def clean_query_text(q: str, max_len: Optional[int] = None) -> str:
    """
    Minimal query normaliser applied before any pattern matching:
    - None -> ""
    - collapse whitespace/newlines
    - trim
    - optional hard cap on length (the interpreter never passes one)
    """
    q = "" if q is None else str(q)
    q = re.sub(r"\s+", " ", q).strip()
    if max_len is not None and len(q) > max_len:
        q = q[:max_len]
    return q
