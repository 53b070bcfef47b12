from __future__ import annotations
import re

_WS_RE = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    # 공백/탭/개행 연속을 공백 하나로
    return _WS_RE.sub(" ", text.strip())
