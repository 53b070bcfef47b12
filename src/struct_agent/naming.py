"""식별자 케이스 변환 (Go 필드명 / 태그 값)."""
from __future__ import annotations


def to_pascal_case(name: str) -> str:
    """
    snake_case → PascalCase.
    빈 세그먼트(앞뒤/연속 '_')는 버리고, 세그먼트마다 첫 글자만 대문자, 나머지는 소문자.
      user_id → UserId, a_b_c_d → ABCD
    """
    parts = [p for p in name.split("_") if p]
    return "".join(p[0].upper() + p[1:].lower() for p in parts)


def to_snake_case(name: str) -> str:
    """
    PascalCase / camelCase / SCREAMING_CASE → snake_case (태그 값 용).
    대문자가 없으면 그대로 반환한다. 약어 연속(ID, HTTP)은 소문자 경계에서만 자른다.
      UserID → user_id, HTTPServer → http_server, user_id → user_id
    """
    if not any(ch.isupper() for ch in name):
        return name

    out: list[str] = []
    for i, ch in enumerate(name):
        if ch.isupper():
            if i > 0 and name[i - 1] != "_":
                prev_lower = name[i - 1].islower()
                next_lower = i + 1 < len(name) and name[i + 1].islower()
                if prev_lower or next_lower:
                    out.append("_")
            out.append(ch.lower())
        else:
            out.append(ch)
    return "".join(out)
