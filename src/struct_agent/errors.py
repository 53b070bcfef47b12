"""변환 과정에서 발생하는 예외 정의."""
from __future__ import annotations


class StructAgentError(Exception):
    pass


class SQLParseError(StructAgentError):
    """Parse 호출 전체를 실패시키는 오류. kind 로 종류를 구분한다."""

    kind = "SQLParseError"
    default_message = "failed to parse SQL"

    def __init__(self, message: str | None = None, diagnostics: list | None = None):
        super().__init__(message or self.default_message)
        # 버려진 절들의 진단 (NoValidColumns 에서만 채워짐)
        self.diagnostics = list(diagnostics or [])


class NoTableName(SQLParseError):
    kind = "NoTableName"
    default_message = "failed to extract table name from SQL"


class NoColumnBlock(SQLParseError):
    kind = "NoColumnBlock"
    default_message = "failed to extract column definitions"


class NoClosingParen(SQLParseError):
    kind = "NoClosingParen"
    default_message = "failed to find closing parenthesis"


class NoValidColumns(SQLParseError):
    kind = "NoValidColumns"
    default_message = "failed to parse columns: no valid columns found"


class ClauseError(StructAgentError):
    """컬럼 절 하나의 실패. 파서 루프에서 진단으로 바뀌고 전파되지 않는다."""

    def __init__(self, kind: str, clause: str, detail: str = ""):
        self.kind = kind
        self.clause = clause
        self.detail = detail
        msg = f"{kind}: {clause}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)
