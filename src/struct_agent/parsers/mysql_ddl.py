"""
CREATE TABLE 문 하나를 TableRecord 로 변환한다.

SQL 문법 파서가 아니라 패턴 매칭 기반이다.
  정규화 → 테이블명/컬럼 블록 추출 → 최상위 콤마로 절 분리 → 절 단위 분류/파싱
괄호/따옴표 짝 맞추기는 정규식 대신 문자 스캐너로 처리한다.
"""
from __future__ import annotations
import logging
import re
from typing import List, Tuple

from struct_agent.errors import (
    ClauseError,
    NoClosingParen,
    NoColumnBlock,
    NoTableName,
    NoValidColumns,
)
from struct_agent.model import ClauseDiagnostic, FieldRecord, ParseResult, TableRecord
from struct_agent.naming import to_pascal_case
from struct_agent.normalize import normalize_whitespace
from struct_agent.parsers.base import Parser
from struct_agent.type_map import map_sql_type

logger = logging.getLogger(__name__)

# 문자열 리터럴(' ")과 백틱 식별자. 연 문자와 같은 문자로만 닫힌다.
QUOTE_CHARS = "'\"`"

SQL_TYPE_NAMES = (
    "TINYINT", "SMALLINT", "MEDIUMINT", "INT", "INTEGER", "BIGINT",
    "FLOAT", "DOUBLE", "DECIMAL", "NUMERIC",
    "CHAR", "VARCHAR", "TEXT", "TINYTEXT", "MEDIUMTEXT", "LONGTEXT",
    "DATETIME", "TIMESTAMP", "DATE", "TIME",
    "BOOLEAN", "BOOL",
    "BLOB", "TINYBLOB", "MEDIUMBLOB", "LONGBLOB",
    "JSON", "ENUM", "SET",
)

CONSTRAINT_PREFIXES = (
    "PRIMARY KEY",
    "FOREIGN KEY",
    "UNIQUE KEY",
    "UNIQUE INDEX",
    "UNIQUE (",
    "UNIQUE(",
    "KEY ",
    "INDEX ",
    "FULLTEXT ",
    "SPATIAL ",
    "CONSTRAINT",
    "CHECK ",
    "CHECK(",
)

TABLE_NAME_RE = re.compile(
    r"CREATE\s+TABLE\s+(?:IF\s+NOT\s+EXISTS\s+)?[`\"']?(\w+)[`\"']?",
    re.IGNORECASE,
)
# 마지막 ')' 뒤에 테이블 옵션(ENGINE 등) 또는 ';' / 끝이 오는 블록
COLUMN_BLOCK_RE = re.compile(
    r"\(([\s\S]+)\)\s*(?:ENGINE|DEFAULT|AUTO_INCREMENT|COMMENT|;|$)",
    re.IGNORECASE,
)
# 긴 이름부터 시도해야 DATETIME 이 DATE 로, INTEGER 가 INT 로 잘리지 않는다.
# 접두 매칭이라 JSONB, TIMESTAMPTZ, FLOAT8 도 기본 타입으로 읽힌다 (INTERVAL 은 제외).
TYPE_RE = re.compile(
    r"^(?!INTERVAL\b)(" + "|".join(sorted(SQL_TYPE_NAMES, key=len, reverse=True)) + r")"
    r"(?:\s*\(([^)]+)\))?"
    r"(?:\s+(UNSIGNED)\b)?",
    re.IGNORECASE,
)
NOT_NULL_RE = re.compile(r"\bNOT\s+NULL\b", re.IGNORECASE)
COMMENT_RE = re.compile(r"\bCOMMENT\b", re.IGNORECASE)
DEFAULT_RE = re.compile(r"\bDEFAULT\b", re.IGNORECASE)


# ---------------------------------------------------------------
# 구조 추출
# ---------------------------------------------------------------
def _match_table_name(sql: str) -> re.Match:
    m = TABLE_NAME_RE.search(sql)
    if not m:
        raise NoTableName()
    return m


def extract_table_name(sql: str) -> str:
    return _match_table_name(sql).group(1)


def find_matching_paren(text: str, start: int) -> int:
    """text[start] 의 '(' 와 짝이 되는 ')' 위치. 따옴표 안의 괄호는 무시. 없으면 -1."""
    depth = 0
    quote = ""
    i = start
    while i < len(text):
        ch = text[i]
        if quote:
            if ch == "\\" and quote != "`":
                i += 2
                continue
            if ch == quote:
                quote = ""
        elif ch in QUOTE_CHARS:
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return i
        i += 1
    return -1


def extract_column_block(sql: str, start: int = 0) -> str:
    m = COLUMN_BLOCK_RE.search(sql, start)
    # 하나의 균형 잡힌 괄호 그룹일 때만 채택 (테이블 옵션 괄호까지 먹는 경우 제외)
    if m and find_matching_paren(sql, m.start()) == m.end(1):
        return m.group(1)

    open_idx = sql.find("(", start)
    if open_idx == -1:
        raise NoColumnBlock()
    close_idx = find_matching_paren(sql, open_idx)
    if close_idx == -1:
        raise NoClosingParen()
    return sql[open_idx + 1:close_idx]


def split_columns(block: str) -> List[str]:
    """괄호 깊이 0 이고 따옴표 밖인 콤마에서만 분리. 빈 항목도 그대로 반환."""
    parts: List[str] = []
    cur: List[str] = []
    depth = 0
    quote = ""
    escaped = False

    for ch in block:
        if quote:
            cur.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\" and quote != "`":
                escaped = True
            elif ch == quote:
                quote = ""
            continue

        if ch in QUOTE_CHARS:
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        elif ch == "," and depth == 0:
            parts.append("".join(cur))
            cur = []
            continue
        cur.append(ch)

    if cur:
        parts.append("".join(cur))
    return parts


# ---------------------------------------------------------------
# 절 단위 파싱
# ---------------------------------------------------------------
def is_constraint(clause: str) -> bool:
    return clause.upper().startswith(CONSTRAINT_PREFIXES)


def extract_column_name(clause: str) -> Tuple[str, str]:
    """(컬럼명, 나머지). 따옴표 식별자는 안쪽 그대로."""
    clause = clause.strip()
    if not clause:
        raise ClauseError("InvalidColumnName", clause)

    if clause[0] in "`\"":
        end = clause.find(clause[0], 1)
        if end == -1:
            raise ClauseError("InvalidColumnName", clause, "unterminated quoted identifier")
        name = clause[1:end]
        if not name:
            raise ClauseError("InvalidColumnName", clause, "empty identifier")
        return name, clause[end + 1:].strip()

    parts = clause.split()
    if len(parts) < 2:
        raise ClauseError("InvalidColumnName", clause, "missing column type")
    return parts[0], " ".join(parts[1:])


def extract_data_type(definition: str) -> str | None:
    """타입 키워드(대문자). TINYINT(1) 은 boolean 변형으로 따로 돌려준다."""
    m = TYPE_RE.match(definition.strip())
    if not m:
        return None
    data_type = m.group(1).upper()
    size = (m.group(2) or "").strip()
    if data_type == "TINYINT" and size == "1":
        return "TINYINT(1)"
    return data_type


def strip_comment_and_default(definition: str) -> str:
    # COMMENT 이후 전부 제거
    m = COMMENT_RE.search(definition)
    if m:
        definition = definition[:m.start()]

    m = DEFAULT_RE.search(definition)
    if m:
        head = definition[:m.start()]
        rest = definition[m.end():].lstrip()
        if rest and rest[0] in "'\"":
            close = rest.find(rest[0], 1)
            if close == -1:
                definition = head
            else:
                definition = head + rest[close + 1:]
        else:
            words = rest.split(" ", 1)
            definition = head + (words[1] if len(words) > 1 else "")

    return definition.strip()


def is_nullable(definition: str) -> bool:
    return not NOT_NULL_RE.search(strip_comment_and_default(definition))


def is_unsigned(definition: str) -> bool:
    return "UNSIGNED" in definition.upper()


def parse_column_definition(clause: str) -> FieldRecord:
    column_name, rest = extract_column_name(clause)

    data_type = extract_data_type(rest)
    if data_type is None:
        raise ClauseError("UnknownType", clause.strip(), "could not extract data type")

    return FieldRecord(
        name=to_pascal_case(column_name),
        type_name=map_sql_type(data_type, is_nullable(rest), is_unsigned(rest)),
        column_name=column_name,
    )


def parse_columns(block: str) -> Tuple[List[FieldRecord], List[ClauseDiagnostic]]:
    fields: List[FieldRecord] = []
    diagnostics: List[ClauseDiagnostic] = []

    for raw in split_columns(block):
        clause = raw.strip()
        if not clause or is_constraint(clause):
            continue
        try:
            fields.append(parse_column_definition(clause))
        except ClauseError as e:
            logger.warning("skipping clause (not a valid column): %s - %s", clause, e)
            diagnostics.append(ClauseDiagnostic(clause=clause, reason=e.kind, detail=e.detail))

    return fields, diagnostics


class MySQLDDLParser(Parser):
    """MySQL 계열 CREATE TABLE (PostgreSQL/SQLite 의 공통 문법 포함)."""

    def can_parse(self, text: str) -> bool:
        return bool(TABLE_NAME_RE.search(text))

    def parse(self, text: str) -> ParseResult:
        sql = normalize_whitespace(text)

        m = _match_table_name(sql)
        table_name = m.group(1)

        block = extract_column_block(sql, m.end())
        fields, diagnostics = parse_columns(block)
        if not fields:
            raise NoValidColumns(diagnostics=diagnostics)

        table = TableRecord(name=to_pascal_case(table_name), fields=tuple(fields))
        logger.debug("parsed table %s (%d fields, %d skipped)", table.name, len(fields), len(diagnostics))
        return ParseResult(tables=[table], diagnostics=diagnostics)


_default_parser = MySQLDDLParser()


def parse_sql(sql: str) -> List[TableRecord]:
    """CREATE TABLE 하나 → [TableRecord]. 실패하면 SQLParseError."""
    return _default_parser.parse(sql).tables
