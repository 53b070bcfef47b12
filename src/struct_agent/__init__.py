from struct_agent.errors import (
    NoClosingParen,
    NoColumnBlock,
    NoTableName,
    NoValidColumns,
    SQLParseError,
)
from struct_agent.go_writer import to_go, write_go
from struct_agent.model import FieldRecord, GenerationConfig, TableRecord
from struct_agent.parsers.mysql_ddl import parse_sql

__all__ = [
    "FieldRecord",
    "GenerationConfig",
    "TableRecord",
    "SQLParseError",
    "NoTableName",
    "NoColumnBlock",
    "NoClosingParen",
    "NoValidColumns",
    "parse_sql",
    "to_go",
    "write_go",
]
