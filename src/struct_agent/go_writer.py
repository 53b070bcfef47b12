from __future__ import annotations
import re
from pathlib import Path
from typing import Sequence
from struct_agent.model import FieldRecord, GenerationConfig, TableRecord
from struct_agent.naming import to_snake_case
from struct_agent.type_map import TIME_TYPE

GO_IDENTIFIER_RE = re.compile(r"^[A-Za-z_]\w*\Z", re.ASCII)


def needs_time_import(tables: Sequence[TableRecord]) -> bool:
    return any(TIME_TYPE in f.type_name for t in tables for f in t.fields)


def struct_tags(column_name: str, config: GenerationConfig) -> str:
    # 태그 값은 snake_case 로 통일
    name = to_snake_case(column_name)
    tags = []
    if config.emit_json:
        tags.append(f'json:"{name}"')
    if config.emit_db:
        tags.append(f'db:"{name}"')
    if config.emit_orm:
        tags.append(f'gorm:"column:{name}"')
    if config.emit_xml:
        tags.append(f'xml:"{name}"')
    return " ".join(tags)


def calculate_alignment(fields: Sequence[FieldRecord]) -> tuple[int, int]:
    max_name = max((len(f.name) for f in fields), default=0)
    max_type = max((len(f.type_name) for f in fields), default=0)
    return max_name, max_type


def struct_block(table: TableRecord, config: GenerationConfig) -> str:
    lines = [f"type {table.name} struct {{"]
    max_name, max_type = calculate_alignment(table.fields)

    for f in table.fields:
        line = "\t" + f.name.ljust(max_name + 1) + f.type_name
        if config.any_tags:
            tags = struct_tags(f.column_name, config)
            line = line + " " * (max_type - len(f.type_name) + 1) + f"`{tags}`"
        lines.append(line)

    lines.append("}\n")
    return "\n".join(lines)


def to_go(
    tables: Sequence[TableRecord],
    config: GenerationConfig | None = None,
    package: str = "main",
) -> str:
    if not tables:
        return ""
    config = config or GenerationConfig()

    out = [f"package {package}\n\n"]
    if needs_time_import(tables):
        out.append('import "time"\n\n')

    # 구조체 사이에는 빈 줄 하나
    out.append("\n".join(struct_block(t, config) for t in tables))
    return "".join(out)


def write_go(
    tables: Sequence[TableRecord],
    out_path: Path,
    config: GenerationConfig | None = None,
    package: str = "main",
) -> Path:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(to_go(tables, config, package), encoding="utf-8")
    return out_path
