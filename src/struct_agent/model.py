from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class FieldRecord:
    name: str          # Go 필드명 (PascalCase)
    type_name: str     # Go 타입 (int, *string, time.Time, []byte ...)
    column_name: str   # SQL 원본 컬럼명 (따옴표만 제거, 태그 출력 기준)


@dataclass(frozen=True)
class TableRecord:
    name: str
    fields: Tuple[FieldRecord, ...] = ()


@dataclass(frozen=True)
class GenerationConfig:
    # 출력 순서는 JSON → DB → ORM(gorm) → XML 고정
    emit_json: bool = False
    emit_db: bool = False
    emit_orm: bool = False
    emit_xml: bool = False

    @property
    def any_tags(self) -> bool:
        return self.emit_json or self.emit_db or self.emit_orm or self.emit_xml


@dataclass(frozen=True)
class ClauseDiagnostic:
    clause: str
    reason: str   # InvalidColumnName / UnknownType
    detail: str = ""


@dataclass
class ParseResult:
    tables: List[TableRecord] = field(default_factory=list)
    diagnostics: List[ClauseDiagnostic] = field(default_factory=list)
