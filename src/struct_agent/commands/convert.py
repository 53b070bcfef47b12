"""SQL 파일 → Go 구조체 파일 생성."""
from __future__ import annotations
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from struct_agent.config import settings
from struct_agent.go_writer import write_go
from struct_agent.model import GenerationConfig
from struct_agent.naming import to_snake_case
from struct_agent.parsers.mysql_ddl import MySQLDDLParser

console = Console()


def load_text(p: Path) -> str:
    return p.read_text(encoding="utf-8", errors="ignore")


def run_convert(
    sql_file: Path,
    out_dir: Path | None = None,
    out_file: str | None = None,
    config: GenerationConfig | None = None,
    package: str | None = None,
) -> Path:
    """
    SQL 파일의 CREATE TABLE 을 Go 구조체로 변환해 저장한다.
    반환: 생성된 .go 파일 경로
    파싱 실패 시 SQLParseError 를 그대로 올린다.
    """
    console.print(f"[bold]SQL:[/bold] {sql_file}")

    result = MySQLDDLParser().parse(load_text(sql_file))
    for d in result.diagnostics:
        console.print(f"[yellow]Skipped ({d.reason}):[/yellow] {escape(d.clause)}")

    table = result.tables[0]
    console.print(f"Parsed [green]{len(table.fields)}[/green] columns → {table.name}")

    base = out_dir or settings.output_dir
    out_path = base / (out_file or f"{to_snake_case(table.name)}.go")
    write_go(result.tables, out_path, config, package=package or settings.go_package)

    console.print(f"[bold green]Go:[/bold green] {out_path}")
    return out_path
