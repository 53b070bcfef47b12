"""
SQL CREATE TABLE → Go 구조체 변환 CLI.
- struct-agent convert schema.sql --json --gorm
- struct-agent watch schema.sql --json   (파일이 바뀔 때마다 재생성)
- struct-agent types                     (SQL → Go 타입 매핑표)
"""
from __future__ import annotations
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from struct_agent.commands.convert import run_convert, load_text
from struct_agent.config import settings
from struct_agent.errors import SQLParseError
from struct_agent.go_writer import to_go
from struct_agent.model import GenerationConfig
from struct_agent.parsers.mysql_ddl import parse_sql
from struct_agent.type_map import SQL_TYPE_MAP, UNSIGNED_TYPE_MAP, map_sql_type

console = Console()

app = typer.Typer(
    name="struct-agent",
    add_completion=False,
    help="SQL CREATE TABLE 문을 Go 구조체 코드로 변환",
)


def _sql_arg() -> Path:
    return typer.Argument(..., exists=True, dir_okay=False, readable=True, help="CREATE TABLE 문이 담긴 .sql 파일")


def _config(json_tag: bool, db_tag: bool, gorm_tag: bool, xml_tag: bool) -> GenerationConfig:
    return GenerationConfig(emit_json=json_tag, emit_db=db_tag, emit_orm=gorm_tag, emit_xml=xml_tag)


@app.command("convert")
def cmd_convert(
    sql_file: Path = _sql_arg(),
    json_tag: bool = typer.Option(False, "--json", "-j", help='json:"..." 태그 추가'),
    db_tag: bool = typer.Option(False, "--db", "-d", help='db:"..." 태그 추가 (sqlx)'),
    gorm_tag: bool = typer.Option(False, "--gorm", "-g", help='gorm:"column:..." 태그 추가'),
    xml_tag: bool = typer.Option(False, "--xml", "-x", help='xml:"..." 태그 추가'),
    package: Optional[str] = typer.Option(None, "--package", "-p", help="Go 패키지명 (기본: STRUCT_GO_PACKAGE)"),
    out_dir: Optional[Path] = typer.Option(None, help="출력 디렉터리 (기본: STRUCT_OUTPUT_DIR)"),
    out_file: Optional[str] = typer.Option(None, help="출력 파일명 (기본: <table>.go)"),
    stdout: bool = typer.Option(False, "--stdout", help="파일 대신 표준출력으로"),
):
    """SQL 파일 하나를 Go 구조체로 변환."""
    config = _config(json_tag, db_tag, gorm_tag, xml_tag)
    try:
        if stdout:
            tables = parse_sql(load_text(sql_file))
            typer.echo(to_go(tables, config, package=package or settings.go_package), nl=False)
            return
        run_convert(sql_file, out_dir=out_dir, out_file=out_file, config=config, package=package)
    except SQLParseError as e:
        console.print(f"[bold red]SQL parsing error:[/bold red] {e}")
        raise typer.Exit(code=1)


@app.command("watch")
def cmd_watch(
    sql_file: Path = _sql_arg(),
    json_tag: bool = typer.Option(False, "--json", "-j", help='json:"..." 태그 추가'),
    db_tag: bool = typer.Option(False, "--db", "-d", help='db:"..." 태그 추가 (sqlx)'),
    gorm_tag: bool = typer.Option(False, "--gorm", "-g", help='gorm:"column:..." 태그 추가'),
    xml_tag: bool = typer.Option(False, "--xml", "-x", help='xml:"..." 태그 추가'),
    package: Optional[str] = typer.Option(None, "--package", "-p", help="Go 패키지명"),
    out_dir: Optional[Path] = typer.Option(None, help="출력 디렉터리"),
    out_file: Optional[str] = typer.Option(None, help="출력 파일명"),
):
    """SQL 파일이 바뀔 때마다 Go 파일 재생성."""
    from struct_agent.watch import watch

    watch(
        sql_file,
        out_dir=out_dir,
        out_file=out_file,
        config=_config(json_tag, db_tag, gorm_tag, xml_tag),
        package=package,
    )


@app.command("types")
def cmd_types():
    """SQL → Go 타입 매핑표 출력."""
    table = Table(title="SQL → Go")
    table.add_column("SQL type")
    table.add_column("NOT NULL")
    table.add_column("NULL")
    table.add_column("UNSIGNED")

    for sql_type in SQL_TYPE_MAP:
        unsigned = map_sql_type(sql_type, False, True) if sql_type in UNSIGNED_TYPE_MAP else "-"
        table.add_row(
            sql_type,
            map_sql_type(sql_type, False),
            map_sql_type(sql_type, True),
            unsigned,
        )
    console.print(table)


if __name__ == "__main__":
    app()
