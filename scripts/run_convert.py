#!/usr/bin/env python3
"""
struct-agent convert 와 동일한 진입점. pip install 없이 실행 가능.

  python scripts/run_convert.py schema.sql
  python scripts/run_convert.py --json --gorm schema.sql
  python scripts/run_convert.py -j -d --stdout schema.sql
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# 프로젝트 루트에서 실행 시 src 로드 (pip install 없이 실행 가능)
_ROOT = Path(__file__).resolve().parent.parent
_SRC = _ROOT / "src"
if _SRC.exists() and str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))


def main() -> int:
    parser = argparse.ArgumentParser(
        description="CREATE TABLE SQL → Go 구조체 코드 생성",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
예시:
  python scripts/run_convert.py schema.sql
  python scripts/run_convert.py --json --gorm schema.sql
  python scripts/run_convert.py -j -d --stdout schema.sql
        """.strip(),
    )
    parser.add_argument("sql_file", help="CREATE TABLE 문이 담긴 .sql 파일")
    parser.add_argument("--json", "-j", action="store_true", help='json:"..." 태그 추가')
    parser.add_argument("--db", "-d", action="store_true", help='db:"..." 태그 추가 (sqlx)')
    parser.add_argument("--gorm", "-g", action="store_true", help='gorm:"column:..." 태그 추가')
    parser.add_argument("--xml", "-x", action="store_true", help='xml:"..." 태그 추가')
    parser.add_argument("--package", "-p", default=None, help="Go 패키지명")
    parser.add_argument("--out-dir", default=None, help="출력 디렉터리")
    parser.add_argument("--stdout", action="store_true", help="파일 대신 표준출력으로")

    args = parser.parse_args()

    from struct_agent.commands.convert import run_convert, load_text
    from struct_agent.config import settings
    from struct_agent.errors import SQLParseError
    from struct_agent.go_writer import to_go
    from struct_agent.model import GenerationConfig
    from struct_agent.parsers.mysql_ddl import parse_sql

    config = GenerationConfig(
        emit_json=args.json,
        emit_db=args.db,
        emit_orm=args.gorm,
        emit_xml=args.xml,
    )
    sql_file = Path(args.sql_file)

    try:
        if args.stdout:
            tables = parse_sql(load_text(sql_file))
            sys.stdout.write(to_go(tables, config, package=args.package or settings.go_package))
        else:
            run_convert(
                sql_file,
                out_dir=Path(args.out_dir) if args.out_dir else None,
                config=config,
                package=args.package,
            )
    except SQLParseError as e:
        print(f"SQL parsing error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
