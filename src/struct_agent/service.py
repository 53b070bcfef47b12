"""
HTTP 계층이 호출하는 변환 서비스.
요청 JSON → (status, payload) 로 매핑만 하고, 실제 변환은 parse_sql / to_go 가 한다.
"""
from __future__ import annotations
import logging
from typing import Any

from pydantic import ValidationError

from struct_agent.config import settings
from struct_agent.errors import SQLParseError
from struct_agent.go_writer import to_go
from struct_agent.parsers.mysql_ddl import parse_sql
from struct_agent.schema_models import ConvertRequest, ConvertResponse

logger = logging.getLogger(__name__)


class ConvertFailed(Exception):
    def __init__(self, message: str, status: int = 400):
        super().__init__(message)
        self.message = message
        self.status = status


def convert(req: ConvertRequest) -> ConvertResponse:
    if not req.sql.strip():
        raise ConvertFailed("SQL cannot be empty", status=400)
    if len(req.sql) > settings.max_sql_chars:
        raise ConvertFailed(f"SQL is too large (max {settings.max_sql_chars} chars)", status=413)

    try:
        tables = parse_sql(req.sql)
    except SQLParseError as e:
        logger.info(f"Parse failed ({e.kind}): {e}")
        raise ConvertFailed(f"SQL parsing error: {e}", status=400) from e

    code = to_go(tables, req.config.to_generation_config(), package=req.package or settings.go_package)
    return ConvertResponse(code=code)


def handle_convert(body: Any) -> tuple[int, dict]:
    if not isinstance(body, dict):
        return 400, ConvertResponse(error="Invalid JSON: request body must be an object").payload()

    try:
        req = ConvertRequest.model_validate(body)
    except ValidationError as e:
        return 400, ConvertResponse(error=f"Invalid JSON: {e.errors()[0]['msg']}").payload()

    try:
        resp = convert(req)
    except ConvertFailed as e:
        return e.status, ConvertResponse(error=e.message).payload()

    return 200, resp.payload()
