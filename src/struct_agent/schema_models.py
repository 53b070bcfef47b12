"""/api/convert 요청/응답 Pydantic 모델."""
from __future__ import annotations
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from struct_agent.go_writer import GO_IDENTIFIER_RE
from struct_agent.model import GenerationConfig


class TagConfigModel(BaseModel):
    # 원래 API 의 키 이름(AddJSONTag ...)과 snake_case 둘 다 허용
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    add_json_tag: bool = Field(default=False, alias="AddJSONTag")
    add_db_tag: bool = Field(default=False, alias="AddDBTag")
    add_gorm_tag: bool = Field(default=False, alias="AddGormTag")
    add_xml_tag: bool = Field(default=False, alias="AddXMLTag")

    def to_generation_config(self) -> GenerationConfig:
        return GenerationConfig(
            emit_json=self.add_json_tag,
            emit_db=self.add_db_tag,
            emit_orm=self.add_gorm_tag,
            emit_xml=self.add_xml_tag,
        )


class ConvertRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    sql: str = ""
    config: TagConfigModel = Field(default_factory=TagConfigModel)
    package: Optional[str] = None

    @field_validator("sql", mode="before")
    @classmethod
    def coerce_sql(cls, v):
        return "" if v is None else v

    @field_validator("config", mode="before")
    @classmethod
    def coerce_config(cls, v):
        # null 이면 태그 전부 끔
        return {} if v is None else v

    @field_validator("package")
    @classmethod
    def check_package(cls, v):
        if v and not GO_IDENTIFIER_RE.match(v):
            raise ValueError(f"invalid Go package name: {v!r}")
        return v


class ConvertResponse(BaseModel):
    code: Optional[str] = None
    error: Optional[str] = None

    def payload(self) -> dict:
        # 원래 API 처럼 비어있는 키는 내보내지 않는다
        return self.model_dump(exclude_none=True)
