from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from pathlib import Path

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    output_dir: Path = Field(default=Path("./out"), alias="STRUCT_OUTPUT_DIR")
    go_package: str = Field(default="main", alias="STRUCT_GO_PACKAGE")

    # HTTP 요청 SQL 최대 길이
    max_sql_chars: int = Field(default=200_000, alias="STRUCT_MAX_SQL_CHARS")

    # watch 모드 재생성 최소 간격(초)
    watch_debounce: float = Field(default=0.8, alias="STRUCT_WATCH_DEBOUNCE")

settings = Settings()
