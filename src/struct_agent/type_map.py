"""SQL 타입 → Go 타입 매핑."""
from __future__ import annotations

BOOL_TYPE = "bool"
STRING_TYPE = "string"
TIME_TYPE = "time.Time"
BYTES_TYPE = "[]byte"

# TINYINT(1) 은 파서가 boolean 변형으로 따로 구분해서 넘겨준다
SQL_TYPE_MAP = {
    "TINYINT(1)": BOOL_TYPE,
    "BOOLEAN": BOOL_TYPE,
    "BOOL": BOOL_TYPE,
    "TINYINT": "int8",
    "SMALLINT": "int16",
    "MEDIUMINT": "int",
    "INT": "int",
    "INTEGER": "int",
    "BIGINT": "int64",
    "FLOAT": "float64",
    "DOUBLE": "float64",
    "DECIMAL": "float64",
    "NUMERIC": "float64",
    "CHAR": STRING_TYPE,
    "VARCHAR": STRING_TYPE,
    "TEXT": STRING_TYPE,
    "TINYTEXT": STRING_TYPE,
    "MEDIUMTEXT": STRING_TYPE,
    "LONGTEXT": STRING_TYPE,
    "JSON": STRING_TYPE,
    "ENUM": STRING_TYPE,
    "SET": STRING_TYPE,
    "DATETIME": TIME_TYPE,
    "TIMESTAMP": TIME_TYPE,
    "DATE": TIME_TYPE,
    "TIME": TIME_TYPE,
    "BLOB": BYTES_TYPE,
    "TINYBLOB": BYTES_TYPE,
    "MEDIUMBLOB": BYTES_TYPE,
    "LONGBLOB": BYTES_TYPE,
}

UNSIGNED_TYPE_MAP = {
    "TINYINT": "uint8",
    "SMALLINT": "uint16",
    "MEDIUMINT": "uint32",
    "INT": "uint32",
    "INTEGER": "uint32",
    "BIGINT": "uint64",
}


def base_go_type(sql_type: str, unsigned: bool = False) -> str:
    key = sql_type.upper()
    if unsigned and key in UNSIGNED_TYPE_MAP:
        return UNSIGNED_TYPE_MAP[key]
    # 모르는 타입은 string 으로 (오류 아님)
    return SQL_TYPE_MAP.get(key, STRING_TYPE)


def map_sql_type(sql_type: str, nullable: bool, unsigned: bool = False) -> str:
    base = base_go_type(sql_type, unsigned)
    # []byte 는 nil 이 가능하므로 포인터로 감싸지 않는다
    if base == BYTES_TYPE:
        return base
    if nullable:
        return "*" + base
    return base
