import pytest

from struct_agent.config import settings
from struct_agent.schema_models import ConvertRequest, TagConfigModel
from struct_agent.service import ConvertFailed, convert, handle_convert

USERS_SQL = "CREATE TABLE users (id INT NOT NULL, name VARCHAR(255) NOT NULL)"


def test_convert_success():
    status, payload = handle_convert({"sql": USERS_SQL, "config": {"AddJSONTag": True}})
    assert status == 200
    assert set(payload) == {"code"}
    assert "type Users struct {" in payload["code"]
    assert 'json:"id"' in payload["code"]


def test_snake_case_config_keys_are_accepted():
    status, payload = handle_convert({"sql": USERS_SQL, "config": {"add_gorm_tag": True, "add_db_tag": True}})
    assert status == 200
    assert '`db:"name" gorm:"column:name"`' in payload["code"]


def test_missing_config_means_no_tags():
    status, payload = handle_convert({"sql": USERS_SQL})
    assert status == 200
    assert "`" not in payload["code"]


def test_invalid_sql_is_a_parse_error():
    status, payload = handle_convert({"sql": "Halo ini bukan SQL", "config": {"AddJSONTag": True}})
    assert status == 400
    assert set(payload) == {"error"}
    assert payload["error"] == "SQL parsing error: failed to extract table name from SQL"


@pytest.mark.parametrize("body", [{"sql": ""}, {"sql": "   \n"}, {"sql": None}, {}])
def test_empty_sql(body):
    status, payload = handle_convert(body)
    assert status == 400
    assert payload == {"error": "SQL cannot be empty"}


def test_non_object_body():
    status, payload = handle_convert(["not", "an", "object"])
    assert status == 400
    assert payload["error"].startswith("Invalid JSON")


def test_bad_config_type():
    status, payload = handle_convert({"sql": USERS_SQL, "config": {"AddJSONTag": "maybe"}})
    assert status == 400
    assert payload["error"].startswith("Invalid JSON")


def test_sql_size_limit(monkeypatch):
    monkeypatch.setattr(settings, "max_sql_chars", 10)
    status, payload = handle_convert({"sql": USERS_SQL})
    assert status == 413
    assert "too large" in payload["error"]


def test_package_override():
    status, payload = handle_convert({"sql": USERS_SQL, "package": "models"})
    assert status == 200
    assert payload["code"].startswith("package models\n")


def test_convert_raises_convert_failed():
    with pytest.raises(ConvertFailed) as exc:
        convert(ConvertRequest(sql="CREATE TABLE t (PRIMARY KEY (id))"))
    assert exc.value.status == 400
    assert "no valid columns found" in exc.value.message


def test_tag_config_mapping():
    cfg = TagConfigModel.model_validate(
        {"AddJSONTag": True, "AddDBTag": False, "AddGormTag": True, "AddXMLTag": True}
    ).to_generation_config()
    assert (cfg.emit_json, cfg.emit_db, cfg.emit_orm, cfg.emit_xml) == (True, False, True, True)
    assert cfg.any_tags


def test_null_config_means_no_tags():
    status, payload = handle_convert({"sql": "CREATE TABLE t (id INT)", "config": None})
    assert status == 200
    assert "`" not in payload["code"]
    assert "type T struct {" in payload["code"]


@pytest.mark.parametrize("package", ['x\nimport "os"', "1models", "my-pkg", "models;"])
def test_package_must_be_go_identifier(package):
    status, payload = handle_convert({"sql": USERS_SQL, "package": package})
    assert status == 400
    assert payload["error"].startswith("Invalid JSON")
    assert "invalid Go package name" in payload["error"]


def test_empty_package_uses_default():
    status, payload = handle_convert({"sql": USERS_SQL, "package": ""})
    assert status == 200
    assert payload["code"].startswith(f"package {settings.go_package}\n")
