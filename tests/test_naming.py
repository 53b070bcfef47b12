import pytest

from struct_agent.naming import to_pascal_case, to_snake_case


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("user_id", "UserId"),
        ("first_name", "FirstName"),
        ("USER_PROFILE", "UserProfile"),
        ("a_b_c_d", "ABCD"),
        ("single", "Single"),
        ("Users", "Users"),
        ("_leading_underscore", "LeadingUnderscore"),
        ("trailing_underscore_", "TrailingUnderscore"),
        ("double__underscore", "DoubleUnderscore"),
        ("", ""),
    ],
)
def test_to_pascal_case(raw, expected):
    assert to_pascal_case(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("UserID", "user_id"),
        ("user_id", "user_id"),
        ("userName", "user_name"),
        ("CreatedAt", "created_at"),
        ("HTTPServer", "http_server"),
        ("XMLHttpRequest", "xml_http_request"),
        ("ID", "id"),
        ("USER_NAME", "user_name"),
        ("already_snake_2", "already_snake_2"),
    ],
)
def test_to_snake_case(raw, expected):
    assert to_snake_case(raw) == expected


@pytest.mark.parametrize("raw", ["UserID", "HTTPServer", "fooBarBaz", "USER_NAME", "ABCDef", "x"])
def test_to_snake_case_is_idempotent(raw):
    once = to_snake_case(raw)
    assert to_snake_case(once) == once


def test_to_snake_case_keeps_lowercase_input_untouched():
    # 대문자가 없으면 숫자/기호 포함 그대로
    assert to_snake_case("col-1.x") == "col-1.x"
