import json
from http import HTTPStatus

import pytest

from biz_error import AppError, ErrorCodeLike, ErrorResponse, compile_catalog

from conftest import exec_generated


@pytest.fixture
def error_code(sample_schema_text: str):
    return exec_generated(compile_catalog(sample_schema_text).code).ErrorCode


def test_generated_enum_satisfies_protocol(error_code) -> None:
    assert isinstance(error_code.Success, ErrorCodeLike)


def test_default_message(error_code) -> None:
    error = AppError(error_code.InvalidParam)

    assert error.code == 4000
    assert error.msg == "INVALID PARAMETER"
    assert error.data is None
    assert error.error_code is error_code.InvalidParam
    assert str(error) == "[4000] INVALID PARAMETER"


def test_with_msg_overrides_message(error_code) -> None:
    error = AppError(error_code.InvalidParam).with_msg("user_id is required")

    assert error.msg == "user_id is required"
    assert str(error) == "[4000] user_id is required"
    assert error.args == ("[4000] user_id is required",)


def test_with_code_and_data(error_code) -> None:
    error = AppError.with_code_and_data(error_code.InvalidParam, {"field": "user_id"})

    assert error.data == {"field": "user_id"}
    assert error.to_response().to_dict() == {
        "code": 4000,
        "msg": "INVALID PARAMETER",
        "data": {"field": "user_id"},
    }


def test_to_http(error_code) -> None:
    status, body = AppError(error_code.Success).to_http()

    assert status == 200
    assert type(status) is int
    assert body == {"code": 0, "msg": "Success"}


def test_is_raisable(error_code) -> None:
    with pytest.raises(AppError) as exc_info:
        raise AppError(error_code.InvalidParam).with_data([1, 2])

    assert exc_info.value.to_response().data == [1, 2]


def test_error_response_json(error_code) -> None:
    response = ErrorResponse.from_error_code(error_code.Success).with_msg("成功")

    assert json.loads(response.to_json()) == {"code": 0, "msg": "成功"}
    assert "成功" in response.to_json()


class _StaticCode:
    def code(self) -> int:
        return 7

    def message(self) -> str:
        return "static"

    def message_lang(self, lang: str) -> str:
        return "static"

    def status(self) -> int:
        return HTTPStatus.CONFLICT


def test_accepts_any_error_code_like() -> None:
    status, body = AppError(_StaticCode(), data={"id": 1}).to_http()

    assert status == 409
    assert body == {"code": 7, "msg": "static", "data": {"id": 1}}
