import ast
from http import HTTPStatus

import pytest

from biz_error.codegen import compile_catalog, get_generator
from biz_error.codegen.core.config import CompilerConfig
from biz_error.codegen.core.errors import (
    GeneratorError,
    IdentifierCollisionError,
    InvalidIdentifierError,
    MissingFieldError,
    StatusOutOfRangeError,
)
from biz_error.codegen.core.generator import generate_code
from biz_error.codegen.core.schema import ErrorCatalog, ErrorEntry, Message

from conftest import exec_generated


def test_generated_module_is_valid_python(sample_schema_text: str) -> None:
    result = compile_catalog(sample_schema_text)
    ast.parse(result.code)
    assert result.code.endswith("\n")
    assert not result.code.endswith("\n\n")


def test_example_catalog_behaviour(sample_schema_text: str) -> None:
    module = exec_generated(compile_catalog(sample_schema_text).code)
    ErrorCode = module.ErrorCode

    assert [member.name for member in ErrorCode] == ["Success", "InvalidParam"]
    assert ErrorCode.Success.value == "success"

    assert ErrorCode.Success.code() == 0
    assert ErrorCode.InvalidParam.code() == 4000

    assert ErrorCode.Success.message() == "Success"
    assert ErrorCode.Success.message_lang("zh-CN") == "成功"
    assert ErrorCode.InvalidParam.message_lang("zh-CN") == "INVALID PARAMETER"

    assert ErrorCode.Success.status() == 200
    assert ErrorCode.Success.status() is HTTPStatus.OK
    assert ErrorCode.InvalidParam.status() == 500

    assert str(ErrorCode.InvalidParam) == "[4000] INVALID PARAMETER"
    assert module.ALL_CODES == (ErrorCode.Success, ErrorCode.InvalidParam)
    assert module.DEFAULT_LANGUAGE == "en"


def test_unknown_language_falls_back_to_default(sample_schema_text: str) -> None:
    ErrorCode = exec_generated(compile_catalog(sample_schema_text).code).ErrorCode

    for member in ErrorCode:
        assert member.message_lang("fr") == member.message_lang("en")
        assert member.message_lang("") == member.message()


def test_output_is_deterministic(sample_schema_text: str) -> None:
    first = compile_catalog(sample_schema_text, source="biz_errors.yaml")
    second = compile_catalog(sample_schema_text, source="biz_errors.yaml")
    assert first.code == second.code


def test_header_names_the_source(sample_schema_text: str) -> None:
    result = compile_catalog(sample_schema_text, source="biz_errors.yaml")
    assert result.code.splitlines()[0] == (
        "# This file is generated by biz-error from biz_errors.yaml."
    )


def test_all_codes_follows_declaration_order() -> None:
    schema = (
        "errors:\n"
        "  zeta: {code: 3, message: {en: Z}}\n"
        "  alpha: {code: 1, message: {en: A}}\n"
        "  mid: {code: 2, message: {en: M}}\n"
    )
    module = exec_generated(compile_catalog(schema).code)
    assert [member.value for member in module.ALL_CODES] == ["zeta", "alpha", "mid"]


def test_missing_default_message_resolves_to_empty() -> None:
    schema = "default_language: en\nerrors:\n  boom: {code: 1, message: {fr: Boum}}\n"
    result = compile_catalog(schema)
    ErrorCode = exec_generated(result.code).ErrorCode

    assert ErrorCode.Boom.message_lang("fr") == "Boum"
    assert ErrorCode.Boom.message_lang("de") == ""
    assert ErrorCode.Boom.message() == ""
    assert any("'boom'" in warning for warning in result.warnings)


def test_require_default_message_rejects_gap() -> None:
    schema = "errors:\n  boom: {code: 1, message: {fr: Boum}}\n"
    with pytest.raises(MissingFieldError):
        compile_catalog(schema, {"require_default_message": True})


def test_non_default_language_default() -> None:
    schema = (
        "default_language: zh-CN\n"
        "errors:\n"
        "  success: {code: 0, http_status: 200, message: {en: Success, zh-CN: 成功}}\n"
    )
    module = exec_generated(compile_catalog(schema).code)

    assert module.DEFAULT_LANGUAGE == "zh-CN"
    assert module.ErrorCode.Success.message() == "成功"
    assert module.ErrorCode.Success.message_lang("ja") == "成功"


def test_unregistered_status_is_emitted_as_int() -> None:
    schema = "errors:\n  odd: {code: 1, http_status: 299, message: {en: Odd}}\n"
    result = compile_catalog(schema)
    status = exec_generated(result.code).ErrorCode.Odd.status()

    assert status == 299
    assert not isinstance(status, HTTPStatus)
    assert "return 299" in result.code


def test_registered_status_uses_http_status_name() -> None:
    schema = "errors:\n  gone: {code: 1, http_status: 404, message: {en: Gone}}\n"
    assert "return HTTPStatus.NOT_FOUND" in compile_catalog(schema).code


def test_messages_with_quotes_are_escaped() -> None:
    schema = (
        "errors:\n"
        "  quoted:\n"
        "    code: 1\n"
        "    message:\n"
        "      en: 'It''s \"broken\"\\n'\n"
    )
    ErrorCode = exec_generated(compile_catalog(schema).code).ErrorCode
    assert ErrorCode.Quoted.message() == "It's \"broken\"\\n"


def test_member_comments_can_be_disabled(sample_schema_text: str) -> None:
    with_comments = compile_catalog(sample_schema_text).code
    without_comments = compile_catalog(sample_schema_text, {"add_comments": False}).code

    assert "#: INVALID PARAMETER" in with_comments
    assert "#: INVALID PARAMETER" not in without_comments


def test_custom_enum_name(sample_schema_text: str) -> None:
    result = compile_catalog(
        sample_schema_text, {"enum_name": "BizError", "all_codes_name": "EVERY_ERROR"}
    )
    module = exec_generated(result.code)

    assert module.BizError.Success.code() == 0
    assert module.EVERY_ERROR == tuple(module.BizError)
    assert result.metadata["enum_name"] == "BizError"


def test_indent_size(sample_schema_text: str) -> None:
    code = compile_catalog(sample_schema_text, {"indent_size": 2}).code

    assert "\n  Success = 'success'\n" in code
    assert exec_generated(code).ErrorCode.InvalidParam.code() == 4000


def test_crlf_line_endings(sample_schema_text: str) -> None:
    code = compile_catalog(sample_schema_text, {"line_ending": "\r\n"}).code
    assert code.count("\r\n") == code.count("\n")


def test_empty_catalog_compiles() -> None:
    result = compile_catalog("errors: {}\n")
    module = exec_generated(result.code)

    assert module.ALL_CODES == ()
    assert len(module.ErrorCode) == 0
    assert result.warnings


def test_metadata(sample_schema_text: str) -> None:
    metadata = compile_catalog(sample_schema_text).metadata

    assert metadata["language"] == "python"
    assert metadata["file_extension"] == ".py"
    assert metadata["entry_count"] == 2
    assert metadata["default_language"] == "en"
    assert metadata["languages"] == ["en", "zh-CN"]


def test_status_999_is_rejected() -> None:
    schema = "errors:\n  boom: {code: 1, http_status: 999, message: {en: Boom}}\n"
    with pytest.raises(StatusOutOfRangeError):
        compile_catalog(schema)


def test_collision_is_rejected_before_emission() -> None:
    schema = (
        "errors:\n"
        "  foo_bar: {code: 1, message: {en: A}}\n"
        "  fooBar: {code: 2, message: {en: B}}\n"
    )
    with pytest.raises(IdentifierCollisionError):
        compile_catalog(schema)


def test_emitter_rejects_out_of_range_status_it_is_given() -> None:
    generator = get_generator("python")
    catalog = ErrorCatalog(
        entries=(ErrorEntry("boom", 1, 999, (Message("en", "Boom"),)),)
    )

    with pytest.raises(GeneratorError, match="Internal error"):
        generator.generate(catalog, ["Boom"])


def test_generate_code_uses_generator_config() -> None:
    generator = get_generator("py", CompilerConfig(unique_codes=True))
    catalog = ErrorCatalog(
        entries=(
            ErrorEntry("one", 1, 500, (Message("en", "One"),)),
            ErrorEntry("two", 2, 500, (Message("en", "Two"),)),
        )
    )
    result = generate_code(generator, catalog)
    assert exec_generated(result.code).ErrorCode.Two.code() == 2


def test_status_type_name_cannot_be_a_member() -> None:
    schema = "errors:\n  HTTPStatus: {code: 1, http_status: 400, message: {en: A}}\n"
    with pytest.raises(InvalidIdentifierError):
        compile_catalog(schema)


def test_members_resembling_generated_names_still_import() -> None:
    schema = (
        "errors:\n"
        "  http_status: {code: 1, http_status: 400, message: {en: A}}\n"
        "  error_code: {code: 2, message: {en: B}}\n"
        "  default_LANGUAGE: {code: 3, message: {en: C}}\n"
    )
    ErrorCode = exec_generated(compile_catalog(schema).code).ErrorCode

    assert ErrorCode.HttpStatus.status() == 400
    assert ErrorCode.ErrorCode.code() == 2
    assert ErrorCode.DefaultLANGUAGE.message() == "C"


def test_fullwidth_duplicate_is_rejected_before_emission() -> None:
    schema = (
        "errors:\n"
        "  foo: {code: 1, message: {en: A}}\n"
        "  ｆoo: {code: 2, message: {en: B}}\n"
    )
    with pytest.raises(IdentifierCollisionError):
        compile_catalog(schema)
