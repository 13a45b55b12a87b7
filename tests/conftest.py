import textwrap
import types
from pathlib import Path
from typing import Callable

import pytest

SAMPLE_SCHEMA = textwrap.dedent(
    """\
    default_language: en
    errors:
      success:
        code: 0
        http_status: 200
        message:
          en: "Success"
          zh-CN: "成功"
      invalid_param:
        code: 4000
        message:
          en: "INVALID PARAMETER"
    """
)


def exec_generated(code: str, name: str = "generated_error_codes") -> types.ModuleType:
    module = types.ModuleType(name)
    exec(compile(code, f"<{name}>", "exec"), module.__dict__)
    return module


@pytest.fixture
def sample_schema_text() -> str:
    return SAMPLE_SCHEMA


@pytest.fixture
def write_schema(tmp_path: Path) -> Callable[..., Path]:
    def _write(text: str, name: str = "biz_errors.yaml") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(text), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_schema(write_schema: Callable[..., Path]) -> Path:
    return write_schema(SAMPLE_SCHEMA)
