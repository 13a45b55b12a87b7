from pathlib import Path

import pytest

from biz_error.codegen import (
    CompilerConfig,
    GeneratorRegistry,
    RegistryError,
    get_generator,
    list_supported_languages,
)
from biz_error.codegen.languages.python import PythonGenerator, create_python_generator


def test_python_is_registered_with_alias() -> None:
    assert list_supported_languages() == ["python"]
    assert isinstance(get_generator("python"), PythonGenerator)
    assert isinstance(get_generator("PY"), PythonGenerator)


def test_unknown_language() -> None:
    with pytest.raises(RegistryError, match="Available: python"):
        get_generator("cobol")


def test_create_generator_config_forms(tmp_path: Path) -> None:
    registry = GeneratorRegistry()
    registry.register("python", PythonGenerator, aliases=["py"])

    config_file = tmp_path / "config.json"
    config_file.write_text('{"enum_name": "FromFile"}', encoding="utf-8")

    assert registry.create_generator("py").config.enum_name == "ErrorCode"
    assert registry.create_generator("py", {"enum_name": "FromDict"}).config.enum_name == (
        "FromDict"
    )
    assert registry.create_generator("py", config_file).config.enum_name == "FromFile"

    config = CompilerConfig(enum_name="Given")
    assert registry.create_generator("py", config).config is config

    with pytest.raises(RegistryError, match="Invalid config type"):
        registry.create_generator("py", 42)


def test_register_rejects_non_generators() -> None:
    with pytest.raises(RegistryError):
        GeneratorRegistry().register("python", object)


def test_alias_conflicts() -> None:
    registry = GeneratorRegistry()
    registry.register("python", PythonGenerator)

    with pytest.raises(RegistryError, match="conflicts"):
        registry.register("python3", PythonGenerator, aliases=["python"])


def test_is_supported() -> None:
    registry = GeneratorRegistry()
    registry.register("python", PythonGenerator, aliases=["py"])

    assert registry.is_supported("Python")
    assert registry.is_supported("py")
    assert not registry.is_supported("go")


def test_create_python_generator_options() -> None:
    generator = create_python_generator(enum_name="BizError", source="errors.yaml")

    assert generator.config.enum_name == "BizError"
    assert generator.source == "errors.yaml"
    assert generator.file_extension == ".py"
