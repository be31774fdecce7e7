import pytest

from objectfile.exceptions import FormatSyntaxError, ParserUnavailableError
from objectfile.parsers import (
    HybridJsonParser,
    Json5Options,
    Json5Parser,
    JsonOptions,
    JsonParser,
    YamlOptions,
    YamlParser,
)

PLAIN_VALUE = {
    "name": "demo",
    "count": 3,
    "ratio": 1.5,
    "enabled": True,
    "missing": None,
    "items": [1, "two", {"three": 3}],
}


@pytest.mark.parametrize("parser", [JsonParser(), Json5Parser(), YamlParser(), HybridJsonParser()])
def test_round_trip_plain_data(parser):
    assert parser.parse(parser.stringify(PLAIN_VALUE)) == PLAIN_VALUE


def test_json_stringify_uses_two_space_indent_by_default():
    assert JsonParser().stringify({"test": "out.json"}) == '{\n  "test": "out.json"\n}'


def test_json_zero_indent_is_compact():
    parser = JsonParser(JsonOptions(indent=0))
    assert parser.stringify({"test": "StdJson"}) == '{"test":"StdJson"}'


def test_json_hooks_are_applied():
    parser = JsonParser(
        JsonOptions(
            object_hook=lambda obj: {k.upper(): v for k, v in obj.items()},
            default=lambda value: sorted(value),
        )
    )
    assert parser.parse('{"a": {"b": 1}}') == {"A": {"B": 1}}
    assert parser.stringify({"s": {3, 1, 2}}) == '{\n  "s": [\n    1,\n    2,\n    3\n  ]\n}'


def test_json_rejects_comments():
    with pytest.raises(FormatSyntaxError) as excinfo:
        JsonParser().parse('// Test\n{ "test": "json" }')
    assert excinfo.value.format_key == "json"
    assert isinstance(excinfo.value.__cause__, ValueError)
    assert excinfo.value.original is excinfo.value.__cause__


def test_json_cyclic_value_is_a_syntax_error():
    value: dict = {}
    value["self"] = value
    with pytest.raises(FormatSyntaxError):
        JsonParser().stringify(value)


def test_json_unrepresentable_value_is_a_syntax_error():
    with pytest.raises(FormatSyntaxError):
        JsonParser().stringify({"obj": object()})


@pytest.mark.parametrize("number", [float("nan"), float("inf"), float("-inf")])
def test_json_non_finite_numbers_are_a_syntax_error(number):
    with pytest.raises(FormatSyntaxError) as excinfo:
        JsonParser().stringify({"a": number})
    assert excinfo.value.format_key == "json"


def test_hybrid_writes_non_finite_numbers_as_errors():
    with pytest.raises(FormatSyntaxError):
        HybridJsonParser().stringify({"a": float("nan")})


def test_json5_accepts_comments_and_unquoted_keys():
    assert Json5Parser().parse('//Test\n{ test: "json5", }') == {"test": "json5"}


def test_json5_output_leaves_identifier_keys_unquoted():
    text = Json5Parser().stringify({"test": "out.json5"})
    assert "test:" in text
    assert '"test"' not in text


def test_json5_options_without_indent_are_single_line():
    text = Json5Parser(options=Json5Options(indent=None)).stringify({"test": "StdJson"})
    assert "\n" not in text
    assert Json5Parser().parse(text) == {"test": "StdJson"}


def test_json5_invalid_text_is_a_syntax_error():
    with pytest.raises(FormatSyntaxError) as excinfo:
        Json5Parser().parse("{ test: ")
    assert excinfo.value.format_key == "json5"


def test_json5_without_library_fails_at_construction(monkeypatch):
    monkeypatch.setattr("objectfile.parsers.json5_.json5", None)
    assert Json5Parser.available() is False
    with pytest.raises(ParserUnavailableError):
        Json5Parser()


def test_yaml_parse_and_stringify():
    parser = YamlParser()
    assert parser.parse("# Test\ntest: yaml") == {"test": "yaml"}
    assert parser.stringify({"a": 1}) == "a: 1\n"


def test_yaml_keeps_insertion_order():
    assert YamlParser().stringify({"b": 1, "a": 2}) == "b: 1\na: 2\n"


def test_yaml_dump_options():
    parser = YamlParser(options=YamlOptions(dump={"default_flow_style": True}))
    assert parser.stringify({"test": "StdJson"}) == "{test: StdJson}\n"


def test_yaml_safe_loader_rejects_python_tags():
    with pytest.raises(FormatSyntaxError):
        YamlParser().parse("!!python/object:builtins.object {}")


def test_yaml_invalid_text_is_a_syntax_error():
    with pytest.raises(FormatSyntaxError) as excinfo:
        YamlParser().parse("a: b: c")
    assert excinfo.value.format_key == "yaml"


def test_yaml_unrepresentable_value_is_a_syntax_error():
    with pytest.raises(FormatSyntaxError):
        YamlParser().stringify({"obj": object()})


def test_yaml_without_library_fails_at_construction(monkeypatch):
    monkeypatch.setattr("objectfile.parsers.yaml_.yaml", None)
    assert YamlParser.available() is False
    with pytest.raises(ParserUnavailableError):
        YamlParser()


def test_hybrid_reads_relaxed_and_writes_strict():
    parser = HybridJsonParser()
    assert parser.parse('// Test\n{ "test": "hjson" }') == {"test": "hjson"}
    assert parser.stringify({"test": "out.json"}) == '{\n  "test": "out.json"\n}'


def test_hybrid_parse_error_names_json():
    with pytest.raises(FormatSyntaxError) as excinfo:
        HybridJsonParser().parse("{bad")
    assert excinfo.value.format_key == "json"
    assert "json5" not in str(excinfo.value).split(":")[0]
    assert isinstance(excinfo.value.original, ValueError)


def test_hybrid_delegates_to_given_parsers():
    reader = Json5Parser()
    writer = JsonParser(JsonOptions(indent=0))
    parser = HybridJsonParser(reader=reader, writer=writer)
    assert parser.reader is reader
    assert parser.writer is writer
    assert parser.stringify({"a": [1, 2]}) == '{"a":[1,2]}'


def test_write_file_returns_value_and_writes_utf8(tmp_path):
    path = tmp_path / "out.json"
    value = {"name": "café"}
    assert JsonParser().write_file(path, value) is value
    assert path.read_text(encoding="utf-8") == '{\n  "name": "café"\n}'
    assert JsonParser().read_file(path) == value


def test_read_file_missing_propagates_os_error(tmp_path):
    with pytest.raises(FileNotFoundError):
        YamlParser().read_file(tmp_path / "missing.yaml")


@pytest.mark.asyncio
async def test_async_file_operations_match_sync(tmp_path):
    parser = YamlParser()
    path = tmp_path / "out.yaml"
    assert await parser.awrite_file(path, PLAIN_VALUE) == PLAIN_VALUE
    assert path.read_text(encoding="utf-8") == parser.stringify(PLAIN_VALUE)
    assert await parser.aread_file(path) == parser.read_file(path)


@pytest.mark.asyncio
async def test_async_read_missing_propagates_os_error(tmp_path):
    with pytest.raises(FileNotFoundError):
        await JsonParser().aread_file(tmp_path / "missing.json")
