from pathlib import Path

import pytest

from text_formatting.config import AppConfig, RuntimeConfig
from text_formatting.core import FormattingError, FormattingService
from text_formatting.tools import TOOLS, call_tool, list_tools


def test_list_tools_describes_required_string_arguments() -> None:
    descriptors = {descriptor.name: descriptor for descriptor in list_tools()}
    assert set(descriptors) == {"format_for_html", "slugify_title", "html_to_markdown"}
    schema = descriptors["html_to_markdown"].input_schema
    assert set(schema["required"]) == {"html", "title"}
    assert schema["properties"]["html"]["type"] == "string"
    assert schema["properties"]["title"]["type"] == "string"
    assert descriptors["slugify_title"].input_schema["required"] == ["title"]
    assert all(descriptor.description for descriptor in descriptors.values())


def test_call_tool_returns_text_content() -> None:
    result = call_tool(FormattingService(), "slugify_title", {"title": "Café au Lait -- A Recipe"})
    assert result.is_error is False
    assert [item.text for item in result.content] == ["cafe-au-lait-a-recipe"]
    assert result.content[0].type == "text"


def test_call_tool_html_to_markdown_returns_confirmation(tmp_path: Path) -> None:
    service = FormattingService(AppConfig(runtime=RuntimeConfig(output_dir=tmp_path)))
    result = call_tool(service, "html_to_markdown", {"html": "<h2>Hi</h2>", "title": "Greeting"})
    text = result.content[0].text
    assert "Filename : greeting.md" in text
    assert text.endswith("## Hi")
    assert (tmp_path / "greeting.md").exists()


def test_unknown_tool() -> None:
    with pytest.raises(FormattingError) as exc:
        call_tool(FormattingService(), "shout", {})
    assert exc.value.code == "UNKNOWN_TOOL"


@pytest.mark.parametrize(
    "arguments",
    [{}, {"text": 5}, {"title": "wrong field"}, {"text": None}],
)
def test_invalid_arguments(arguments: dict) -> None:
    with pytest.raises(FormattingError) as exc:
        call_tool(FormattingService(), "format_for_html", arguments)
    assert exc.value.code == "INVALID_ARGUMENTS"


def test_registry_names_match_keys() -> None:
    assert all(name == spec.name for name, spec in TOOLS.items())
