"""Turn a Write/Edit/MultiEdit tool call into the single text blob to scan.

Each supported tool maps to one input dataclass; anything else parses to
None and is treated as "nothing to check".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

SUPPORTED_TOOLS = ("Write", "Edit", "MultiEdit")


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _path(tool_input: dict[str, Any]) -> str | None:
    # Empty string means no path, same as a missing key
    return _text(tool_input.get("file_path")) or None


@dataclass(frozen=True)
class WriteInput:
    file_path: str | None
    content: str

    @classmethod
    def from_tool_input(cls, tool_input: dict[str, Any]) -> WriteInput:
        return cls(_path(tool_input), _text(tool_input.get("content")))

    def new_text(self) -> str:
        return self.content


@dataclass(frozen=True)
class EditInput:
    file_path: str | None
    old_string: str
    new_string: str

    @classmethod
    def from_tool_input(cls, tool_input: dict[str, Any]) -> EditInput:
        return cls(
            _path(tool_input),
            _text(tool_input.get("old_string")),
            _text(tool_input.get("new_string")),
        )

    def new_text(self) -> str:
        return self.new_string


@dataclass(frozen=True)
class MultiEditInput:
    file_path: str | None
    edits: tuple[EditInput, ...]

    @classmethod
    def from_tool_input(cls, tool_input: dict[str, Any]) -> MultiEditInput:
        file_path = _path(tool_input)
        raw_edits = tool_input.get("edits")
        if not isinstance(raw_edits, list):
            raw_edits = []
        edits = tuple(
            EditInput(
                file_path,
                _text(edit.get("old_string")),
                _text(edit.get("new_string")),
            )
            for edit in raw_edits
            if isinstance(edit, dict)
        )
        return cls(file_path, edits)

    def new_text(self) -> str:
        # Patterns only need to match within a single edit
        return "\n".join(edit.new_string for edit in self.edits)


ToolCall = WriteInput | EditInput | MultiEditInput

_PARSERS: dict[str, type[WriteInput] | type[EditInput] | type[MultiEditInput]] = {
    "Write": WriteInput,
    "Edit": EditInput,
    "MultiEdit": MultiEditInput,
}


def parse_tool_call(data: Any) -> ToolCall | None:
    """Parse decoded hook input; None when the tool call is not supported."""
    if not isinstance(data, dict):
        return None
    parser = _PARSERS.get(_text(data.get("tool_name")))
    if parser is None:
        return None
    tool_input = data.get("tool_input")
    if not isinstance(tool_input, dict):
        tool_input = {}
    return parser.from_tool_input(tool_input)


@dataclass(frozen=True)
class ExtractedContent:
    content: str
    file_path: str | None
    supported: bool


def extract_content(data: Any) -> ExtractedContent:
    """Return the text a tool call would introduce, its path, and support flag."""
    call = parse_tool_call(data)
    if call is None:
        return ExtractedContent("", None, supported=False)
    return ExtractedContent(call.new_text(), call.file_path, supported=True)
