"""Link parsers package."""

from pathlib import Path

from ._BaseParser import BaseParser
from ._MarkdownParser import MARKDOWN_LINK_PATTERN, MarkdownParser
from .LinkRef import LinkRef

_PARSERS: dict[str, type[BaseParser]] = {
    "markdown": MarkdownParser,
    # Rust doc comments are Markdown
    "rust": MarkdownParser,
}

_EXTENSIONS: dict[str, str] = {
    ".md": "markdown",
    ".rs": "rust",
}


def get_parser(parser_name: str | None = None, file_path: Path | None = None) -> BaseParser:
    """Get a parser instance by name or file extension.

    Files with an unknown extension fall back to the Markdown parser.
    """
    if parser_name:
        parser_cls = _PARSERS.get(parser_name)
        if not parser_cls:
            raise ValueError(f"Unknown parser: {parser_name}")
        return parser_cls()

    if file_path:
        name = _EXTENSIONS.get(file_path.suffix.lower())
        if name:
            return _PARSERS[name]()

    return MarkdownParser()


__all__ = ["BaseParser", "LinkRef", "MARKDOWN_LINK_PATTERN", "MarkdownParser", "get_parser"]
