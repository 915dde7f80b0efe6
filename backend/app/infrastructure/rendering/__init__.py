from .markdown_renderer import RegexMarkdownRenderer

__all__ = ["RegexMarkdownRenderer"]
