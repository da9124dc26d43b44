"""
Rendering of schema documentation as source comments.

Documentation text is split into lines, near-empty lines are dropped and
the rest are greedily word-wrapped into ``//`` comment lines.
"""

from typing import List, Optional

COMMENT_PREFIX = "//"
DEFAULT_MAX_WIDTH = 80


def split_comment_line(line: str, max_width: int = DEFAULT_MAX_WIDTH, indent: int = 0) -> str:
    """
    Wrap one line of text into comment lines.

    A word joins the current physical line while
    ``current_length + 1 + len(word) < max_width``; otherwise it opens a new
    line. Words are never split, so a single over-long word gets a line of
    its own.

    Args:
        line: Text to wrap (already stripped)
        max_width: Column budget, including indentation and comment prefix
        indent: Number of leading spaces on every physical line

    Returns:
        Wrapped comment lines, each terminated by a newline
    """
    indent_str = " " * indent
    base_length = indent + len(COMMENT_PREFIX)

    physical_lines: List[List[str]] = [[]]
    current_length = base_length

    for word in line.split():
        words = physical_lines[-1]
        if not words or current_length + 1 + len(word) < max_width:
            words.append(word)
            current_length += 1 + len(word)
        else:
            physical_lines.append([word])
            current_length = base_length + 1 + len(word)

    return "".join(
        f"{indent_str}{COMMENT_PREFIX} {' '.join(words)}\n"
        for words in physical_lines
        if words
    )


def format_comment(doc: Optional[str], indent: int = 0,
                   max_width: int = DEFAULT_MAX_WIDTH) -> str:
    """
    Render free-form documentation as a comment block.

    Args:
        doc: Documentation text, or None when the node has none
        indent: Indentation for nested declarations
        max_width: Column budget per physical line

    Returns:
        Comment block (empty string when there is nothing to render)
    """
    if doc is None:
        return ""

    return "".join(
        split_comment_line(stripped, max_width, indent)
        for stripped in (raw.strip() for raw in doc.split("\n"))
        if len(stripped) > 1
    )
