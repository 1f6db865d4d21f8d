"""Language descriptors for the source scanner.

A descriptor tells the scanner which tokens introduce each region kind.
It is a frozen value passed into every scan call; nothing in the scanner
reads language settings from module state.

Design decisions:
1. Quote marks are single characters; the opening character also closes
   the literal.
2. Extensions are lowercase and include the dot; lookup normalizes case.
3. CPP_LANGUAGE covers C and C++ together since .h is genuinely ambiguous.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class LanguageDescriptor:
    """Token set for one C-like language family.

    Attributes:
        name: Unique identifier (lowercase, e.g., "c_cpp")
        macro_mark: Token that introduces a preprocessor directive
        quote_marks: Characters that open (and close) a string/char literal
        inline_comment_mark: Token that starts a comment running to end of line
        block_comment_marks: (open, close) tokens of a block comment
        extensions: File extensions including dot (e.g., ".cpp")
    """

    name: str
    macro_mark: str
    quote_marks: frozenset[str]
    inline_comment_mark: str
    block_comment_marks: tuple[str, str]
    extensions: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not self.macro_mark:
            raise ValueError("macro_mark must not be empty")
        if not self.inline_comment_mark:
            raise ValueError("inline_comment_mark must not be empty")
        if not all(self.block_comment_marks) or len(self.block_comment_marks) != 2:
            raise ValueError("block_comment_marks must be a non-empty (open, close) pair")
        for quote in self.quote_marks:
            if len(quote) != 1:
                raise ValueError(f"quote marks must be single characters, got {quote!r}")


CPP_LANGUAGE = LanguageDescriptor(
    name="c_cpp",
    macro_mark="#",
    quote_marks=frozenset({'"', "'"}),
    inline_comment_mark="//",
    block_comment_marks=("/*", "*/"),
    extensions=frozenset({".c", ".h", ".cpp", ".cc", ".cxx", ".hpp", ".hxx", ".hh", ".ino"}),
)
