"""Utility for generating Markdown code blocks."""


def md_codeblock(lines: list[str], lang: str = "cpp") -> list[str]:
    """Wrap ``lines`` in a fenced block, dropping trailing blank lines."""
    while lines and not lines[-1].strip():
        lines = lines[:-1]
    return [f"```{lang}", *lines, "```"]
