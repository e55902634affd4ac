"""Utility for turning raw comment lines into display text."""


def clean_comment(line: str) -> str:
    """Strip comment delimiters (``//``, ``/**``, ``*``, ``*/``) and whitespace."""
    text = line.strip().lstrip("/*")
    text = text.rstrip().rstrip("*/")
    return text.strip()
