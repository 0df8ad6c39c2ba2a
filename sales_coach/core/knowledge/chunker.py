"""
Paragraph chunker.

Knowledge text is chunked on blank lines: one chunk per non-empty
paragraph, whitespace trimmed.

Dependencies: None
System role: First stage of knowledge ingestion
"""

PARAGRAPH_SEPARATOR = "\n\n"


def split_paragraphs(raw_text: str) -> list[str]:
    """
    Split text into trimmed, non-empty paragraphs.

    Args:
        raw_text: Arbitrary text, paragraphs separated by a blank line

    Returns:
        list[str]: Paragraphs in input order; empty for all-whitespace input
    """
    normalized = raw_text.replace("\r\n", "\n")
    chunks = (chunk.strip() for chunk in normalized.split(PARAGRAPH_SEPARATOR))
    return [chunk for chunk in chunks if chunk]
