"""
Tokenizer for the raw identifier catalog.

The catalog text uses two nested delimiters:
- Records separated by line breaks
- Fields within a record separated by semicolons

Some fields additionally hold two identifiers pasted together with a
single space instead of a semicolon. Those are split on the space.

Tokens are never validated or corrected. Malformed-looking identifiers
pass through unchanged; only the structure is recovered.
"""

from __future__ import annotations

from typing import Iterator


RECORD_SEPARATOR = '\n'
FIELD_SEPARATOR = ';'
PASTED_SEPARATOR = ' '


def _split_records(raw: str) -> list[str]:
    """Split raw text into records on any line break style."""
    return raw.replace('\r\n', '\n').replace('\r', '\n').split(RECORD_SEPARATOR)


def _split_field(field_text: str) -> Iterator[str]:
    """Yield the tokens held by a single semicolon-delimited field."""
    field_text = field_text.strip()
    if not field_text:
        return
    
    if PASTED_SEPARATOR not in field_text:
        yield field_text
        return
    
    for part in field_text.split(PASTED_SEPARATOR):
        part = part.strip()
        if part:
            yield part


def iter_tokens(raw: str) -> Iterator[str]:
    """
    Iterate over catalog tokens in order of appearance.
    
    Args:
        raw: Whole catalog text
        
    Yields:
        Non-empty identifier strings, top-to-bottom, left-to-right
    """
    if not raw:
        return
    
    for record in _split_records(raw):
        for field_text in record.split(FIELD_SEPARATOR):
            yield from _split_field(field_text)


def tokenize(raw: str) -> tuple[str, ...]:
    """
    Turn the raw catalog string into an ordered tuple of tokens.
    
    The position of each token in the result is its catalog index.
    The empty string yields an empty tuple. No input raises.
    """
    return tuple(iter_tokens(raw))
