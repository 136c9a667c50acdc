# topmark:header:start
#
#   project      : PromptTag
#   file         : whitespace.py
#   file_relpath : src/prompttag/rendering/whitespace.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Whitespace normalization for rendered template content.

Template text is usually written indented inside source code, and interpolated
sections carry their own leading/trailing newlines from the section wrap. The
helpers here turn such raw text into a deterministic, indentation-independent
block.

Helpers
-------
* ``collapse_blank_lines(text)``: three or more line breaks (possibly with
  whitespace-only lines in between) become exactly one blank line (``\n\n``).
* ``collapse_horizontal(text)``: runs of spaces/tabs become a single space.
* ``dedent_line_starts(text)``: drop one space directly after each newline.
* ``normalize_whitespace(text)``: the full pipeline, in the order above with
  trims around it.
"""

from __future__ import annotations

import re
from typing import Final

_BLANK_RUN_RX: Final[re.Pattern[str]] = re.compile(r"\n\s*\n\s*\n")
_EDGE_WS_RX: Final[re.Pattern[str]] = re.compile(r"^\s+|\s+$")
_HORIZONTAL_WS_RX: Final[re.Pattern[str]] = re.compile(r"[ \t]+")


def collapse_blank_lines(text: str) -> str:
    r"""Collapse runs of three or more line breaks down to ``\n\n``.

    Whitespace-only lines between the breaks are absorbed by the collapse.

    Args:
        text (str): The text to process.

    Returns:
        str: The text with at most one blank line between paragraphs.
    """
    return _BLANK_RUN_RX.sub("\n\n", text)


def collapse_horizontal(text: str) -> str:
    """Collapse runs of spaces and tabs (never newlines) into one space."""
    return _HORIZONTAL_WS_RX.sub(" ", text)


def dedent_line_starts(text: str) -> str:
    """Remove a single space immediately following each newline."""
    return text.replace("\n ", "\n")


def normalize_whitespace(text: str) -> str:
    """Normalize ``text`` into a clean block.

    Steps, in order:
      1. collapse three or more line breaks into one blank line;
      2. trim leading and trailing whitespace;
      3. collapse runs of spaces/tabs into a single space;
      4. remove one leading space after every newline;
      5. trim again.

    The result is idempotent: normalizing already-normalized content returns
    it unchanged.

    Args:
        text (str): Raw concatenated template content.

    Returns:
        str: The normalized content (possibly empty).
    """
    text = collapse_blank_lines(text)
    text = _EDGE_WS_RX.sub("", text)
    text = collapse_horizontal(text)
    text = dedent_line_starts(text)
    return text.strip()
