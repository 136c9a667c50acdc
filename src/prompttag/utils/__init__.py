# topmark:header:start
#
#   project      : PromptTag
#   file         : __init__.py
#   file_relpath : src/prompttag/utils/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Internal utilities for PromptTag."""

from __future__ import annotations
