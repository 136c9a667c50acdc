# topmark:header:start
#
#   project      : PromptTag
#   file         : constants.py
#   file_relpath : src/prompttag/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PromptTag Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

PROMPTTAG_VERSION: str = get_version("prompttag")

# Section markers, formatted with the section name.
SECTION_START_MARKER: str = "==== {name} ===="
SECTION_END_MARKER: str = "==== End of {name} ===="

# Separator used by the default array formatter (one blank line between items).
DEFAULT_ARRAY_SEPARATOR: str = "\n\n"

# Environment variable consulted by `prompttag.config.logging.setup_logging`.
LOG_LEVEL_ENV_VAR: str = "PROMPTTAG_LOG_LEVEL"
