"""Fixed text used when compiling name patterns."""

FRAGMENT_PREFIX = "^("
"""Every fragment is anchored and grouped so a ``|`` cannot escape the anchors."""

FRAGMENT_SUFFIX = ")$"

MATCH_ALL_FRAGMENT = "^(.*)$"
"""A finalized fragment that matches anything and is optimized away."""

REGEX_SPECIAL_CHARS = frozenset("|*+?()[]{}.^$\\")
"""Characters escaped inside quotes, or everywhere under ``force_escape``."""

WHERE_PREFIX = "WHERE "
AND_PREFIX = "  AND "

ALT_NAME_INDENT = "\n        OR "
"""Continuation between the two arms of a name/alt-name disjunction."""

ACL_COLUMN_TITLE = "Access privileges"
