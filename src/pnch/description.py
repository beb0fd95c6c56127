# SPDX-License-Identifier: MIT

from typing import Optional

TAG_SEPARATOR = "/"


def split_tag_description(raw: str) -> tuple[Optional[str], Optional[str]]:
    """
    Split a `tag/description` argument on its first forward slash.

    Everything before the slash is the tag and everything after it is the
    description, both trimmed. Without a slash the whole text is the
    description. Empty parts become None, so any string yields a valid pair.

    Examples:
        "ISSUE-123/The issue is fixed" -> ("ISSUE-123", "The issue is fixed")
        "Release notes" -> (None, "Release notes")
        "a/b/c" -> ("a", "b/c")
    """
    if TAG_SEPARATOR not in raw:
        return None, __none_if_empty(raw)

    tag, description = raw.split(TAG_SEPARATOR, 1)
    return __none_if_empty(tag), __none_if_empty(description)


def __none_if_empty(value: str) -> Optional[str]:
    stripped = value.strip()
    if stripped == "":
        return None
    return stripped
