# SPDX-License-Identifier: MIT

import pytest

from pnch.description import split_tag_description


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("ISSUE-123/The issue is fixed", ("ISSUE-123", "The issue is fixed")),
        ("Release notes", (None, "Release notes")),
        ("a/b/c", ("a", "b/c")),
        ("  pnch  /  Release  ", ("pnch", "Release")),
        ("pnch/", ("pnch", None)),
        ("/only a description", (None, "only a description")),
        ("", (None, None)),
        ("/", (None, None)),
    ],
)
def test_split_tag_description(raw, expected):
    assert split_tag_description(raw) == expected
