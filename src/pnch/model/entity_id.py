# SPDX-License-Identifier: MIT

from typing import TypeAlias

EntryId: TypeAlias = int

FIRST_ENTRY_ID: EntryId = 1
