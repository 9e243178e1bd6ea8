# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""File extension splitting for version sort.

GNU sort defines an extension as a dot, followed by an ASCII letter or
tilde, followed by zero or more ASCII letters, digits or tildes; all of that
repeated zero or more times and anchored at the end of the string. As a
regular expression:

    (\\.[A-Za-z~][A-Za-z0-9~]*)*$

The match is found with a single right-to-left scan instead of ``re``.

Example:
    ```python
    split_extension("hello-8.0.12.tar.gz")  # ("hello-8.0.12", ".tar.gz")
    split_extension(".autom4te.cfg")        # ("", ".autom4te.cfg")
    split_extension("hello-8.2")            # ("hello-8.2", "")
    ```
"""

from __future__ import annotations

from .chars import ASCII_LETTERS
from .chunks import DIGITS

# Characters allowed right after an extension dot
_EXT_LEAD = ASCII_LETTERS | {"~"}
# Characters allowed anywhere in an extension segment
_EXT_BODY = _EXT_LEAD | DIGITS


def split_extension(s: str) -> tuple[str, str]:
    """Split ``s`` into ``(base, extension)``.

    Args:
        s: String to split.

    Returns:
        A tuple where ``base + extension == s``. The extension is empty when
        ``s`` has no trailing extension (including when ``s`` ends in a dot).
    """
    split_at: int | None = None
    following: str | None = None  # character to the right of the cursor

    for i in range(len(s) - 1, -1, -1):
        c = s[i]
        if c == ".":
            if following is None:
                # Trailing dot: nothing can match
                return s, ""
            if following not in _EXT_LEAD:
                break
            split_at = i
        elif c not in _EXT_BODY:
            break
        following = c

    if split_at is None:
        return s, ""
    return s[:split_at], s[split_at:]
