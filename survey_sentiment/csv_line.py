# Survey Sentiment
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""CSV line splitting.

Survey exports are read line by line. Each line is split into fields with a
minimal quote-aware scanner:

- A double quote toggles "inside quotes" mode and is not part of the field.
- A comma outside quotes ends the current field.
- Everything else (including commas inside quotes) is kept.

Doubled quotes (`""`) are not treated as an escaped quote: each quote simply
toggles the mode. Fields spanning multiple lines are not supported.
"""


def parse_line(line: str) -> list[str]:
    """Split a single CSV line into fields.

    Args:
        line:
            Raw line without the trailing newline.

    Returns:
        The list of fields. Always contains at least one (possibly empty) field.
    """

    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)

    fields.append("".join(current))
    return fields
