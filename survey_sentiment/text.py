# Survey Sentiment
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Text normalization helpers.

Only ASCII letters and digits survive normalization. Non-ASCII characters are
dropped rather than folded, so `"café"` becomes `"caf"`.
"""

import re
import string


_NON_ALNUM_RE = re.compile(r"[^A-Za-z0-9]")

# ASCII whitespace only; NBSP and other Unicode spaces stay inside a token.
_WHITESPACE_RE = re.compile(r"[ \t\n\v\f\r]+")

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def ascii_lower(text: str) -> str:
    """Lowercase ASCII letters only and leave everything else untouched."""

    return text.translate(_ASCII_LOWER)


def normalize(token: str) -> str:
    """Strip every non-alphanumeric character and lowercase the remainder.

    Args:
        token:
            A single whitespace-delimited token.

    Returns:
        The normalized token. May be empty (e.g. for pure punctuation).
    """

    return ascii_lower(_NON_ALNUM_RE.sub("", token))


def tokenize(text: str) -> list[str]:
    """Split text on runs of ASCII whitespace."""

    return [token for token in _WHITESPACE_RE.split(text) if token]
