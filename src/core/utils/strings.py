"""String primitives used by query terms.

Case folding and separator normalization are pure transforms that
return new strings. File paths handed to the query engine are already
canonical; only user supplied patterns go through
`normalize_separators`.
"""

import os

from core.utils.constants import CANONICAL_SEPARATOR


def to_lower(value: str) -> str:
    """Return the case-folded form used for case-insensitive comparisons."""
    return value.lower()


def equal_caseless(left: str, right: str) -> bool:
    """Compare two strings ignoring case.

    Folding can change a string's length ("İ".lower() is two code points),
    so lengths are only comparable after both sides are folded.
    """
    return left == right or to_lower(left) == to_lower(right)


def normalize_separators(value: str, native_sep: str = os.sep) -> str:
    """Rewrite native path separators to the canonical "/" form.

    On POSIX the native separator already is canonical and the value is
    returned unchanged. The transform is idempotent.

    Example:
        normalize_separators("src\\main.c", native_sep="\\")
        → "src/main.c"
    """
    if native_sep == CANONICAL_SEPARATOR:
        return value
    return value.replace(native_sep, CANONICAL_SEPARATOR)
