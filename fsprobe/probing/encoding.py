"""
Hash encoding and path parsing helpers.
"""
import string
from pathlib import Path
from typing import Union

from .. import config

DIGITS = string.digits + string.ascii_lowercase


def base_convert(digits: str, source_base: int, dest_base: int,
                 pad: int = 1, lowercase: bool = True) -> str:
    """
    Convert a number between arbitrary bases (2..36), left-padding the result
    with zeros to at least `pad` digits.

    Raises ValueError for bases out of range or digits that are not valid in
    the source base.
    """
    for base in (source_base, dest_base):
        if not 2 <= base <= 36:
            raise ValueError(f"Base must be between 2 and 36, got {base}")

    digits = digits.lower()
    if not digits:
        raise ValueError("Empty input")

    valid = DIGITS[:source_base]
    # int() would also accept prefixes, signs and underscores
    bad = [c for c in digits if c not in valid]
    if bad:
        raise ValueError(f"Invalid digit {bad[0]!r} for base {source_base}")

    value = int(digits, source_base)
    out = []
    while value:
        value, rem = divmod(value, dest_base)
        out.append(DIGITS[rem])
    result = ''.join(reversed(out)) or '0'
    result = result.zfill(pad)

    return result if lowercase else result.upper()


def sha1_hex_to_base36(hexdigest: str) -> str:
    """SHA-1 hex digest -> 31-digit lowercase base-36 string."""
    return base_convert(hexdigest, 16, 36, config.SHA1_BASE36_WIDTH)


def extension_from_path(path: Union[str, Path]) -> str:
    """
    Lowercased text after the rightmost '.' in the path.

    The whole path string is scanned, not just the final component, so
    '/photos.old/README' yields 'old/readme'. Type resolution has always been
    fed this value; keep it that way.
    A '.' at index 0 counts as no extension.
    """
    path = str(path)
    i = path.rfind('.')
    return path[i + 1:].lower() if i > 0 else ''
