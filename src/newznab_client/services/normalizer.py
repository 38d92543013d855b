"""
Raw feed item -> NZB mapping.

Attributes are converted through ATTRIBUTE_CONVERTERS, a name-keyed table of
setters. Each converter handles its own failures:

- date-valued attributes are parsed leniently; failures are logged and the
  field stays None
- integer-valued attributes silently fall back to 0
- unknown attribute names are skipped

Attributes are applied in document order, so a repeated name overwrites the
earlier value.
"""

import logging
from typing import Callable, Dict, Iterable, List

from newznab_client.models.feed import RawNZB
from newznab_client.models.nzb import NZB
from newznab_client.timecodec import parse_rfc1123z_lenient

logger = logging.getLogger(__name__)

AttributeConverter = Callable[[NZB, str], None]


_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_PREFIX_BASES = {'b': 2, 'o': 8, 'x': 16}


def _underscores_ok(s: str) -> bool:
    """Underscores may only sit between digits, or between a base prefix and a digit."""
    saw = '^'
    i = 0
    hex_digits = False
    if len(s) >= 2 and s[0] == '0' and s[1].lower() in _PREFIX_BASES:
        i = 2
        saw = '0'
        hex_digits = s[1].lower() == 'x'
    for c in s[i:]:
        if '0' <= c <= '9' or (hex_digits and c.lower() in 'abcdef'):
            saw = '0'
            continue
        if c == '_':
            if saw != '0':
                return False
            saw = '_'
            continue
        if saw == '_':
            return False
        saw = '!'
    return saw != '_'


def parse_int(value: str, bits: int = 64) -> int:
    """
    Parse an integer attribute the way newznab servers write them, returning
    0 on failure.

    The base follows integer-literal rules: ``0x``, ``0o`` and ``0b``
    prefixes select hex, octal and binary, a bare leading ``0`` selects
    octal, and underscores may separate digits. Surrounding whitespace is an
    error. Values beyond a signed ``bits``-wide integer are clamped to its
    range.

    Example:
        >>> parse_int('12345'), parse_int('0x10'), parse_int('010'), parse_int('n/a')
        (12345, 16, 8, 0)
        >>> parse_int('99999999999', bits=32)
        2147483647
    """
    if not value:
        return 0

    s = value
    negative = False
    if s[0] in '+-':
        negative = s[0] == '-'
        s = s[1:]
        if not s:
            return 0

    base = 10
    digits = s
    if s[0] == '0':
        if len(s) >= 3 and s[1].lower() in _PREFIX_BASES:
            base = _PREFIX_BASES[s[1].lower()]
            digits = s[2:]
        else:
            base = 8
            digits = s[1:]

    max_unsigned = (1 << bits) - 1
    n = 0
    underscores = False
    for c in digits:
        if c == '_':
            underscores = True
            continue
        d = _DIGITS.find(c.lower()) if c.isascii() else -1
        if d < 0 or d >= base:
            return 0
        n = n * base + d
        if n > max_unsigned:
            n = max_unsigned
            break
    else:
        if underscores and not _underscores_ok(s):
            return 0

    cutoff = 1 << (bits - 1)
    if not negative and n >= cutoff:
        return cutoff - 1
    if negative and n > cutoff:
        return -cutoff
    return -n if negative else n


def _set_air_date(nzb: NZB, value: str) -> None:
    parsed = parse_rfc1123z_lenient(value, field='tvairdate')
    if parsed is not None:
        nzb.air_date = parsed


def _set_id(nzb: NZB, value: str) -> None:
    nzb.id = value


def _set_size(nzb: NZB, value: str) -> None:
    nzb.size = parse_int(value)


def _set_grabs(nzb: NZB, value: str) -> None:
    nzb.num_grabs = parse_int(value, bits=32)


def _set_comments(nzb: NZB, value: str) -> None:
    nzb.num_comments = parse_int(value, bits=32)


ATTRIBUTE_CONVERTERS: Dict[str, AttributeConverter] = {
    'tvairdate': _set_air_date,
    'guid': _set_id,
    'size': _set_size,
    'grabs': _set_grabs,
    'comments': _set_comments,
}


def normalize_item(
    raw: RawNZB,
    converters: Dict[str, AttributeConverter] = ATTRIBUTE_CONVERTERS
) -> NZB:
    """
    Build an NZB from one raw feed item.

    Title, description and publish date are copied verbatim; everything else
    comes from the attribute list via ``converters``.

    Args:
        raw: Decoded ``<item>``
        converters: Attribute name -> converter table

    Returns:
        New NZB; never raises for bad attribute values
    """
    nzb = NZB(
        title=raw.title,
        description=raw.description,
        pub_date=raw.pub_date,
    )

    for attr in raw.attributes:
        converter = converters.get(attr.name)
        if converter is None:
            continue
        converter(nzb, attr.value)

    return nzb


def normalize_items(
    raws: Iterable[RawNZB],
    converters: Dict[str, AttributeConverter] = ATTRIBUTE_CONVERTERS
) -> List[NZB]:
    """Normalize every item, preserving input order."""
    return [normalize_item(raw, converters) for raw in raws]
