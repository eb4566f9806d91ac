"""Share records and the JSON share-file format.

A share file is one JSON object:

    {
      "keys": {"n": 4, "k": 3},
      "1": {"base": "10", "value": "4"},
      "2": {"base": "2", "value": "111"},
      ...
    }

Every key except "keys" is a share; the key is its x-coordinate in
base 10, and y = decode(value, base).
"""

import json
import logging
import re
from dataclasses import dataclass

from secretrecon.errors import (
    MalformedShareFile, ShareCountMismatch,
    ShareFileNotFound, ShareFileParseError,
)
from secretrecon.radix import decode, encode

logger = logging.getLogger(__name__)

KEYS_FIELD = 'keys'

_DECIMAL = re.compile(r'[+-]?[0-9]+', re.ASCII)


@dataclass(frozen=True, order=True)
class Share:
    x: int
    y: int

    def __iter__(self):
        yield self.x
        yield self.y

    def __getitem__(self, idx):
        return (self.x, self.y)[idx]


@dataclass(frozen=True)
class ShareSet:
    """Declared (n, k) plus the decoded shares, sorted by ascending x."""

    n: int
    k: int
    shares: tuple

    def points(self) -> list:
        return [(s.x, s.y) for s in self.shares]

    @classmethod
    def from_shares(cls, shares, k: int, n: int = None):
        ordered = tuple(sorted(Share(x, y) for x, y in shares))
        return cls(n=len(ordered) if n is None else n, k=k, shares=ordered)


def _parse_int(raw, what: str, source) -> int:
    """Accept a JSON integer or a plain ASCII decimal string, nothing else.

    Floats (including inf/nan and 2.0) and bools are rejected.
    """
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    if isinstance(raw, str) and _DECIMAL.fullmatch(raw):
        try:
            return int(raw, 10)
        except ValueError:
            # exceeds the interpreter's int string conversion limit
            pass
    raise MalformedShareFile(source, f"{what} must be an integer, got {raw!r}")


def parse_document(data, source='<document>') -> ShareSet:
    """Build a ShareSet from an already-parsed share document.

    Raises:
        MalformedShareFile: missing keys/n/k, bad share entry, or bad x.
        ShareCountMismatch: number of share entries != declared n.
        DecodeError: a share value is not valid in its base.
    """
    if not isinstance(data, dict):
        raise MalformedShareFile(source, "top-level JSON value must be an object")
    keys = data.get(KEYS_FIELD)
    if not isinstance(keys, dict) or 'n' not in keys or 'k' not in keys:
        raise MalformedShareFile(source, "missing 'keys' with 'n' and 'k'")
    n = _parse_int(keys['n'], "keys.n", source)
    k = _parse_int(keys['k'], "keys.k", source)

    shares = []
    for key, entry in data.items():
        if key == KEYS_FIELD:
            continue
        x = _parse_int(key, f"share key {key!r}", source)
        if x < 1:
            raise MalformedShareFile(source, f"share key {key!r} must be >= 1")
        if not isinstance(entry, dict) or 'base' not in entry or 'value' not in entry:
            raise MalformedShareFile(
                source, f"share {key!r} needs 'base' and 'value'")
        base = _parse_int(entry['base'], f"base of share {key!r}", source)
        value = entry['value']
        if not isinstance(value, str):
            raise MalformedShareFile(
                source, f"value of share {key!r} must be a string")
        shares.append(Share(x, decode(value, base)))

    if len(shares) != n:
        raise ShareCountMismatch(source, n, len(shares))

    logger.debug("%s: parsed %d shares (k=%d)", source, len(shares), k)
    return ShareSet.from_shares(shares, k=k, n=n)


def load_share_file(path) -> ShareSet:
    """Read and parse one share file."""
    try:
        with open(path) as f:
            data = json.load(f)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError, UnicodeDecodeError and oversized int literals
        # are all ValueErrors
        raise ShareFileParseError(path, f"invalid JSON: {e}") from e
    except OSError as e:
        raise ShareFileNotFound(path, f"cannot open: {e.strerror or e}") from e
    return parse_document(data, source=path)


def dump_share_file(path, share_set: ShareSet, bases=None):
    """Write a ShareSet in share-file format.

    bases: optional list of bases cycled over the shares (default all 10).
    """
    bases = list(bases) if bases else [10]
    doc = {KEYS_FIELD: {'n': share_set.n, 'k': share_set.k}}
    for i, share in enumerate(share_set.shares):
        base = bases[i % len(bases)]
        doc[str(share.x)] = {'base': str(base), 'value': encode(share.y, base)}
    with open(path, 'w') as f:
        json.dump(doc, f, indent=2)

