from __future__ import annotations
import re
from pathlib import Path
from typing import List

import numpy as np

# Fixed 32-reference trace used by the demonstration runs.
DEMO_TRACE: List[int] = [
    0x0000, 0x0004, 0x000c, 0x2200, 0x00d0, 0x00e0, 0x1130,
    0x0028, 0x113c, 0x2204, 0x0010, 0x0020, 0x0004, 0x0040,
    0x2208, 0x0008, 0x00a0, 0x0004, 0x1104, 0x0028, 0x000c,
    0x0084, 0x000c, 0x3390, 0x00b0, 0x1100, 0x0028, 0x0064,
    0x0070, 0x00d0, 0x0008, 0x3394,
]

_SEPARATORS = re.compile(r"[\s,]+")


def _parse_token(token: str, lineno: int) -> int:
    base = 0 if token[:2].lower() in ("0x", "0o", "0b") else 10
    try:
        return int(token, base)
    except ValueError:
        raise ValueError(f"line {lineno}: cannot parse address {token!r}") from None


def parse_trace(text: str) -> List[int]:
    """Parses addresses from text. Tokens are separated by whitespace or commas; '#' starts a comment."""
    addresses = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.split("#", 1)[0].strip()
        if not line:
            continue
        for token in _SEPARATORS.split(line):
            if token:
                addresses.append(_parse_token(token, lineno))
    return addresses


def load_trace(path: str) -> List[int]:
    """Loads an address trace file."""
    return parse_trace(Path(path).read_text(encoding="utf-8"))


def synthetic_trace(length: int, working_set: int = 16, line_size: int = 16,
                    seed: int | None = None, address_bits: int = 16) -> List[int]:
    """
    Draws ``length`` addresses from ``working_set`` distinct lines chosen at random
    in the address space, each with a random byte offset inside its line.
    """
    if length < 0:
        raise ValueError("Trace length must not be negative.")
    num_lines = (1 << address_bits) // line_size
    if not 0 < working_set <= num_lines:
        raise ValueError(f"Working set must be between 1 and {num_lines} lines.")

    rng = np.random.default_rng(seed)
    lines = rng.choice(num_lines, size=working_set, replace=False)
    picks = rng.integers(0, working_set, size=length)
    offsets = rng.integers(0, line_size, size=length)
    return [int(lines[p]) * line_size + int(o) for p, o in zip(picks, offsets)]
