# utils/key_values.py
"""Parser for ``KEY=VALUE`` blocks as printed by ``systemctl show``."""

from requests.structures import CaseInsensitiveDict


def parse_key_values(text: str | None) -> CaseInsensitiveDict:
    """
    Parse one ``KEY=VALUE`` pair per line into a case-insensitive mapping.

    Blank lines, lines without ``=`` and lines starting with ``=`` are
    skipped. Keys and values are trimmed; the last duplicate key wins.
    """
    pairs: CaseInsensitiveDict = CaseInsensitiveDict()
    if not text:
        return pairs

    for raw_line in text.split("\n"):
        line = raw_line.strip()
        if not line:
            continue
        idx = line.find("=")
        if idx <= 0:
            continue
        pairs[line[:idx].strip()] = line[idx + 1 :].strip()

    return pairs
