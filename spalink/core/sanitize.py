"""
Path text sanitization.

Normalizes free-form path text typed at a prompt, pasted from a file
explorer, or read back from the config file, so that cosmetic differences
never count as a different path.
"""

SMART_DOUBLE_QUOTES = "“”„‟″«»"
SMART_SINGLE_QUOTES = "‘’‚‛′"
QUOTE_CHARS = ('"', "'")
PATH_SEPARATORS = "/\\"

_QUOTE_TABLE = str.maketrans(
    {
        **{ch: '"' for ch in SMART_DOUBLE_QUOTES},
        **{ch: "'" for ch in SMART_SINGLE_QUOTES},
    }
)


def _clean_once(value: str) -> str:
    value = value.strip().translate(_QUOTE_TABLE)

    if len(value) >= 2 and value[0] in QUOTE_CHARS and value[0] == value[-1]:
        value = value[1:-1]

    return value.strip().rstrip(PATH_SEPARATORS).strip()


def sanitize(raw: str | None) -> str | None:
    """
    Clean up a path string.

    Trims whitespace, turns smart quotes into plain ones, removes one layer
    of matching surrounding quotes and strips trailing path separators.
    The pass repeats until the text stops changing, so a value that was
    quoted twice (``"'C:\\dev'"``) ends up bare and cleaning a clean value
    is a no-op.

    Args:
        raw: Text to clean, may be None

    Returns:
        The cleaned path, or None if nothing is left
    """
    if raw is None:
        return None

    value = raw
    while True:
        cleaned = _clean_once(value)
        if cleaned == value:
            break
        value = cleaned

    return value or None
