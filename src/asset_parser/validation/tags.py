"""SkySpark marker tag name rules."""


def is_tag_name(s: str) -> bool:
    """
    Return True if the string is a valid SkySpark tag name.

    A tag name starts with an ASCII lowercase letter, followed by any number
    of ASCII letters, digits, or underscores.
    """
    if not s:
        return False
    first, rest = s[0], s[1:]
    if not ("a" <= first <= "z"):
        return False
    return all(c == "_" or (c.isascii() and c.isalnum()) for c in rest)
