"""
Naming helpers for generated identifiers.
"""


def upper_first(name: str) -> str:
    """
    Return ``name`` with its first character uppercased.

    Used to derive the exported form of a field name. An empty name gives an
    empty string so invalid identifiers surface where they are consumed.

    Example:
        >>> upper_first("createdAt")
        'CreatedAt'
        >>> upper_first("")
        ''
    """
    if not name:
        return ""
    return name[0].upper() + name[1:]
