"""
Case policy for filename comparisons.

All case normalization in the package goes through fold_case, so the
indexer's keys and the matchers' comparisons always agree.
"""


def fold_case(text: str, case_sensitive: bool) -> str:
    """
    Normalize text according to the active case policy.

    Case-insensitive comparison lowercases both sides. Lowercasing keeps
    characters such as ``"ß"`` intact, so a regex or glob written with the
    original character still lines up one-to-one with the indexed name.

    Args:
        text: Text to normalize
        case_sensitive: Whether comparisons respect case

    Returns:
        The text unchanged when case-sensitive, its lowercase form otherwise
    """
    if case_sensitive:
        return text
    return text.lower()
