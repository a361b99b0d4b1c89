"""
Search mode inference from raw query text.

The classifier guesses whether a query was meant as a regular expression, a
shell glob or a plain substring. It is a best-effort heuristic: filenames
may legitimately contain characters that are also pattern syntax, so a
caller who knows better should pick the mode explicitly. Fuzzy mode is
never inferred.
"""

from ..models.search_mode import SearchMode


# Escape sequences that only make sense in a regular expression
REGEX_ESCAPES = ('\\d', '\\w', '\\s', '\\.', '\\^', '\\$')

# Characters that make a wildcard query more likely a regex than a glob
NON_GLOB_CHARS = ('[', '(', '\\', '|')


def classify(query: str) -> SearchMode:
    """
    Infer the search mode a query most likely intends.

    Regex-likeness is checked before glob-likeness because every glob
    construct can also appear inside a regular expression.

    Args:
        query: Query text as typed by the user

    Returns:
        SearchMode.REGEX, SearchMode.GLOB or SearchMode.SUBSTRING
    """
    if looks_like_regex(query):
        return SearchMode.REGEX
    if looks_like_glob(query):
        return SearchMode.GLOB
    return SearchMode.SUBSTRING


def looks_like_regex(query: str) -> bool:
    """Check for regex metacharacters that rarely occur in filenames."""
    if '\\' in query and any(escape in query for escape in REGEX_ESCAPES):
        return True

    # Anchors
    if query.startswith('^') or query.endswith('$'):
        return True

    # Character classes
    if '[' in query and ']' in query:
        return True

    # Counted repetition such as {4} or {2,3}
    if '{' in query and '}' in query and any(ch in '0123456789' for ch in query):
        return True

    # Alternation
    if '|' in query:
        return True

    # Groups
    if '(' in query and ')' in query:
        return True

    # A leading '+' is common in filenames; anywhere else it is a quantifier
    if len(query) > 1 and '+' in query[1:]:
        return True

    return False


def looks_like_glob(query: str) -> bool:
    """Check for shell wildcards without regex-only syntax around them."""
    if '*' not in query and '?' not in query:
        return False
    return not any(ch in query for ch in NON_GLOB_CHARS)
