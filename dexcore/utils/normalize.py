"""ABOUTME: Slug helpers for upstream internal names like "raichu-alola".
ABOUTME: Splits slugs into base species and form token and builds title-cased labels."""

SLUG_SEPARATOR = "-"


def split_slug(slug: str) -> tuple[str, str | None]:
    """Split a slug into base species name and form token.

    The base name is the text before the first dash; the form token is
    everything after it, with its own dashes preserved.

    Args:
        slug: Internal dash-separated name.

    Returns:
        Tuple of (base_name, form_token). form_token is None when the slug
        has no dash or nothing follows the first dash.

    Examples:
        >>> split_slug("raichu-alola")
        ('raichu', 'alola')
        >>> split_slug("charizard-mega-x")
        ('charizard', 'mega-x')
        >>> split_slug("pikachu")
        ('pikachu', None)
    """
    base, sep, token = slug.partition(SLUG_SEPARATOR)
    if not sep or not token:
        return base, None
    return base, token


def base_species_name(slug: str) -> str:
    """Return the base species name of a slug (text before the first dash)."""
    return split_slug(slug)[0]


def capitalize_word(word: str) -> str:
    """Uppercase the first letter of `word` and keep the rest as is.

    Unlike str.capitalize(), the remainder is not lowercased ("mega" -> "Mega",
    "XL" -> "XL").
    """
    return word[:1].upper() + word[1:]


def title_case_slug(slug: str) -> str:
    """Convert a dash-separated slug to space-joined title-case words.

    Empty segments from doubled or trailing dashes are dropped.

    Examples:
        >>> title_case_slug("mega-x")
        'Mega X'
        >>> title_case_slug("rapid-strike")
        'Rapid Strike'
    """
    words = [capitalize_word(word) for word in slug.split(SLUG_SEPARATOR) if word]
    return " ".join(words)
