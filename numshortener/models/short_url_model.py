from dataclasses import dataclass


@dataclass(frozen=True)
class ShortURLModel:
    """Represent a stored URL record.

    Records are created once, at the first successful registration of a URL,
    and are never updated or deleted afterwards.

    Attributes:
        original_url (str):
            The validated, unmodified URL string the identifier redirects to.
        short_url (int):
            The positive integer identifier assigned to the URL.

    Example:
        >>> record = ShortURLModel(original_url='https://www.example.com', short_url=2)
        >>> record.original_url
        'https://www.example.com'
        >>> record.short_url
        2
    """

    original_url: str
    short_url: int
