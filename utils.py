from typing import Any, Iterable, Optional


def format_temperature(temperature: float) -> str:
    """Formats a numeric temperature with exactly one fractional digit.

        Args:
            temperature: The temperature as returned by the weather provider.

        Returns:
            The temperature as a string, e.g. "44.4" for 44.4 and "44.0" for 44.

        Example:
            >>> format_temperature(44)
            '44.0'
    """
    return f"{temperature:.1f}"


def first_or_default(items: Iterable[Any], default: Optional[Any] = None) -> Optional[Any]:
    """
        Returns the first element of an iterable, or a default when it is empty.

        Providers may return several candidates (weather conditions, wiki pages)
        of which only the first one is of interest.

        Args:
            items (Iterable[Any]): Any iterable (list, dict values, generator).
            default (Any): The value returned for an empty iterable.

        Returns:
            Any: The first element, or default.

        Example:
            >>> first_or_default([3, 2, 1])
            3
            >>> first_or_default([], "N / A")
            'N / A'
    """
    return next(iter(items), default)
