"""
Boolean flag encoding shared by the settings store and the project settings.
No Django imports here: awards_api.settings loads this before apps are ready.
"""

TRUE_VALUES = ('true', '1', 'yes')
FALSE_VALUES = ('false', '0', 'no')


def parse_bool(value, default):
    """
    Interpret a stored setting value as a boolean.

    Args:
        value: Raw stored value (usually a string, may be None)
        default (bool): Returned when the value is missing or unparseable

    Returns:
        bool

    Example:
        >>> parse_bool(" YES ", False)
        True
        >>> parse_bool("maybe", True)
        True
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value

    normalized = str(value).strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    return default


def serialize_bool(value):
    return 'true' if value else 'false'
