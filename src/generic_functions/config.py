"""Configuration utilities for generic-functions.

Settings come from environment variables only. Each getter validates its
variable and raises :class:`~generic_functions.errors.InvalidSettingError`
when the value is unusable.
"""

import os

from generic_functions.constants import COUNTRY_DATE_FORMATS
from generic_functions.errors import InvalidSettingError

ENV_PREFIX = "GENERIC_FUNCTIONS_"  # pragma: no mutate

HTTP_TIMEOUT_ENV = f"{ENV_PREFIX}HTTP_TIMEOUT"  # pragma: no mutate
COUNTRY_ENV = f"{ENV_PREFIX}COUNTRY"  # pragma: no mutate

DEFAULT_HTTP_TIMEOUT = 10.0
DEFAULT_COUNTRY = "FR"


def get_http_timeout() -> float:
    """Get the default timeout (in seconds) used by :func:`~generic_functions.utils.api.api`.

    Returns:
        The value of `GENERIC_FUNCTIONS_HTTP_TIMEOUT`, or 10 seconds when unset.

    Raises:
        InvalidSettingError: If the variable is not a positive number.
    """
    if not (raw := os.environ.get(HTTP_TIMEOUT_ENV)):
        return DEFAULT_HTTP_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError as e:
        raise InvalidSettingError(HTTP_TIMEOUT_ENV, raw, "expected a number") from e
    if timeout <= 0:
        raise InvalidSettingError(HTTP_TIMEOUT_ENV, raw, "expected a positive number")
    return timeout


def get_default_country() -> str:
    """Get the ISO country code used when no country is given for date formats.

    Returns:
        The upper-cased value of `GENERIC_FUNCTIONS_COUNTRY`, or ``"FR"`` when unset.

    Raises:
        InvalidSettingError: If the code has no known date format.
    """
    if not (raw := os.environ.get(COUNTRY_ENV)):
        return DEFAULT_COUNTRY
    code = raw.strip().upper()
    if code not in COUNTRY_DATE_FORMATS:
        raise InvalidSettingError(COUNTRY_ENV, raw, "unknown country code")
    return code
