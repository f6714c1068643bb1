# =============================================================================
# COMANDE v1.0 - UTILS PACKAGE
# =============================================================================
#   utils/dates.py       - parse_timestamp, format_timestamp, minuti_trascorsi
#   utils/conversions.py - parse_decimal, parse_optional_int
#   utils/validation.py  - validate_stato, validate_non_negativo, validate_quantita
#   utils/response.py    - success_response
# =============================================================================

from .dates import (
    parse_timestamp,
    format_timestamp,
    utc_now,
    minuti_trascorsi,
)

from .conversions import (
    parse_decimal,
    parse_optional_int,
)

from .validation import (
    validate_stato,
    validate_non_negativo,
    validate_quantita,
)

from .response import success_response

__all__ = [
    'parse_timestamp',
    'format_timestamp',
    'utc_now',
    'minuti_trascorsi',
    'parse_decimal',
    'parse_optional_int',
    'validate_stato',
    'validate_non_negativo',
    'validate_quantita',
    'success_response',
]
