# =============================================================================
# COMANDE v1.0 - UTILS/CONVERSIONS
# =============================================================================
# Parsing importi e interi dai payload in ingresso
# =============================================================================

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional


def parse_decimal(value: Any) -> Decimal:
    """
    Converte un importo in Decimal.

    Gestisce:
    - numeri (int, float, Decimal) così come arrivano dal JSON
    - virgola come separatore decimale (italiano)
    - simboli € e EUR

    Il segno viene mantenuto: il controllo di non negatività spetta al chiamante.
    """
    if value is None or value == '':
        return Decimal('0')

    if isinstance(value, bool):
        raise ValueError(f"Importo non valido: {value!r}")

    if isinstance(value, Decimal):
        return _finito(value)

    if isinstance(value, (int, float)):
        return _finito(Decimal(str(value)))

    value = str(value).strip()
    value = value.replace('€', '').replace('EUR', '').replace(' ', '')
    value = re.sub(r'[^\d,.\-]', '', value)

    if not value:
        return Decimal('0')

    # Formato italiano (1.234,56) vs americano (1,234.56)
    if ',' in value and '.' in value:
        if value.rfind(',') > value.rfind('.'):
            value = value.replace('.', '').replace(',', '.')
        else:
            value = value.replace(',', '')
    elif ',' in value:
        value = value.replace(',', '.')

    try:
        return _finito(Decimal(value))
    except InvalidOperation:
        raise ValueError(f"Importo non valido: {value!r}")


def _finito(importo: Decimal) -> Decimal:
    # NaN e infinito non sono importi
    if not importo.is_finite():
        raise ValueError(f"Importo non valido: {importo}")
    return importo


def parse_optional_int(value: Any) -> Optional[int]:
    """Converte in int, None se assente."""
    if value is None or value == '':
        return None
    if isinstance(value, bool):
        raise ValueError(f"Intero non valido: {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"Intero non valido: {value!r}")
    return int(value)
