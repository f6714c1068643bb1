# =============================================================================
# COMANDE v1.0 - UTILS/DATES
# =============================================================================
# Parsing e formattazione timestamp
# =============================================================================

from datetime import datetime, timezone
from typing import Any, Optional


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Normalizza un timestamp in datetime timezone-aware (UTC se naive).

    Formati supportati:
    - datetime
    - ISO 8601 (anche con suffisso 'Z' come prodotto da JavaScript)
    - epoch in millisecondi (int/float)

    Returns:
        datetime o None se il valore è assente
    """
    if value is None or value == '':
        return None

    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            dt = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            raise ValueError(f"Timestamp fuori intervallo: {value!r}")
    else:
        testo = str(value).strip()
        if testo.endswith('Z'):
            testo = testo[:-1] + '+00:00'
        try:
            dt = datetime.fromisoformat(testo)
        except ValueError:
            raise ValueError(f"Timestamp non valido: {value!r}")

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def format_timestamp(dt: Optional[datetime]) -> Optional[str]:
    """Formatta in ISO 8601."""
    if dt is None:
        return None
    return dt.isoformat()


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def minuti_trascorsi(da: datetime, a: datetime) -> int:
    """Minuti interi trascorsi tra due istanti (mai negativi)."""
    secondi = (a - da).total_seconds()
    if secondi <= 0:
        return 0
    return int(secondi // 60)
