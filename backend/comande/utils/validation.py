# =============================================================================
# COMANDE v1.0 - UTILS/VALIDATION
# =============================================================================
# Funzioni di validazione
# =============================================================================

from decimal import Decimal
from typing import Iterable, Optional, Union

from ..exceptions import ValidationError, ValoreNegativoError


def validate_stato(stato: str, stati_validi: Iterable[str], nome_campo: str = "stato") -> Optional[str]:
    """
    Validate state value against allowed list.

    Args:
        stato: Value to validate
        stati_validi: Valid values
        nome_campo: Field name for error message

    Returns:
        Error message if invalid, None if valid
    """
    stati_validi = list(stati_validi)
    if stato not in stati_validi:
        return f"{nome_campo} non valido. Valori ammessi: {', '.join(stati_validi)}"
    return None


def validate_non_negativo(valore: Union[int, Decimal], nome_campo: str) -> None:
    """Solleva ValoreNegativoError se il valore è negativo."""
    if valore is not None and valore < 0:
        raise ValoreNegativoError(
            detail=f"{nome_campo} non può essere negativo",
            extra={"field": nome_campo, "valore": str(valore)}
        )


def validate_quantita(quantita: int, nome_campo: str = "quantita") -> None:
    """La quantità di una riga deve essere un intero positivo."""
    if quantita is None:
        raise ValidationError(
            detail=f"{nome_campo} mancante",
            extra={"field": nome_campo}
        )
    validate_non_negativo(quantita, nome_campo)
    if quantita == 0:
        raise ValidationError(
            detail=f"{nome_campo} deve essere maggiore di zero",
            extra={"field": nome_campo}
        )
