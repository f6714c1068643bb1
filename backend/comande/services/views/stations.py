# =============================================================================
# COMANDE v1.0 - STATION ROUTER
# =============================================================================
# Proiezione dello snapshot sulle righe di competenza di ogni stazione
# =============================================================================

from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Sequence

from ...exceptions import ValidationError
from ..lifecycle.constants import Postazione
from ..lifecycle.models import Ordinazione
from .filters import raggruppa_per_tab


class Stazione(str, Enum):
    """Stazioni di lavoro (schermate) che consumano le viste."""
    CAMERIERE = "CAMERIERE"
    PREPARA = "PREPARA"
    CUCINA = "CUCINA"
    BANCO = "BANCO"
    CASSA = "CASSA"
    SUPERVISORE = "SUPERVISORE"


# None = la stazione vede tutte le righe
POSTAZIONI_PER_STAZIONE: Dict[Stazione, Optional[FrozenSet[str]]] = {
    Stazione.PREPARA: frozenset({Postazione.PREPARA.value, Postazione.BANCO.value}),
    Stazione.CUCINA: frozenset({Postazione.CUCINA.value}),
    Stazione.BANCO: frozenset({Postazione.BANCO.value}),
    Stazione.CAMERIERE: None,
    Stazione.CASSA: None,
    Stazione.SUPERVISORE: None,
}


def parse_stazione(value) -> Stazione:
    """
    Raises:
        ValidationError: stazione sconosciuta
    """
    if isinstance(value, Stazione):
        return value
    try:
        return Stazione(str(value).strip().upper())
    except ValueError:
        raise ValidationError(
            detail=f"Stazione non valida: {value!r}",
            extra={"field": "stazione", "ammessi": [s.value for s in Stazione]}
        )


def proietta_per_stazione(orders: Sequence[Ordinazione], stazione: Stazione) -> List[Ordinazione]:
    """
    Ordinazioni viste da una stazione, con le sole righe di sua competenza.

    L'ordine relativo è preservato; ordinazioni senza righe per la stazione
    vengono escluse. Restituisce copie: lo snapshot in ingresso non cambia.
    """
    postazioni = POSTAZIONI_PER_STAZIONE[stazione]
    if postazioni is None:
        return [o.con_righe(o.items) for o in orders]

    proiettate = []
    for ordinazione in orders:
        righe = [i for i in ordinazione.items if i.postazione in postazioni]
        if righe:
            proiettate.append(ordinazione.con_righe(righe))
    return proiettate


def viste_stazione(orders: Sequence[Ordinazione], stazione: Stazione) -> Dict[str, List[Ordinazione]]:
    """Ricalcolo completo dei tab di una stazione su uno snapshot."""
    return raggruppa_per_tab(proietta_per_stazione(orders, stazione))
