# =============================================================================
# COMANDE v1.0 - LIFECYCLE CONSTANTS
# =============================================================================
# Stati ordinazione, stati riga, postazioni ed eventi di transizione
# =============================================================================

from enum import Enum
from typing import Dict, Tuple


class StatoOrdinazione(str, Enum):
    """
    Stato aggregato di un'ordinazione.

    Pipeline: ORDINATO -> IN_PREPARAZIONE -> PRONTO -> CONSEGNATO.
    ORDINATO_ESAURITO è uno stato laterale: ordine su prodotto non più
    disponibile, si risolve solo con correzione amministrativa esterna.
    """
    ORDINATO = "ORDINATO"
    IN_PREPARAZIONE = "IN_PREPARAZIONE"
    PRONTO = "PRONTO"
    CONSEGNATO = "CONSEGNATO"
    ORDINATO_ESAURITO = "ORDINATO_ESAURITO"


class StatoRiga(str, Enum):
    """Stato di una singola riga (INSERITO -> IN_LAVORAZIONE -> PRONTO -> CONSEGNATO)."""
    INSERITO = "INSERITO"
    IN_LAVORAZIONE = "IN_LAVORAZIONE"
    PRONTO = "PRONTO"
    CONSEGNATO = "CONSEGNATO"


class Postazione(str, Enum):
    """Postazioni di preparazione note."""
    CUCINA = "CUCINA"
    PREPARA = "PREPARA"
    BANCO = "BANCO"
    CAMERIERI = "CAMERIERI"


class EventoOrdine(str, Enum):
    """Eventi che richiedono una transizione dell'ordinazione."""
    START_PREPARATION = "START_PREPARATION"
    MARK_READY = "MARK_READY"
    DELIVER = "DELIVER"
    MARK_OUT_OF_STOCK = "MARK_OUT_OF_STOCK"


# Ordine dei passi nella pipeline (ESAURITO escluso)
PIPELINE_ORDINAZIONE: Tuple[StatoOrdinazione, ...] = (
    StatoOrdinazione.ORDINATO,
    StatoOrdinazione.IN_PREPARAZIONE,
    StatoOrdinazione.PRONTO,
    StatoOrdinazione.CONSEGNATO,
)

PIPELINE_RIGA: Tuple[StatoRiga, ...] = (
    StatoRiga.INSERITO,
    StatoRiga.IN_LAVORAZIONE,
    StatoRiga.PRONTO,
    StatoRiga.CONSEGNATO,
)

TRANSIZIONI_EVENTO: Dict[StatoOrdinazione, Dict[EventoOrdine, StatoOrdinazione]] = {
    StatoOrdinazione.ORDINATO: {
        EventoOrdine.START_PREPARATION: StatoOrdinazione.IN_PREPARAZIONE,
        EventoOrdine.MARK_OUT_OF_STOCK: StatoOrdinazione.ORDINATO_ESAURITO,
    },
    StatoOrdinazione.IN_PREPARAZIONE: {
        EventoOrdine.MARK_READY: StatoOrdinazione.PRONTO,
    },
    StatoOrdinazione.PRONTO: {
        EventoOrdine.DELIVER: StatoOrdinazione.CONSEGNATO,
    },
    StatoOrdinazione.CONSEGNATO: {},
    # Uscita solo tramite correzione amministrativa (esterna)
    StatoOrdinazione.ORDINATO_ESAURITO: {},
}

STATI_ORDINAZIONE = [s.value for s in StatoOrdinazione]
STATI_RIGA = [s.value for s in StatoRiga]
