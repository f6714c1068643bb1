# =============================================================================
# COMANDE v1.0 - LIFECYCLE STATES
# =============================================================================
# Funzioni pure sugli stati: parsing al confine, terminalità, transizioni
# =============================================================================

from typing import Any, Iterable, List, Optional, Union

from ...exceptions import InvalidStateError, TransizioneStatoError
from ...utils.validation import validate_stato
from .constants import (
    StatoOrdinazione,
    StatoRiga,
    EventoOrdine,
    PIPELINE_ORDINAZIONE,
    PIPELINE_RIGA,
    TRANSIZIONI_EVENTO,
    STATI_ORDINAZIONE,
    STATI_RIGA,
)

Stato = Union[StatoOrdinazione, StatoRiga]


# =============================================================================
# PARSING (confine di ingresso)
# =============================================================================

def _normalizza(value: Any) -> Any:
    if isinstance(value, str):
        return value.strip().upper()
    return value


def parse_stato_ordinazione(value: Any, campo: str = "stato") -> StatoOrdinazione:
    """
    Converte un valore in ingresso in StatoOrdinazione.

    Raises:
        InvalidStateError: valore non riconosciuto
    """
    if isinstance(value, StatoOrdinazione):
        return value
    value = _normalizza(value)
    if not isinstance(value, str) or validate_stato(value, STATI_ORDINAZIONE, campo):
        raise InvalidStateError(value, campo=campo, ammessi=STATI_ORDINAZIONE)
    return StatoOrdinazione(value)


def parse_stato_riga(value: Any, campo: str = "stato") -> StatoRiga:
    """
    Converte un valore in ingresso in StatoRiga.

    Raises:
        InvalidStateError: valore non riconosciuto
    """
    if isinstance(value, StatoRiga):
        return value
    value = _normalizza(value)
    if not isinstance(value, str) or validate_stato(value, STATI_RIGA, campo):
        raise InvalidStateError(value, campo=campo, ammessi=STATI_RIGA)
    return StatoRiga(value)


# =============================================================================
# PREDICATI
# =============================================================================

def is_terminal(state: Stato) -> bool:
    """CONSEGNATO è terminale sia per ordinazioni che per righe."""
    return state in (StatoOrdinazione.CONSEGNATO, StatoRiga.CONSEGNATO)


def is_exhausted(state: Stato) -> bool:
    return state == StatoOrdinazione.ORDINATO_ESAURITO


def items_all_ready(items: Iterable) -> bool:
    """
    True se tutte le righe sono PRONTO.

    Vero in modo vacuo per una lista vuota: i chiamanti che devono
    distinguere un'ordinazione senza righe lo verificano a parte.
    """
    return all(item.stato == StatoRiga.PRONTO for item in items)


# =============================================================================
# TRANSIZIONI
# =============================================================================

def valida_transizione(attuale: StatoOrdinazione, nuovo: StatoOrdinazione) -> bool:
    """
    Verifica una richiesta di transizione dell'ordinazione.

    Regole:
    - solo in avanti lungo la pipeline (salti ammessi, stesso stato no)
    - ORDINATO_ESAURITO raggiungibile solo da ORDINATO
    - da ORDINATO_ESAURITO si esce solo con correzione amministrativa esterna
    """
    if attuale == StatoOrdinazione.ORDINATO_ESAURITO:
        return False
    if nuovo == StatoOrdinazione.ORDINATO_ESAURITO:
        return attuale == StatoOrdinazione.ORDINATO
    return PIPELINE_ORDINAZIONE.index(nuovo) > PIPELINE_ORDINAZIONE.index(attuale)


def valida_transizione_riga(attuale: StatoRiga, nuovo: StatoRiga) -> bool:
    """Le righe avanzano solo in avanti (INSERITO -> ... -> CONSEGNATO)."""
    return PIPELINE_RIGA.index(nuovo) > PIPELINE_RIGA.index(attuale)


def verifica_transizione(
    attuale: StatoOrdinazione,
    nuovo: StatoOrdinazione,
    id_ordinazione: Optional[str] = None
) -> StatoOrdinazione:
    """Come valida_transizione ma solleva TransizioneStatoError."""
    if not valida_transizione(attuale, nuovo):
        raise TransizioneStatoError(attuale.value, nuovo.value, "ordinazione", id_ordinazione)
    return nuovo


def verifica_transizione_riga(
    attuale: StatoRiga,
    nuovo: StatoRiga,
    id_riga: Optional[str] = None
) -> StatoRiga:
    if not valida_transizione_riga(attuale, nuovo):
        raise TransizioneStatoError(attuale.value, nuovo.value, "rigaOrdinazione", id_riga)
    return nuovo


def transizione_per_evento(stato: StatoOrdinazione, evento: EventoOrdine) -> StatoOrdinazione:
    """
    Stato di destinazione per un evento.

    Raises:
        TransizioneStatoError: evento non ammesso nello stato corrente
    """
    destinazione = TRANSIZIONI_EVENTO[stato].get(evento)
    if destinazione is None:
        raise TransizioneStatoError(stato.value, evento.value)
    return destinazione


def eventi_disponibili(stato: StatoOrdinazione) -> List[EventoOrdine]:
    return list(TRANSIZIONI_EVENTO[stato].keys())


def stato_suggerito(ordinazione) -> Optional[StatoOrdinazione]:
    """
    Stato verso cui l'ordinazione potrebbe avanzare in base alle righe.

    Solo un suggerimento per chi chiama: il core non applica mai
    transizioni automaticamente. None se nulla da suggerire o se
    l'ordinazione non ha righe.
    """
    if not ordinazione.items:
        return None

    if items_all_ready(ordinazione.items):
        candidato = StatoOrdinazione.PRONTO
    elif any(i.stato != StatoRiga.INSERITO for i in ordinazione.items):
        candidato = StatoOrdinazione.IN_PREPARAZIONE
    else:
        return None

    if valida_transizione(ordinazione.stato, candidato):
        return candidato
    return None
