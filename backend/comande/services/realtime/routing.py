# =============================================================================
# COMANDE v1.0 - REAL-TIME STATION ROUTING
# =============================================================================
# Quali eventi riceve ogni stazione e con quale priorità
# =============================================================================

from dataclasses import dataclass
from typing import Any, Callable, Dict, FrozenSet, Optional

from ..views.stations import Stazione
from .events import NomeEvento


@dataclass(frozen=True)
class FiltroStazione:
    tipi_evento: FrozenSet[str]
    filtro: Optional[Callable[[str, Dict[str, Any]], bool]] = None


def _filtro_cameriere(nome: str, dati: Dict[str, Any]) -> bool:
    # Solo ordini propri o senza cameriere assegnato
    if nome.startswith('order:'):
        return not dati.get('waiterId') or dati.get('waiterId') == dati.get('currentUserId')
    return True


def _filtro_postazione(postazione: str) -> Callable[[str, Dict[str, Any]], bool]:
    def filtro(nome: str, dati: Dict[str, Any]) -> bool:
        if nome in (NomeEvento.ORDER_NEW, NomeEvento.ORDER_SENT):
            return any(i.get('destination') == postazione for i in dati.get('items') or [])
        if nome == NomeEvento.ORDER_ITEM_UPDATE:
            return dati.get('destination') == postazione
        return True
    return filtro


def _filtro_cassa(nome: str, dati: Dict[str, Any]) -> bool:
    if nome in (NomeEvento.ORDER_DELIVERED, NomeEvento.ORDER_READY):
        return dati.get('status') in ('CONSEGNATO', 'PRONTO')
    return True


def _filtro_supervisore(nome: str, dati: Dict[str, Any]) -> bool:
    # Sotto carico passano solo eventi non a bassa priorità
    carico = dati.get('systemLoad')
    return dati.get('priority') != 'low' or (carico is not None and carico < 0.8)


_EVENTI_PREPARAZIONE = frozenset({
    NomeEvento.ORDER_NEW,
    NomeEvento.ORDER_SENT,
    NomeEvento.ORDER_ITEM_UPDATE,
    NomeEvento.ORDER_CANCELLED,
    NomeEvento.NOTIFICATION_REMINDER,
})

FILTRI_STAZIONE: Dict[Stazione, FiltroStazione] = {
    Stazione.CAMERIERE: FiltroStazione(
        frozenset({
            NomeEvento.ORDER_READY,
            NomeEvento.ORDER_DELIVERED,
            NomeEvento.ORDER_PAID,
            NomeEvento.ORDER_UPDATE,
            NomeEvento.NOTIFICATION_NEW,
            NomeEvento.SYSTEM_ANNOUNCEMENT,
        }),
        _filtro_cameriere,
    ),
    Stazione.PREPARA: FiltroStazione(_EVENTI_PREPARAZIONE, _filtro_postazione('PREPARA')),
    Stazione.CUCINA: FiltroStazione(_EVENTI_PREPARAZIONE, _filtro_postazione('CUCINA')),
    Stazione.BANCO: FiltroStazione(_EVENTI_PREPARAZIONE, _filtro_postazione('BANCO')),
    Stazione.CASSA: FiltroStazione(
        frozenset({
            NomeEvento.ORDER_DELIVERED,
            NomeEvento.ORDER_READY,
            NomeEvento.ORDER_PAID,
            NomeEvento.NOTIFICATION_NEW,
            NomeEvento.SYSTEM_ANNOUNCEMENT,
        }),
        _filtro_cassa,
    ),
    Stazione.SUPERVISORE: FiltroStazione(
        frozenset({
            NomeEvento.ORDER_NEW,
            NomeEvento.ORDER_UPDATE,
            NomeEvento.ORDER_READY,
            NomeEvento.ORDER_DELIVERED,
            NomeEvento.ORDER_PAID,
            NomeEvento.ORDER_CANCELLED,
            NomeEvento.NOTIFICATION_NEW,
            NomeEvento.SYSTEM_ANNOUNCEMENT,
            NomeEvento.USER_ACTIVITY,
            NomeEvento.STATION_STATUS,
        }),
        _filtro_supervisore,
    ),
}


def deve_ricevere_evento(
    stazione: Stazione,
    nome_evento: str,
    dati: Dict[str, Any],
    utente_id: Optional[str] = None
) -> bool:
    """True se l'evento va inoltrato alla stazione."""
    filtro = FILTRI_STAZIONE[stazione]

    if nome_evento not in filtro.tipi_evento:
        return False

    if filtro.filtro:
        return filtro.filtro(nome_evento, {**(dati or {}), 'currentUserId': utente_id})

    return True


PRIORITA_BASE: Dict[str, int] = {
    NomeEvento.ORDER_NEW: 10,
    NomeEvento.ORDER_READY: 9,
    NomeEvento.ORDER_DELIVERED: 8,
    NomeEvento.NOTIFICATION_REMINDER: 7,
    NomeEvento.ORDER_UPDATE: 6,
    NomeEvento.NOTIFICATION_NEW: 5,
    NomeEvento.SYSTEM_ANNOUNCEMENT: 4,
    NomeEvento.USER_ACTIVITY: 2,
    NomeEvento.SYSTEM_HEARTBEAT: 1,
}
PRIORITA_DEFAULT = 3


def priorita_evento(stazione: Stazione, nome_evento: str) -> int:
    """Punteggio di priorità: base evento + bonus per le stazioni interessate."""
    base = PRIORITA_BASE.get(nome_evento, PRIORITA_DEFAULT)

    if stazione in (Stazione.PREPARA, Stazione.CUCINA, Stazione.BANCO):
        bonus = 2 if ('new' in nome_evento or 'sent' in nome_evento) else 0
    elif stazione == Stazione.CAMERIERE:
        bonus = 2 if ('ready' in nome_evento or 'delivered' in nome_evento) else 0
    elif stazione == Stazione.CASSA:
        bonus = 2 if ('delivered' in nome_evento or 'paid' in nome_evento) else 0
    else:
        bonus = 1

    return base + bonus
