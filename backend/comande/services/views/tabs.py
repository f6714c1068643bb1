# =============================================================================
# COMANDE v1.0 - VIEW TABS
# =============================================================================
# Tab delle postazioni e tabella dichiarativa dei predicati
# =============================================================================

from enum import Enum
from typing import Callable, Dict, Optional

from ..lifecycle.constants import StatoOrdinazione, StatoRiga
from ..lifecycle.models import Ordinazione
from ..lifecycle.states import items_all_ready


class TabVista(str, Enum):
    """Tab delle schermate di postazione, nell'ordine in cui vengono mostrate."""
    ESAURITI = "esauriti"
    ATTESA = "attesa"
    PREPARAZIONE = "preparazione"
    PRONTI = "pronti"
    RITIRATI = "ritirati"


TAB_VISTE = [t.value for t in TabVista]


# =============================================================================
# PREDICATI
# =============================================================================

def _esauriti(o: Ordinazione) -> bool:
    return o.stato == StatoOrdinazione.ORDINATO_ESAURITO


def _attesa(o: Ordinazione) -> bool:
    return (
        o.stato == StatoOrdinazione.ORDINATO
        and any(i.stato == StatoRiga.INSERITO for i in o.items)
    )


def _preparazione(o: Ordinazione) -> bool:
    return o.stato == StatoOrdinazione.IN_PREPARAZIONE


def _pronti(o: Ordinazione) -> bool:
    # OR con le righe: un'ordinazione IN_PREPARAZIONE con tutte le righe
    # pronte compare sia in preparazione che in pronti.
    # ESAURITO resta esclusivo del proprio tab.
    return (
        (o.stato == StatoOrdinazione.PRONTO or items_all_ready(o.items))
        and o.stato != StatoOrdinazione.CONSEGNATO
        and o.stato != StatoOrdinazione.ORDINATO_ESAURITO
    )


def _ritirati(o: Ordinazione) -> bool:
    return o.stato == StatoOrdinazione.CONSEGNATO


PREDICATI_TAB: Dict[TabVista, Callable[[Ordinazione], bool]] = {
    TabVista.ESAURITI: _esauriti,
    TabVista.ATTESA: _attesa,
    TabVista.PREPARAZIONE: _preparazione,
    TabVista.PRONTI: _pronti,
    TabVista.RITIRATI: _ritirati,
}


def risolvi_tab(tab) -> Optional[TabVista]:
    """TabVista corrispondente (confronto esatto), None per valori sconosciuti."""
    if isinstance(tab, TabVista):
        return tab
    if not isinstance(tab, str):
        return None
    try:
        return TabVista(tab)
    except ValueError:
        return None
