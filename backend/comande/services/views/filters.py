# =============================================================================
# COMANDE v1.0 - VIEW FILTERS
# =============================================================================
# Partizione dello snapshot ordinazioni nei tab di postazione.
# Funzioni pure: nessun I/O, l'input non viene mai modificato.
# =============================================================================

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ..lifecycle.constants import StatoOrdinazione, StatoRiga
from ..lifecycle.models import Ordinazione
from .tabs import TabVista, PREDICATI_TAB, risolvi_tab

_logger = logging.getLogger('comande.viste')


def filter_orders_for_view(
    orders: Sequence[Ordinazione],
    tab,
    logger: Optional[logging.Logger] = None
) -> List[Ordinazione]:
    """
    Ordinazioni che appartengono al tab richiesto.

    Restituisce una sottosequenza stabile di `orders` (stesso ordine
    relativo, nessun ordinamento). Non solleva mai: un tab sconosciuto
    produce una lista vuota.

    Args:
        orders: snapshot delle ordinazioni in corso
        tab: nome del tab (str o TabVista)
        logger: logger per la diagnostica (default: comande.viste)
    """
    log = logger or _logger

    tab_vista = risolvi_tab(tab)
    if tab_vista is None:
        log.debug("Tab sconosciuto %r: nessuna ordinazione", tab)
        return []

    predicato = PREDICATI_TAB[tab_vista]
    risultato = [o for o in orders if predicato(o)]

    log.debug("Tab %s: %d/%d ordinazioni", tab_vista.value, len(risultato), len(orders))
    return risultato


def raggruppa_per_tab(orders: Sequence[Ordinazione]) -> Dict[str, List[Ordinazione]]:
    """Tutti i tab in una volta (stessa semantica di filter_orders_for_view)."""
    return {
        tab.value: [o for o in orders if predicato(o)]
        for tab, predicato in PREDICATI_TAB.items()
    }


# =============================================================================
# RIEPILOGO RIGHE (conteggi O(n))
# =============================================================================

@dataclass
class RiepilogoRighe:
    """Conteggio righe per stato di una singola ordinazione."""
    stato: StatoOrdinazione
    totale: int = 0
    per_stato: Dict[StatoRiga, int] = field(default_factory=dict)

    def conta(self, stato: StatoRiga) -> int:
        return self.per_stato.get(stato, 0)

    @property
    def tutte_pronte(self) -> bool:
        return self.conta(StatoRiga.PRONTO) == self.totale

    def in_tab(self, tab: TabVista) -> bool:
        """Stessi predicati di PREDICATI_TAB, valutati sui conteggi."""
        if tab == TabVista.ESAURITI:
            return self.stato == StatoOrdinazione.ORDINATO_ESAURITO
        if tab == TabVista.ATTESA:
            return self.stato == StatoOrdinazione.ORDINATO and self.conta(StatoRiga.INSERITO) > 0
        if tab == TabVista.PREPARAZIONE:
            return self.stato == StatoOrdinazione.IN_PREPARAZIONE
        if tab == TabVista.PRONTI:
            return (
                (self.stato == StatoOrdinazione.PRONTO or self.tutte_pronte)
                and self.stato not in (StatoOrdinazione.CONSEGNATO,
                                       StatoOrdinazione.ORDINATO_ESAURITO)
            )
        return self.stato == StatoOrdinazione.CONSEGNATO


def riepiloga_righe(ordinazione: Ordinazione) -> RiepilogoRighe:
    riepilogo = RiepilogoRighe(stato=ordinazione.stato, totale=len(ordinazione.items))
    for item in ordinazione.items:
        riepilogo.per_stato[item.stato] = riepilogo.per_stato.get(item.stato, 0) + 1
    return riepilogo


def conta_per_tab(orders: Sequence[Ordinazione]) -> Dict[str, int]:
    """Badge dei tab: numero di ordinazioni per ciascun tab."""
    conteggi = {tab.value: 0 for tab in TabVista}
    for ordinazione in orders:
        riepilogo = riepiloga_righe(ordinazione)
        for tab in TabVista:
            if riepilogo.in_tab(tab):
                conteggi[tab.value] += 1
    return conteggi
