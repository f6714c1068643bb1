# =============================================================================
# COMANDE v1.0 - REAL-TIME SNAPSHOT
# =============================================================================
# Applicazione degli aggiornamenti incrementali allo snapshot ordinazioni.
# Ogni chiamata restituisce un nuovo snapshot: nessuno stato interno.
# =============================================================================

import logging
from typing import Any, Dict, List, Optional, Sequence

from ..lifecycle.constants import StatoOrdinazione, StatoRiga
from ..lifecycle.models import Ordinazione
from ..lifecycle.states import parse_stato_ordinazione, parse_stato_riga, valida_transizione
from .events import NomeEvento

logger = logging.getLogger('comande.realtime')


def _id_ordinazione(dati: Dict[str, Any]) -> Optional[str]:
    valore = dati.get('orderId', dati.get('ordinazioneId'))
    return str(valore) if valore is not None else None


def _indice(ordini: Sequence[Ordinazione], id_ordinazione: Optional[str]) -> Optional[int]:
    for i, o in enumerate(ordini):
        if o.id == id_ordinazione:
            return i
    return None


def _ordinazione_da_evento_new(dati: Dict[str, Any]) -> Ordinazione:
    """
    order:new porta un record completo (con 'id') oppure il payload compatto
    del canale (orderId, tableNumber, items[{id, productName, quantity, destination}]).
    """
    if 'id' in dati:
        return Ordinazione.from_dict(dati)

    id_ordinazione = _id_ordinazione(dati)
    return Ordinazione.from_dict({
        'id': id_ordinazione,
        'tavolo': dati.get('tableNumber'),
        'nomeCliente': dati.get('customerName'),
        'timestamp': dati.get('timestamp'),
        'totaleCosto': dati.get('totalAmount', 0),
        'stato': StatoOrdinazione.ORDINATO,
        'items': [
            {
                'id': item.get('id'),
                'prodotto': item.get('productName', ''),
                'quantita': item.get('quantity', 1),
                'postazione': item.get('destination', ''),
                'stato': StatoRiga.INSERITO,
            }
            for item in dati.get('items') or []
        ],
    })


def _sostituisci(ordini: Sequence[Ordinazione], indice: int, nuova: Ordinazione) -> List[Ordinazione]:
    risultato = list(ordini)
    risultato[indice] = nuova
    return risultato


def _imposta_stato(ordini, dati, stato: StatoOrdinazione, nome_evento: str) -> List[Ordinazione]:
    indice = _indice(ordini, _id_ordinazione(dati))
    if indice is None:
        logger.warning("%s per ordinazione sconosciuta %s: ignorato", nome_evento, _id_ordinazione(dati))
        return list(ordini)

    # Fatti già persistiti: applicati anche se fuori pipeline
    attuale = ordini[indice].stato
    if attuale != stato and not valida_transizione(attuale, stato):
        logger.warning("%s: transizione non ammessa per ordinazione %s (%s -> %s), applicata",
                       nome_evento, ordini[indice].id, attuale.value, stato.value)
    return _sostituisci(ordini, indice, ordini[indice].con_stato(stato))


def _aggiorna_riga(ordini, dati) -> List[Ordinazione]:
    nuovo_stato = parse_stato_riga(dati.get('status', dati.get('stato')))
    id_ordinazione = _id_ordinazione(dati)
    id_riga = str(dati.get('itemId', ''))

    indice = _indice(ordini, id_ordinazione)
    if indice is None:
        logger.warning("Aggiornamento riga %s per ordinazione sconosciuta %s: ignorato",
                       id_riga, id_ordinazione)
        return list(ordini)

    ordinazione = ordini[indice]
    if not any(r.id == id_riga for r in ordinazione.items):
        logger.warning("Riga %s non trovata nell'ordinazione %s: ignorato", id_riga, id_ordinazione)
        return list(ordini)

    righe = [r.con_stato(nuovo_stato) if r.id == id_riga else r for r in ordinazione.items]
    return _sostituisci(ordini, indice, ordinazione.con_righe(righe))


def applica_evento(
    ordini: Sequence[Ordinazione],
    nome_evento: str,
    dati: Dict[str, Any]
) -> List[Ordinazione]:
    """
    Nuovo snapshot con l'aggiornamento applicato.

    Gli stati nei payload passano dal confine di validazione
    (InvalidStateError). Eventi riferiti a ordinazioni o righe sconosciute
    vengono registrati e ignorati. Cambi di stato fuori pipeline vengono
    applicati e segnalati con un warning. Eventi non di ordine lasciano lo
    snapshot invariato.
    """
    dati = dati or {}

    if nome_evento == NomeEvento.ORDER_NEW:
        nuova = _ordinazione_da_evento_new(dati)
        indice = _indice(ordini, nuova.id)
        if indice is None:
            return list(ordini) + [nuova]
        return _sostituisci(ordini, indice, nuova)

    if nome_evento == NomeEvento.ORDER_ITEM_UPDATE:
        return _aggiorna_riga(ordini, dati)

    if nome_evento in (NomeEvento.ORDER_STATUS_CHANGE, NomeEvento.ORDER_UPDATE):
        stato = parse_stato_ordinazione(dati.get('newStatus', dati.get('status')))
        return _imposta_stato(ordini, dati, stato, nome_evento)

    if nome_evento == NomeEvento.ORDER_READY:
        return _imposta_stato(ordini, dati, StatoOrdinazione.PRONTO, nome_evento)

    if nome_evento == NomeEvento.ORDER_DELIVERED:
        return _imposta_stato(ordini, dati, StatoOrdinazione.CONSEGNATO, nome_evento)

    if nome_evento == NomeEvento.ORDER_OUT_OF_STOCK:
        return _imposta_stato(ordini, dati, StatoOrdinazione.ORDINATO_ESAURITO, nome_evento)

    if nome_evento == NomeEvento.ORDER_CANCELLED:
        id_ordinazione = _id_ordinazione(dati)
        return [o for o in ordini if o.id != id_ordinazione]

    return list(ordini)
