# =============================================================================
# COMANDE v1.0 - REMINDERS DETECTION
# =============================================================================
# Ricerca prodotti pronti da troppo tempo nello snapshot ordinazioni
# =============================================================================

import math
from datetime import datetime
from typing import Any, Dict, List, Sequence

from ...utils.dates import minuti_trascorsi
from ..lifecycle.constants import StatoOrdinazione, StatoRiga
from ..lifecycle.models import Ordinazione
from .models import (
    ConfigPromemoria,
    ProdottoPronto,
    Promemoria,
    URGENZA_NORMALE,
    URGENZA_ALTA,
    URGENZA_CRITICA,
    LIVELLI_URGENZA,
    etichetta_postazione,
)


def calcola_urgenza(minuti: int, cfg: ConfigPromemoria) -> str:
    if minuti >= cfg.critico_minuti:
        return URGENZA_CRITICA
    if minuti >= cfg.escalation_minuti:
        return URGENZA_ALTA
    return URGENZA_NORMALE


def trova_promemoria(
    ordini: Sequence[Ordinazione],
    adesso: datetime,
    cfg: ConfigPromemoria
) -> List[Promemoria]:
    """
    Promemoria per righe PRONTO non ritirate oltre la soglia.

    Considera solo le postazioni abilitate e le righe con timestamp_pronto.
    Raggruppa per ordinazione, dalla riga pronta da più tempo.
    """
    candidati = []
    for ordinazione in ordini:
        if ordinazione.stato == StatoOrdinazione.CONSEGNATO:
            continue
        for riga in ordinazione.items:
            if riga.stato != StatoRiga.PRONTO or riga.timestamp_pronto is None:
                continue
            if riga.postazione not in cfg.postazioni_abilitate:
                continue
            minuti = minuti_trascorsi(riga.timestamp_pronto, adesso)
            if minuti >= cfg.soglia_minuti:
                candidati.append((riga.timestamp_pronto, ordinazione, riga, minuti))

    candidati.sort(key=lambda c: c[0])

    per_ordinazione: Dict[str, Promemoria] = {}
    for _, ordinazione, riga, minuti in candidati:
        promemoria = per_ordinazione.get(ordinazione.id)
        if promemoria is None:
            promemoria = Promemoria(
                ordinazione_id=ordinazione.id,
                tavolo=ordinazione.tavolo,
                cameriere=ordinazione.cameriere,
                urgenza=calcola_urgenza(minuti, cfg),
            )
            per_ordinazione[ordinazione.id] = promemoria

        promemoria.prodotti.append(ProdottoPronto(
            nome=riga.prodotto,
            quantita=riga.quantita,
            postazione=riga.postazione,
            minuti_pronti=minuti,
        ))
        promemoria.totale_prodotti += riga.quantita
        promemoria.minuti_massimi_attesa = max(promemoria.minuti_massimi_attesa, minuti)

        urgenza = calcola_urgenza(promemoria.minuti_massimi_attesa, cfg)
        if LIVELLI_URGENZA[urgenza] > LIVELLI_URGENZA[promemoria.urgenza]:
            promemoria.urgenza = urgenza

    return list(per_ordinazione.values())


def _arrotonda(valore: float) -> int:
    # Metà per eccesso (valori sempre non negativi)
    return math.floor(valore + 0.5)


def statistiche_promemoria(promemoria: Sequence[Promemoria]) -> Dict[str, Any]:
    """
    Riepilogo dei promemoria correnti per supervisore e dashboard.

    Returns:
        totale, conteggi per urgenza, attesa media/massima (minuti) e
        postazioni ordinate per attesa media pesata sulle quantità
    """
    per_urgenza = {livello: 0 for livello in LIVELLI_URGENZA}
    for p in promemoria:
        per_urgenza[p.urgenza] += 1

    attese = [p.minuti_massimi_attesa for p in promemoria]

    per_postazione: Dict[str, Dict[str, int]] = {}
    for p in promemoria:
        for prodotto in p.prodotti:
            voce = per_postazione.setdefault(prodotto.postazione, {'quantita': 0, 'minuti': 0})
            voce['quantita'] += prodotto.quantita
            voce['minuti'] += prodotto.minuti_pronti * prodotto.quantita

    postazioni = [
        {
            'postazione': postazione,
            'etichetta': etichetta_postazione(postazione),
            'quantita': voce['quantita'],
            'media_minuti': _arrotonda(voce['minuti'] / voce['quantita']),
        }
        for postazione, voce in per_postazione.items()
        if voce['quantita'] > 0
    ]
    postazioni.sort(key=lambda s: s['media_minuti'], reverse=True)

    return {
        'totale': len(promemoria),
        'per_urgenza': per_urgenza,
        'media_attesa': _arrotonda(sum(attese) / len(attese)) if attese else 0,
        'massima_attesa': max(attese) if attese else 0,
        'postazioni_in_ritardo': postazioni,
    }
