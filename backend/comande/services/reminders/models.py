# =============================================================================
# COMANDE v1.0 - REMINDERS MODELS
# =============================================================================
# Dataclasses per promemoria prodotti pronti non ritirati
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Optional

from ...config import config
from ..lifecycle.constants import Postazione


URGENZA_NORMALE = 'normale'
URGENZA_ALTA = 'alta'
URGENZA_CRITICA = 'critica'

LIVELLI_URGENZA = {URGENZA_NORMALE: 1, URGENZA_ALTA: 2, URGENZA_CRITICA: 3}


def etichetta_postazione(postazione: str) -> str:
    """Nome mostrato al personale di sala."""
    return 'Bar' if postazione == Postazione.PREPARA.value else 'Cucina'


@dataclass(frozen=True)
class ConfigPromemoria:
    """Soglie in minuti per promemoria ed escalation."""
    soglia_minuti: int = 10
    escalation_minuti: int = 15
    critico_minuti: int = 20
    intervallo_minuti: int = 5
    postazioni_abilitate: FrozenSet[str] = frozenset({
        Postazione.PREPARA.value,
        Postazione.CUCINA.value,
    })

    @classmethod
    def from_config(cls) -> "ConfigPromemoria":
        return cls(
            soglia_minuti=config.PROMEMORIA_SOGLIA_MIN,
            escalation_minuti=config.PROMEMORIA_ESCALATION_MIN,
            critico_minuti=config.PROMEMORIA_CRITICO_MIN,
            intervallo_minuti=config.PROMEMORIA_INTERVALLO_MIN,
        )


@dataclass
class ProdottoPronto:
    nome: str
    quantita: int
    postazione: str
    minuti_pronti: int


@dataclass
class Promemoria:
    """Promemoria per un'ordinazione con prodotti pronti in attesa di ritiro."""
    ordinazione_id: str
    tavolo: Optional[str]
    cameriere: Optional[str]
    prodotti: List[ProdottoPronto] = field(default_factory=list)
    totale_prodotti: int = 0
    minuti_massimi_attesa: int = 0
    urgenza: str = URGENZA_NORMALE

    @property
    def postazioni(self) -> List[str]:
        visti = []
        for p in self.prodotti:
            if p.postazione not in visti:
                visti.append(p.postazione)
        return visti

    def messaggio(self) -> str:
        stazioni = ' e '.join(etichetta_postazione(s) for s in self.postazioni)
        prefisso = ''
        if self.urgenza == URGENZA_CRITICA:
            prefisso = 'CRITICO - '
        elif self.urgenza == URGENZA_ALTA:
            prefisso = 'URGENTE - '
        return (
            f"Tavolo {self.tavolo or 'Asporto'}: {prefisso}{self.totale_prodotti} prodotti "
            f"pronti da {self.minuti_massimi_attesa} minuti in {stazioni}"
        )

    def to_evento(self) -> Dict[str, Any]:
        """Payload per l'evento notification:reminder."""
        return {
            'orderId': self.ordinazione_id,
            'tableNumber': self.tavolo,
            'waiterId': self.cameriere,
            'type': 'pickup',
            'message': self.messaggio(),
            'urgency': self.urgenza,
            'waitTimeMinutes': self.minuti_massimi_attesa,
            'stations': self.postazioni,
            'items': [
                {
                    'nome': p.nome,
                    'quantita': p.quantita,
                    'postazione': p.postazione,
                    'minutiPronti': p.minuti_pronti,
                }
                for p in self.prodotti
            ],
        }
