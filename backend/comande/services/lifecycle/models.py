# =============================================================================
# COMANDE v1.0 - LIFECYCLE MODELS
# =============================================================================
# Dataclasses Ordinazione / RigaOrdinazione con parsing al confine
# =============================================================================

from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from ...exceptions import ValidationError
from ...utils.conversions import parse_decimal, parse_optional_int
from ...utils.dates import parse_timestamp, format_timestamp, utc_now
from ...utils.validation import validate_non_negativo, validate_quantita
from .constants import StatoOrdinazione, StatoRiga, Postazione
from .states import parse_stato_ordinazione, parse_stato_riga


def _campo(dati: Dict[str, Any], *chiavi: str, default: Any = None) -> Any:
    """Primo valore presente tra le chiavi (camelCase dei record persistiti o snake_case)."""
    for chiave in chiavi:
        if chiave in dati and dati[chiave] is not None:
            return dati[chiave]
    return default


def _parse_or_fail(parser, valore: Any, campo: str) -> Any:
    try:
        return parser(valore)
    except (ValueError, TypeError) as e:
        raise ValidationError(detail=str(e), extra={"field": campo})


def _id_obbligatorio(dati: Dict[str, Any], entita: str) -> str:
    valore = dati.get('id')
    if valore is None or str(valore).strip() == '':
        raise ValidationError(detail=f"id mancante per {entita}", extra={"field": "id"})
    return str(valore)


@dataclass
class RigaOrdinazione:
    """Riga di un'ordinazione: un prodotto destinato a una postazione."""
    id: str
    ordinazione_id: str
    prodotto: str
    quantita: int
    prezzo: Decimal
    stato: StatoRiga
    postazione: str
    timestamp: datetime = field(default_factory=utc_now)
    prodotto_id: Optional[int] = None
    note: Optional[str] = None
    glasses_count: Optional[int] = None
    configurazione: Optional[Dict[str, Any]] = None
    timestamp_pronto: Optional[datetime] = None

    @classmethod
    def from_dict(cls, dati: Dict[str, Any], ordinazione_id: Optional[str] = None) -> "RigaOrdinazione":
        """
        Costruisce una riga da un record persistito o da un payload.

        Raises:
            InvalidStateError: stato non riconosciuto
            ValidationError: id mancante, quantità non positiva, importi negativi
        """
        id_riga = _id_obbligatorio(dati, "rigaOrdinazione")

        prodotto = _campo(dati, 'prodotto', 'nome', default='')
        if isinstance(prodotto, dict):
            prodotto = prodotto.get('nome', '')

        quantita = _parse_or_fail(parse_optional_int, _campo(dati, 'quantita', default=1), 'quantita')
        validate_quantita(quantita)

        prezzo = _parse_or_fail(parse_decimal, _campo(dati, 'prezzo', default=0), 'prezzo')
        validate_non_negativo(prezzo, 'prezzo')

        glasses = _parse_or_fail(
            parse_optional_int, _campo(dati, 'glassesCount', 'glasses_count'), 'glasses_count'
        )
        validate_non_negativo(glasses, 'glasses_count')

        timestamp = _parse_or_fail(parse_timestamp, dati.get('timestamp'), 'timestamp')

        return cls(
            id=id_riga,
            ordinazione_id=str(ordinazione_id or _campo(dati, 'ordinazioneId', 'ordinazione_id', default='')),
            prodotto=str(prodotto),
            prodotto_id=_parse_or_fail(
                parse_optional_int, _campo(dati, 'prodottoId', 'prodotto_id'), 'prodotto_id'
            ),
            quantita=quantita,
            prezzo=prezzo,
            stato=parse_stato_riga(dati.get('stato')),
            postazione=str(_campo(dati, 'postazione', 'destinazione', default='')).strip().upper(),
            timestamp=timestamp or utc_now(),
            note=dati.get('note'),
            glasses_count=glasses,
            configurazione=_campo(dati, 'configurazione'),
            timestamp_pronto=_parse_or_fail(
                parse_timestamp, _campo(dati, 'timestampPronto', 'timestamp_pronto'), 'timestamp_pronto'
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'ordinazioneId': self.ordinazione_id,
            'prodotto': self.prodotto,
            'prodottoId': self.prodotto_id,
            'quantita': self.quantita,
            'prezzo': float(self.prezzo),
            'stato': self.stato.value,
            'timestamp': format_timestamp(self.timestamp),
            'postazione': self.postazione,
            'note': self.note,
            'glassesCount': self.glasses_count,
            'configurazione': self.configurazione,
            'timestampPronto': format_timestamp(self.timestamp_pronto),
        }

    def con_stato(self, stato: StatoRiga) -> "RigaOrdinazione":
        """Copia con nuovo stato (l'istanza originale non viene toccata)."""
        return replace(self, stato=stato)


@dataclass
class Ordinazione:
    """Ordinazione di un tavolo o cliente con le sue righe."""
    id: str
    stato: StatoOrdinazione
    items: List[RigaOrdinazione] = field(default_factory=list)
    totale_costo: Decimal = Decimal('0')
    timestamp: datetime = field(default_factory=utc_now)
    tavolo: Optional[str] = None
    cliente: Optional[str] = None
    note: Optional[str] = None
    cameriere: Optional[str] = None

    @property
    def has_kitchen_items(self) -> bool:
        return any(i.postazione == Postazione.CUCINA.value for i in self.items)

    @classmethod
    def from_dict(cls, dati: Dict[str, Any]) -> "Ordinazione":
        """
        Costruisce un'ordinazione (con righe) da un record persistito o da un payload.

        Accetta sia le chiavi camelCase (totaleCosto, nomeCliente, righe/items)
        sia snake_case. Le righe vengono sempre legate a questa ordinazione.

        Raises:
            InvalidStateError: stato ordinazione o riga non riconosciuto
            ValidationError: dati mancanti o valori negativi
        """
        id_ordinazione = _id_obbligatorio(dati, "ordinazione")

        totale = _parse_or_fail(
            parse_decimal, _campo(dati, 'totaleCosto', 'totale_costo', 'totale', default=0), 'totale_costo'
        )
        validate_non_negativo(totale, 'totale_costo')

        righe = _campo(dati, 'items', 'righe', default=[])
        timestamp = _parse_or_fail(parse_timestamp, dati.get('timestamp'), 'timestamp')
        tavolo = dati.get('tavolo')

        return cls(
            id=id_ordinazione,
            stato=parse_stato_ordinazione(dati.get('stato')),
            items=[RigaOrdinazione.from_dict(r, ordinazione_id=id_ordinazione) for r in righe],
            totale_costo=totale,
            timestamp=timestamp or utc_now(),
            tavolo=str(tavolo) if tavolo is not None else None,
            cliente=_campo(dati, 'nomeCliente', 'cliente'),
            note=dati.get('note'),
            cameriere=dati.get('cameriere'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'tavolo': self.tavolo,
            'cliente': self.cliente,
            'timestamp': format_timestamp(self.timestamp),
            'items': [i.to_dict() for i in self.items],
            'totaleCosto': float(self.totale_costo),
            'stato': self.stato.value,
            'hasKitchenItems': self.has_kitchen_items,
            'cameriere': self.cameriere,
            'note': self.note,
        }

    def con_stato(self, stato: StatoOrdinazione) -> "Ordinazione":
        return replace(self, stato=stato)

    def con_righe(self, items: List[RigaOrdinazione]) -> "Ordinazione":
        return replace(self, items=list(items))


def parse_ordinazioni(records: List[Dict[str, Any]]) -> List[Ordinazione]:
    """Converte una lista di record in ordinazioni validate."""
    return [Ordinazione.from_dict(r) for r in records]
