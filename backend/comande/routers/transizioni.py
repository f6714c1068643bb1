# =============================================================================
# COMANDE v1.0 - TRANSIZIONI ROUTER
# =============================================================================
# Validazione richieste di transizione (ordinazione, riga, evento)
# =============================================================================

from fastapi import APIRouter, Query
from pydantic import BaseModel
from typing import Any

from ..exceptions import ValidationError
from ..services.lifecycle import (
    EventoOrdine,
    parse_stato_ordinazione,
    parse_stato_riga,
    valida_transizione,
    valida_transizione_riga,
    transizione_per_evento,
    eventi_disponibili,
)
from ..utils.response import success_response


router = APIRouter(prefix="/transizioni")


class TransizioneRequest(BaseModel):
    stato_attuale: Any = None
    nuovo_stato: Any = None


class EventoRequest(BaseModel):
    stato_attuale: Any = None
    evento: str


@router.post("/ordinazione")
async def valida_transizione_ordinazione(request: TransizioneRequest):
    attuale = parse_stato_ordinazione(request.stato_attuale, campo="stato_attuale")
    nuovo = parse_stato_ordinazione(request.nuovo_stato, campo="nuovo_stato")
    return success_response(
        data={"valida": valida_transizione(attuale, nuovo)},
        stato_attuale=attuale.value,
        nuovo_stato=nuovo.value
    )


@router.post("/riga")
async def valida_transizione_di_riga(request: TransizioneRequest):
    attuale = parse_stato_riga(request.stato_attuale, campo="stato_attuale")
    nuovo = parse_stato_riga(request.nuovo_stato, campo="nuovo_stato")
    return success_response(
        data={"valida": valida_transizione_riga(attuale, nuovo)},
        stato_attuale=attuale.value,
        nuovo_stato=nuovo.value
    )


@router.post("/evento")
async def applica_evento_ordinazione(request: EventoRequest):
    """Stato risultante dall'evento; 409 se l'evento non è ammesso."""
    attuale = parse_stato_ordinazione(request.stato_attuale, campo="stato_attuale")
    try:
        evento = EventoOrdine(request.evento)
    except ValueError:
        raise ValidationError(
            detail=f"Evento non valido: {request.evento}",
            extra={"field": "evento", "ammessi": [e.value for e in EventoOrdine]}
        )
    return success_response(data={"nuovo_stato": transizione_per_evento(attuale, evento).value})


@router.get("/eventi")
async def lista_eventi_disponibili(stato: str = Query(..., description="Stato ordinazione")):
    attuale = parse_stato_ordinazione(stato)
    return success_response(data=[e.value for e in eventi_disponibili(attuale)])
