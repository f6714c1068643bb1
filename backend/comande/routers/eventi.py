# =============================================================================
# COMANDE v1.0 - EVENTI ROUTER
# =============================================================================
# Applicazione aggiornamenti real-time e instradamento per stazione
# =============================================================================

from fastapi import APIRouter
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

from ..services.lifecycle import parse_ordinazioni
from ..services.realtime import applica_evento, deve_ricevere_evento, priorita_evento
from ..services.views import Stazione, parse_stazione, viste_stazione
from ..utils.response import success_response


router = APIRouter(prefix="/eventi")


class ApplicaEventoRequest(BaseModel):
    ordinazioni: List[Dict[str, Any]] = Field(default_factory=list)
    evento: str
    dati: Dict[str, Any] = Field(default_factory=dict)
    stazione: Optional[str] = None


class InstradaEventoRequest(BaseModel):
    evento: str
    dati: Dict[str, Any] = Field(default_factory=dict)
    utente_id: Optional[str] = None


@router.post("/applica")
async def applica_evento_snapshot(request: ApplicaEventoRequest):
    """
    Nuovo snapshot dopo l'evento; con `stazione` include anche i tab
    ricalcolati per quella stazione.
    """
    snapshot = applica_evento(parse_ordinazioni(request.ordinazioni), request.evento, request.dati)

    extra = {}
    if request.stazione:
        viste = viste_stazione(snapshot, parse_stazione(request.stazione))
        extra["viste"] = {tab: [o.id for o in ordini] for tab, ordini in viste.items()}

    return success_response(data=[o.to_dict() for o in snapshot], count=len(snapshot), **extra)


@router.post("/instrada")
async def instrada_evento(request: InstradaEventoRequest):
    """Per ogni stazione: se riceve l'evento e con quale priorità."""
    return success_response(data={
        stazione.value: {
            "riceve": deve_ricevere_evento(stazione, request.evento, request.dati, request.utente_id),
            "priorita": priorita_evento(stazione, request.evento),
        }
        for stazione in Stazione
    })
