# =============================================================================
# COMANDE v1.0 - VISTE ROUTER
# =============================================================================
# Endpoint per tab di postazione e viste per stazione.
# Lo snapshot arriva nel body: la persistenza è un collaboratore esterno.
# =============================================================================

from fastapi import APIRouter
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional

from ..services.lifecycle import parse_ordinazioni
from ..services.views import (
    TAB_VISTE,
    filter_orders_for_view,
    conta_per_tab,
    parse_stazione,
    proietta_per_stazione,
    viste_stazione,
)
from ..utils.response import success_response


router = APIRouter()


# =============================================================================
# MODELLI PYDANTIC
# =============================================================================

class SnapshotRequest(BaseModel):
    ordinazioni: List[Dict[str, Any]] = Field(default_factory=list)
    stazione: Optional[str] = None


def _snapshot(request: SnapshotRequest):
    ordini = parse_ordinazioni(request.ordinazioni)
    if request.stazione:
        ordini = proietta_per_stazione(ordini, parse_stazione(request.stazione))
    return ordini


# =============================================================================
# TAB
# =============================================================================

@router.get("/viste/tabs")
async def lista_tabs():
    """Nomi dei tab, nell'ordine di visualizzazione."""
    return success_response(data=TAB_VISTE)


@router.post("/viste/conteggi")
async def conteggi_tabs(request: SnapshotRequest):
    """Numero di ordinazioni per ciascun tab (badge)."""
    return success_response(data=conta_per_tab(_snapshot(request)))


@router.post("/viste/{tab}")
async def ordinazioni_per_tab(tab: str, request: SnapshotRequest):
    """
    Ordinazioni del tab richiesto, nell'ordine dello snapshot.

    Tab sconosciuto: lista vuota (nessun errore).
    """
    filtrate = filter_orders_for_view(_snapshot(request), tab)
    return success_response(
        data=[o.to_dict() for o in filtrate],
        count=len(filtrate),
        tab=tab
    )


# =============================================================================
# STAZIONI
# =============================================================================

@router.post("/stazioni/{stazione}/viste")
async def viste_per_stazione(stazione: str, request: SnapshotRequest):
    """Tutti i tab di una stazione, ricalcolati sullo snapshot."""
    viste = viste_stazione(parse_ordinazioni(request.ordinazioni), parse_stazione(stazione))
    return success_response(
        data={tab: [o.to_dict() for o in ordini] for tab, ordini in viste.items()},
        stazione=parse_stazione(stazione).value
    )
