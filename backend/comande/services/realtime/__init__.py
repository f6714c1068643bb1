# =============================================================================
# COMANDE v1.0 - REAL-TIME SERVICE PACKAGE
# =============================================================================
# Contratto con il canale di aggiornamento (il trasporto è esterno):
#   realtime/events.py   - nomi evento, EventoSSE, frame SSE
#   realtime/routing.py  - filtri e priorità eventi per stazione
#   realtime/snapshot.py - applicazione aggiornamenti allo snapshot
# =============================================================================

from .events import (
    NomeEvento,
    NOMI_EVENTO,
    HEARTBEAT_FRAME,
    EventoSSE,
    formatta_sse,
)

from .routing import (
    FiltroStazione,
    FILTRI_STAZIONE,
    deve_ricevere_evento,
    priorita_evento,
)

from .snapshot import applica_evento

__all__ = [
    'NomeEvento',
    'NOMI_EVENTO',
    'HEARTBEAT_FRAME',
    'EventoSSE',
    'formatta_sse',
    'FiltroStazione',
    'FILTRI_STAZIONE',
    'deve_ricevere_evento',
    'priorita_evento',
    'applica_evento',
]
