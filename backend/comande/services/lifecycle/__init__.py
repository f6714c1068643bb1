# =============================================================================
# COMANDE v1.0 - LIFECYCLE SERVICE PACKAGE
# =============================================================================
# Ciclo di vita ordinazioni e righe:
#   lifecycle/constants.py - enumerazioni stati, postazioni, eventi
#   lifecycle/states.py    - parsing al confine, predicati, transizioni
#   lifecycle/models.py    - Ordinazione, RigaOrdinazione
# =============================================================================

from .constants import (
    StatoOrdinazione,
    StatoRiga,
    Postazione,
    EventoOrdine,
    PIPELINE_ORDINAZIONE,
    PIPELINE_RIGA,
    TRANSIZIONI_EVENTO,
    STATI_ORDINAZIONE,
    STATI_RIGA,
)

from .states import (
    parse_stato_ordinazione,
    parse_stato_riga,
    is_terminal,
    is_exhausted,
    items_all_ready,
    valida_transizione,
    valida_transizione_riga,
    verifica_transizione,
    verifica_transizione_riga,
    transizione_per_evento,
    eventi_disponibili,
    stato_suggerito,
)

from .models import (
    Ordinazione,
    RigaOrdinazione,
    parse_ordinazioni,
)

__all__ = [
    # Constants
    'StatoOrdinazione',
    'StatoRiga',
    'Postazione',
    'EventoOrdine',
    'PIPELINE_ORDINAZIONE',
    'PIPELINE_RIGA',
    'TRANSIZIONI_EVENTO',
    'STATI_ORDINAZIONE',
    'STATI_RIGA',
    # States
    'parse_stato_ordinazione',
    'parse_stato_riga',
    'is_terminal',
    'is_exhausted',
    'items_all_ready',
    'valida_transizione',
    'valida_transizione_riga',
    'verifica_transizione',
    'verifica_transizione_riga',
    'transizione_per_evento',
    'eventi_disponibili',
    'stato_suggerito',
    # Models
    'Ordinazione',
    'RigaOrdinazione',
    'parse_ordinazioni',
]
