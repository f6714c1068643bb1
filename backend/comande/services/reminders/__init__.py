# =============================================================================
# COMANDE v1.0 - REMINDERS SERVICE PACKAGE
# =============================================================================
# Promemoria prodotti pronti non ritirati
# =============================================================================

from .models import (
    ConfigPromemoria,
    ProdottoPronto,
    Promemoria,
    URGENZA_NORMALE,
    URGENZA_ALTA,
    URGENZA_CRITICA,
    etichetta_postazione,
)

from .detection import (
    calcola_urgenza,
    trova_promemoria,
    statistiche_promemoria,
)

from .scheduler import (
    GestorePromemoria,
    init_promemoria_scheduler,
    shutdown_promemoria_scheduler,
    get_promemoria_scheduler_status,
)

__all__ = [
    'ConfigPromemoria',
    'ProdottoPronto',
    'Promemoria',
    'URGENZA_NORMALE',
    'URGENZA_ALTA',
    'URGENZA_CRITICA',
    'calcola_urgenza',
    'trova_promemoria',
    'statistiche_promemoria',
    'etichetta_postazione',
    'GestorePromemoria',
    'init_promemoria_scheduler',
    'shutdown_promemoria_scheduler',
    'get_promemoria_scheduler_status',
]
