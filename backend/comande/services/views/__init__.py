# =============================================================================
# COMANDE v1.0 - VIEWS SERVICE PACKAGE
# =============================================================================
#   views/tabs.py     - TabVista e tabella predicati
#   views/filters.py  - filter_orders_for_view, conteggi per tab
#   views/stations.py - proiezione righe per stazione
# =============================================================================

from .tabs import (
    TabVista,
    TAB_VISTE,
    PREDICATI_TAB,
    risolvi_tab,
)

from .filters import (
    filter_orders_for_view,
    raggruppa_per_tab,
    RiepilogoRighe,
    riepiloga_righe,
    conta_per_tab,
)

from .stations import (
    Stazione,
    POSTAZIONI_PER_STAZIONE,
    parse_stazione,
    proietta_per_stazione,
    viste_stazione,
)

__all__ = [
    'TabVista',
    'TAB_VISTE',
    'PREDICATI_TAB',
    'risolvi_tab',
    'filter_orders_for_view',
    'raggruppa_per_tab',
    'RiepilogoRighe',
    'riepiloga_righe',
    'conta_per_tab',
    'Stazione',
    'POSTAZIONI_PER_STAZIONE',
    'parse_stazione',
    'proietta_per_stazione',
    'viste_stazione',
]
