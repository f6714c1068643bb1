# =============================================================================
# COMANDE v1.0 - ROUTERS PACKAGE
# =============================================================================

from . import viste
from . import transizioni
from . import eventi

__all__ = [
    'viste',
    'transizioni',
    'eventi',
]
