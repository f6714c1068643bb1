# =============================================================================
# COMANDE v1.0
# =============================================================================
# Ciclo di vita ordinazioni e viste per postazione (cucina, bar, sala, cassa)
# =============================================================================

__version__ = "1.0.0"
