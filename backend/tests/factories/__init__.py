# =============================================================================
# COMANDE v1.0 - TEST FACTORIES
# =============================================================================
# Factory Boy factories per generazione dati di test
# =============================================================================

from .ordinazioni import OrdinazioneFactory, RigaOrdinazioneFactory

__all__ = [
    "OrdinazioneFactory",
    "RigaOrdinazioneFactory",
]
