# =============================================================================
# COMANDE v1.0 - CONFIGURAZIONE
# =============================================================================
# Parametri runtime letti da variabili ambiente (.env supportato)
# =============================================================================

import os

from dotenv import load_dotenv

# Carica variabili ambiente da .env se presente
load_dotenv()


def _env_bool(nome: str, default: str = "false") -> bool:
    return os.getenv(nome, default).strip().lower() in ("1", "true", "yes", "si")


# =============================================================================
# CONFIGURAZIONE PRINCIPALE
# =============================================================================

class Settings:
    """Configurazione globale dell'applicazione."""

    # Versione
    VERSION: str = "1.0.0"
    APP_NAME: str = "COMANDE"

    # API
    API_PREFIX: str = os.getenv("API_PREFIX", "/api/v1")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )

    # Real-time (valore comunicato al trasporto esterno)
    SSE_HEARTBEAT_SEC: int = int(os.getenv("SSE_HEARTBEAT_SEC", "30"))

    # Promemoria prodotti pronti non ritirati
    PROMEMORIA_ABILITATO: bool = _env_bool("PROMEMORIA_ABILITATO")
    PROMEMORIA_INTERVALLO_SCHEDULER_SEC: int = int(
        os.getenv("PROMEMORIA_INTERVALLO_SCHEDULER_SEC", "60")
    )
    PROMEMORIA_SOGLIA_MIN: int = int(os.getenv("PROMEMORIA_SOGLIA_MIN", "10"))
    PROMEMORIA_ESCALATION_MIN: int = int(os.getenv("PROMEMORIA_ESCALATION_MIN", "15"))
    PROMEMORIA_CRITICO_MIN: int = int(os.getenv("PROMEMORIA_CRITICO_MIN", "20"))
    PROMEMORIA_INTERVALLO_MIN: int = int(os.getenv("PROMEMORIA_INTERVALLO_MIN", "5"))


# Istanza singleton
config = Settings()
