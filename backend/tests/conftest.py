# =============================================================================
# COMANDE v1.0 - TEST CONFIGURATION
# =============================================================================
# Global fixtures e configurazioni per pytest
# =============================================================================

import pytest
from fastapi.testclient import TestClient
from typing import Callable, Generator, Dict, Any, List
import os

# Imposta ambiente di test PRIMA di importare l'app
os.environ["PROMEMORIA_ABILITATO"] = "false"

from comande.main import app
from comande.services.lifecycle import Ordinazione

from factories import OrdinazioneFactory


# =============================================================================
# CLIENT FIXTURES
# =============================================================================

@pytest.fixture(scope="session")
def client() -> Generator[TestClient, None, None]:
    """
    TestClient per chiamate API sincrone.
    Scope session per performance.
    """
    c = TestClient(app)
    yield c


# =============================================================================
# BUILDER FIXTURES
# =============================================================================

@pytest.fixture
def crea_ordinazione() -> Callable[..., Ordinazione]:
    """
    Builder di Ordinazione validate.

    Uso: crea_ordinazione("IN_PREPARAZIONE", ["PRONTO", "PRONTO"], postazione="CUCINA")
    """
    def _crea(stato: str = "ORDINATO", stati_righe: List[str] = (), **kwargs) -> Ordinazione:
        return Ordinazione.from_dict(
            OrdinazioneFactory.con_righe(list(stati_righe), stato=stato, **kwargs)
        )
    return _crea


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================

@pytest.fixture
def sample_ordinazione_data() -> Dict[str, Any]:
    """
    Record ordinazione come arriva dalla persistenza (chiavi camelCase).
    """
    return {
        "id": "ORD_TEST_001",
        "tavolo": "12",
        "nomeCliente": "Rossi",
        "timestamp": "2026-01-15T20:30:00Z",
        "totaleCosto": "18,50",
        "stato": "IN_PREPARAZIONE",
        "cameriere": "cameriere_1",
        "items": [
            {
                "id": "RIGA_TEST_001",
                "prodotto": {"nome": "Spritz"},
                "prodottoId": 7,
                "quantita": 2,
                "prezzo": 5.5,
                "stato": "PRONTO",
                "destinazione": "prepara",
                "timestamp": "2026-01-15T20:30:00Z",
                "timestampPronto": "2026-01-15T20:35:00Z",
                "glassesCount": 2,
            },
            {
                "id": "RIGA_TEST_002",
                "prodotto": "Toast",
                "quantita": 1,
                "prezzo": "7,50",
                "stato": "in_lavorazione",
                "postazione": "CUCINA",
            },
        ],
    }


@pytest.fixture
def snapshot_misto() -> List[Dict[str, Any]]:
    """
    Una ordinazione per ciascun caso della tabella dei tab, in ordine noto.
    """
    return [
        OrdinazioneFactory.con_righe(["INSERITO"], id="A_ATTESA", stato="ORDINATO"),
        OrdinazioneFactory.con_righe(["IN_LAVORAZIONE"], id="B_PREP", stato="IN_PREPARAZIONE"),
        OrdinazioneFactory.con_righe(["PRONTO", "PRONTO"], id="C_PREP_PRONTE", stato="IN_PREPARAZIONE"),
        OrdinazioneFactory.con_righe(["IN_LAVORAZIONE"], id="D_PRONTO", stato="PRONTO"),
        OrdinazioneFactory.con_righe(["PRONTO"], id="E_CONSEGNATO", stato="CONSEGNATO"),
        OrdinazioneFactory.con_righe(["INSERITO"], id="F_ESAURITO", stato="ORDINATO_ESAURITO"),
    ]


# =============================================================================
# MARKER CONFIGURATION
# =============================================================================

def pytest_configure(config):
    """
    Configura marker personalizzati.
    """
    config.addinivalue_line(
        "markers", "slow: test che richiedono più tempo"
    )
    config.addinivalue_line(
        "markers", "integration: test di integrazione (API via TestClient)"
    )
    config.addinivalue_line(
        "markers", "unit: test unitari isolati"
    )
