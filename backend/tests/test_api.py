# =============================================================================
# COMANDE v1.0 - API TESTS
# =============================================================================
# Integration tests for HTTP endpoints (TestClient)
# =============================================================================

import pytest
from fastapi.testclient import TestClient

from factories import OrdinazioneFactory, RigaOrdinazioneFactory


pytestmark = pytest.mark.integration


class TestRoot:

    def test_root(self, client: TestClient):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["app"] == "COMANDE"

    def test_health(self, client: TestClient):
        response = client.get("/health")
        data = response.json()

        assert response.status_code == 200
        assert data["status"] == "healthy"
        assert data["promemoria"]["running"] is False


class TestVisteEndpoint:
    """Endpoint tab di postazione."""

    def test_lista_tabs(self, client: TestClient):
        response = client.get("/api/v1/viste/tabs")
        assert response.json()["data"] == ["esauriti", "attesa", "preparazione", "pronti", "ritirati"]

    def test_tab_pronti(self, client: TestClient, snapshot_misto):
        response = client.post("/api/v1/viste/pronti", json={"ordinazioni": snapshot_misto})
        data = response.json()

        assert response.status_code == 200
        assert data["success"] is True
        assert data["count"] == 2
        assert [o["id"] for o in data["data"]] == ["C_PREP_PRONTE", "D_PRONTO"]

    def test_tab_sconosciuto(self, client: TestClient, snapshot_misto):
        """Tab sconosciuto: lista vuota, nessun errore."""
        response = client.post("/api/v1/viste/archivio", json={"ordinazioni": snapshot_misto})

        assert response.status_code == 200
        assert response.json()["data"] == []
        assert response.json()["count"] == 0

    def test_conteggi(self, client: TestClient, snapshot_misto):
        response = client.post("/api/v1/viste/conteggi", json={"ordinazioni": snapshot_misto})

        assert response.json()["data"] == {
            "esauriti": 1, "attesa": 1, "preparazione": 2, "pronti": 2, "ritirati": 1,
        }

    def test_stato_non_valido(self, client: TestClient):
        """Stato sconosciuto nel record -> 422 con codice dedicato."""
        snapshot = [OrdinazioneFactory(stato="ANNULLATO")]
        response = client.post("/api/v1/viste/attesa", json={"ordinazioni": snapshot})

        assert response.status_code == 422
        detail = response.json()["detail"]
        assert detail["code"] == "STATO_NON_VALIDO"
        assert detail["valore"] == "ANNULLATO"

    def test_quantita_vuota(self, client: TestClient):
        """Riga con quantita vuota -> 400, mai una riga senza quantità."""
        dati = OrdinazioneFactory(stato="ORDINATO")
        dati["items"] = [RigaOrdinazioneFactory(stato="PRONTO", quantita="")]
        response = client.post("/api/v1/viste/pronti", json={"ordinazioni": [dati]})

        assert response.status_code == 400
        assert response.json()["detail"]["field"] == "quantita"

    def test_timestamp_fuori_intervallo(self, client: TestClient):
        response = client.post("/api/v1/viste/attesa", json={
            "ordinazioni": [OrdinazioneFactory(timestamp=10**20)],
        })

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "VALIDATION_ERROR"

    def test_filtro_per_stazione(self, client: TestClient):
        dati = OrdinazioneFactory(id="ORD_BAR", stato="ORDINATO")
        dati["items"] = [
            RigaOrdinazioneFactory(stato="INSERITO", postazione="PREPARA"),
            RigaOrdinazioneFactory(stato="INSERITO", postazione="CUCINA"),
        ]
        response = client.post("/api/v1/viste/attesa", json={"ordinazioni": [dati], "stazione": "cucina"})
        [ordinazione] = response.json()["data"]

        assert [i["postazione"] for i in ordinazione["items"]] == ["CUCINA"]

    def test_viste_stazione(self, client: TestClient, snapshot_misto):
        response = client.post("/api/v1/stazioni/supervisore/viste", json={"ordinazioni": snapshot_misto})
        data = response.json()

        assert response.status_code == 200
        assert data["stazione"] == "SUPERVISORE"
        assert [o["id"] for o in data["data"]["ritirati"]] == ["E_CONSEGNATO"]

    def test_stazione_sconosciuta(self, client: TestClient):
        response = client.post("/api/v1/stazioni/pizzeria/viste", json={"ordinazioni": []})
        assert response.status_code == 400
        assert response.json()["detail"]["code"] == "VALIDATION_ERROR"


class TestTransizioniEndpoint:
    """Validazione richieste di transizione."""

    def test_ordinazione_valida(self, client: TestClient):
        response = client.post("/api/v1/transizioni/ordinazione", json={
            "stato_attuale": "ORDINATO", "nuovo_stato": "IN_PREPARAZIONE",
        })
        assert response.status_code == 200
        assert response.json()["data"] == {"valida": True}

    def test_ordinazione_da_esaurito(self, client: TestClient):
        response = client.post("/api/v1/transizioni/ordinazione", json={
            "stato_attuale": "ORDINATO_ESAURITO", "nuovo_stato": "IN_PREPARAZIONE",
        })
        assert response.json()["data"] == {"valida": False}

    def test_riga_indietro(self, client: TestClient):
        response = client.post("/api/v1/transizioni/riga", json={
            "stato_attuale": "PRONTO", "nuovo_stato": "INSERITO",
        })
        assert response.json()["data"] == {"valida": False}

    def test_stato_non_valido(self, client: TestClient):
        response = client.post("/api/v1/transizioni/ordinazione", json={
            "stato_attuale": "ORDINATO", "nuovo_stato": "SERVITO",
        })
        assert response.status_code == 422
        assert response.json()["detail"]["campo"] == "nuovo_stato"

    def test_evento(self, client: TestClient):
        response = client.post("/api/v1/transizioni/evento", json={
            "stato_attuale": "IN_PREPARAZIONE", "evento": "MARK_READY",
        })
        assert response.json()["data"] == {"nuovo_stato": "PRONTO"}

    def test_evento_non_ammesso(self, client: TestClient):
        response = client.post("/api/v1/transizioni/evento", json={
            "stato_attuale": "CONSEGNATO", "evento": "MARK_READY",
        })
        assert response.status_code == 409
        assert response.json()["detail"]["code"] == "TRANSIZIONE_NON_VALIDA"

    def test_evento_sconosciuto(self, client: TestClient):
        response = client.post("/api/v1/transizioni/evento", json={
            "stato_attuale": "ORDINATO", "evento": "CANCEL",
        })
        assert response.status_code == 400

    def test_eventi_disponibili(self, client: TestClient):
        response = client.get("/api/v1/transizioni/eventi", params={"stato": "PRONTO"})
        assert response.json()["data"] == ["DELIVER"]


class TestEventiEndpoint:
    """Applicazione e instradamento eventi real-time."""

    def test_applica_con_viste(self, client: TestClient, snapshot_misto):
        response = client.post("/api/v1/eventi/applica", json={
            "ordinazioni": snapshot_misto,
            "evento": "order:delivered",
            "dati": {"orderId": "D_PRONTO"},
            "stazione": "CASSA",
        })
        data = response.json()

        assert response.status_code == 200
        assert data["count"] == len(snapshot_misto)
        assert data["viste"]["ritirati"] == ["D_PRONTO", "E_CONSEGNATO"]
        assert data["viste"]["pronti"] == ["C_PREP_PRONTE"]

    def test_instrada(self, client: TestClient):
        response = client.post("/api/v1/eventi/instrada", json={
            "evento": "order:new",
            "dati": {"items": [{"destination": "CUCINA"}]},
        })
        data = response.json()["data"]

        assert data["CUCINA"] == {"riceve": True, "priorita": 12}
        assert data["PREPARA"]["riceve"] is False
        assert data["CAMERIERE"]["riceve"] is False
