# =============================================================================
# COMANDE v1.0 - VIEW FILTER TESTS
# =============================================================================
# Tabella dei tab, filter_orders_for_view e conteggi
# =============================================================================

import logging
import pytest

from comande.services.lifecycle import StatoRiga, parse_ordinazioni
from comande.services.views import (
    TabVista,
    TAB_VISTE,
    risolvi_tab,
    filter_orders_for_view,
    raggruppa_per_tab,
    riepiloga_righe,
    conta_per_tab,
)

from factories import OrdinazioneFactory


pytestmark = pytest.mark.unit


def _tab_di(ordinazione):
    """Tab in cui compare una singola ordinazione."""
    return {t for t in TAB_VISTE if filter_orders_for_view([ordinazione], t)}


class TestRisolviTab:
    """Nomi dei tab."""

    def test_ordine_visualizzazione(self):
        assert TAB_VISTE == ["esauriti", "attesa", "preparazione", "pronti", "ritirati"]

    def test_confronto_esatto(self):
        assert risolvi_tab("pronti") == TabVista.PRONTI
        assert risolvi_tab("PRONTI") is None
        assert risolvi_tab("archivio") is None
        assert risolvi_tab(None) is None


class TestTabellaPredicati:
    """Un caso per ogni riga della tabella dei tab."""

    def test_ordinato_con_righe_inserite(self, crea_ordinazione):
        assert _tab_di(crea_ordinazione("ORDINATO", ["INSERITO"])) == {"attesa"}

    def test_pronto_con_righe_in_lavorazione(self, crea_ordinazione):
        assert _tab_di(crea_ordinazione("PRONTO", ["IN_LAVORAZIONE"])) == {"pronti"}

    def test_in_preparazione_tutte_pronte(self, crea_ordinazione):
        """Doppia appartenenza: preparazione e pronti."""
        o = crea_ordinazione("IN_PREPARAZIONE", ["PRONTO", "PRONTO"])
        assert _tab_di(o) == {"preparazione", "pronti"}

    def test_in_preparazione_in_corso(self, crea_ordinazione):
        o = crea_ordinazione("IN_PREPARAZIONE", ["PRONTO", "IN_LAVORAZIONE"])
        assert _tab_di(o) == {"preparazione"}

    @pytest.mark.parametrize("righe", [["INSERITO"], ["PRONTO"], ["PRONTO", "PRONTO"], []])
    def test_esaurito_solo_esauriti(self, crea_ordinazione, righe):
        """ORDINATO_ESAURITO compare solo in esauriti, qualunque siano le righe."""
        assert _tab_di(crea_ordinazione("ORDINATO_ESAURITO", righe)) == {"esauriti"}

    @pytest.mark.parametrize("righe", [["PRONTO"], ["CONSEGNATO"], ["INSERITO"]])
    def test_consegnato_solo_ritirati(self, crea_ordinazione, righe):
        assert _tab_di(crea_ordinazione("CONSEGNATO", righe)) == {"ritirati"}

    def test_ordinato_tutte_pronte(self, crea_ordinazione):
        """ORDINATO con righe già pronte: pronti per OR sulle righe."""
        assert _tab_di(crea_ordinazione("ORDINATO", ["PRONTO"])) == {"pronti"}

    def test_ordinato_senza_inserite_non_pronte(self, crea_ordinazione):
        """Nessun tab: né righe INSERITO né tutte pronte."""
        assert _tab_di(crea_ordinazione("ORDINATO", ["IN_LAVORAZIONE"])) == set()

    def test_ordinazioni_vuote(self, crea_ordinazione):
        """Senza righe la condizione "tutte pronte" è vera in modo vacuo."""
        assert _tab_di(crea_ordinazione("ORDINATO", [])) == {"pronti"}
        assert _tab_di(crea_ordinazione("IN_PREPARAZIONE", [])) == {"preparazione", "pronti"}


class TestFilterOrdersForView:
    """Proprietà del filtro."""

    def test_sottosequenza_stabile(self, snapshot_misto):
        ordini = parse_ordinazioni(snapshot_misto)
        for tab in TAB_VISTE:
            risultato = filter_orders_for_view(ordini, tab)
            indici = [ordini.index(o) for o in risultato]
            assert indici == sorted(indici)

    def test_risultati_per_tab(self, snapshot_misto):
        ordini = parse_ordinazioni(snapshot_misto)
        ids = lambda tab: [o.id for o in filter_orders_for_view(ordini, tab)]

        assert ids("attesa") == ["A_ATTESA"]
        assert ids("preparazione") == ["B_PREP", "C_PREP_PRONTE"]
        assert ids("pronti") == ["C_PREP_PRONTE", "D_PRONTO"]
        assert ids("ritirati") == ["E_CONSEGNATO"]
        assert ids("esauriti") == ["F_ESAURITO"]

    def test_snapshot_vuoto(self):
        for tab in TAB_VISTE:
            assert filter_orders_for_view([], tab) == []

    def test_tab_sconosciuto(self, snapshot_misto):
        ordini = parse_ordinazioni(snapshot_misto)
        assert filter_orders_for_view(ordini, "archivio") == []
        assert filter_orders_for_view(ordini, "") == []

    def test_input_non_modificato(self, snapshot_misto):
        ordini = parse_ordinazioni(snapshot_misto)
        copia = list(ordini)
        filter_orders_for_view(ordini, "pronti")
        assert ordini == copia

    def test_accetta_enum(self, snapshot_misto):
        ordini = parse_ordinazioni(snapshot_misto)
        assert filter_orders_for_view(ordini, TabVista.RITIRATI)[0].id == "E_CONSEGNATO"

    def test_logger_iniettato(self, caplog):
        logger = logging.getLogger("test.viste")
        with caplog.at_level(logging.DEBUG, logger="test.viste"):
            filter_orders_for_view([], "archivio", logger=logger)
        assert any("archivio" in r.getMessage() for r in caplog.records)

    def test_copertura_tab(self, snapshot_misto):
        """
        Somma dei conteggi: ogni ordinazione con un solo tab conta una
        volta, eccedenza solo per le doppie appartenenze documentate.
        """
        ordini = parse_ordinazioni(snapshot_misto)
        totale = sum(len(filter_orders_for_view(ordini, t)) for t in TAB_VISTE)
        doppie = sum(1 for o in ordini if len(_tab_di(o)) == 2)

        assert doppie == 1
        assert totale == len(ordini) + doppie


class TestConteggi:
    """raggruppa_per_tab e conta_per_tab coerenti con il filtro."""

    def test_raggruppa_coerente(self, snapshot_misto):
        ordini = parse_ordinazioni(snapshot_misto)
        gruppi = raggruppa_per_tab(ordini)

        assert list(gruppi.keys()) == TAB_VISTE
        for tab in TAB_VISTE:
            assert gruppi[tab] == filter_orders_for_view(ordini, tab)

    def test_conta_coerente(self, snapshot_misto):
        ordini = parse_ordinazioni(snapshot_misto)
        conteggi = conta_per_tab(ordini)

        for tab in TAB_VISTE:
            assert conteggi[tab] == len(filter_orders_for_view(ordini, tab))

    def test_conta_snapshot_casuale(self):
        """Riepilogo O(n) e predicati concordano su un batch generato."""
        records = []
        for stato in ("ORDINATO", "IN_PREPARAZIONE", "PRONTO", "CONSEGNATO", "ORDINATO_ESAURITO"):
            for righe in (["INSERITO"], ["PRONTO"], ["PRONTO", "IN_LAVORAZIONE"], []):
                records.append(OrdinazioneFactory.con_righe(righe, stato=stato))
        ordini = parse_ordinazioni(records)

        conteggi = conta_per_tab(ordini)
        for tab in TAB_VISTE:
            assert conteggi[tab] == len(filter_orders_for_view(ordini, tab))

    def test_riepiloga_righe(self, crea_ordinazione):
        r = riepiloga_righe(crea_ordinazione("IN_PREPARAZIONE", ["PRONTO", "PRONTO", "INSERITO"]))

        assert r.totale == 3
        assert r.conta(StatoRiga.PRONTO) == 2
        assert r.conta(StatoRiga.CONSEGNATO) == 0
        assert not r.tutte_pronte
        assert r.in_tab(TabVista.PREPARAZIONE)
        assert not r.in_tab(TabVista.PRONTI)
