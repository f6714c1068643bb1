# =============================================================================
# COMANDE v1.0 - REMINDERS SCHEDULER
# =============================================================================
# Invio periodico promemoria prodotti pronti non ritirati.
# Snapshot e pubblicazione sono collaboratori esterni iniettati.
# =============================================================================

import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Sequence

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger
from apscheduler.events import EVENT_JOB_ERROR, EVENT_JOB_EXECUTED

from ...config import config
from ...utils.dates import utc_now, minuti_trascorsi
from ..lifecycle.models import Ordinazione
from ..realtime.events import EventoSSE, NomeEvento
from .detection import trova_promemoria, statistiche_promemoria
from .models import ConfigPromemoria, Promemoria

# Logger
logger = logging.getLogger('comande.promemoria')

ProviderSnapshot = Callable[[], Sequence[Ordinazione]]
Publisher = Callable[[EventoSSE], None]


class GestorePromemoria:
    """
    Calcola e pubblica i promemoria, evitando invii ravvicinati
    per la stessa ordinazione (intervallo_minuti).
    """

    def __init__(
        self,
        provider: ProviderSnapshot,
        publisher: Publisher,
        cfg: Optional[ConfigPromemoria] = None
    ):
        self.provider = provider
        self.publisher = publisher
        self.cfg = cfg or ConfigPromemoria.from_config()
        self.ultimi_invii: Dict[str, datetime] = {}
        self._scheduler: Optional[BackgroundScheduler] = None

    def _troppo_presto(self, promemoria: Promemoria, adesso: datetime) -> bool:
        ultimo = self.ultimi_invii.get(promemoria.ordinazione_id)
        if ultimo is None:
            return False
        return minuti_trascorsi(ultimo, adesso) < self.cfg.intervallo_minuti

    def esegui(self, adesso: Optional[datetime] = None) -> Dict[str, int]:
        """
        Un giro completo: snapshot, ricerca, pubblicazione.

        Returns:
            Conteggi trovati/inviati e per urgenza
        """
        adesso = adesso or utc_now()
        snapshot = list(self.provider())
        self.dimentica([o.id for o in snapshot])
        trovati = trova_promemoria(snapshot, adesso, self.cfg)

        risultato = {'found': len(trovati), 'sent': 0, 'normale': 0, 'alta': 0, 'critica': 0}
        for promemoria in trovati:
            if self._troppo_presto(promemoria, adesso):
                logger.debug("Promemoria ordinazione %s gia inviato di recente",
                             promemoria.ordinazione_id)
                continue

            self.publisher(EventoSSE(
                evento=NomeEvento.NOTIFICATION_REMINDER,
                dati=promemoria.to_evento(),
                timestamp=adesso,
            ))
            self.ultimi_invii[promemoria.ordinazione_id] = adesso
            risultato['sent'] += 1
            risultato[promemoria.urgenza] += 1

            logger.info(
                f"Promemoria {promemoria.urgenza} inviato per ordinazione "
                f"{promemoria.ordinazione_id} ({promemoria.minuti_massimi_attesa}m)"
            )

        return risultato

    def statistiche(self, adesso: Optional[datetime] = None) -> Dict[str, Any]:
        """Statistiche sui promemoria dello snapshot corrente (senza inviare nulla)."""
        adesso = adesso or utc_now()
        return statistiche_promemoria(trova_promemoria(list(self.provider()), adesso, self.cfg))

    def dimentica(self, ordini_attivi: List[str]) -> None:
        """Rimuove lo storico invii delle ordinazioni non più attive."""
        attivi = set(ordini_attivi)
        self.ultimi_invii = {k: v for k, v in self.ultimi_invii.items() if k in attivi}

    # -------------------------------------------------------------------------
    # Scheduler
    # -------------------------------------------------------------------------

    def _job(self):
        try:
            return self.esegui()
        except Exception as e:
            logger.error(f"Errore job promemoria: {e}")
            raise

    def avvia(self, intervallo_sec: Optional[int] = None) -> None:
        if self._scheduler is not None:
            logger.warning("Scheduler promemoria gia in esecuzione")
            return

        intervallo = intervallo_sec or config.PROMEMORIA_INTERVALLO_SCHEDULER_SEC

        self._scheduler = BackgroundScheduler(
            timezone='Europe/Rome',
            job_defaults={
                'coalesce': True,
                'max_instances': 1,
                'misfire_grace_time': 30
            }
        )
        self._scheduler.add_listener(_job_listener, EVENT_JOB_ERROR | EVENT_JOB_EXECUTED)
        self._scheduler.add_job(
            self._job,
            trigger=IntervalTrigger(seconds=intervallo),
            id='promemoria_pronti',
            name='Promemoria prodotti pronti',
            replace_existing=True
        )
        self._scheduler.start()

        logger.info(f"Scheduler promemoria avviato (intervallo: {intervallo} secondi)")

    def ferma(self) -> None:
        if self._scheduler is not None:
            self._scheduler.shutdown(wait=False)
            self._scheduler = None
            logger.info("Scheduler promemoria fermato")

    @property
    def attivo(self) -> bool:
        return self._scheduler is not None

    def stato(self) -> dict:
        if self._scheduler is None:
            return {'running': False, 'jobs': []}

        return {
            'running': True,
            'jobs': [
                {
                    'id': job.id,
                    'name': job.name,
                    'next_run': job.next_run_time.isoformat() if job.next_run_time else None
                }
                for job in self._scheduler.get_jobs()
            ]
        }


def _job_listener(event):
    """Listener per eventi job."""
    if event.exception:
        logger.error(f"Job promemoria fallito: {event.exception}")
    else:
        logger.debug("Job promemoria completato")


# =============================================================================
# ISTANZA APPLICAZIONE
# =============================================================================

_gestore: Optional[GestorePromemoria] = None


def init_promemoria_scheduler(provider: ProviderSnapshot, publisher: Publisher) -> Optional[GestorePromemoria]:
    """
    Avvia i promemoria se abilitati in configurazione.

    Chiamata da chi integra il servizio, che fornisce snapshot e canale.
    """
    global _gestore

    if not config.PROMEMORIA_ABILITATO:
        logger.info("Promemoria non abilitati in configurazione")
        return None

    if _gestore is None:
        _gestore = GestorePromemoria(provider, publisher)
    _gestore.avvia()
    return _gestore


def shutdown_promemoria_scheduler() -> None:
    global _gestore

    if _gestore is not None:
        _gestore.ferma()
        _gestore = None


def get_promemoria_scheduler_status() -> dict:
    if _gestore is None:
        return {'running': False, 'jobs': []}
    return _gestore.stato()
