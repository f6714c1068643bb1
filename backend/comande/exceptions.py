# =============================================================================
# COMANDE v1.0 - ECCEZIONI CENTRALIZZATE
# =============================================================================
# Sistema di eccezioni custom per gestione errori uniforme
# =============================================================================

from fastapi import HTTPException
from typing import Optional, Dict, Any, Iterable


class ComandeException(Exception):
    """
    Eccezione base per COMANDE.

    Tutte le eccezioni custom devono estendere questa classe.
    Fornisce conversione automatica a HTTPException.
    """
    status_code: int = 500
    code: str = "INTERNAL_ERROR"
    detail: str = "Errore interno del server"

    def __init__(self, detail: Optional[str] = None, extra: Dict[str, Any] = None):
        self.detail = detail or self.__class__.detail
        self.extra = extra or {}
        super().__init__(self.detail)

    def to_http_exception(self) -> HTTPException:
        """Converte in HTTPException per FastAPI."""
        return HTTPException(
            status_code=self.status_code,
            detail={
                "code": self.code,
                "message": self.detail,
                **self.extra
            }
        )

    def to_dict(self) -> Dict[str, Any]:
        """Converte in dizionario per logging."""
        return {
            "code": self.code,
            "status_code": self.status_code,
            "message": self.detail,
            **self.extra
        }


# =============================================================================
# ECCEZIONI HTTP STANDARD
# =============================================================================

class ValidationError(ComandeException):
    """Errore di validazione dati (400)."""
    status_code = 400
    code = "VALIDATION_ERROR"
    detail = "Errore di validazione"


class ConflictError(ComandeException):
    """Conflitto con stato attuale (409)."""
    status_code = 409
    code = "CONFLICT"
    detail = "Conflitto con lo stato attuale della risorsa"


# =============================================================================
# ECCEZIONI DOMINIO - STATI ORDINAZIONE
# =============================================================================

class InvalidStateError(ValidationError):
    """
    Valore di stato non riconosciuto.

    Sollevata solo al confine di ingresso dei dati (deserializzazione di
    record persistiti o payload in arrivo), mai dentro i filtri vista.
    """
    status_code = 422
    code = "STATO_NON_VALIDO"
    detail = "Valore di stato non riconosciuto"

    def __init__(self, valore: Any, campo: str = "stato", ammessi: Iterable[str] = ()):
        ammessi = list(ammessi)
        super().__init__(
            detail=f"{campo} non valido: {valore!r}",
            extra={"campo": campo, "valore": str(valore), "ammessi": ammessi}
        )
        self.valore = valore
        self.campo = campo


class TransizioneStatoError(ConflictError):
    """Transizione di stato non valida."""
    code = "TRANSIZIONE_NON_VALIDA"
    detail = "Transizione di stato non valida"

    def __init__(self, stato_attuale: str, nuovo_stato: str,
                 entita: str = "ordinazione", id_entita: Optional[str] = None):
        riferimento = f" {id_entita}" if id_entita else ""
        super().__init__(
            detail=f"Transizione di stato non valida per {entita}{riferimento}: "
                   f"da {stato_attuale} a {nuovo_stato}",
            extra={
                "stato_attuale": stato_attuale,
                "nuovo_stato": nuovo_stato,
                "entita": entita,
            }
        )
        self.stato_attuale = stato_attuale
        self.nuovo_stato = nuovo_stato
        self.entita = entita


class ValoreNegativoError(ValidationError):
    """Importo o quantità negativa."""
    code = "VALORE_NEGATIVO"
    detail = "Importi e quantità non possono essere negativi"
