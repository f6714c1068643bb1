# =============================================================================
# COMANDE v1.0 - SERVICES PACKAGE
# =============================================================================
#   services/lifecycle - stati, transizioni, modelli ordinazione
#   services/views     - tab di postazione e proiezione per stazione
#   services/realtime  - contratto eventi e aggiornamento snapshot
#   services/reminders - promemoria prodotti pronti
# =============================================================================
