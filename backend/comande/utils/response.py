# =============================================================================
# COMANDE v1.0 - UTILS/RESPONSE
# =============================================================================
# Builder per risposte API standardizzate
# =============================================================================

from typing import Any, Dict


def success_response(data: Any = None, message: str = None, **kwargs) -> Dict[str, Any]:
    """
    Build standard success response.

    Args:
        data: Response payload
        message: Optional message
        **kwargs: Additional fields (count, tab, etc.)

    Returns:
        Standardized success response dict
    """
    response = {"success": True}
    if data is not None:
        response["data"] = data
    if message:
        response["message"] = message
    response.update(kwargs)
    return response
