from typing import Any, Dict

from errors import EncodingFault, LookupFault


def extract_lore(document: Dict[str, Any], key: str) -> str:
    """Devuelve document["data"][key]["lore"] o lanza LookupFault."""
    data = document.get("data")
    if not isinstance(data, dict):
        raise LookupFault("El documento no tiene un mapa 'data'", key=key)

    record = data.get(key)
    if not isinstance(record, dict):
        raise LookupFault(f"Campeón '{key}' no encontrado", key=key)

    lore = record.get("lore")
    if not isinstance(lore, str) or not lore:
        raise LookupFault(f"Campeón '{key}' sin campo 'lore'", key=key)
    return lore


def describe_activity(activity_type) -> str:
    # ActivityTypes es un Enum de str; el canal envía el valor plano. Sin tipo: ""
    if activity_type is None:
        activity_type = ""
    return f"{getattr(activity_type, 'value', activity_type)} event detected"


def apology_for(error: Exception) -> str:
    key = getattr(error, "key", None)
    if key is not None and isinstance(error, (LookupFault, EncodingFault)):
        return f"Sorry, I don't know a champion called '{key}'."
    return "Sorry, something went wrong while looking that up. Please try again."
