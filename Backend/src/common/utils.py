import logging
import os
from typing import List, Optional

logger = logging.getLogger(__name__)


def env_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.lower() in {"1", "true", "yes", "on"}


def env_int(name: str, default: int) -> int:
    """Entier depuis l'environnement; valeur invalide -> default (avec un warning)."""
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    try:
        return int(val)
    except ValueError:
        logger.warning(f"[config] {name}={val!r} n'est pas un entier, on garde {default}")
        return default


def env_list(name: str, default: Optional[List[str]] = None) -> List[str]:
    # "a, b,,c" -> ["a", "b", "c"]
    val = os.getenv(name, "")
    items = [v.strip() for v in val.split(",") if v.strip()]
    return items or list(default or [])


def name_key(value: Optional[str]) -> str:
    """
    Clé de comparaison d'un nom: espaces retirés + casefold().
    "Électronique", " électronique " et "ÉLECTRONIQUE" -> "électronique"
    (SQLite ne compare sans casse que l'ASCII, d'où une clé stockée).
    """
    return (value or "").strip().casefold()
