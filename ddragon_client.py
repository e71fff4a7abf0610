import logging
import unicodedata
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

import settings
from errors import EncodingFault, NetworkFault, ParseFault
from presenters import extract_lore

log = logging.getLogger("lore-bot.ddragon")

# Caracteres que romperían el segmento de ruta (no se escapan, se rechazan)
_PATH_BREAKERS = set("/\\?#")


class DDragonClient:
    """Cliente del feed estático de Data Dragon (un GET por consulta, sin caché)."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = (base_url or settings.ddragon_base_url()).rstrip("/")
        t = settings.DDRAGON_TIMEOUT if timeout is None else timeout
        self.timeout = t if t > 0 else None
        self.transport = transport

    def champion_url(self, key: str) -> str:
        if not key:
            raise EncodingFault("Texto vacío: no hay campeón que buscar", key=key)
        if key in (".", ".."):
            raise EncodingFault(f"'{key}' no es un segmento de ruta válido", key=key)
        bad = [c for c in key if c in _PATH_BREAKERS or unicodedata.category(c) in ("Cc", "Cs")]
        if bad:
            raise EncodingFault(f"Caracteres no válidos en '{key}': {bad!r}", key=key)
        return f"{self.base_url}/{quote(key, safe='')}.json"

    async def fetch_champion(self, key: str) -> Dict[str, Any]:
        url = self.champion_url(key)
        log.debug("GET %s", url)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                r = await client.get(url)
                r.raise_for_status()
        except httpx.HTTPStatusError as e:
            log.warning("ddragon: HTTP %s para %s", e.response.status_code, url)
            raise NetworkFault(f"HTTP {e.response.status_code} consultando {url}", key=key) from e
        except httpx.HTTPError as e:
            log.warning("ddragon: error de red para %s: %r", url, e)
            raise NetworkFault(f"Error de red consultando {url}: {e!r}", key=key) from e

        try:
            document = r.json()
        except ValueError as e:
            raise ParseFault(f"Respuesta no es JSON válido ({url})", key=key) from e
        if not isinstance(document, dict):
            raise ParseFault(f"Se esperaba un objeto JSON ({url})", key=key)
        return document

    async def fetch_lore(self, key: str) -> str:
        document = await self.fetch_champion(key)
        return extract_lore(document, key)
