# bot.py — Bot de lore de campeones (Data Dragon)
import asyncio
import logging
from typing import Optional

from botbuilder.core import ActivityHandler, MessageFactory, TurnContext
from botbuilder.schema import ActivityTypes

from ddragon_client import DDragonClient
from errors import TurnCancelled
from presenters import describe_activity

log = logging.getLogger("lore-bot.bot")


class ChampionLoreBot(ActivityHandler):
    """
    Un turno = una pasada:
    - message: el texto es la clave del campeón; responde con su lore.
    - cualquier otro tipo: responde "<tipo> event detected".
    No guarda nada entre turnos.
    """

    def __init__(self, client: Optional[DDragonClient] = None):
        self.client = client or DDragonClient()

    async def on_turn(self, turn_context: TurnContext, cancel_event: Optional[asyncio.Event] = None):
        activity = turn_context.activity
        if activity.type == ActivityTypes.message:
            await self.on_message_activity(turn_context, cancel_event)
            return
        await turn_context.send_activity(describe_activity(activity.type))

    async def on_message_activity(self, turn_context: TurnContext, cancel_event: Optional[asyncio.Event] = None):
        champion = turn_context.activity.text

        _check_cancelled(cancel_event, champion)
        lore = await self._fetch_lore(champion, cancel_event)
        _check_cancelled(cancel_event, champion)

        log.info("lore[%s]: %s", champion, lore)
        await turn_context.send_activity(MessageFactory.text(lore))

    async def _fetch_lore(self, champion: str, cancel_event: Optional[asyncio.Event]) -> str:
        if cancel_event is None:
            return await self.client.fetch_lore(champion)

        # La consulta compite con la cancelación; lo primero que termine gana
        fetch = asyncio.ensure_future(self.client.fetch_lore(champion))
        cancelled = asyncio.ensure_future(cancel_event.wait())
        try:
            await asyncio.wait({fetch, cancelled}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            pending = [t for t in (fetch, cancelled) if not t.done()]
            for t in pending:
                t.cancel()
            await asyncio.gather(*pending, return_exceptions=True)

        if cancelled.done() and not cancelled.cancelled():
            log.info("turno cancelado durante la consulta de %s", champion)
            raise TurnCancelled("Turno cancelado", key=champion)
        return fetch.result()


def _check_cancelled(cancel_event: Optional[asyncio.Event], champion: str) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise TurnCancelled("Turno cancelado", key=champion)
