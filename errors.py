from typing import Optional


class LoreBotError(Exception):
    """Falla de un turno; nunca deja estado entre turnos."""

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key


class NetworkFault(LoreBotError):
    pass


class ParseFault(LoreBotError):
    pass


class LookupFault(LoreBotError):
    pass


class EncodingFault(LoreBotError):
    pass


class TurnCancelled(LoreBotError):
    pass
