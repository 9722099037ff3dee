from typing import Optional
import uuid

def mint_player_id() -> str:
    return uuid.uuid4().hex

def resolve_player_id(token: Optional[str]) -> str:
    """Reuse the client-supplied token exactly as given, otherwise mint a fresh id."""
    if token:
        return token
    return mint_player_id()
