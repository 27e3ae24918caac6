from auraboard.client.board import AuraBoardClient, SignInRequired
from auraboard.client.state import BoardState

__all__ = ["AuraBoardClient", "BoardState", "SignInRequired"]
