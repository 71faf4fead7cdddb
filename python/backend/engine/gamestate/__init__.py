from backend.engine.gamestate.state import SearchState

__all__ = ["SearchState"]
