from icerunner.engine.gamestate.state import GameState

__all__ = ["GameState"]
