from icerunner.engine.gamerules.rules import Move, generate_moves, is_goal, slide

__all__ = ["Move", "generate_moves", "is_goal", "slide"]
