from icerunner.engine.gamesolver.search import breadth_first_search
from icerunner.engine.gamesolver.solver import Solver

__all__ = ["Solver", "breadth_first_search"]
