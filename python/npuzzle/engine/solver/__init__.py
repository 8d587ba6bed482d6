from npuzzle.engine.solver.astar import a_star_solve
from npuzzle.engine.solver.dfs import dfs_solve
from npuzzle.engine.solver.heuristics import manhattan_distance
from npuzzle.engine.solver.solver import Solver

__all__ = ["Solver", "a_star_solve", "dfs_solve", "manhattan_distance"]
