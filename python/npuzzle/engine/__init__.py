from npuzzle.engine.generator import PuzzleGenerator
from npuzzle.engine.solvability import Solvability
from npuzzle.engine.solver import Solver

__all__ = ["PuzzleGenerator", "Solvability", "Solver"]
