from npuzzle.engine.solvability.oracle import Solvability

__all__ = ["Solvability"]
