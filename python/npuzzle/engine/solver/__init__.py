from npuzzle.engine.solver.solver import SearchLimitReached, Solution, Solver, priority

__all__ = ["SearchLimitReached", "Solution", "Solver", "priority"]
