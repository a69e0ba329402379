from npuzzle.engine.generator.generator import SHUFFLES_PER_CELL, BoardGenerator

__all__ = ["BoardGenerator", "SHUFFLES_PER_CELL"]
