from klotski.engine.movegen.moves import block_cells, can_slide, neighbors, slide

__all__ = ["block_cells", "can_slide", "neighbors", "slide"]
