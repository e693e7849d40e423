from klotski.engine.errors import InvariantError

__all__ = ["InvariantError"]
