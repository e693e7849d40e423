from klotski.engine.normalizer.normalizer import normalize

__all__ = ["normalize"]
