from .window import RateWindow

__all__ = ["RateWindow"]
