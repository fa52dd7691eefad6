from .selector import RoundRobinSelector

__all__ = ["RoundRobinSelector"]
