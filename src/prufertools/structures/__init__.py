from .queue import EligibilityQueue

__all__ = [
    "EligibilityQueue",
]
