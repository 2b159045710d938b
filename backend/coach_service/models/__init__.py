from .coach import Coach

__all__ = [
    "Coach",
]
