from .unfold import iterate, iterateM, unfold, unfoldM

__all__ = (
    # Promise
    "iterate",
    "unfold",
    # Generic
    "iterateM",
    "unfoldM",
)
