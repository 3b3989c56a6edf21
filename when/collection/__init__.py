from .fold import foldM, reduce, reduce_right, reduce_rightM, reduceM
from .gather import all, allM, gatherM, join, joinM, settle, settleM
from .traverse import map, mapM

__all__ = (
    # Promise
    "all",
    "join",
    "map",
    "reduce",
    "reduce_right",
    "settle",
    # Generic
    "allM",
    "foldM",
    "gatherM",
    "joinM",
    "mapM",
    "reduceM",
    "reduce_rightM",
    "settleM",
)
