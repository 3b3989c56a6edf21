from .race import RaceResult, any, anyM, some, someM

__all__ = (
    # State
    "RaceResult",
    # Promise
    "any",
    "some",
    # Generic
    "anyM",
    "someM",
)
