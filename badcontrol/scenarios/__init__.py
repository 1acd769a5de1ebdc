from .gender import GENDER
from .sign_reversal import SIGN_REVERSAL
from .selection import SELECTION

ALL = [GENDER, SIGN_REVERSAL, SELECTION]

__all__ = ["GENDER", "SIGN_REVERSAL", "SELECTION", "ALL"]
