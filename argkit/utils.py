from typing import Optional

_TRUE = ("true", "True", "y", "yes", "Y", "Yes", "1")
_FALSE = ("false", "False", "n", "no", "N", "No", "0")


def parseBool(s: str) -> Optional[bool]:
    s = s.strip()
    if s in _TRUE:
        return True
    elif s in _FALSE:
        return False
    return None

