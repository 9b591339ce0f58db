from minilisp.types.expression import Expression, Kind, NIL, UNIT, TRUE, FALSE, boolean
from minilisp.types.environment import Environment

__all__ = ["Expression", "Kind", "Environment", "NIL", "UNIT", "TRUE", "FALSE", "boolean"]
