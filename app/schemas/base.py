import math
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys, accepting both forms on input"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def coerce_float(value) -> float:
    """Missing, non-numeric or non-finite values become 0.0"""
    if value is None:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def coerce_count(value) -> int:
    """Counts are non-negative integers; anything else becomes 0"""
    return max(0, int(coerce_float(value)))
