from .ema import Ema
from .kvo import Kvo

__all__ = [
    "Ema",
    "Kvo",
]
