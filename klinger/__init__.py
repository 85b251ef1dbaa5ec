from .indicators import Ema, Kvo

__all__ = [
    "Ema",
    "Kvo",
]
