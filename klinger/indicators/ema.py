from decimal import Decimal


# Exponential Moving Average seeded from zero rather than from the first price.
class Ema:
    value: Decimal = Decimal("0.0")
    _a: Decimal
    _a_inv: Decimal

    def __init__(self, period: int) -> None:
        if period < 0:
            raise ValueError(f"Invalid period ({period})")

        # Decay calculated in terms of span.
        self.set_smoothing_factor(Decimal("2.0") / (period + 1))

    @property
    def smoothing_factor(self) -> Decimal:
        return self._a

    @property
    def smoothing_complement(self) -> Decimal:
        return self._a_inv

    def set_smoothing_factor(self, a: Decimal) -> None:
        self._a = a
        self._a_inv = 1 - self._a

    def update(self, price: Decimal) -> Decimal:
        self.value = self._a_inv * self.value + self._a * price
        return self.value

    def reset(self) -> None:
        self.value = Decimal("0.0")
