import logging
from decimal import Decimal, DivisionByZero, InvalidOperation, localcontext
from typing import Optional, Union

from .ema import Ema

_log = logging.getLogger(__name__)

Real = Union[Decimal, float, int]


# Klinger Volume Oscillator
class Kvo:
    value: Optional[Decimal] = None

    _short_ema: Ema
    _long_ema: Ema
    _short_period: int
    _long_period: int

    _prev_hlc: Decimal = Decimal("0.0")
    # `None` until the first bar has been seen. A legitimate range can be zero.
    _prev_dm: Optional[Decimal] = None
    _prev_trend: int = 0
    _prev_cm: Decimal = Decimal("0.0")

    _t: int = 0
    _t1: int = 2

    def __init__(self, short_period: int, long_period: int) -> None:
        if short_period < 0:
            raise ValueError(f"Invalid short period ({short_period})")
        if long_period < 0:
            raise ValueError(f"Invalid long period ({long_period})")

        self._short_period = short_period
        self._long_period = long_period
        self._short_ema = Ema(short_period)
        self._long_ema = Ema(long_period)

    @property
    def short_period(self) -> int:
        return self._short_period

    @property
    def long_period(self) -> int:
        return self._long_period

    @property
    def maturity(self) -> int:
        return self._t1

    @property
    def mature(self) -> bool:
        return self._t >= self._t1

    def update(self, high: Real, low: Real, close: Real, volume: Real) -> Optional[Decimal]:
        self._t = min(self._t + 1, self._t1)

        with localcontext() as ctx:
            ctx.traps[DivisionByZero] = False
            ctx.traps[InvalidOperation] = False

            hlc = sum(map(_to_decimal, (high, low, close)), Decimal("0.0"))
            dm = _to_decimal(high) - _to_decimal(low)

            if self._prev_dm is None:
                self.value = None
            else:
                trend = 1 if hlc > self._prev_hlc else -1
                if trend != self._prev_trend:
                    cm = self._prev_dm + dm
                else:
                    cm = self._prev_cm + dm

                vf = 100 * _to_decimal(volume) * trend * abs(2 * (dm / cm - 1))

                short_vf = self._short_ema.update(vf)
                long_vf = self._long_ema.update(vf)
                self.value = short_vf - long_vf

                _log.debug(
                    f"hlc {hlc} cm {cm} trend {trend} vf {vf} short {short_vf} long {long_vf} "
                    f"kvo {self.value}"
                )

                self._prev_cm = cm
                self._prev_trend = trend

            self._prev_dm = dm
            self._prev_hlc = hlc

        return self.value

    next = update

    def reset(self) -> None:
        self.value = None
        self._prev_hlc = Decimal("0.0")
        self._prev_dm = None
        # Construction leaves the trend at 0. If the first trend after a reset is down it does not
        # count as a reversal, unlike the first downtrend after construction.
        self._prev_trend = -1
        self._prev_cm = Decimal("0.0")
        self._short_ema.reset()
        self._long_ema.reset()
        self._t = 0


def _to_decimal(value: Real) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # Go through the shortest repr so that 82.15 becomes Decimal("82.15").
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)
