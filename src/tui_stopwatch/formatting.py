import math
import typing as tp
from decimal import Decimal, ROUND_HALF_EVEN, ROUND_HALF_UP, localcontext

RoundingRule = tp.Literal['half_up', 'half_even']

ZERO_DISPLAY = '0.00'

_HUNDREDTH = Decimal('0.01')
_DECIMAL_ROUNDING = {
    'half_up': ROUND_HALF_UP,
    'half_even': ROUND_HALF_EVEN,
}

def formatSeconds(ms: float, rounding: RoundingRule = 'half_up') -> str:
    '''
    `12345` ms -> `"12.35"` (half_up) or `"12.34"` (half_even).
    Rounds the decimal text of `ms`, not its binary value,
    so `x.xx5` boundaries behave as they read.
    Never negative, never scientific notation.
    '''
    if not math.isfinite(ms) or ms <= 0:
        return ZERO_DISPLAY
    try:
        mode = _DECIMAL_ROUNDING[rounding]
    except KeyError:
        raise ValueError(f'Unknown rounding rule: {rounding}')
    seconds = Decimal(repr(float(ms))) / 1000
    with localcontext() as ctx:
        # integer digits plus two decimals must fit
        ctx.prec = max(ctx.prec, seconds.adjusted() + 3)
        return f'{seconds.quantize(_HUNDREDTH, rounding=mode):f}'
