# -*- coding: utf-8 -*-
"""
Net / VAT / gross arithmetic.

All results are rounded to cents with ROUND_HALF_UP, which for Decimal is
round half away from zero (-0.005 -> -0.01).
"""

import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext

from vatbot.parser.types import AmountType

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
HUNDRED = Decimal(100)
# Significant digits for money arithmetic; amounts that still do not fit
# at cent precision are booked as 0.
MONEY_PRECISION = 60
# Largest power of ten an amount may reach; leaves room for cents and a
# VAT rate up to 100%.
MAX_AMOUNT_EXPONENT = MONEY_PRECISION - 4


@dataclass(frozen=True)
class Triplet:
    net: Decimal
    vat: Decimal
    gross: Decimal


def to_decimal(value) -> Decimal:
    """Coerce to Decimal; None, NaN, infinities and garbage become 0."""
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip().replace(",", ".")) if value is not None else Decimal(0)
        except (InvalidOperation, ValueError):
            return Decimal(0)
    if not result.is_finite():
        return Decimal(0)
    return result


def round2(value) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = MONEY_PRECISION
        try:
            return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)
        except InvalidOperation:
            logger.warning(f"Amount too large to book, using 0: {value}")
            return Decimal("0.00")


def compute_triplet(amount, amount_type: AmountType, vat_rate, vat_applicable: bool) -> Triplet:
    """
    Convert a typed amount into net, VAT and gross.

    Args:
        amount: the number the user typed (non-numeric counts as 0)
        amount_type: NET if the amount excludes VAT, otherwise it is gross
        vat_rate: percent, e.g. 20
        vat_applicable: False forces VAT to 0

    Returns:
        Triplet with gross == net + vat
    """
    a = to_decimal(amount)
    if a.adjusted() > MAX_AMOUNT_EXPONENT:
        logger.warning(f"Amount too large to book, using 0: {a}")
        a = Decimal(0)

    with localcontext() as ctx:
        ctx.prec = MONEY_PRECISION
        rate = to_decimal(vat_rate) / HUNDRED if vat_applicable else Decimal(0)

        if rate <= 0:
            return Triplet(net=round2(a), vat=round2(0), gross=round2(a))

        if amount_type == AmountType.NET:
            net = round2(a)
            vat = round2(a * rate)
            return Triplet(net=net, vat=vat, gross=round2(net + vat))

        net = round2(a / (1 + rate))
        return Triplet(net=net, vat=round2(a - net), gross=round2(a))
