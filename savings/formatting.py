import math
from decimal import Context, Decimal, ROUND_HALF_UP

CURRENCY_SYMBOL = "₹"
NOT_AVAILABLE = "N/A"

# Precisão suficiente para qualquer float finito sem notação científica
_WIDE_CONTEXT = Context(prec=400)


def _round_half_up(value: float) -> Decimal:
    """Arredonda para inteiro, empate afastando do zero (igual ao navegador)"""
    return Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP, context=_WIDE_CONTEXT)


def _group_en_in(digits: str) -> str:
    """Agrupa no padrão indiano: últimos 3 dígitos, depois de 2 em 2"""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_currency(amount: float) -> str:
    """
    Formata valor em rúpias, locale en-IN, sem casas decimais.

    Ex: 525000 -> "₹5,25,000"; -11000 -> "-₹11,000"; infinito -> "N/A"
    """
    if not math.isfinite(amount):
        return NOT_AVAILABLE
    rounded = _round_half_up(amount)
    if rounded == 0:
        return f"{CURRENCY_SYMBOL}0"
    sign = "-" if rounded < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{_group_en_in(str(abs(rounded)))}"


def format_percent(value: float) -> str:
    if not math.isfinite(value):
        return NOT_AVAILABLE
    return f"{_round_half_up(value)}%"


def format_months(months: int, net_savings: float) -> str:
    """Período de payback; N/A quando não há economia"""
    if net_savings > 0 and months > 0:
        return f"{months} months"
    return NOT_AVAILABLE
