# -*- coding: utf-8 -*-
"""
Estado da calculadora de economia.

Guarda as três entradas numéricas e o flag de exibição do detalhamento.
Qualquer alteração de entrada recalcula todas as métricas na hora, e o
objeto de métricas é substituído por inteiro.
"""

import logging
import math
import re
import sys
from typing import Any, Optional

from savings.calculator import calculator as default_calculator
from savings.interface import CalculatorInputs, DerivedMetrics, ISavingsCalculator, Number

logger = logging.getLogger(__name__)

DEFAULT_ORDERS_PER_DAY = 50
DEFAULT_AVERAGE_ORDER_VALUE = 350
DEFAULT_COMMISSION_RATE = 25

# Mesmo formato aceito por um campo numérico do navegador
_NUMERIC_TEXT = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")


def coerce_number(value: Any) -> float:
    """
    Converte o valor digitado em número; qualquer coisa inválida vira 0.

    Args:
        value: Número ou texto bruto do campo

    Returns:
        float finito (a exibição cuida de mostrar 50.0 como 50)
    """
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, int):
        if abs(value) > sys.float_info.max:
            return 0.0
        number = float(value)
    elif isinstance(value, float):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if not _NUMERIC_TEXT.match(text):
            return 0.0
        number = float(text)
    else:
        return 0.0

    if not math.isfinite(number):
        return 0.0
    return number


class CalculatorSession:
    """
    Sessão de uso da calculadora (uma por página aberta).

    Não há persistência: a sessão nasce com os valores padrão e é descartada
    quando a página fecha.
    """

    def __init__(self, calculator: Optional[ISavingsCalculator] = None):
        self.calculator = calculator or default_calculator
        self.show_breakdown = False
        self._inputs = CalculatorInputs(
            orders_per_day=DEFAULT_ORDERS_PER_DAY,
            average_order_value=DEFAULT_AVERAGE_ORDER_VALUE,
            commission_rate=DEFAULT_COMMISSION_RATE,
        )
        self._metrics = self.calculator.derive(self._inputs)

    @property
    def inputs(self) -> CalculatorInputs:
        return self._inputs

    @property
    def metrics(self) -> DerivedMetrics:
        return self._metrics

    def set_orders_per_day(self, value: Any) -> DerivedMetrics:
        return self._update(orders_per_day=coerce_number(value))

    def set_average_order_value(self, value: Any) -> DerivedMetrics:
        return self._update(average_order_value=coerce_number(value))

    def set_commission_rate(self, value: Number) -> DerivedMetrics:
        """O slider garante a faixa [15, 35]; o valor é guardado como veio"""
        return self._update(commission_rate=value)

    def toggle_breakdown(self) -> bool:
        self.show_breakdown = not self.show_breakdown
        return self.show_breakdown

    def _update(self, **changes) -> DerivedMetrics:
        inputs = self._inputs.model_copy(update=changes)
        metrics = self.calculator.derive(inputs)

        # Troca entradas e métricas juntas
        self._inputs, self._metrics = inputs, metrics
        logger.debug(
            f"Recalculado: {inputs.orders_per_day} pedidos/dia, ticket {inputs.average_order_value}, "
            f"comissão {inputs.commission_rate}% -> economia {metrics.net_savings}"
        )
        return metrics
