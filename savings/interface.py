import math
from abc import ABC, abstractmethod
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, field_serializer

Number = Union[int, float]


class FiniteJsonModel(BaseModel):
    """Modelo cujos floats infinitos/NaN saem como null no JSON"""

    @field_serializer("*", mode="wrap", when_used="json")
    def serialize_finite(self, value, handler):
        result = handler(value)
        if isinstance(result, float) and not math.isfinite(result):
            return None
        return result


class CalculatorInputs(BaseModel):
    """Entradas informadas pelo restaurante"""
    orders_per_day: Number = 50
    average_order_value: Number = 350
    commission_rate: Number = 25  # % retido pela plataforma


class DerivedMetrics(FiniteJsonModel):
    """
    Métricas mensais derivadas das entradas (sempre recalculadas por inteiro).

    O cálculo sempre preenche floats; None só aparece depois do JSON, quando
    um valor estoura o limite do float.
    """
    model_config = ConfigDict(frozen=True)

    monthly_revenue: Optional[float]
    commission_paid: Optional[float]
    own_system_cost: float
    net_savings: Optional[float]
    suggested_website_cost: Optional[float]
    suggested_maintenance_cost: float


class ISavingsCalculator(ABC):
    """
    Interface para calculadoras de economia ao trocar a plataforma de delivery
    por um sistema de pedidos próprio.

    O método derive() é puro: mesmas entradas, mesmas métricas. Os demais
    métodos são derivações de apresentação calculadas a partir das métricas,
    nunca armazenadas.
    """

    DAYS_PER_MONTH = 30

    def __init__(self, system: str):
        self.system = system

    @abstractmethod
    def derive(self, inputs: CalculatorInputs) -> DerivedMetrics:
        """
        Calcula as métricas mensais.

        Args:
            inputs: Pedidos/dia, ticket médio e comissão (%)

        Returns:
            DerivedMetrics completo
        """
        pass

    def monthly_orders(self, inputs: CalculatorInputs) -> Number:
        return inputs.orders_per_day * self.DAYS_PER_MONTH

    def daily_revenue(self, inputs: CalculatorInputs) -> Number:
        return inputs.orders_per_day * inputs.average_order_value

    def savings_percentage(self, metrics: DerivedMetrics) -> float:
        """% da comissão atual que deixa de ser paga"""
        if metrics.commission_paid > 0:
            percentage = max(0, metrics.net_savings) / metrics.commission_paid * 100
            if math.isfinite(percentage):
                return percentage
        return 0

    def payback_months(self, metrics: DerivedMetrics) -> int:
        """
        Meses inteiros de economia para recuperar o investimento no site.

        Returns:
            Número de meses, ou 0 quando não há economia ou o valor estoura
            (exibido como N/A)
        """
        if metrics.net_savings > 0:
            months = metrics.suggested_website_cost / metrics.net_savings
            if math.isfinite(months):
                return math.ceil(months)
        return 0

    def progress_value(self, metrics: DerivedMetrics) -> float:
        """Valor da barra de progresso, sempre entre 0 e 100"""
        return min(100, max(0, self.savings_percentage(metrics)))

    def total_own_system_cost(self, metrics: DerivedMetrics) -> float:
        return metrics.own_system_cost + metrics.suggested_maintenance_cost

    def annual_savings(self, metrics: DerivedMetrics) -> float:
        return max(0, metrics.net_savings * 12)

    def annual_profit(self, metrics: DerivedMetrics) -> float:
        return metrics.net_savings * 12

    def first_year_roi(self, metrics: DerivedMetrics) -> Optional[float]:
        """ROI de 12 meses em %, ou None quando não há investimento (ou estoura)"""
        if metrics.suggested_website_cost > 0:
            roi = metrics.net_savings * 12 / metrics.suggested_website_cost * 100
            if math.isfinite(roi):
                return roi
        return None
