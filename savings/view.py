"""
Montagem da tela da calculadora.

Transforma a sessão (entradas + métricas) no modelo que a camada de
renderização consome: cards, gráfico, barra de progresso, resumo do
investimento e detalhamento. Os valores de apresentação são recalculados
a cada chamada, nunca guardados.
"""
import math
from typing import List, Optional

from savings.formatting import format_currency, format_months, format_percent
from savings.interface import CalculatorInputs, DerivedMetrics, FiniteJsonModel
from savings.session import CalculatorSession

PLATFORM_COMMISSION_COLOR = "#EF4444"
OWN_SYSTEM_COLOR = "#10B981"
SAVINGS_COLOR = "#3B82F6"

DISCLAIMER = "Calculations are estimates based on provided inputs. Actual costs may vary."


class QuickStats(FiniteJsonModel):
    monthly_orders: Optional[float]
    daily_revenue: Optional[float]
    daily_revenue_display: str


class MetricCard(FiniteJsonModel):
    label: str
    value: Optional[float]  # None = estourou
    display: str


class SavingsProgress(FiniteJsonModel):
    """Painel 'Savings Potential' (só existe com economia positiva)"""
    percentage: float
    percentage_display: str
    progress_value: float  # 0..100
    caption: str


class InvestmentItem(FiniteJsonModel):
    label: str
    badge: str
    value: Optional[float]
    display: str


class ChartSlice(FiniteJsonModel):
    name: str
    value: Optional[float]
    color: str
    share_percent: float
    display: str


class InvestmentSummary(FiniteJsonModel):
    """Painel 'Investment Opportunity' (só existe com economia positiva)"""
    investment: str
    monthly_savings: str
    payback_months: int
    payback_display: str
    after_recovery: str
    annual_profit: str


class BreakdownLine(FiniteJsonModel):
    label: str
    display: str
    emphasis: bool = False


class BreakdownSection(FiniteJsonModel):
    title: str
    lines: List[BreakdownLine]


class Breakdown(FiniteJsonModel):
    expanded: bool
    sections: List[BreakdownSection]


class SavingsView(FiniteJsonModel):
    inputs: CalculatorInputs
    metrics: DerivedMetrics
    quick_stats: QuickStats
    cards: List[MetricCard]
    savings_progress: Optional[SavingsProgress] = None
    investment_details: List[InvestmentItem]
    cost_breakdown_chart: List[ChartSlice]
    investment_summary: Optional[InvestmentSummary] = None
    breakdown: Breakdown
    disclaimer: str = DISCLAIMER


def _plain(value) -> str:
    """50.0 -> '50', 12.5 -> '12.5'"""
    number = float(value)
    if math.isfinite(number) and number.is_integer() and abs(number) < 1e15:
        return str(int(number))
    return str(value)


def build_chart(session: CalculatorSession) -> List[ChartSlice]:
    calc, metrics = session.calculator, session.metrics
    data = [
        ("Platform Commission", metrics.commission_paid, PLATFORM_COMMISSION_COLOR),
        ("Own System", calc.total_own_system_cost(metrics), OWN_SYSTEM_COLOR),
        ("Monthly Savings", max(0, metrics.net_savings), SAVINGS_COLOR),
    ]
    total = sum(value for _, value, _ in data)

    return [
        ChartSlice(
            name=name,
            value=value,
            color=color,
            share_percent=(value / total * 100) if 0 < total < math.inf else 0.0,
            display=format_currency(value),
        )
        for name, value, color in data
    ]


def build_breakdown(session: CalculatorSession) -> Breakdown:
    calc, inputs, metrics = session.calculator, session.inputs, session.metrics
    roi = calc.first_year_roi(metrics)

    platform = BreakdownSection(
        title="Current Platform Costs",
        lines=[
            BreakdownLine(label="Average orders per day:", display=f"{_plain(inputs.orders_per_day)} orders"),
            BreakdownLine(label="Average order value:", display=format_currency(inputs.average_order_value)),
            BreakdownLine(label="Monthly orders:", display=f"{_plain(calc.monthly_orders(inputs))} orders"),
            BreakdownLine(label="Commission rate:", display=f"{_plain(inputs.commission_rate)}%"),
            BreakdownLine(label="Total commission paid:", display=format_currency(metrics.commission_paid),
                          emphasis=True),
        ],
    )
    own_system = BreakdownSection(
        title="Own System Costs",
        lines=[
            BreakdownLine(label="Monthly ordering system:", display=format_currency(metrics.own_system_cost)),
            BreakdownLine(label="Monthly maintenance:", display=format_currency(metrics.suggested_maintenance_cost)),
            BreakdownLine(label="Total monthly cost:", display=format_currency(calc.total_own_system_cost(metrics)),
                          emphasis=True),
        ],
    )
    investment = BreakdownSection(
        title="Investment Analysis",
        lines=[
            BreakdownLine(label="Payback Period",
                          display=format_months(calc.payback_months(metrics), metrics.net_savings)),
            BreakdownLine(label="Annual Savings", display=format_currency(calc.annual_savings(metrics))),
            BreakdownLine(label="ROI (1 Year)", display=format_percent(roi) if roi is not None else "N/A"),
        ],
    )

    return Breakdown(expanded=session.show_breakdown, sections=[platform, own_system, investment])


def build_view(session: CalculatorSession) -> SavingsView:
    """
    Monta a tela completa a partir do estado atual da sessão.

    Progresso e resumo do investimento só aparecem quando net_savings > 0;
    caso contrário ficam None e não devem ser renderizados.
    """
    calc, inputs, metrics = session.calculator, session.inputs, session.metrics
    has_savings = metrics.net_savings > 0
    percentage = calc.savings_percentage(metrics)
    daily_revenue = calc.daily_revenue(inputs)

    cards = [
        MetricCard(label="Monthly Revenue", value=metrics.monthly_revenue,
                   display=format_currency(metrics.monthly_revenue)),
        MetricCard(label="Commission Lost", value=metrics.commission_paid,
                   display=format_currency(metrics.commission_paid)),
        MetricCard(label="Monthly Savings", value=max(0, metrics.net_savings),
                   display=format_currency(max(0, metrics.net_savings))),
    ]

    savings_progress = None
    investment_summary = None
    if has_savings:
        savings_progress = SavingsProgress(
            percentage=percentage,
            percentage_display=f"{format_percent(percentage)} Savings",
            progress_value=calc.progress_value(metrics),
            caption=f"You could save {format_percent(percentage)} of your current platform costs",
        )
        payback = calc.payback_months(metrics)
        investment_summary = InvestmentSummary(
            investment=format_currency(metrics.suggested_website_cost),
            monthly_savings=format_currency(metrics.net_savings),
            payback_months=payback,
            payback_display=format_months(payback, metrics.net_savings),
            after_recovery=format_currency(metrics.net_savings),
            annual_profit=format_currency(calc.annual_profit(metrics)),
        )

    return SavingsView(
        inputs=inputs,
        metrics=metrics,
        quick_stats=QuickStats(
            monthly_orders=calc.monthly_orders(inputs),
            daily_revenue=daily_revenue,
            daily_revenue_display=format_currency(daily_revenue),
        ),
        cards=cards,
        savings_progress=savings_progress,
        investment_details=[
            InvestmentItem(label="Website Development", badge="One-time",
                           value=metrics.suggested_website_cost,
                           display=format_currency(metrics.suggested_website_cost)),
            InvestmentItem(label="Monthly Maintenance", badge="Recurring",
                           value=metrics.suggested_maintenance_cost,
                           display=format_currency(metrics.suggested_maintenance_cost)),
        ],
        cost_breakdown_chart=build_chart(session),
        investment_summary=investment_summary,
        breakdown=build_breakdown(session),
    )
