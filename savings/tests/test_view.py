import pytest
from savings import CalculatorSession, build_view


def test_view_cards_for_default_scenario():
    """Testa os cards principais no cenário padrão"""
    view = build_view(CalculatorSession())

    labels = [card.label for card in view.cards]
    displays = [card.display for card in view.cards]

    assert labels == ["Monthly Revenue", "Commission Lost", "Monthly Savings"]
    assert displays == ["₹5,25,000", "₹1,31,250", "₹1,20,250"]


def test_view_shows_investment_summary_when_saving():
    """Testa que o resumo do investimento aparece com economia positiva"""
    view = build_view(CalculatorSession())

    summary = view.investment_summary
    assert summary is not None
    assert summary.investment == "₹2,10,438"
    assert summary.monthly_savings == "₹1,20,250"
    assert summary.payback_months == 2
    assert summary.payback_display == "2 months"
    assert summary.annual_profit == "₹14,43,000"


def test_view_hides_summary_and_progress_without_savings():
    """Testa que sem economia não há resumo, progresso nem payback"""
    session = CalculatorSession()
    session.set_orders_per_day(0)

    view = build_view(session)

    assert view.investment_summary is None
    assert view.savings_progress is None
    assert view.cards[2].value == 0
    assert view.cards[2].display == "₹0"

    investment = view.breakdown.sections[2]
    payback = next(line for line in investment.lines if line.label == "Payback Period")
    assert payback.display == "N/A"


def test_view_progress_is_clamped():
    """Testa que a barra de progresso fica entre 0 e 100"""
    view = build_view(CalculatorSession())

    progress = view.savings_progress
    assert progress is not None
    assert 0 <= progress.progress_value <= 100
    assert progress.percentage_display == "92% Savings"
    assert progress.caption == "You could save 92% of your current platform costs"


def test_view_chart_slices():
    """Testa as fatias do gráfico de custos"""
    view = build_view(CalculatorSession())

    slices = {s.name: s for s in view.cost_breakdown_chart}
    assert set(slices) == {"Platform Commission", "Own System", "Monthly Savings"}
    assert slices["Platform Commission"].value == 131250
    assert slices["Platform Commission"].color == "#EF4444"
    assert slices["Own System"].value == 11000
    assert slices["Own System"].color == "#10B981"
    assert slices["Monthly Savings"].value == 120250
    assert slices["Monthly Savings"].color == "#3B82F6"
    assert sum(s.share_percent for s in view.cost_breakdown_chart) == pytest.approx(100)


def test_view_chart_savings_slice_never_negative():
    """Testa que a fatia de economia não fica negativa"""
    session = CalculatorSession()
    session.set_average_order_value("")

    view = build_view(session)

    savings_slice = view.cost_breakdown_chart[2]
    assert savings_slice.value == 0


def test_view_breakdown_follows_toggle():
    """Testa que o detalhamento acompanha o flag da sessão"""
    session = CalculatorSession()
    assert build_view(session).breakdown.expanded is False

    session.toggle_breakdown()
    view = build_view(session)

    assert view.breakdown.expanded is True
    titles = [section.title for section in view.breakdown.sections]
    assert titles == ["Current Platform Costs", "Own System Costs", "Investment Analysis"]


def test_view_breakdown_lines():
    """Testa o conteúdo das seções do detalhamento"""
    view = build_view(CalculatorSession())
    platform, own_system, investment = view.breakdown.sections

    platform_lines = {line.label: line.display for line in platform.lines}
    assert platform_lines["Average orders per day:"] == "50 orders"
    assert platform_lines["Average order value:"] == "₹350"
    assert platform_lines["Monthly orders:"] == "1500 orders"
    assert platform_lines["Commission rate:"] == "25%"
    assert platform_lines["Total commission paid:"] == "₹1,31,250"

    own_lines = {line.label: line.display for line in own_system.lines}
    assert own_lines["Monthly ordering system:"] == "₹5,000"
    assert own_lines["Monthly maintenance:"] == "₹6,000"
    assert own_lines["Total monthly cost:"] == "₹11,000"

    investment_lines = {line.label: line.display for line in investment.lines}
    assert investment_lines["Payback Period"] == "2 months"
    assert investment_lines["Annual Savings"] == "₹14,43,000"
    assert investment_lines["ROI (1 Year)"] == "686%"


def test_view_quick_stats_and_investment_details():
    """Testa estatísticas rápidas e detalhes do investimento"""
    view = build_view(CalculatorSession())

    assert view.quick_stats.monthly_orders == 1500
    assert view.quick_stats.daily_revenue_display == "₹17,500"
    assert [item.label for item in view.investment_details] == ["Website Development", "Monthly Maintenance"]
    assert [item.badge for item in view.investment_details] == ["One-time", "Recurring"]
    assert view.investment_details[1].display == "₹6,000"


def test_view_at_break_even_hides_summary_and_progress():
    """Testa que com economia exatamente 0 não há resumo, progresso nem payback"""
    session = CalculatorSession()
    session.set_orders_per_day(44)
    session.set_average_order_value(25)
    session.set_commission_rate(100 / 3)

    view = build_view(session)

    assert view.metrics.net_savings == 0
    assert view.investment_summary is None
    assert view.savings_progress is None
    assert session.calculator.savings_percentage(session.metrics) == 0

    investment = {line.label: line.display for line in view.breakdown.sections[2].lines}
    assert investment["Payback Period"] == "N/A"
    assert investment["Annual Savings"] == "₹0"


def test_view_roi_rounds_ties_up():
    """Testa que ROI de 16.5% aparece como 17%"""
    session = CalculatorSession()
    session.set_orders_per_day(70)
    session.set_average_order_value(22)
    session.set_commission_rate(25)

    view = build_view(session)

    investment = {line.label: line.display for line in view.breakdown.sections[2].lines}
    assert investment["ROI (1 Year)"] == "17%"


def test_view_with_overflowed_metrics():
    """Testa que a tela é montada mesmo quando as métricas estouram"""
    session = CalculatorSession()
    session.set_orders_per_day("1e306")

    view = build_view(session)

    assert view.cards[0].display == "N/A"
    assert view.investment_summary.payback_display == "N/A"
    assert view.savings_progress.progress_value == 0
    assert all(s.share_percent == 0 for s in view.cost_breakdown_chart)

    platform = {line.label: line.display for line in view.breakdown.sections[0].lines}
    assert platform["Average orders per day:"] == "1e+306 orders"
