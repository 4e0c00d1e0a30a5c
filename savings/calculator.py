from savings.interface import CalculatorInputs, DerivedMetrics, ISavingsCalculator


class SelfHostedSavingsCalculator(ISavingsCalculator):
    """
    Calculadora de economia para sistema de pedidos próprio.

    Características:
    - Custos mensais fixos (sistema + manutenção)
    - Investimento único no site proporcional à economia, com piso
    """

    OWN_SYSTEM_COST = 5000  # ₹/mês do sistema de pedidos
    MAINTENANCE_COST = 6000  # manutenção mensal sugerida
    WEBSITE_COST_FLOOR = 40000  # investimento mínimo no site
    WEBSITE_COST_MULTIPLE = 1.75  # meses de economia cobrados pelo site

    def __init__(self):
        super().__init__(system="self-hosted")

    def derive(self, inputs: CalculatorInputs) -> DerivedMetrics:
        monthly_orders = self.monthly_orders(inputs)
        monthly_revenue = monthly_orders * inputs.average_order_value
        commission_paid = (monthly_revenue * inputs.commission_rate) / 100

        total_monthly_cost = self.OWN_SYSTEM_COST + self.MAINTENANCE_COST
        net_savings = commission_paid - total_monthly_cost
        suggested_website_cost = max(self.WEBSITE_COST_FLOOR, net_savings * self.WEBSITE_COST_MULTIPLE)

        return DerivedMetrics(
            monthly_revenue=monthly_revenue,
            commission_paid=commission_paid,
            own_system_cost=self.OWN_SYSTEM_COST,
            net_savings=net_savings,
            suggested_website_cost=suggested_website_cost,
            suggested_maintenance_cost=self.MAINTENANCE_COST,
        )


calculator = SelfHostedSavingsCalculator()


def derive(inputs: CalculatorInputs) -> DerivedMetrics:
    """Atalho para a calculadora padrão"""
    return calculator.derive(inputs)
