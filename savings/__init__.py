from .interface import ISavingsCalculator, CalculatorInputs, DerivedMetrics
from .calculator import SelfHostedSavingsCalculator, derive
from .session import CalculatorSession
from .view import SavingsView, build_view

__all__ = [
    "ISavingsCalculator",
    "CalculatorInputs",
    "DerivedMetrics",
    "SelfHostedSavingsCalculator",
    "derive",
    "CalculatorSession",
    "SavingsView",
    "build_view",
]
