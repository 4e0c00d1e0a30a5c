# -*- coding: utf-8 -*-
import logging
import os
from typing import Optional, Union

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel, Field

from config import settings
# Importar módulo de economia
from savings import CalculatorInputs, CalculatorSession, DerivedMetrics, SavingsView, build_view
from savings.calculator import SelfHostedSavingsCalculator, calculator
from savings.interface import FiniteJsonModel
from savings.session import DEFAULT_AVERAGE_ORDER_VALUE, DEFAULT_COMMISSION_RATE, DEFAULT_ORDERS_PER_DAY

# Configuração de logging estruturado
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

COMMISSION_RATE_MIN = 15
COMMISSION_RATE_MAX = 35
COMMISSION_RATE_STEP = 1

app = FastAPI(title="Delivery Savings Calculator API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Static
if not os.path.isdir("static"):
    os.makedirs("static", exist_ok=True)
app.mount("/static", StaticFiles(directory="static", html=True), name="static")


@app.get("/", include_in_schema=False)
async def root_index():
    # Serve a página da calculadora em /static/main.html
    index_path = os.path.join("static", "main.html")
    return FileResponse(index_path)


@app.get("/health")
async def health():
    return {"status": "ok"}


# ============================================================================
# SAVINGS ENDPOINTS
# ============================================================================

class SavingsCalculateRequest(BaseModel):
    """Request para cálculo das métricas"""
    orders_per_day: float = Field(DEFAULT_ORDERS_PER_DAY, description="Pedidos por dia")
    average_order_value: float = Field(DEFAULT_AVERAGE_ORDER_VALUE, description="Ticket médio em ₹")
    commission_rate: float = Field(DEFAULT_COMMISSION_RATE, ge=COMMISSION_RATE_MIN, le=COMMISSION_RATE_MAX,
                                   description="Comissão da plataforma em % (15 a 35)")


class SavingsCalculateResponse(FiniteJsonModel):
    """Métricas derivadas e números de apresentação"""
    metrics: DerivedMetrics
    savings_percentage: float
    payback_months: Optional[int] = None  # None = N/A
    progress_value: float
    annual_savings: Optional[float]
    first_year_roi: Optional[float] = None


class SavingsViewRequest(BaseModel):
    """
    Valores brutos dos campos da página.

    Os campos de texto aceitam qualquer conteúdo: texto não numérico vira 0.
    """
    orders_per_day: Union[float, str, None] = DEFAULT_ORDERS_PER_DAY
    average_order_value: Union[float, str, None] = DEFAULT_AVERAGE_ORDER_VALUE
    commission_rate: float = Field(DEFAULT_COMMISSION_RATE, ge=COMMISSION_RATE_MIN, le=COMMISSION_RATE_MAX)
    show_breakdown: bool = False


@app.get("/savings/defaults")
async def savings_defaults():
    """
    Valores iniciais da calculadora e parâmetros fixos.

    Retorna:
        Dict com entradas padrão, limites do slider e custos fixos
    """
    return {
        "inputs": {
            "orders_per_day": DEFAULT_ORDERS_PER_DAY,
            "average_order_value": DEFAULT_AVERAGE_ORDER_VALUE,
            "commission_rate": DEFAULT_COMMISSION_RATE,
        },
        "commission_rate_bounds": {
            "min": COMMISSION_RATE_MIN,
            "max": COMMISSION_RATE_MAX,
            "step": COMMISSION_RATE_STEP,
        },
        "fixed_costs": {
            "own_system_cost": SelfHostedSavingsCalculator.OWN_SYSTEM_COST,
            "suggested_maintenance_cost": SelfHostedSavingsCalculator.MAINTENANCE_COST,
            "website_cost_floor": SelfHostedSavingsCalculator.WEBSITE_COST_FLOOR,
        },
    }


@app.post("/savings/calculate", response_model=SavingsCalculateResponse)
async def savings_calculate(request: SavingsCalculateRequest):
    """
    Calcula as métricas de economia para entradas numéricas.

    Args:
        request: SavingsCalculateRequest com pedidos/dia, ticket médio e comissão

    Returns:
        SavingsCalculateResponse com métricas e payback (None quando N/A)

    Raises:
        422: Comissão fora da faixa [15, 35]
    """
    try:
        inputs = CalculatorInputs(
            orders_per_day=request.orders_per_day,
            average_order_value=request.average_order_value,
            commission_rate=request.commission_rate,
        )
        metrics = calculator.derive(inputs)

        # 0 = sem economia (ou valor estourado): N/A
        payback = calculator.payback_months(metrics) or None

        logger.info(
            f"Cálculo: {inputs.orders_per_day} pedidos/dia, comissão {inputs.commission_rate}% "
            f"-> economia mensal {metrics.net_savings:.2f}"
        )

        return SavingsCalculateResponse(
            metrics=metrics,
            savings_percentage=calculator.savings_percentage(metrics),
            payback_months=payback,
            progress_value=calculator.progress_value(metrics),
            annual_savings=calculator.annual_savings(metrics),
            first_year_roi=calculator.first_year_roi(metrics),
        )

    except Exception as e:
        logger.error(f"Erro ao calcular economia: {str(e)}")
        raise HTTPException(
            status_code=500,
            detail={"message": f"Erro ao calcular economia: {str(e)}"}
        )


@app.post("/savings/view", response_model=SavingsView)
async def savings_view(request: SavingsViewRequest):
    """
    Monta a tela completa a partir dos valores dos campos.

    Cada valor passa pelos mesmos setters usados pela página, então texto
    inválido é tratado como 0 e as métricas são recalculadas na hora.
    """
    try:
        session = CalculatorSession()
        session.set_orders_per_day(request.orders_per_day)
        session.set_average_order_value(request.average_order_value)
        session.set_commission_rate(request.commission_rate)
        if request.show_breakdown:
            session.toggle_breakdown()

        view = build_view(session)
        logger.info(
            f"Tela montada: economia mensal {view.metrics.net_savings:.2f}, "
            f"resumo de investimento: {'sim' if view.investment_summary else 'não'}"
        )
        return view

    except Exception as e:
        logger.error(f"Erro ao montar tela: {str(e)}")
        raise HTTPException(
            status_code=500,
            detail={"message": f"Erro ao montar tela: {str(e)}"}
        )


# ========= MAIN PARA RODAR DEBUGANDO =========


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app:app", host=settings.host, port=settings.port, reload=settings.dev_mode)
