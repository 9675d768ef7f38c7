"""
Registros de valor do modelo do jornaleiro (newsvendor).
Todos imutaveis: criados uma vez e nunca alterados.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Dict, Mapping, Tuple


@dataclass(frozen=True)
class SimulationParameters:
    """Parametros economicos e de demanda de uma rodada de simulacao."""
    mean: float                 # Demanda media (mu)
    std_dev: float              # Desvio padrao (sigma)
    profit: float               # Ganho por unidade vendida
    excess_loss: float          # Perda por unidade sobrante
    # Informativos: o modelo so usa profit e excess_loss
    sale_price: float = 0.0
    liquidation_price: float = 0.0
    purchase_cost: float = 0.0

    def __post_init__(self):
        if not self.mean > 0:
            raise ValueError(f"mean must be > 0, got {self.mean}")
        if not self.std_dev >= 0:
            raise ValueError(f"std_dev must be >= 0, got {self.std_dev}")
        if not self.profit > 0:
            raise ValueError(f"profit must be > 0, got {self.profit}")
        if not self.excess_loss >= 0:
            raise ValueError(f"excess_loss must be >= 0, got {self.excess_loss}")

    @classmethod
    def from_dict(cls, values: Mapping[str, float]) -> "SimulationParameters":
        known = {k: float(v) for k, v in values.items() if k in cls.__dataclass_fields__}
        return cls(**known)


@dataclass(frozen=True)
class ScenarioResult:
    """Resultado de um cenario (uma tentativa) de Monte Carlo."""
    simulation_number: int
    uniform: float
    z_score: float
    demand: int
    units_sold: int
    excess_units: int
    shortage_units: int
    profit: float


@dataclass(frozen=True)
class PolicyRun:
    policy_name: str
    order_quantity: int
    results: Tuple[ScenarioResult, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class PolicyStatistics:
    """Estatisticas agregadas de uma politica."""
    policy_name: str
    order_quantity: int
    average_profit: float = 0.0
    average_excess: float = 0.0
    average_shortage: float = 0.0
    max_profit: float = 0.0
    min_profit: float = 0.0
    std_dev_profit: float = 0.0
    sellout_percentage: float = 0.0  # % de cenarios sem falta
    total_simulations: int = 0

    def as_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class AnalyticalSolution:
    cu: float               # Custo de ficar curto (ganho perdido)
    co: float               # Custo de sobra
    critical_ratio: float   # Cu / (Cu + Co)
    z_value: float
    optimal_quantity: int   # Q* = mu + z * sigma


@dataclass(frozen=True)
class RandomNumberExample:
    index: int
    uniform: float
    z_score: float
    demand: int
