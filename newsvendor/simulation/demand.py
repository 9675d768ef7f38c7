"""
Gerador de demanda Normal via Box-Muller.
"""

from typing import Iterator, List, NamedTuple, Optional

import numpy as np

from newsvendor.config import DEFAULT_N_EXAMPLES, LCG_INCREMENT, LCG_MODULUS, LCG_MULTIPLIER
from newsvendor.inventory.rounding import round_half_up
from newsvendor.models import RandomNumberExample, SimulationParameters

# Gerador ambiente do processo, usado quando nenhum rng e injetado
_AMBIENT_RNG = np.random.default_rng()

# ln(0) diverge; uniforme 0 vira o menor double positivo
_TINY = np.finfo(float).tiny


class DemandDraw(NamedTuple):
    uniform: float
    z_score: float
    demand: int


def lcg_uniforms(seed: int, count: int) -> Iterator[float]:
    """
    Sequencia de uniformes do gerador congruencial linear:
    seed = (seed * 9301 + 49297) % 233280; u = seed / 233280
    """
    current = int(seed)
    for _ in range(count):
        current = (current * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        yield current / LCG_MODULUS


def generate_demand(mean, std_dev, uniform: Optional[float] = None,
                    rng: Optional[np.random.Generator] = None,
                    second_uniform: Optional[float] = None) -> DemandDraw:
    """
    Sorteia uma demanda inteira ~ Normal(mean, std_dev).

    z = sqrt(-2 ln(u)) * cos(2 pi u2)

    `u` e o uniforme informado (ou sorteado de `rng`). `u2` vem sempre de
    `rng`, mesmo quando `uniform` e informado, salvo se `second_uniform`
    for passado explicitamente. Por isso informar so `uniform` nao torna o
    resultado reprodutivel.

    A demanda e arredondada e nao e truncada em zero.
    """
    rng = rng if rng is not None else _AMBIENT_RNG

    u = uniform if uniform is not None else rng.random()
    u2 = second_uniform if second_uniform is not None else rng.random()

    z = np.sqrt(-2 * np.log(max(u, _TINY))) * np.cos(2 * np.pi * u2)
    demand = round_half_up(mean + z * std_dev)

    return DemandDraw(uniform=float(u), z_score=float(z), demand=demand)


def generate_random_examples(params: SimulationParameters, count: int = DEFAULT_N_EXAMPLES,
                             seed: Optional[int] = None,
                             rng: Optional[np.random.Generator] = None) -> List[RandomNumberExample]:
    """Tabela de exemplos (uniforme -> z -> demanda) para demonstracao."""
    if seed is not None:
        uniforms = list(lcg_uniforms(seed, count))
    else:
        uniforms = [None] * count

    examples = []
    for i, u in enumerate(uniforms):
        draw = generate_demand(params.mean, params.std_dev, uniform=u, rng=rng)
        examples.append(RandomNumberExample(
            index=i + 1,
            uniform=draw.uniform,
            z_score=draw.z_score,
            demand=draw.demand,
        ))

    return examples
