import numpy as np
from scipy.stats import norm

from newsvendor.models import SimulationParameters


def standard_loss(z):
    """
    Funcao de Perda Normal Padrao L(z) = pdf(z) - z*(1-cdf(z)).
    E[(Z - z)+] para Z ~ N(0, 1).
    """
    return norm.pdf(z) - z * (1 - norm.cdf(z))


def expected_outcome(order_quantity, params: SimulationParameters):
    """
    Valores esperados de um pedido Q sob demanda Normal(mu, sigma),
    sem arredondar a demanda. Serve de referencia teorica para as medias
    simuladas.

    E[falta]  = sigma * L(z)
    E[vendas] = mu - E[falta]
    E[sobra]  = Q - E[vendas]
    """
    mu = params.mean
    sigma = params.std_dev

    if sigma <= 0:
        # Demanda deterministica
        expected_shortage = max(0.0, mu - order_quantity)
        in_stock_probability = 1.0 if order_quantity >= mu else 0.0
    else:
        z = (order_quantity - mu) / sigma
        expected_shortage = sigma * standard_loss(z)
        in_stock_probability = norm.cdf(z)

    expected_sold = mu - expected_shortage
    expected_excess = order_quantity - expected_sold
    expected_profit = expected_sold * params.profit - expected_excess * params.excess_loss

    return {
        'expected_sold': float(expected_sold),
        'expected_excess': float(expected_excess),
        'expected_shortage': float(expected_shortage),
        'expected_profit': float(expected_profit),
        'in_stock_probability': float(np.clip(in_stock_probability, 0.0, 1.0)),
    }
