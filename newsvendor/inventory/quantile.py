"""
Inversa da CDF normal padrao (funcao quantil).
Aproximacao racional de Acklam / Beasley-Springer-Moro.
"""

import numpy as np

# Regiao central
A = (
    -3.969683028665376e+01,
    2.209460984245205e+02,
    -2.759285104469687e+02,
    1.383577518672690e+02,
    -3.066479806614716e+01,
    2.506628277459239e+00,
)
B = (
    -5.447609879822406e+01,
    1.615858368580409e+02,
    -1.556989798598866e+02,
    6.680131188771972e+01,
    -1.328068155288572e+01,
)

# Caudas
C = (
    -7.784894002430293e-03,
    -3.223964580411365e-01,
    -2.400758277161838e+00,
    -2.549732539343734e+00,
    4.374664141464968e+00,
    2.938163982698783e+00,
)
D = (
    7.784695709041462e-03,
    3.224671290700398e-01,
    2.445134137142996e+00,
    3.754408661907416e+00,
)

P_LOW = 0.02425
P_HIGH = 1 - P_LOW


def _tail(q):
    num = ((((C[0] * q + C[1]) * q + C[2]) * q + C[3]) * q + C[4]) * q + C[5]
    den = (((D[0] * q + D[1]) * q + D[2]) * q + D[3]) * q + 1
    return num / den


def inverse_normal_cdf(p):
    """
    Retorna z tal que Phi(z) ~= p.

    Precondicao: 0 < p < 1 (nao verificada; p fora do intervalo
    produz nan/inf ou erro do numpy).
    """
    if p < P_LOW:
        # Cauda esquerda
        q = np.sqrt(-2 * np.log(p))
        z = _tail(q)
    elif p <= P_HIGH:
        # Regiao central
        q = p - 0.5
        r = q * q
        num = (((((A[0] * r + A[1]) * r + A[2]) * r + A[3]) * r + A[4]) * r + A[5]) * q
        den = ((((B[0] * r + B[1]) * r + B[2]) * r + B[3]) * r + B[4]) * r + 1
        z = num / den
    else:
        # Cauda direita (espelho da esquerda)
        q = np.sqrt(-2 * np.log(1 - p))
        z = -_tail(q)

    return float(z)
