import numpy as np


def round_half_up(x):
    """
    Arredonda para o inteiro mais proximo; metades vao para +infinito
    (2.5 -> 3, -2.5 -> -2). Usado para demanda e para Q*.
    """
    return int(np.floor(x + 0.5))
