# Parametros do problema (campanha de Natal - tablets infantis)
DEFAULT_PARAMS = {
    'mean': 7000.0,             # Demanda media (mu)
    'std_dev': 800.0,           # Desvio padrao da demanda (sigma)
    'sale_price': 80.0,         # Preco de venda
    'profit': 35.0,             # Ganho por unidade vendida (Cu)
    'liquidation_price': 20.0,  # Preco de liquidacao das sobras
    'purchase_cost': 45.0,      # Custo de compra
    'excess_loss': 15.0,        # Perda por unidade sobrante (Co)
}

# Politicas comparadas
POLICY_1_NAME = "Policy 1"
POLICY_1_QUANTITY = 7000
POLICY_2_NAME = "Policy 2"
POLICY_2_QUANTITY = 6800
OPTIMAL_POLICY_NAME = "Optimal Policy"

# Monte Carlo
DEFAULT_N_SIMULATIONS = 100
DEFAULT_N_EXAMPLES = 10

# Gerador congruencial linear usado no modo com semente
LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280

# Histograma de lucros
HISTOGRAM_BINS = 10
HISTOGRAM_BINS_LARGE = 15
HISTOGRAM_LARGE_THRESHOLD = 500
