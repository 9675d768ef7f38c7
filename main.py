import logging

from newsvendor.config import DEFAULT_N_EXAMPLES, DEFAULT_N_SIMULATIONS, DEFAULT_PARAMS
from newsvendor.decision_support import policy_justification, rank_policies
from newsvendor.inventory.analytical import solve
from newsvendor.inventory.profit import calculate_profit
from newsvendor.inventory.service_levels import expected_outcome
from newsvendor.models import SimulationParameters
from newsvendor.simulation.demand import generate_random_examples
from newsvendor.simulation.monte_carlo import compare_policies, default_policies
from newsvendor.simulation.statistics import aggregate_run, profit_histogram


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    print("=== Newsvendor - Monte Carlo Simulation ===")

    # 1. Parametros
    params = SimulationParameters.from_dict(DEFAULT_PARAMS)
    print(f"Demand ~ Normal(mu={params.mean:.0f}, sigma={params.std_dev:.0f})")
    print(f"Unit profit: {params.profit:.2f} | Loss per unsold unit: {params.excess_loss:.2f}")

    # 2. Funcao de lucro (exemplos)
    print("\n[Step 2] Profit function examples (Q=7000)...")
    for demand in (6500, 7500):
        outcome = calculate_profit(demand, 7000, params)
        print(f"D={demand}: sold={outcome.units_sold}, excess={outcome.excess_units}, "
              f"shortage={outcome.shortage_units}, profit={outcome.profit:,.2f}")

    # 3. Numeros aleatorios
    print("\n[Step 3] Random number examples...")
    for ex in generate_random_examples(params, count=DEFAULT_N_EXAMPLES, seed=12345):
        print(f"#{ex.index:2d} u={ex.uniform:.4f} z={ex.z_score:+.4f} demand={ex.demand}")

    # 4. Solucao analitica
    print("\n[Step 4] Analytical solution...")
    solution = solve(params)
    print(f"Cu={solution.cu:.2f}, Co={solution.co:.2f}, "
          f"critical ratio={solution.critical_ratio:.4f}, z={solution.z_value:.4f}")
    print(f"Q* = mu + z*sigma = {solution.optimal_quantity}")
    theory = expected_outcome(solution.optimal_quantity, params)
    print(f"Expected profit at Q*: {theory['expected_profit']:,.2f}")

    # 5. Simulacao das politicas
    print(f"\n[Step 5] Simulating {DEFAULT_N_SIMULATIONS} scenarios per policy...")
    runs, comparison = compare_policies(params, default_policies(solution), DEFAULT_N_SIMULATIONS)
    print(comparison[['policy_name', 'order_quantity', 'average_profit', 'std_dev_profit',
                      'sellout_percentage']].to_string(index=False))

    optimal_run = runs[-1]
    print(f"\nProfit histogram - {optimal_run.policy_name}:")
    print(profit_histogram(optimal_run.results)[['range', 'count']].to_string(index=False))

    # 6. Recomendacao
    print("\n[Step 6] Recommendation...")
    ranked = rank_policies(comparison)
    print(ranked[['policy_name', 'adjusted_score']].to_string(index=False))
    stats = [aggregate_run(run) for run in runs]
    for reason in policy_justification(stats, solution):
        print(f"- {reason}")

    print("\n=== Pipeline Complete ===")


if __name__ == "__main__":
    main()
