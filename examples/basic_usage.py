"""
Basic usage example for the quant toolkit

Shows simple workflow for:
1. Pricing an option with Black-Scholes and reading its Greeks
2. Checking the closed-form price against a Monte Carlo estimate
3. Extracting VaR / CVaR from simulated paths
4. Tracing an efficient frontier over a few strategies
"""

import logging
from quant_toolkit import (
    BlackScholesModel, MonteCarloEngine, FrontierAnalyzer, StrategyPayoffs, OptionParameters
)

def basic_example():
    """Simple example of package usage"""

    print("Basic Quant Toolkit Example")
    print("="*50)

    # Step 1: Closed-form pricing
    params = OptionParameters(
        spot=100.0, strike=100.0, time_to_expiry=1.0,
        volatility=0.2, risk_free_rate=0.05, option_type="call"
    )
    result = BlackScholesModel.price(params).rounded()

    print("\nBlack-Scholes Call (S=K=100, T=1, vol=20%, r=5%):")
    print(f"  Price: {result.price}")
    print(f"  Delta: {result.delta}  Gamma: {result.gamma}  Vega: {result.vega}")
    print(f"  Theta (daily): {result.theta}  Rho: {result.rho}")

    # Step 2: Monte Carlo check (one step is exact for GBM terminal prices)
    print("\nMonte Carlo price (100,000 paths):")
    simulation = MonteCarloEngine.price_option(
        S0=100.0, K=100.0, r=0.05, sigma=0.2, T=1.0,
        paths=100000, steps=1, option_type="call", seed=42
    )
    interval = simulation.confidence_interval
    print(f"  Estimate: {simulation.price:.4f}  95% CI: [{interval.lower:.4f}, {interval.upper:.4f}]")
    print(f"  Contains closed form: {interval.contains(result.price)}")

    # Step 3: Tail risk of simulated one-year paths
    paths = MonteCarloEngine.generate_paths(S0=100.0, mu=0.08, sigma=0.25, T=1.0,
                                            steps=252, paths=5000, seed=7)
    risk = MonteCarloEngine.calculate_risk_metrics(paths, confidence=0.95, initial_value=10000.0)
    print("\nRisk on a $10,000 position (95%):")
    print(f"  VaR: ${risk.value_at_risk:,.2f}  CVaR: ${risk.conditional_var:,.2f}")
    print(f"  Worst return: {risk.worst_return:.1%}  Best return: {risk.best_return:.1%}")

    # Step 4: Strategy payoffs and efficient frontier
    print("\nStrategy payoffs at 0.5x / 1x / 2x spot:")
    for name in StrategyPayoffs.get_all_strategies():
        curve = StrategyPayoffs.payoff_curve(name, spot=100.0, prices=[50.0, 100.0, 200.0])
        print(f"  {name:18s} {curve[0]:9.2f} {curve[1]:9.2f} {curve[2]:9.2f}")

    analyzer = FrontierAnalyzer([
        {"name": "Covered Call", "expected_return": 0.08, "volatility": 0.12},
        {"name": "Long LEAPS", "expected_return": 0.15, "volatility": 0.30},
        {"name": "Strangle", "expected_return": 0.10, "volatility": 0.22}
    ], points=20)
    frontier = analyzer.analyze()

    best = frontier.max_sharpe_point
    print("\nEfficient frontier:")
    print(frontier.to_dataframe().round(4).to_string(index=False))
    print(f"\n  Best Sharpe {best.sharpe_ratio:.3f} at return {best.expected_return:.2%}, risk {best.risk:.2%}")

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    basic_example()
