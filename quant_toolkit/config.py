"""
Default parameters for pricing, simulation and portfolio optimization.

Every value here is a default only; the engines accept overrides as call or
constructor arguments.
"""

# Pricing Parameters
DAYS_PER_YEAR = 365  # Theta is reported as daily decay
GREEK_SCALE = 100    # Vega and rho are quoted per 1% move
DISPLAY_DECIMALS = 4

# Monte Carlo Parameters
DEFAULT_STEPS = 252
DEFAULT_PATHS = 10000
DEFAULT_BATCH_SIZE = 5000
CONFIDENCE_Z_SCORE = 1.96  # Normal approximation, not Student-t
DEFAULT_RISK_CONFIDENCE = 0.95

# Gradient Descent Optimizer Parameters
OPTIMIZER_LEARNING_RATE = 0.01
OPTIMIZER_MAX_ITERATIONS = 1000
OPTIMIZER_RETURN_TOLERANCE = 1e-4
OPTIMIZER_METHODS = ("gradient", "slsqp")
OPTIMIZER_MIN_WEIGHT_TOTAL = 1e-12  # Smaller totals are not renormalized

# Efficient Frontier Parameters
FRONTIER_RISK_FREE_RATE = 0.03
FRONTIER_POINTS = 50
ASSUMED_CORRELATION = 0.5
MIN_STRATEGIES = 2

# Strategy Payoff Assumptions
STRATEGY_VOLATILITY = 0.20
STRATEGY_RISK_FREE_RATE = 0.05
PAYOFF_GRID_POINTS = 100
PAYOFF_GRID_START = 0.5   # Grid starts at 0.5x spot
PAYOFF_GRID_STEP = 1 / 50  # ... and ends at 2.48x spot for 100 points

# Strike offsets are multiples of spot, horizons are in years
STRATEGY_PRESETS = {
    "covered-call": {
        "legs": [{"option_type": "call", "strike_mult": 1.10, "position": "short"}],
        "time_to_expiry": 1 / 12,
        "holds_underlying": True
    },
    "cash-secured-put": {
        "legs": [{"option_type": "put", "strike_mult": 0.90, "position": "short"}],
        "time_to_expiry": 1 / 12,
        "holds_underlying": False
    },
    "long-leaps": {
        "legs": [{"option_type": "call", "strike_mult": 1.00, "position": "long"}],
        "time_to_expiry": 2.0,
        "holds_underlying": False
    },
    "strangle": {
        "legs": [
            {"option_type": "call", "strike_mult": 1.10, "position": "long"},
            {"option_type": "put", "strike_mult": 0.90, "position": "long"}
        ],
        "time_to_expiry": 1 / 12,
        "holds_underlying": False
    }
}

STRATEGY_NAMES = list(STRATEGY_PRESETS.keys())
