"""Default parameters for the bank-deposit vs stablecoin adoption ABM."""

DEFAULT_PARAMS = {
    # Simulation
    'steps': 3650,               # manual halt (ten years of daily ticks)
    'stop_ceiling': 1_000_000.0, # halt once deposits + coin exceed this

    # Population
    'n_households': 100,
    'n_banks': 1,
    'initial_deposits': 100.0,   # mean of initial bank balance
    'deposit_sigma_ratio': 0.5,  # std = ratio * initial_deposits
    'initial_coin_utility': 0.2,
    'high_risk_propensity': (0.5, 1.0),
    'low_risk_propensity': (0.0, 0.5),
    'network_degree': 3,

    # Wages
    'unemployment_rate': 0.05,
    'yearly_salary': 1.02,       # annual multiplicative growth
    'days_per_year': 365,

    # Transactions
    'transactions_per_tick': 20,
    'transaction_amount': 10.0,
    'bank_fee_rate': 0.03,
    'coin_fee_rate': 0.005,
    'bank_attractiveness': 0.5,

    # Learning
    'utility_growth': 1.01,
    'utility_noise_sigma': 0.1,

    # Reallocation
    'reallocation_sample_size': 10,
    'reallocation_fraction': 0.1,
    'peer_adoption_threshold': 0.3,
    'social_influence': 0.5,
    'bank_confidence_threshold': 0.8,
    'fear_factor': 2.0,

    # Display
    'bank_initial_size': 2.0,
}

# Host-side control ranges: key -> (min, max, step)
SLIDER_RANGES = {
    'n_households':              (1, 500, 1),
    'n_banks':                   (0, 10, 1),
    'initial_deposits':          (1.0, 1000.0, 1.0),
    'initial_coin_utility':      (0.0, 1.0, 0.01),
    'bank_attractiveness':       (0.0, 1.0, 0.01),
    'transactions_per_tick':     (1, 50, 1),
    'social_influence':          (0.0, 1.0, 0.01),
    'bank_confidence_threshold': (0.0, 1.0, 0.01),
    'fear_factor':               (0.0, 10.0, 0.1),
    'unemployment_rate':         (0.0, 0.1, 0.005),
    'yearly_salary':             (1.0, 1.05, 0.001),
}

_COUNT_KEYS = ('n_households', 'n_banks', 'transactions_per_tick',
               'reallocation_sample_size', 'network_degree')
_NON_NEGATIVE_KEYS = ('bank_fee_rate', 'coin_fee_rate', 'transaction_amount',
                      'stop_ceiling', 'deposit_sigma_ratio',
                      'utility_noise_sigma', 'days_per_year')


def validate_params(params) -> None:
    """Raise ``ValueError`` for structurally invalid parameters.

    Only contract violations are rejected (negative populations, rates
    outside [0, 1], ...). Values outside the host's slider ranges but
    otherwise meaningful are accepted.
    """
    for key in _COUNT_KEYS:
        if key not in params:
            continue
        value = params[key]
        if isinstance(value, bool) or int(value) != value:
            raise ValueError(f"{key} must be an integer, got {value!r}")
        if value < 0:
            raise ValueError(f"{key} must be >= 0, got {value!r}")

    for key in _NON_NEGATIVE_KEYS:
        if key in params and params[key] < 0:
            raise ValueError(f"{key} must be >= 0, got {params[key]!r}")

    for key in ('unemployment_rate', 'reallocation_fraction'):
        if key in params and not 0.0 <= params[key] <= 1.0:
            raise ValueError(f"{key} must lie in [0, 1], got {params[key]!r}")

    if params.get('days_per_year', 1) == 0:
        raise ValueError("days_per_year must be > 0")
