from methanol_sim.metrics.estimators import (
    calculate_performance,
    estimate_conversion,
    estimate_selectivity,
)

__all__ = ["calculate_performance", "estimate_conversion", "estimate_selectivity"]
