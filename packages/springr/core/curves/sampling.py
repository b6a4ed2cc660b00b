"""Curve sampling.

Samples spring curves on a uniform grid of normalized time.
"""

from springr.core.curves.models import CurveParams, CurvePoint
from springr.core.curves.oscillator import evaluate_array


def sample_uniform_grid(n: int) -> list[float]:
    """Generate N evenly-spaced samples in [0, 1).

    Returns N samples: [0.0, 1/N, 2/N, ..., (N-1)/N]

    Args:
        n: Number of samples to generate. Must be >= 2.

    Raises:
        ValueError: If n < 2.

    Example:
        >>> sample_uniform_grid(4)
        [0.0, 0.25, 0.5, 0.75]
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    return [i / n for i in range(n)]


def sample_curve(params: CurveParams, n_samples: int) -> list[CurvePoint]:
    """Evaluate a spring curve on the uniform grid.

    Args:
        params: Oscillator parameters.
        n_samples: Number of samples (must be >= 2).

    Returns:
        List of CurvePoints at t = i / n_samples.
    """
    t_grid = sample_uniform_grid(n_samples)
    values = evaluate_array(params.omega, params.gamma, t_grid)
    return [CurvePoint(t=t, v=float(v)) for t, v in zip(t_grid, values, strict=True)]
