"""discrete_stats.core.statistics.distributions

Continuous distribution functions backing the inference and sampling layers
(no SciPy).

Implemented:
- Standard normal CDF/PPF via stdlib ``statistics.NormalDist``
- Chi-square CDF/SF/PPF via regularized incomplete gamma + safeguarded Newton

The normal quantile drives confidence intervals and inverse-CDF normal
sampling; the chi-square functions give p-values and critical values for the
goodness-of-fit test.

Chi-square:
  If X ~ ChiSquare(df), then X = 2 * Gamma(a=df/2, scale=1).
  CDF is regularized lower incomplete gamma P(a, x/2).

References (algorithms):
- Numerical Recipes / Cephes style implementations for incomplete gamma.
- Wilson-Hilferty transformation for initial chi-square quantile guess.
"""

from __future__ import annotations

import math
from statistics import NormalDist
from typing import Tuple

from ..errors import DegenerateComputationError, InvalidArgumentError


# ----------------------------
# Normal
# ----------------------------

_NORMAL = NormalDist()


def normal_cdf(z: float) -> float:
    """Standard normal CDF, P(Z <= z)."""
    return float(_NORMAL.cdf(z))


def normal_ppf(p: float) -> float:
    """Standard normal quantile (inverse CDF).

    Args:
        p: probability in (0, 1)

    Returns:
        z such that P(Z <= z) = p
    """
    if not (0.0 < p < 1.0):
        raise InvalidArgumentError("p must be in (0,1)")
    return float(_NORMAL.inv_cdf(p))


def two_sided_z(confidence: float) -> float:
    """Critical z for a two-sided interval at ``confidence`` (0.95 -> 1.95996...)."""
    if not (0.0 < confidence < 1.0):
        raise InvalidArgumentError("confidence must be in (0,1)")
    return normal_ppf(1.0 - (1.0 - confidence) / 2.0)


# ----------------------------
# Incomplete gamma (regularized)
# ----------------------------

_DEF_EPS = 1e-14
_DEF_MAX_IT = 2000
_TINY = 1e-300
_MAX_BRACKET_DOUBLINGS = 200
_MAX_NEWTON_STEPS = 100


def _gammainc_series(a: float, x: float, eps: float, max_it: int) -> float:
    ap = a
    summ = 1.0 / a
    delt = summ
    for _ in range(max_it):
        ap += 1.0
        delt *= x / ap
        summ += delt
        if abs(delt) < abs(summ) * eps:
            break
    return summ * math.exp(-x + a * math.log(x) - math.lgamma(a))


def _gammainc_upper_cf(a: float, x: float, eps: float, max_it: int) -> float:
    # Modified Lentz's method for Q(a, x)
    b = x + 1.0 - a
    c = 1.0 / _TINY
    d = 1.0 / max(b, _TINY)
    h = d

    for i in range(1, max_it + 1):
        an = -float(i) * (float(i) - a)
        b += 2.0
        d = an * d + b
        if abs(d) < _TINY:
            d = _TINY
        c = b + an / c
        if abs(c) < _TINY:
            c = _TINY
        d = 1.0 / d
        delta = d * c
        h *= delta
        if abs(delta - 1.0) < eps:
            break

    return h * math.exp(-x + a * math.log(x) - math.lgamma(a))


def _clip_unit(v: float) -> float:
    return min(max(v, 0.0), 1.0)


def gammainc_lower(a: float, x: float, eps: float = _DEF_EPS, max_it: int = _DEF_MAX_IT) -> float:
    """Regularized lower incomplete gamma P(a, x).

    Series expansion for x < a+1, continued fraction otherwise.

    Args:
        a: shape parameter (>0)
        x: integration limit

    Returns:
        P(a, x) in [0, 1]
    """
    if a <= 0.0:
        raise InvalidArgumentError("a must be positive")
    if x <= 0.0:
        return 0.0
    if x < a + 1.0:
        return _clip_unit(_gammainc_series(a, x, eps, max_it))
    return _clip_unit(1.0 - _gammainc_upper_cf(a, x, eps, max_it))


def gammainc_upper(a: float, x: float, eps: float = _DEF_EPS, max_it: int = _DEF_MAX_IT) -> float:
    """Regularized upper incomplete gamma Q(a, x) = 1 - P(a, x)."""
    if a <= 0.0:
        raise InvalidArgumentError("a must be positive")
    if x <= 0.0:
        return 1.0
    if x < a + 1.0:
        return _clip_unit(1.0 - _gammainc_series(a, x, eps, max_it))
    return _clip_unit(_gammainc_upper_cf(a, x, eps, max_it))


# ----------------------------
# Chi-square
# ----------------------------


def _check_df(df: int) -> None:
    if df <= 0:
        raise InvalidArgumentError("df must be positive")


def chi2_cdf(x: float, df: int) -> float:
    """CDF of chi-square distribution, P(X <= x)."""
    _check_df(df)
    if x <= 0.0:
        return 0.0
    return gammainc_lower(0.5 * float(df), 0.5 * float(x))


def chi2_sf(x: float, df: int) -> float:
    """Survival function of chi-square distribution, P(X > x).

    Computed from Q directly so small upper-tail p-values keep precision.
    """
    _check_df(df)
    if x <= 0.0:
        return 1.0
    return gammainc_upper(0.5 * float(df), 0.5 * float(x))


def _chi2_pdf(x: float, df: int) -> float:
    if x <= 0.0:
        return 0.0
    k = 0.5 * float(df)
    log_pdf = (k - 1.0) * math.log(x) - 0.5 * x - k * math.log(2.0) - math.lgamma(k)
    return math.exp(log_pdf)


def _wilson_hilferty_guess(p: float, df: int) -> float:
    # X/df is roughly normal after a cube-root transform
    k = float(df)
    h = 2.0 / (9.0 * k)
    t = 1.0 - h + normal_ppf(p) * math.sqrt(h)
    return k * max(t, 1e-12) ** 3


def _chi2_bracket(p: float, df: int, start: float) -> Tuple[float, float]:
    hi = max(start, 1e-12)
    for _ in range(_MAX_BRACKET_DOUBLINGS):
        if chi2_cdf(hi, df) >= p:
            return 0.0, hi
        hi *= 2.0
    raise DegenerateComputationError(f"could not bracket chi-square quantile p={p}, df={df}")


def chi2_ppf(p: float, df: int, tol: float = 1e-12) -> float:
    """Quantile (inverse CDF) of chi-square distribution.

    Starts from the Wilson-Hilferty approximation and refines with Newton
    steps on chi2_cdf(x) - p. A step that leaves the current bracket
    [lo, hi] is replaced by bisection, so the iteration always converges.

    Args:
        p: probability in (0,1)
        df: degrees of freedom (>0)
        tol: relative step size at which iteration stops

    Returns:
        x such that chi2_cdf(x, df) = p
    """
    _check_df(df)
    if not (0.0 < p < 1.0):
        raise InvalidArgumentError("p must be in (0,1)")

    guess = _wilson_hilferty_guess(p, df)
    lo, hi = _chi2_bracket(p, df, guess)
    x = min(max(guess, lo + 1e-15), hi - 1e-15)

    for _ in range(_MAX_NEWTON_STEPS):
        residual = chi2_cdf(x, df) - p
        if residual < 0.0:
            lo = x
        else:
            hi = x

        slope = _chi2_pdf(x, df)
        candidate = x - residual / slope if slope > 0.0 else math.nan
        if not (lo < candidate < hi):
            candidate = 0.5 * (lo + hi)

        if abs(candidate - x) <= tol * max(1.0, x):
            return float(candidate)
        x = candidate

    return float(x)
