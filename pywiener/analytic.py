# Copyright 2018 Max Shinn <maxwell.shinn@yale.edu>
#           2018 Norman Lam <norman.lam@yale.edu>
#
# This file is part of PyWiener, and is available under the MIT license.
# Please see LICENSE.txt in the root directory for more information.

__all__ = ["time_choice_density", "dchoice"]

import numpy as np

from paranoid.types import Number, Maybe, Range
from paranoid.decorators import accepts, returns

from . import parameters as param
from .errors import InvalidParameter, check_parameters, check_choice

def series_term_counts(tt, epsilon):
    """Number of terms needed by each series to reach error `epsilon` at normalised time `tt`.

    Returns (smalltime_k, largetime_k, lambda_t) from Eqs 10-12 of
    Navarro & Fuss (2009).  When lambda_t is negative, the small-time
    series needs fewer terms than the large-time series.  A negative
    radicand means no terms are needed, so it is treated as zero.
    """
    # Navarro & Fuss Eq 10
    largetime_k = np.sqrt(max(0, -2 * (np.log(np.pi) + np.log(tt) + np.log(epsilon)) / (np.pi**2 * tt)))
    # Navarro & Fuss Eq 11
    smalltime_k = 2 + np.sqrt(max(0, -2 * tt * (np.log(2) + np.log(epsilon)
                                                 + .5 * (np.log(2) + np.log(np.pi) + np.log(tt)))))
    # Navarro & Fuss Eq 12
    lambda_t = smalltime_k - largetime_k
    return smalltime_k, largetime_k, lambda_t

@accepts(Number, Number, Number, Number, choice=Number, epsilon=Maybe(Number))
@returns(Number)
def time_choice_density(t, b, a, v, choice=1, epsilon=None):
    """Bivariate density of response time and choice in a drift-diffusion model.

    Evaluates p(t, choice | b, a, v) for a process which starts at
    `a*b` between a lower barrier at 0 and an upper barrier at `a`, and
    has drift rate `v` and unit noise.

    - `t` - the response time, greater than 0
    - `b` - the relative starting point, in (0, 1)
    - `a` - the distance between the barriers, greater than 0
    - `v` - the drift rate
    - `choice` - 1 for the upper barrier, 0 for the lower barrier
    - `epsilon` - the truncation error budget, in (0, 1).  Defaults to
      parameters.epsilon (0.001).  Smaller values sum more terms.

    When choice is 0, this is Eq (1) in the Appendix of Wabersich &
    Vandekerckhove (2014).  When choice is 1, it is the same equation
    with `b` replaced by 1-b and `v` replaced by -v.

    The density is computed with the method of Navarro & Fuss (2009):
    first the density of a process with zero drift and unit barrier
    distance is approximated at time t/a^2 by whichever of the
    small-time and large-time series needs fewer terms for the error
    budget, and then it is rescaled to the requested `a` and `v`.

    The result is not clipped at zero.  Truncation error can make it
    slightly negative for extreme inputs.

    References:
    Navarro, D. J., & Fuss, I. G. (2009). Fast and accurate
    calculations for first-passage times in Wiener diffusion
    models. Journal of mathematical psychology, 53(4), 222-230.

    Wabersich, D., & Vandekerckhove, J. (2014). The RWiener Package:
    an R Package Providing Distribution Functions for the Wiener
    Diffusion Model. R Journal, 6(1).
    """
    check_choice(choice)
    check_parameters(b, a, v)
    if not t > 0:
        raise InvalidParameter("Time t must be positive, not %s" % repr(t))
    if epsilon is None:
        epsilon = param.epsilon
    if not 0 < epsilon < 1:
        raise InvalidParameter("Error tolerance epsilon must be in (0, 1), not %s" % repr(epsilon))

    if choice == 1:
        v = -v
        b = 1 - b

    tt = t/a**2 # See final term in Equation 2 of Navarro & Fuss

    smalltime_k, largetime_k, lambda_t = series_term_counts(tt, epsilon)

    # Navarro & Fuss Eq 13
    if lambda_t < 0:
        K_div = (np.ceil(smalltime_k) - 1)/2
        k = np.arange(-np.floor(K_div), np.ceil(K_div) + 1)
        # Prefactor tt^(-3/2) is applied inside the exponential
        p = np.sum((b + 2*k) * np.exp(-(b + 2*k)**2 / (2*tt) - 1.5*np.log(tt)))
        p = p / np.sqrt(2 * np.pi)
    else:
        K = max(np.ceil(largetime_k), 1)
        k = np.arange(1, K + 1)
        p = np.sum(k * np.exp(-k**2 * np.pi**2 * tt / 2) * np.sin(k * np.pi * b))
        p = p * np.pi

    # p is the final term in Navarro & Fuss Eq 2, so this is Eq 2
    return float(p * np.exp(-v * a * b - v**2 * t / 2) / a**2)

@accepts(Number, Number, Number, choice=Number)
@returns(Range(0, 1))
def dchoice(b, a, v, choice=1):
    """Marginal probability of one of the two choices in a drift-diffusion model.

    Gives the probability of first reaching the upper barrier (`choice`
    of 1) or the lower barrier (`choice` of 0) for a process with
    relative starting point `b`, barrier distance `a`, and drift rate
    `v`.

    For the upper barrier this is Eq 3 of Tuerlinckx et al (2001),
    (exp(-2*a*b*v) - 1)/(exp(-2*a*v) - 1), where their `z` is `a*b`.
    The lower barrier uses the same formula with `b` replaced by 1-b
    and `v` replaced by -v.  Without drift, the ratio is 0/0, and its
    limit `b` is returned instead.

    Reference:
    Tuerlinckx, F., Maris, E., Ratcliff, R., & De Boeck, P. (2001). A
    comparison of four methods for simulating the diffusion
    process. Behavior Research Methods, Instruments, & Computers,
    33(4), 443-456.
    """
    check_choice(choice)
    check_parameters(b, a, v)
    if choice == 0:
        b = 1 - b
        v = -v
    av = a * v
    if abs(av) < param.zero_drift_tol:
        return float(b)
    if av > 0:
        return float(np.expm1(-2*av*b) / np.expm1(-2*av))
    # Same ratio multiplied through by exp(2*a*v), so no exponent is positive
    return float(np.exp(2*av*(1-b)) * np.expm1(2*av*b) / np.expm1(2*av))
