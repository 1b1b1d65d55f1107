# Copyright 2018 Max Shinn <maxwell.shinn@yale.edu>
#           2018 Norman Lam <norman.lam@yale.edu>
#
# This file is part of PyWiener, and is available under the MIT license.
# Please see LICENSE.txt in the root directory for more information.

__all__ = ['loglikelihood', 'sampler_data', 'fit_ddm']

import numpy as np
from scipy.optimize import minimize, differential_evolution

from . import parameters as param
from .analytic import time_choice_density
from .sample import TrajectorySample
from .fitresult import FitResult
from .errors import InvalidParameter, check_parameters
from .logger import logger as _logger, format_parameters

from paranoid.types import Number, Maybe, Unchecked, Boolean, ExtendedReal, Dict, String
from paranoid.decorators import accepts, returns, ensures
from paranoid.settings import Settings as paranoid_settings

@accepts(TrajectorySample, Number, Number, Number, tau=Number, epsilon=Maybe(Number))
@returns(ExtendedReal)
def loglikelihood(sample, b, a, v, tau=0, epsilon=None):
    """Log likelihood of the trials in `sample` under a drift-diffusion model.

    Each trial contributes the log of `time_choice_density` evaluated
    at its decision time, the response time minus the non-decision
    time `tau`, and its choice.  `b`, `a`, `v` and `epsilon` are as in
    `time_choice_density`.

    If any response time is not longer than `tau`, or the density of
    any trial is not positive, the likelihood is zero and -inf is
    returned.
    """
    check_parameters(b, a, v)
    if not tau >= 0:
        raise InvalidParameter("Non-decision time tau must be non-negative, not %s" % repr(tau))
    decision_times = sample.times - tau
    if np.any(decision_times <= 0):
        if param.likelihood_warnings:
            _logger.warning("Infinite likelihood encountered.  Some response times are not longer than "
                            "the non-decision time tau=%f." % tau)
        return -np.inf
    densities = np.asarray([time_choice_density(float(t), b, a, v, choice=int(c), epsilon=epsilon)
                            for c,t in zip(sample.choices, decision_times)])
    if not np.all(densities > 0):
        if param.likelihood_warnings:
            _logger.warning("Infinite likelihood encountered.  The series density was not positive "
                            "(minimum=%g), which may be caused by truncation error.  Try decreasing epsilon." % np.min(densities))
            _logger.debug(format_parameters(b, a, v, tau=tau))
        return -np.inf
    return float(np.sum(np.log(densities)))

@accepts(TrajectorySample, Number, Number, tau=Number)
@returns(Dict(String, Unchecked))
@ensures("return['n'] == len(sample)")
def sampler_data(sample, alpha_ub, sigma, tau=0):
    """The data record for fitting `sample` with an external Bayesian sampler.

    The sampler is expected to implement the following model, where
    "wiener" is the density of first reaching the upper barrier (see
    `time_choice_density`):

        alpha ~ Uniform(0, alpha_ub)
        beta ~ Uniform(0, 1)
        delta ~ Normal(0, sigma)
        y[i] ~ wiener(alpha, tau, beta, delta)      if z[i] == 1
        y[i] ~ wiener(alpha, tau, 1-beta, -delta)   if z[i] == 0

    and to return posterior draws of alpha (barrier distance `a`),
    beta (relative starting point `b`), and delta (drift rate `v`).

    Returns a dict with the keys "n" (number of trials), "y" (response
    times), "z" (choices, 0 or 1), "alpha_ub", "sigma", and "tau".
    """
    if len(sample) == 0:
        raise InvalidParameter("The sample must contain at least one trial")
    if not alpha_ub > 0:
        raise InvalidParameter("alpha_ub must be positive, not %s" % repr(alpha_ub))
    if not sigma > 0:
        raise InvalidParameter("sigma must be positive, not %s" % repr(sigma))
    if not tau >= 0:
        raise InvalidParameter("Non-decision time tau must be non-negative, not %s" % repr(tau))
    if np.any(sample.times <= tau):
        _logger.warning("Some response times are not longer than the non-decision time tau=%f, "
                        "so the sampler will find zero likelihood." % tau)
    return {"n": len(sample),
            "y": np.array(sample.times),
            "z": np.array(sample.choices),
            "alpha_ub": float(alpha_ub),
            "sigma": float(sigma),
            "tau": float(tau)}

@accepts(TrajectorySample, tau=Number, fitting_method=Unchecked, bounds=Maybe(Dict(String, Unchecked)),
         fitparams=Maybe(Dict(String, Unchecked)), epsilon=Maybe(Number), verify=Boolean, verbose=Boolean)
@returns(FitResult)
def fit_ddm(sample, tau=0, fitting_method="differential_evolution", bounds=None,
            fitparams=None, epsilon=None, verify=False, verbose=True):
    """Find the maximum likelihood parameters b, a, and v for `sample`.

    The data `sample` should be a TrajectorySample of the response
    times (in seconds, NOT milliseconds) and choices to fit.  The
    non-decision time `tau` is held fixed.

    `fitting_method` specifies how the model should be fit.
    "differential_evolution" is the default, which accurately locates
    the global maximum without using a derivative.  "simple" uses a
    derivative-based method to minimize from the center of the search
    range.  "simplex" is the Nelder-Mead method, and is a
    gradient-free local search, also from the center of the search
    range.  Alternatively, a custom objective function may be used by
    setting `fitting_method` to be a function which accepts the "x_0"
    parameter (for starting position) and "constraints" (for min and
    max values), and returns a scipy OptimizeResult.

    `bounds` is a dictionary with keys "b", "a", and "v", giving the
    (min, max) search range for each parameter.  Missing keys are taken
    from parameters.fit_bounds.

    `fitparams` is a dictionary of kwargs to be passed directly to the
    minimization routine for fine-grained low-level control over the
    optimization.  Normally this should not be needed.

    If `verify` is False (the default), checking for programming
    errors is disabled during the fit.  If verification is already
    disabled, this does not re-enable it.

    `verbose` enables out-of-boundaries warnings and prints the
    parameters at each evaluation of the fitness function.

    Returns a FitResult, with the fitted parameters in its
    `parameters` dictionary.
    """
    if len(sample) == 0:
        raise InvalidParameter("Cannot fit an empty sample")
    names = ["b", "a", "v"]
    search = dict(param.fit_bounds)
    if bounds is not None:
        search.update(bounds)
    constraints = [tuple(search[n]) for n in names] # List of (min, max) tuples
    for n,(minval,maxval) in zip(names, constraints):
        if not minval < maxval:
            raise InvalidParameter("Invalid bounds for %s: %s" % (n, repr((minval, maxval))))
    x_0 = [(minval+maxval)/2 for minval,maxval in constraints]
    # Disable paranoid and likelihood warnings if `verify` is False.
    paranoid_state = paranoid_settings.get('enabled')
    likelihood_warnings_state = param.likelihood_warnings
    if paranoid_state and not verify:
        paranoid_settings.set(enabled=False)
    param.likelihood_warnings = False
    # A function for the solver to minimize.
    def _fit_model(xs):
        clipped = []
        for x,n,(minval,maxval) in zip(xs, names, constraints):
            # Sometimes the numpy optimizers will ignore bounds up to
            # floating point errors, and Nelder-Mead ignores them
            # entirely.  Keep the model within its domain.
            if x > maxval:
                if verbose:
                    _logger.warning("Optimizer went out of bounds.  Setting %s=%f to %f" % (n, x, maxval))
                x = maxval
            if x < minval:
                if verbose:
                    _logger.warning("Optimizer went out of bounds.  Setting %s=%f to %f" % (n, x, minval))
                x = minval
            clipped.append(x)
        b, a, v = clipped
        lossf = -loglikelihood(sample, b, a, v, tau=tau, epsilon=epsilon)
        if verbose:
            _logger.info(format_parameters(b, a, v) + " loss=" + str(lossf))
        return lossf
    # Cast to a dictionary if necessary
    if fitparams is None:
        fitparams = {}
    try:
        # Run the solver
        if fitting_method == "simple":
            x_fit = minimize(_fit_model, x_0, bounds=constraints, **fitparams)
            assert x_fit.success, "Fit failed: %s" % x_fit.message
        elif fitting_method == "simplex":
            x_fit = minimize(_fit_model, x_0, method='Nelder-Mead', **fitparams)
        elif fitting_method == "differential_evolution":
            if "disp" not in fitparams.keys():
                fitparams["disp"] = verbose
            x_fit = differential_evolution(_fit_model, constraints, **fitparams)
        elif callable(fitting_method):
            x_fit = fitting_method(_fit_model, x_0=x_0, constraints=constraints)
        else:
            raise NotImplementedError("Invalid fitting method")
    finally:
        paranoid_settings.set(enabled=paranoid_state)
        param.likelihood_warnings = likelihood_warnings_state
    fitted = {n : float(np.clip(x, minval, maxval)) for x,n,(minval,maxval) in zip(x_fit.x, names, constraints)}
    _logger.info("Params " + format_parameters(**fitted) + " gave " + str(x_fit.fun))
    return FitResult(fitting_method=(fitting_method if isinstance(fitting_method, str) else "custom"),
                     loss="Negative log likelihood", value=float(x_fit.fun), parameters=fitted,
                     tau=tau, samplesize=len(sample),
                     mess=getattr(x_fit, "message", ""))
