# Copyright 2018 Max Shinn <maxwell.shinn@yale.edu>
#           2018 Norman Lam <norman.lam@yale.edu>
#
# This file is part of PyWiener, and is available under the MIT license.
# Please see LICENSE.txt in the root directory for more information.

__all__ = ["random_walk", "simulate_ddm"]

import numpy as np

from paranoid.types import Number, Integer, Natural0, Maybe, Unchecked
from paranoid.decorators import accepts, returns, ensures

from . import parameters as param
from .sample import Trajectory, TrajectorySample
from .errors import InvalidParameter, SimulationTimeout, check_parameters
from .logger import logger as _logger, format_parameters

def _setup_walk(b, a, v, t_eps, max_steps):
    """Validate the inputs of a random walk and find its step size and up-step probability."""
    check_parameters(b, a, v)
    if t_eps is None:
        t_eps = param.t_eps
    if max_steps is None:
        max_steps = param.max_steps
    if not (t_eps > 0 and np.isfinite(t_eps)):
        raise InvalidParameter("Time step t_eps must be positive, not %s" % repr(t_eps))
    if max_steps < 1:
        raise InvalidParameter("max_steps must be at least 1, not %s" % repr(max_steps))
    delta = np.sqrt(t_eps)
    p = .5 * (1 + v * delta)
    # Not clamped: p outside of [0, 1] makes every step go the same way.
    if param.step_prob_warnings and not 0 <= p <= 1:
        _logger.warning("Step probability p=%f (with %s) is outside of [0, 1], so the random walk is deterministic.  "
                        "Decrease t_eps or the magnitude of the drift rate." % (p, format_parameters(b, a, v, t_eps=t_eps)))
    return t_eps, int(max_steps), delta, p

def _walk(x0, a, delta, p, t_eps, rng, max_steps, exact):
    """Run one walk from `x0` until it leaves (0, a).

    One uniform draw from `rng` decides each step: up by `delta` if
    the draw is less than `p`, otherwise down by `delta`.  The position
    after each step is `x0 + delta*k` for the net number of up-steps
    `k`, and draws are taken in blocks.

    If `exact` is False, blocks double in size and unused draws from
    the final block are discarded.  If `exact` is True, each block is
    no longer than the fewest steps which could reach a barrier, so
    the walk takes exactly one draw per step from `rng`.
    """
    k = 0 # Net number of steps taken upward so far
    tic = 0
    blocksize = param.block_size
    while tic < max_steps:
        if exact:
            x = x0 + delta * k
            blocksize = min(max(1, int(min(x, a - x) / delta) - 1), param.max_block_size)
        size = int(min(blocksize, max_steps - tic))
        steps = np.where(rng.random(size) < p, 1, -1)
        net = k + np.cumsum(steps)
        x = x0 + delta * net
        exited = (x <= 0) | (x >= a)
        if np.any(exited):
            i = int(np.argmax(exited))
            # Landing exactly on the upper barrier counts as crossing it
            choice = 1 if x[i] >= a else 0
            return Trajectory(choice=choice, time=(tic + i + 1) * t_eps)
        k = int(net[-1])
        tic += size
        blocksize = min(2*blocksize, param.max_block_size)
    raise SimulationTimeout("The random walk did not reach a barrier within %i steps.  Increase max_steps, "
                            "or increase t_eps or the magnitude of the drift rate." % max_steps)

@accepts(Number, Number, Number, t_eps=Maybe(Number), rng=Unchecked, seed=Maybe(Natural0), max_steps=Maybe(Integer))
@returns(Trajectory)
@ensures("return.time > 0")
def random_walk(b, a, v, t_eps=None, rng=None, seed=None, max_steps=None):
    """Simulate one trial of a drift-diffusion model with a random walk.

    Uses the random walk approximation described by Tuerlinckx et al
    (2001).  The walk starts at `a*b`, and on each time step of length
    `t_eps` it moves up or down by sqrt(t_eps).  It moves up with
    probability p = (1 + v*sqrt(t_eps))/2.  The walk stops once it
    reaches the lower barrier 0 or the upper barrier `a`.  As `t_eps`
    goes to zero, this converges to a drift-diffusion process with
    drift rate `v` and unit noise.

    - `b` - the relative starting point, in (0, 1)
    - `a` - the distance between the barriers, greater than 0
    - `v` - the drift rate
    - `t_eps` - the time step.  Defaults to parameters.t_eps (1e-4).
      This should be small enough that `p` lies in [0, 1].  If it
      does not, a warning is printed and the walk always moves in
      the direction of the drift.
    - `rng` - the random number generator to use.  This may be any
      object with a `random(size)` method returning uniform draws on
      [0, 1), e.g. a numpy Generator or RandomState.  Exactly one
      draw is taken from `rng` per step, so its state afterwards is
      the same as for a walk drawing one number at a time.  If it is
      not given, a new numpy Generator is created from `seed`.
    - `seed` - the seed used when `rng` is not given.  If neither is
      given, the walk is not reproducible.
    - `max_steps` - the maximum number of steps before giving up with
      SimulationTimeout.  Defaults to parameters.max_steps.

    Returns a Trajectory with the choice (1 for the upper barrier, 0
    for the lower barrier) and the first-passage time, which is the
    number of steps times `t_eps`.

    Note that the random number generator is not thread safe, so if
    you run simulations from several threads, give each of them its
    own `rng` (or `seed`).

    Reference:
    Tuerlinckx, F., Maris, E., Ratcliff, R., & De Boeck, P. (2001). A
    comparison of four methods for simulating the diffusion
    process. Behavior Research Methods, Instruments, & Computers,
    33(4), 443-456.
    """
    t_eps, max_steps, delta, p = _setup_walk(b, a, v, t_eps, max_steps)
    exact = rng is not None
    if rng is None:
        rng = np.random.default_rng(seed)
    return _walk(a*b, a, delta, p, t_eps, rng, max_steps, exact)

@accepts(Integer, Number, Number, Number, t_eps=Maybe(Number), seed=Maybe(Natural0), rng=Unchecked, max_steps=Maybe(Integer))
@returns(TrajectorySample)
@ensures("len(return) == n")
def simulate_ddm(n, b, a, v, t_eps=None, seed=None, rng=None, max_steps=None):
    """Simulate `n` independent trials of a drift-diffusion model.

    Each trial is simulated with `random_walk` (see its documentation
    for `b`, `a`, `v`, `t_eps`, and `max_steps`).  All trials draw from
    the same random number generator `rng`, or a new numpy Generator
    seeded with `seed` if `rng` is not given, so the whole batch is
    reproducible for a given seed.

    Returns a TrajectorySample with exactly `n` trials, in the order
    they were simulated.  If any trial times out, SimulationTimeout
    is raised and no sample is returned.

    Example:

        s = simulate_ddm(10, b=.5, a=2, v=1, seed=0)
        s.to_pandas_dataframe()
    """
    if isinstance(n, (bool, np.bool_)) or not isinstance(n, (int, np.integer)) or n < 1:
        raise InvalidParameter("The number of trials n must be a positive integer, not %s" % repr(n))
    t_eps, max_steps, delta, p = _setup_walk(b, a, v, t_eps, max_steps)
    exact = rng is not None
    if rng is None:
        rng = np.random.default_rng(seed)
    trajectories = []
    for s in range(0, n):
        if s % 1000 == 0:
            _logger.debug("Simulating trial %i" % s)
        trajectories.append(_walk(a*b, a, delta, p, t_eps, rng, max_steps, exact))
    return TrajectorySample.from_trajectories(trajectories)
