# Copyright 2018 Max Shinn <maxwell.shinn@yale.edu>
#           2018 Norman Lam <norman.lam@yale.edu>
# 
# This file is part of PyWiener, and is available under the MIT license.
# Please see LICENSE.txt in the root directory for more information.

__all__ = ["InvalidParameter", "SimulationTimeout"]

import math
import numpy as np

class InvalidParameter(ValueError):
    """A model parameter, time, or choice is outside of its domain."""
    pass

class SimulationTimeout(TimeoutError):
    """A random walk did not reach either barrier within `max_steps` steps.

    This is deterministic for a given seed, so retrying only helps
    with a larger `max_steps` or different parameters.
    """
    pass

def check_parameters(b, a, v):
    """Raise InvalidParameter unless 0 < b < 1, a > 0, and v is finite."""
    if not 0 < b < 1:
        raise InvalidParameter("Relative starting point b must be in (0, 1), not %s" % repr(b))
    if not (a > 0 and math.isfinite(a)):
        raise InvalidParameter("Inter-barrier distance a must be positive, not %s" % repr(a))
    if not math.isfinite(v):
        raise InvalidParameter("Drift rate v must be finite, not %s" % repr(v))

def check_choice(choice):
    """Raise InvalidParameter unless `choice` is the integer 0 or 1.

    Booleans and floats such as 1.0 are rejected.
    """
    if isinstance(choice, (bool, np.bool_)) or not isinstance(choice, (int, np.integer)) \
       or choice not in (0, 1):
        raise InvalidParameter("Choice must be 0 or 1, not %s" % repr(choice))
