# Copyright 2018 Max Shinn <maxwell.shinn@yale.edu>
#           2018 Norman Lam <norman.lam@yale.edu>
# 
# This file is part of PyWiener, and is available under the MIT license.
# Please see LICENSE.txt in the root directory for more information.

__all__ = ["Trajectory", "TrajectorySample", "FitResult",
           "random_walk", "simulate_ddm",
           "time_choice_density", "dchoice",
           "loglikelihood", "sampler_data", "fit_ddm",
           "InvalidParameter", "SimulationTimeout", "set_log_level"]

# Check that Python3 is running
import sys
if sys.version_info.major != 3:
    raise ImportError("PyWiener only supports Python 3")

from .errors import InvalidParameter, SimulationTimeout
from .sample import Trajectory, TrajectorySample
from .fitresult import FitResult
from .simulate import random_walk, simulate_ddm
from .analytic import time_choice_density, dchoice
from .functions import loglikelihood, sampler_data, fit_ddm
from .logger import set_log_level

from ._version import __version__

# Some default functions for paranoid scientist
import paranoid
import math
import numpy as np
paranoid.settings.Settings.get("namespace").update({"math": math, "np": np})
# Disable paranoid for users
paranoid.settings.Settings.set(enabled=False)
