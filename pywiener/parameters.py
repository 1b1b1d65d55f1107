# Copyright 2018 Max Shinn <maxwell.shinn@yale.edu>
#           2018 Norman Lam <norman.lam@yale.edu>
# 
# This file is part of PyWiener, and is available under the MIT license.
# Please see LICENSE.txt in the root directory for more information.

# Default numerical parameters.  These can be overridden by user code
# for the whole process, or per call.

# Random walk
t_eps = 1e-4 # [s] Time-step.  Step size is sqrt(t_eps).
max_steps = 10**8 # Give up on a walk after this many steps
block_size = 4096 # Initial number of uniform draws per block
max_block_size = 2**20 # Blocks double in size up to this many draws

# Series approximation
epsilon = 1e-3 # Truncation error budget (Navarro & Fuss p225)

# Below this value of |a*v|, treat the drift as zero in dchoice
zero_drift_tol = 1e-12

# Display warnings for unclamped step probabilities
step_prob_warnings = True

# Fitting
fit_bounds = {"b": (.01, .99), "a": (.1, 5.), "v": (-5., 5.)} # Default (min, max) search ranges

# Display warnings for zero likelihoods
likelihood_warnings = True
