# Copyright 2018 Max Shinn <maxwell.shinn@yale.edu>
#           2018 Norman Lam <norman.lam@yale.edu>
#
# This file is part of PyWiener, and is available under the MIT license.
# Please see LICENSE.txt in the root directory for more information.

__all__ = ["FitResult"]

from paranoid.decorators import paranoidclass, accepts, returns, requires
from paranoid.types import Number, Self, String, Unchecked, Dict, ExtendedReal, Maybe
import numpy as np

@paranoidclass
class FitResult:
    """The fitted parameters of a drift-diffusion model and how they were found.

    - fitting_method: the optimizer used to minimize the loss (e.g.
      "differential_evolution", "simplex", or "custom")
    - loss: the name of the loss function, normally "Negative log
      likelihood"
    - parameters: a dictionary with the fitted "b", "a", and "v"
    - properties: anything else saved by `fit_ddm`, such as "tau",
      "samplesize", and "mess" (the optimizer's message)

    So the fitted drift rate is FitResult.parameters["v"], and the
    minimized negative log likelihood is FitResult.value().
    """
    @staticmethod
    def _generate():
        yield FitResult(fitting_method="Test method", loss="Negative log likelihood",
                        value=1.1, parameters={"b": .5, "a": 1., "v": .3}, samplesize=10, mess="xyz")
        yield FitResult(fitting_method="simplex", loss="Negative log likelihood",
                        value=None, parameters={})
    @staticmethod
    def _test(v):
        assert v.val in Maybe(Number)
        assert v.fitting_method in String()
        assert v.loss in String()
        assert v.parameters in Dict(String, Number)
        assert v.properties in Dict(String, Unchecked)
    def __init__(self, fitting_method, loss, value, parameters, **kwargs):
        """
        - `fitting_method` - name of the optimizer
        - `loss` - name of the loss function
        - `value` - the loss at the optimum, or None if there was no fit
        - `parameters` - dict of the parameter values at the optimum
        - `kwargs` - any additional properties that should be saved
        """
        self.val = value
        self.loss = loss
        self.parameters = dict(parameters)
        self.properties = kwargs
        self.fitting_method = fitting_method
    def __repr__(self):
        components = ["fitting_method=%s" % repr(self.fitting_method),
                      "loss=%s" % repr(self.loss),
                      "value=%s" % repr(self.val),
                      "parameters=%s" % repr(self.parameters)]
        components += ["%s=%s" % (k,repr(v)) for k,v in self.properties.items()]
        return type(self).__name__ + "(" + ", ".join(components) + ")"
    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return self.__dict__ == other.__dict__
        return False
    @accepts(Self)
    @returns(ExtendedReal)
    def value(self):
        """The loss at the optimum, or inf if no fit was performed."""
        if self.val is not None:
            return self.val
        else:
            return np.inf
    @accepts(Self)
    @returns(ExtendedReal)
    @requires("self.loss == 'Negative log likelihood'")
    @requires("'samplesize' in self.properties")
    def bic(self):
        """Bayesian information criterion of the fit.

        This is log(samplesize)*nparams + 2*loss, where the loss is the
        negative log likelihood and nparams is the number of fitted
        parameters.
        """
        return np.log(self.properties["samplesize"])*len(self.parameters) + 2*self.value()
    @accepts(Self)
    @returns(ExtendedReal)
    @requires("self.loss == 'Negative log likelihood'")
    def aic(self):
        """Akaike information criterion of the fit, 2*nparams + 2*loss."""
        return 2*len(self.parameters) + 2*self.value()
