# Copyright 2018 Max Shinn <maxwell.shinn@yale.edu>
#           2018 Norman Lam <norman.lam@yale.edu>
# 
# This file is part of PyWiener, and is available under the MIT license.
# Please see LICENSE.txt in the root directory for more information.

from paranoid import Type, Set

class Choice(Type):
    """0 (lower barrier) or 1 (upper barrier)"""
    def test(self, v):
        assert v in Set([0, 1]), "Choice must be 0 or 1, not " + repr(v)
    def generate(self):
        yield 0
        yield 1
