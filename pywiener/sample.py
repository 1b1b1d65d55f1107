# Copyright 2018 Max Shinn <maxwell.shinn@yale.edu>
#           2018 Norman Lam <norman.lam@yale.edu>
#
# This file is part of PyWiener, and is available under the MIT license.
# Please see LICENSE.txt in the root directory for more information.

__all__ = ["Trajectory", "TrajectorySample"]

import numpy as np

from paranoid.types import NDArray, Self, Positive0, Range, Unchecked, String
from paranoid.decorators import accepts, returns, requires, ensures, paranoidclass
from .paranoid_types import Choice
from .logger import logger as _logger
from .errors import InvalidParameter, check_choice

@paranoidclass
class Trajectory(object):
    """The outcome of a single simulated trial.

    A trajectory is summarised by the barrier it was absorbed at,
    `choice` (1 for the upper barrier, 0 for the lower barrier), and
    the first-passage `time`.  Trajectories are immutable, and unpack
    as a (choice, time) pair.
    """
    @staticmethod
    def _test(v):
        assert v.choice in Choice(), "Invalid choice"
        assert v.time in Positive0(), "Time must be non-negative"
    @staticmethod
    def _generate():
        yield Trajectory(choice=1, time=.5)
        yield Trajectory(choice=0, time=1e-4)
        yield Trajectory(choice=1, time=3.)
    def __init__(self, choice, time):
        check_choice(choice)
        if not time >= 0:
            raise InvalidParameter("Time must be non-negative, not %s" % repr(time))
        object.__setattr__(self, "choice", int(choice))
        object.__setattr__(self, "time", float(time))
    def __setattr__(self, name, val):
        """No changing the outcome of a trial after it was simulated."""
        raise AttributeError("Trajectory objects are read-only")
    def __delattr__(self, name):
        raise AttributeError("Trajectory objects are read-only")
    def __iter__(self):
        yield self.choice
        yield self.time
    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return self.choice == other.choice and self.time == other.time
        return False
    def __hash__(self):
        return hash((self.choice, self.time))
    def __repr__(self):
        return type(self).__name__ + "(choice=%i, time=%s)" % (self.choice, repr(self.time))

@paranoidclass
class TrajectorySample(object):
    """An ordered batch of simulated (or observed) trials.

    This is a glorified container for two arrays of equal length: the
    choice on each trial (1 for the upper barrier, 0 for the lower
    barrier) and the response time on each trial.  The order of the
    trials is the order in which they were generated or recorded, and
    is preserved by every operation on the sample.

    Iterating over a sample, or indexing it with an integer, gives
    Trajectory objects.  Indexing with a slice gives a new
    TrajectorySample.  The arrays are read-only; to combine samples,
    use `+`, which concatenates them in order.
    """
    @classmethod
    def _test(cls, v):
        # Most testing is done in the constructor and the data is read
        # only, so this isn't strictly necessary
        assert type(v) is cls
        assert v.choices in NDArray(d=1, t=Choice), "choices not a numpy array of zeros and ones"
        assert v.times in NDArray(d=1, t=Positive0), "times not a numpy array with elements greater than 0"
        assert len(v.choices) == len(v.times), "choices and times have different lengths"
    @staticmethod
    def _generate():
        aa = lambda x : np.asarray(x)
        yield TrajectorySample(aa([1, 0, 1]), aa([.1, .2, .3]))
        yield TrajectorySample(aa([1, 1]), aa([.5, 1.5]))
        yield TrajectorySample(aa([0]), aa([.2]))
        yield TrajectorySample(aa([], dtype=int), aa([], dtype=float))
    def __init__(self, choices, times):
        choices = np.asarray(choices)
        times = np.asarray(times, dtype=float)
        assert choices.ndim == 1 and times.ndim == 1, "choices and times must be one dimensional"
        assert len(choices) == len(times), "choices and times must have the same length"
        assert np.all(np.isin(choices, [0, 1])), "Choices must be 0 or 1"
        assert np.all(times >= 0), "Times must be non-negative"
        self.choices = choices.astype(np.int64)
        self.times = times
        # Values should not change
        self.choices.flags.writeable = False
        self.times.flags.writeable = False
    @staticmethod
    def from_trajectories(trajectories):
        """Build a sample from an iterable of Trajectory objects, keeping their order."""
        trajectories = list(trajectories)
        choices = np.asarray([tr.choice for tr in trajectories], dtype=np.int64)
        times = np.asarray([tr.time for tr in trajectories], dtype=float)
        return TrajectorySample(choices, times)
    def __len__(self):
        """The number of trials"""
        return len(self.choices)
    def __iter__(self):
        """Iterate through the trials in order, as Trajectory objects."""
        for c, t in zip(self.choices, self.times):
            yield Trajectory(choice=c, time=t)
    def __getitem__(self, i):
        if isinstance(i, slice):
            return TrajectorySample(self.choices[i], self.times[i])
        return Trajectory(choice=self.choices[i], time=self.times[i])
    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return False
        if len(self) != len(other):
            return False
        return bool(np.all(self.choices == other.choices)) and \
            bool(np.allclose(self.times, other.times))
    def __add__(self, other):
        choices = np.concatenate([self.choices, other.choices])
        times = np.concatenate([self.times, other.times])
        return TrajectorySample(choices, times)
    def __repr__(self):
        return type(self).__name__ + "(choices=%s, times=%s)" % (repr(self.choices.tolist()), repr(self.times.tolist()))
    @property
    def choice_upper(self):
        """Response times of trials which ended at the upper barrier (choice 1)"""
        return self.times[self.choices == 1]
    @property
    def choice_lower(self):
        """Response times of trials which ended at the lower barrier (choice 0)"""
        return self.times[self.choices == 0]
    @accepts(Self, Choice)
    @returns(Range(0, 1))
    @requires("len(self) > 0")
    def prob(self, choice):
        """Proportion of trials ending with choice `choice` (0 or 1)."""
        return float(np.sum(self.choices == choice))/len(self)
    @accepts(Self)
    @returns(Positive0)
    @requires("len(self) > 0")
    def mean_decision_time(self):
        """The mean response time across all trials."""
        return float(np.mean(self.times))
    @staticmethod
    @accepts(NDArray(d=2))
    @returns(Self)
    @requires('data.shape[1] == 2')
    @requires('set(list(data[:,1])) - {0, 1} == set()')
    @ensures('len(return) == data.shape[0]')
    def from_numpy_array(data):
        """Generate a TrajectorySample from a numpy array.

        `data` should be an n x 2 array.  The first column should be
        the response times, and the second column should be the choice
        (0 or 1) of each trial.  The row order is kept.
        """
        return TrajectorySample(data[:,1].astype(np.int64), data[:,0].astype(float))
    @staticmethod
    @accepts(Unchecked, String, String)
    @returns(Self)
    @requires('rt_column_name in df')
    @requires('choice_column_name in df')
    @requires('not df[rt_column_name].isnull().any()')
    @requires('not df[choice_column_name].isnull().any()')
    @ensures('len(df) == len(return)')
    def from_pandas_dataframe(df, rt_column_name="time", choice_column_name="choice"):
        """Generate a TrajectorySample from a pandas dataframe.

        `df` should contain columns named `rt_column_name` (the
        response times, in seconds) and `choice_column_name` (0 or 1,
        or True/False).  Other columns are ignored.  The row order is
        kept.
        """
        if len(df) == 0:
            _logger.warning("Empty DataFrame")
        elif np.mean(df[rt_column_name]) > 50:
            _logger.warning("RTs should be specified in seconds, not milliseconds")
        assert np.all(np.isin(df[choice_column_name], [0, 1, True, False])), "Choice must be specified as True/False or 0/1"
        return TrajectorySample(np.asarray(df[choice_column_name]).astype(np.int64),
                                np.asarray(df[rt_column_name]).astype(float))
    def to_pandas_dataframe(self, rt_column_name="time", choice_column_name="choice"):
        """Convert the sample to a pandas dataframe.

        The dataframe has one row per trial, in generation order, and
        two columns: `choice_column_name` (0 or 1) and
        `rt_column_name` (the response time).
        """
        import pandas
        return pandas.DataFrame({choice_column_name: np.array(self.choices),
                                 rt_column_name: np.array(self.times)},
                                columns=[choice_column_name, rt_column_name])
