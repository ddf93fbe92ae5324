import numbers
import math
import numpy as np


class InvalidArgument(ValueError):
    """An argument failed its type check before reaching the offset math."""

    def __init__(self, message, position = None, name = None, value = None):
        super().__init__(message)
        self.position = position
        self.name = name
        self.value = value


def is_int(x):
    if isinstance(x, (bool, np.bool_)):
        return False
    return isinstance(x, (numbers.Integral, np.integer))

def is_real(x):
    if isinstance(x, (bool, np.bool_)):
        return False
    if not isinstance(x, (numbers.Real, np.integer, np.floating)):
        return False
    try:
        return math.isfinite(x)
    except OverflowError:
        # ints too large for a float
        return False

CHECKS = {
    'real': is_real,
    'int': is_int,
}

def validate_pos(args, spec):
    """
    Checks positional args against spec, a list of (name, kind) pairs
    where kind is 'real' or 'int'. Returns None when every argument
    passes, otherwise the InvalidArgument for the first failure.
    """
    if len(args) != len(spec):
        return InvalidArgument('%d parameters were passed but %d were expected' % (len(args), len(spec)))
    for i, ((name, kind), value) in enumerate(zip(spec, args)):
        if not CHECKS[kind](value):
            return InvalidArgument("Parameter #%d ('%s') with value %r is not a valid %s"
                                   % (i + 1, name, value, 'integer' if kind == 'int' else 'real number'),
                                   position = i + 1, name = name, value = value)
    return None
