"""
This module defines the exceptions raised by dualquat.
"""


class ZeroNormError(ValueError):
    """
    Raised when an operation divides by the norm of a quaternion (or the real part of a dual number) that is zero.

    Norms, inverses, and normalization of dual quaternions are undefined when the primary quaternion has zero length.
    Rather than silently propagating ``nan``/``inf`` values through the rest of a computation, the operations in
    dualquat raise this error so the condition can be caught and handled by the caller.

    Because this is a subclass of :class:`ValueError`, existing handlers for bad numeric input will also catch it.
    """
