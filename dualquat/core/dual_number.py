r"""
This module provides the scalar dual number algebra.

A dual number is a pair :math:`\hat{a}=a_0+\epsilon a_1` where :math:`\epsilon\neq 0` but :math:`\epsilon^2=0`.  Every
function here applies that nilpotent rule by hand, which makes the arithmetic carry a first order "derivative" along in
the dual part.  For instance, for any analytic function :math:`f`

.. math::
    f(a_0+\epsilon a_1) = f(a_0) + \epsilon a_1 f'(a_0)

which is how :func:`dual_sin`, :func:`dual_cos`, :func:`dual_exp`, and :func:`dual_sqrt` are formed.

Dual numbers are used by the dual quaternion routines to represent the norm of a dual quaternion and the angle/pitch
pair of a screw motion.  Both parts may be floats or equally shaped 1d arrays (for vectorized dual quaternions).
"""

from typing import NamedTuple

import numpy as np

from dualquat._typing import F_SCALAR_OR_ARRAY
from dualquat.core._helpers import _check_nonzero_norm


__all__ = ['DualNumber', 'dual_add', 'dual_sub', 'dual_mul', 'dual_inverse', 'dual_conjugate',
           'dual_sin', 'dual_cos', 'dual_exp', 'dual_sqrt']


class DualNumber(NamedTuple):
    """
    An immutable dual number ``real + ε dual``.
    """

    real: F_SCALAR_OR_ARRAY
    """
    The real (primary) part of the dual number
    """

    dual: F_SCALAR_OR_ARRAY = 0.0
    """
    The dual (infinitesimal) part of the dual number
    """


def dual_add(a: DualNumber, b: DualNumber) -> DualNumber:
    """
    Adds two dual numbers part by part.
    """

    return DualNumber(a.real + b.real, a.dual + b.dual)


def dual_sub(a: DualNumber, b: DualNumber) -> DualNumber:
    """
    Subtracts dual number `b` from `a` part by part.
    """

    return DualNumber(a.real - b.real, a.dual - b.dual)


def dual_mul(a: DualNumber, b: DualNumber) -> DualNumber:
    r"""
    Multiplies two dual numbers.

    .. math::
        (a_0+\epsilon a_1)(b_0+\epsilon b_1) = a_0b_0 + \epsilon(a_0b_1 + a_1b_0)

    :param a: the first dual number
    :param b: the second dual number
    :return: the product
    """

    return DualNumber(a.real * b.real, a.real * b.dual + a.dual * b.real)


def dual_inverse(a: DualNumber) -> DualNumber:
    r"""
    Returns the multiplicative inverse of a dual number.

    .. math::
        \frac{1}{a_0+\epsilon a_1} = \frac{1}{a_0} - \epsilon\frac{a_1}{a_0^2}

    :param a: the dual number to invert
    :return: the inverse
    :raises ZeroNormError: if the real part is zero (pure dual numbers have no inverse)
    """

    _check_nonzero_norm(a.real, 'real part of the dual number')

    return DualNumber(1 / a.real, -a.dual / a.real ** 2)


def dual_conjugate(a: DualNumber) -> DualNumber:
    """
    Returns the dual number conjugate, which negates the dual part.
    """

    return DualNumber(a.real, -a.dual)


def dual_sin(a: DualNumber) -> DualNumber:
    r"""
    :math:`\sin(a_0+\epsilon a_1) = \sin a_0 + \epsilon a_1\cos a_0`
    """

    return DualNumber(np.sin(a.real), a.dual * np.cos(a.real))


def dual_cos(a: DualNumber) -> DualNumber:
    r"""
    :math:`\cos(a_0+\epsilon a_1) = \cos a_0 - \epsilon a_1\sin a_0`
    """

    return DualNumber(np.cos(a.real), -a.dual * np.sin(a.real))


def dual_exp(a: DualNumber) -> DualNumber:
    r"""
    :math:`e^{a_0+\epsilon a_1} = e^{a_0}(1 + \epsilon a_1)`
    """

    exp_real = np.exp(a.real)

    return DualNumber(exp_real, a.dual * exp_real)


def dual_sqrt(a: DualNumber) -> DualNumber:
    r"""
    Returns the principal square root of a dual number.

    .. math::
        \sqrt{a_0+\epsilon a_1} = \sqrt{a_0} + \epsilon\frac{a_1}{2\sqrt{a_0}}

    :param a: the dual number to take the square root of
    :return: the square root
    :raises ValueError: if the real part is negative
    :raises ZeroNormError: if the real part is zero
    """

    if np.any(np.asanyarray(a.real) < 0):
        raise ValueError('The real part of the dual number must be non-negative to take the square root')

    _check_nonzero_norm(a.real, 'real part of the dual number')

    root_real = np.sqrt(a.real)

    return DualNumber(root_real, a.dual / (2 * root_real))
