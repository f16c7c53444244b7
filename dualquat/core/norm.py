r"""
This module provides the norm, inner product, and inverse of dual quaternions.

The norm of a dual quaternion is a dual number.  Since
:math:`\hat{\mathbf{q}}\hat{\mathbf{q}}^*=\left\|\mathbf{q}_0\right\|^2+2\epsilon\,\mathbf{q}_0^T\mathbf{q}_1` is a
dual number (the vector portions cancel), its dual number square root gives

.. math::
    \left\|\hat{\mathbf{q}}\right\| = \left\|\mathbf{q}_0\right\| +
    \epsilon\frac{\mathbf{q}_0^T\mathbf{q}_1}{\left\|\mathbf{q}_0\right\|}

and the inverse follows as the conjugate divided by the squared norm.  All of these are undefined when the primary
quaternion has zero length, in which case :class:`.ZeroNormError` is raised.
"""

from dualquat._typing import F_SCALAR_OR_ARRAY
from dualquat.core._helpers import _check_nonzero_norm
from dualquat.core.dual_number import DualNumber, dual_inverse
from dualquat.core.dual_quaternion import DualQuaternion, conj, mul_num_quat
from dualquat.core.quaternion_math import quaternion_dot, quaternion_norm


__all__ = ['norm', 'dot', 'inverse']


def norm(a: DualQuaternion) -> DualNumber:
    r"""
    Returns the dual number norm of a dual quaternion.

    .. math::
        \left\|\hat{\mathbf{q}}\right\| = \left\|\mathbf{q}_0\right\| +
        \epsilon\frac{\mathbf{q}_0^T\mathbf{q}_1}{\left\|\mathbf{q}_0\right\|}

    For a rigid transformation the norm is exactly ``DualNumber(1, 0)``.

    :param a: the dual quaternion
    :return: the norm (with array parts for a vectorized dual quaternion)
    :raises ZeroNormError: if the primary quaternion has zero length
    """

    prim_norm = quaternion_norm(a.primary)

    _check_nonzero_norm(prim_norm)

    return DualNumber(prim_norm, quaternion_dot(a.primary, a.dual) / prim_norm)


def dot(a: DualQuaternion, b: DualQuaternion) -> F_SCALAR_OR_ARRAY:
    """
    Returns the inner product of two dual quaternions treated as 8 element vectors.

    This is the sum of the inner products of the primary parts and of the dual parts.  It is a plain euclidean
    inner product and is not the dual number valued bilinear form used in screw theory.

    :param a: the first dual quaternion
    :param b: the second dual quaternion
    :return: the inner product
    """

    return quaternion_dot(a.primary, b.primary) + quaternion_dot(a.dual, b.dual)


def inverse(a: DualQuaternion) -> DualQuaternion:
    r"""
    Returns the multiplicative inverse of a dual quaternion.

    The inverse is the conjugate (:func:`.conj`) scaled by the inverse of the squared dual number norm

    .. math::
        \hat{\mathbf{q}}^{-1} = \frac{\hat{\mathbf{q}}^*}{\left\|\hat{\mathbf{q}}\right\|^2}
        = \frac{\mathbf{q}_0^*}{n_0^2} + \epsilon\left(\frac{\mathbf{q}_1^*}{n_0^2} -
        \frac{2\mathbf{q}_0^T\mathbf{q}_1}{n_0^4}\mathbf{q}_0^*\right)

    where :math:`n_0=\left\|\mathbf{q}_0\right\|`, so that ``mul(a, inverse(a))`` and ``mul(inverse(a), a)`` are both
    the identity.  For a rigid transformation this reduces to the conjugate.

    :param a: the dual quaternion to invert
    :return: the inverse
    :raises ZeroNormError: if the primary quaternion has zero length
    """

    prim_norm, dual_norm = norm(a)

    # the squared norm as a dual number is (n0^2, 2 n0 n1)
    squared_norm = DualNumber(prim_norm * prim_norm, 2 * prim_norm * dual_norm)

    return mul_num_quat(dual_inverse(squared_norm), conj(a))
