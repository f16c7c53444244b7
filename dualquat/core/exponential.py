r"""
This module provides normalization of dual quaternions and the exponential/logarithm maps between twists and rigid
transformations.

A twist here is a pure dual quaternion (zero scalar portion in both parts)

.. math::
    \hat{\boldsymbol{\xi}} = \frac{\theta}{2}\hat{\mathbf{u}} + \epsilon\left(\frac{\theta}{2}\mathbf{u}_1 +
    \frac{d}{2}\hat{\mathbf{u}}\right)

describing a screw motion that rotates by :math:`\theta` about the line with direction :math:`\hat{\mathbf{u}}` and
moment :math:`\mathbf{u}_1` while translating by :math:`d` along it.  Its exponential is the unit dual quaternion of
that screw motion.  Written with the dual angle :math:`\hat{\theta}=\left\|\hat{\boldsymbol{\xi}}\right\|` and the unit
screw axis :math:`\hat{\mathbf{s}}` (the normalized twist) this is the dual number analogue of Euler's formula

.. math::
    e^{\hat{\boldsymbol{\xi}}} = \cos\hat{\theta} + \hat{\mathbf{s}}\sin\hat{\theta}

In particular a pure rotation by :math:`\theta` about :math:`\hat{\mathbf{u}}` is the exponential of
:math:`\frac{\theta}{2}\hat{\mathbf{u}}` and a pure translation :math:`\mathbf{t}` is the exponential of
:math:`\frac{\epsilon}{2}\mathbf{t}`.
"""

import numpy as np

from dualquat.core.dual_number import DualNumber, dual_cos, dual_exp, dual_inverse, dual_sin
from dualquat.core.dual_quaternion import DualQuaternion, add_num_quat, mul_num_quat
from dualquat.core.norm import norm
from dualquat.core.quaternion_math import pure_quaternion, quaternion_conjugate, quaternion_multiplication


__all__ = ['normalize', 'exp', 'log']


SMALL_ANGLE = 1e-15
"""
Rotation magnitudes below this are treated as zero rotation by :func:`exp` and :func:`log`.
"""


def normalize(a: DualQuaternion) -> DualQuaternion:
    r"""
    Projects a dual quaternion onto the unit dual quaternions by dividing by its dual number norm.

    .. math::
        \frac{\hat{\mathbf{q}}}{\left\|\hat{\mathbf{q}}\right\|} = \frac{\mathbf{q}_0}{n_0} +
        \epsilon\left(\frac{\mathbf{q}_1}{n_0}-\frac{\mathbf{q}_0^T\mathbf{q}_1}{n_0^3}\mathbf{q}_0\right)

    The result has a unit length primary part and satisfies the Study condition, so it is a valid rigid transform.
    Call this periodically on poses built up from many products to remove accumulated round off.

    :param a: the dual quaternion to normalize
    :return: the normalized dual quaternion
    :raises ZeroNormError: if the primary quaternion has zero length
    """

    return mul_num_quat(dual_inverse(norm(a)), a)


def _identity_like(primary: np.ndarray) -> np.ndarray:
    out = np.zeros(primary.shape)
    out[-1] = 1

    return out


def _pure_exp(twist: DualQuaternion) -> DualQuaternion:
    """
    The exponential of a dual quaternion whose scalar portions are both zero.
    """

    small = np.linalg.norm(twist.primary[:3], axis=0) < SMALL_ANGLE

    if np.all(small):
        # exp(ε d) = 1 + ε d exactly since ε^2 = 0
        return DualQuaternion(_identity_like(twist.primary), twist.dual)

    safe_twist = twist

    if np.any(small):
        # only reachable for vectorized input. put a placeholder axis in the zero rotation columns so the division by
        # the norm is defined; these columns are overwritten with the exact result below
        placeholder = np.array(twist.primary)
        placeholder[0, small] = 1
        safe_twist = DualQuaternion(placeholder, twist.dual)

    angle = norm(safe_twist)
    screw_axis = normalize(safe_twist)

    result = add_num_quat(dual_cos(angle), mul_num_quat(dual_sin(angle), screw_axis))

    if np.any(small):
        primary = np.array(result.primary)
        dual = np.array(result.dual)

        primary[:, small] = _identity_like(twist.primary)[:, small]
        dual[:, small] = twist.dual[:, small]

        result = DualQuaternion(primary, dual)

    return result


def exp(a: DualQuaternion) -> DualQuaternion:
    r"""
    Returns the exponential of a dual quaternion.

    For a twist (a pure dual quaternion, see the module documentation) this is

    .. math::
        e^{\hat{\boldsymbol{\xi}}} = \cos\left\|\hat{\boldsymbol{\xi}}\right\| +
        \frac{\hat{\boldsymbol{\xi}}}{\left\|\hat{\boldsymbol{\xi}}\right\|}\sin\left\|\hat{\boldsymbol{\xi}}\right\|

    where the norm, cosine, and sine are all dual number valued (:func:`.norm`, :func:`.dual_cos`,
    :func:`.dual_sin`).  When the rotation portion of the twist is smaller than :data:`SMALL_ANGLE` the result is the
    exact limit :math:`e^{\epsilon\mathbf{q}_1}=1+\epsilon\mathbf{q}_1`, so a zero twist maps to the identity rather
    than to ``nan``.

    If the scalar portions are not zero they commute with the rest of the dual quaternion and are factored out as the
    dual number exponential :math:`e^{q_{0s}+\epsilon q_{1s}}` multiplying the exponential of the pure remainder.  The
    result is then not a unit dual quaternion.

    :param a: the dual quaternion (typically a twist) to exponentiate
    :return: the exponential
    """

    scalar_part = DualNumber(a.primary[-1], a.dual[-1])

    twist = DualQuaternion(pure_quaternion(a.primary[:3]), pure_quaternion(a.dual[:3]))

    return mul_num_quat(dual_exp(scalar_part), _pure_exp(twist))


def log(a: DualQuaternion) -> DualQuaternion:
    r"""
    Returns the twist whose exponential is the rigid transform `a`.

    The input is normalized first (:func:`normalize`) and its sign is chosen so the scalar portion of the primary
    quaternion is non-negative (``a`` and ``-a`` are the same transform), so the returned twist always has a rotation
    angle of at most :math:`\pi`.  Writing the transform as
    :math:`\cos\hat{\theta}+\hat{\mathbf{s}}\sin\hat{\theta}` with :math:`\hat{\theta}=\theta_0+\epsilon\theta_1` and
    :math:`\hat{\mathbf{s}}=\hat{\mathbf{u}}+\epsilon\mathbf{u}_1`, the twist is

    .. math::
        \hat{\theta}\hat{\mathbf{s}} = \theta_0\hat{\mathbf{u}} + \epsilon(\theta_0\mathbf{u}_1+\theta_1\hat{\mathbf{u}})

    For (near) zero rotation the twist is the pure translation :math:`\epsilon\,\text{vec}(\mathbf{q}_1\otimes
    \mathbf{q}_0^*)`.

    :param a: the rigid transform
    :return: the twist such that ``exp(log(a))`` reproduces ``normalize(a)`` up to sign
    :raises ZeroNormError: if the primary quaternion has zero length
    """

    unit = normalize(a)

    # choose the representative with a non-negative scalar so the angle is the short way around
    sign = np.where(unit.primary[-1] < 0, -1.0, 1.0)
    primary = unit.primary * sign
    dual = unit.dual * sign

    sin_half = np.linalg.norm(primary[:3], axis=0)
    cos_half = primary[-1]
    half_angle = np.arctan2(sin_half, cos_half)

    small = sin_half < SMALL_ANGLE
    safe_sin = np.where(small, 1.0, sin_half)

    axis = primary[:3] / safe_sin
    pitch = -dual[-1] / safe_sin
    moment = (dual[:3] - pitch * cos_half * axis) / safe_sin

    twist_primary = np.where(small, 0.0, half_angle * axis)

    half_translation = quaternion_multiplication(dual, quaternion_conjugate(primary))[:3]
    twist_dual = np.where(small, half_translation, half_angle * moment + pitch * axis)

    return DualQuaternion(pure_quaternion(twist_primary), pure_quaternion(twist_dual))
