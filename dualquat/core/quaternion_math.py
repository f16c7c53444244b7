"""
This module provides the single quaternion algebra that the dual quaternion routines are built from.

All quaternions are of the form ``[q_x, q_y, q_z, q_s]`` (vector portion first, scalar last) as described in
:ref:`Quaternion Representation <quaternion-representation>`.  Every function is vectorized: multiple quaternions can be
given as a 4xn array where each column is an independent quaternion, and multiple vectors as a 3xn array.

Addition, subtraction, scaling, and negation of quaternions are ordinary numpy array arithmetic and therefore do not have
dedicated functions here.
"""

import numpy as np

from dualquat._typing import ARRAY_LIKE, DOUBLE_ARRAY, F_SCALAR_OR_ARRAY, SCALAR_OR_ARRAY

from dualquat.core._helpers import _check_quaternion_array_and_shape, _check_vector_array_and_shape, _match_columns
from dualquat.core.conversions import rotvec_to_quaternion

__all__ = ["quaternion_identity", "pure_quaternion", "quaternion_conjugate", "quaternion_multiplication",
           "quaternion_norm", "quaternion_dot", "quaternion_normalize", "vector_rotation", "frame_rotation",
           "quaternion_integration"]


def quaternion_identity() -> DOUBLE_ARRAY:
    """
    Returns the identity quaternion ``[0, 0, 0, 1]``.

    :return: The identity quaternion as a new array
    """

    return np.array([0, 0, 0, 1.0])


def pure_quaternion(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Embeds a 3 element vector (or 3xn array of vectors) as quaternion(s) with a 0 scalar portion.

    :param vector: the vector(s) to embed
    :return: The pure quaternion(s)
    """

    vector = _check_vector_array_and_shape(vector)

    return np.concatenate([vector, np.zeros((1,) + vector.shape[1:])], axis=0)


def quaternion_conjugate(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function provides the conjugate of a quaternion.

    The conjugate negates the vector portion of the quaternion:

    .. math::
        \mathbf{q}=\left[\begin{array}{c}\mathbf{q}_v\\ q_s\end{array}\right]\\
        \mathbf{q}^*=\left[\begin{array}{c}-\mathbf{q}_v\\ q_s\end{array}\right]

    For unit quaternions the conjugate is also the inverse, so that :math:`\mathbf{q}\otimes\mathbf{q}^*` is the
    identity quaternion.  Unlike a rotation inverse, no normalization is performed here, which is what the dual
    quaternion algebra requires.

    :param quaternion: The quaternion(s) to be conjugated
    :return: a numpy array containing the conjugate quaternion(s)
    """

    # ensure the value is an array and break mutability
    quaternion = _check_quaternion_array_and_shape(quaternion, return_copy=True)

    # negate the vector portion
    quaternion[:3] *= -1

    return quaternion


def quaternion_multiplication(quaternion_1_in: ARRAY_LIKE,
                              quaternion_2_in: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Returns the hamiltonian product :math:`\mathbf{q}_1\otimes\mathbf{q}_2`.

    .. math::
        \mathbf{q}_1\otimes\mathbf{q}_2=\left[\begin{array}{c}q_{s1}\mathbf{q}_{v2} + q_{s2}\mathbf{q}_{v1} +
        \mathbf{q}_{v1}\times\mathbf{q}_{v2}\\
        q_{s1}q_{s2}-\mathbf{q}_{v1}^T\mathbf{q}_{v2}\end{array}\right]

    With rotation quaternions the right operand is applied first, so
    `q_from_A_to_C = quaternion_multiplication(q_from_B_to_C, q_from_A_to_B)`.  The product is not commutative.

    Either input may be a single quaternion while the other is 4xn, in which case the single quaternion multiplies
    every column.

    :param quaternion_1_in: The left quaternion(s)
    :param quaternion_2_in: The right quaternion(s)
    :return: The product quaternion(s)
    """

    quaternion_1 = _check_quaternion_array_and_shape(quaternion_1_in)
    quaternion_2 = _check_quaternion_array_and_shape(quaternion_2_in)

    quaternion_1, quaternion_2 = _match_columns(quaternion_1, quaternion_2)

    qs1 = quaternion_1[-1]
    qv1 = quaternion_1[0:3]

    qs2 = quaternion_2[-1]
    qv2 = quaternion_2[0:3]

    qout = np.concatenate([qs1 * qv2 + qs2 * qv1 + np.cross(qv1, qv2, axis=0),
                           [qs1 * qs2 - (qv1 * qv2).sum(axis=0)]], axis=0)

    return qout


def quaternion_norm(quaternion: ARRAY_LIKE) -> F_SCALAR_OR_ARRAY:
    """
    Returns the euclidean length of the quaternion(s).

    :param quaternion: the quaternion(s) to get the length of
    :return: the length as a float, or a 1d array of lengths for a 4xn input
    """

    return np.linalg.norm(_check_quaternion_array_and_shape(quaternion), axis=0)


def quaternion_dot(quaternion_1: ARRAY_LIKE, quaternion_2: ARRAY_LIKE) -> F_SCALAR_OR_ARRAY:
    """
    Returns the 4 element inner product of two quaternions (column by column for 4xn inputs).

    :param quaternion_1: the first quaternion(s)
    :param quaternion_2: the second quaternion(s)
    :return: the inner product(s)
    """

    quaternion_1, quaternion_2 = _match_columns(_check_quaternion_array_and_shape(quaternion_1),
                                                _check_quaternion_array_and_shape(quaternion_2))

    return (quaternion_1 * quaternion_2).sum(axis=0)


def quaternion_normalize(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Normalizes the quaternion(s) such that the scalar term is positive and the length is 1

    :param quaternion: the quaternion(s) to normalize

    :returns: The normalized quaternions
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion, return_copy=True)

    signs = np.sign(work_quaternion[-1])

    if np.shape(signs):
        signs[signs == 0] = 1
    else:
        signs = signs if signs != 0 else 1

    work_quaternion *= signs/np.linalg.norm(work_quaternion, axis=0, keepdims=True)

    return work_quaternion


def vector_rotation(quaternion: ARRAY_LIKE, vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Rotates the vector(s) by the quaternion(s), equivalent to the sandwich product
    :math:`\mathbf{q}\otimes\mathbf{v}\otimes\mathbf{q}^*`.

    The closed form used is

    .. math::
        \mathbf{v}'=(q_s^2-\mathbf{q}_v^T\mathbf{q}_v)\mathbf{v}+2(\mathbf{q}_v^T\mathbf{v})\mathbf{q}_v+
        2q_s\mathbf{q}_v\times\mathbf{v}

    which matches the sandwich product exactly even for quaternions that are not unit length (the result is then
    scaled by the squared length of the quaternion).

    :param quaternion: the rotation quaternion(s)
    :param vector: the vector(s) to rotate
    :return: the rotated vector(s)
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)
    vector = _check_vector_array_and_shape(vector)

    quaternion, vector = _match_columns(quaternion, vector)

    qs = quaternion[-1]
    qv = quaternion[:3]

    return ((qs ** 2 - (qv * qv).sum(axis=0)) * vector + 2 * (qv * vector).sum(axis=0) * qv +
            2 * qs * np.cross(qv, vector, axis=0))


def frame_rotation(quaternion: ARRAY_LIKE, vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Rotates the vector(s) in the inverse direction of the quaternion(s), that is
    :math:`\mathbf{q}^*\otimes\mathbf{v}\otimes\mathbf{q}`.

    This expresses a vector given in the rotated frame in the original frame and undoes :func:`vector_rotation` for
    unit quaternions.

    :param quaternion: the rotation quaternion(s)
    :param vector: the vector(s) to rotate
    :return: the rotated vector(s)
    """

    return vector_rotation(quaternion_conjugate(quaternion), vector)


def quaternion_integration(angular_velocity: ARRAY_LIKE, dt: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    Integrates a constant angular velocity over a time step into an incremental rotation quaternion.

    The increment is the exponential map of the rotation vector :math:`\boldsymbol{\omega}\Delta t`:

    .. math::
        \Delta\mathbf{q}=\left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\hat{\boldsymbol{\omega}}\\
        \text{cos}(\frac{\theta}{2})\end{array}\right],\quad\theta=\left\|\boldsymbol{\omega}\right\|\Delta t

    so that a zero angular velocity (or a zero time step) yields the identity quaternion.

    :param angular_velocity: the angular velocity vector(s) in radians per unit time
    :param dt: the time step
    :return: the incremental rotation quaternion(s)
    """

    angular_velocity = _check_vector_array_and_shape(angular_velocity)

    return rotvec_to_quaternion(angular_velocity * dt)
