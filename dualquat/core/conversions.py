# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Conversions between rotation quaternions and the other rotation representations used by dualquat.

Only what the dual quaternion routines need is provided: rotation vectors (the exponential map used by kinematic
integration) and rotation matrices (used by the homogeneous transformation matrix conversions).  As everywhere else in
dualquat, quaternions are ``[x, y, z, s]`` and n of them are given as the columns of a 4xn array.
"""

import numpy as np

from dualquat._typing import ARRAY_LIKE, DOUBLE_ARRAY

from dualquat.core._helpers import (_check_matrix_array_and_shape, _check_quaternion_array_and_shape,
                                    _check_vector_array_and_shape)


__all__ = ['skew', 'quaternion_to_rotmat', 'rotvec_to_quaternion', 'rotmat_to_quaternion']


SMALL_ROTATION = 1e-15
"""
Rotation vectors shorter than this are converted to the identity quaternion.
"""


def _skew_stack(vectors: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
    """
    Skew matrices for a 3xn array of vectors, always returned as nx3x3.
    """

    x, y, z = vectors

    out = np.zeros((vectors.shape[1], 3, 3))

    out[:, 0, 1], out[:, 0, 2] = -z, y
    out[:, 1, 0], out[:, 1, 2] = z, -x
    out[:, 2, 0], out[:, 2, 1] = -y, x

    return out


def skew(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Returns the skew symmetric cross product matrix of a vector.

    .. math::
        \left[\mathbf{a}\times\right] = \left[\begin{array}{ccc} 0 & -a_3 & a_2 \\
        a_3 & 0 & -a_1 \\
        -a_2 & a_1 & 0 \end{array}\right],\qquad \mathbf{a}\times\mathbf{b}=\left[\mathbf{a}\times\right]\mathbf{b}

    A 3xn array of vectors gives an nx3x3 stack of matrices.

    :param vector: The vector(s) to form the cross product matrix for
    :return: The skew symmetric matrix (or stack of matrices)
    """

    vector = _check_vector_array_and_shape(vector)

    matrices = _skew_stack(vector.reshape(3, -1))

    return matrices[0] if vector.ndim == 1 else matrices


def quaternion_to_rotmat(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Converts rotation quaternion(s) into the equivalent rotation matrix(ces).

    .. math::
        \mathbf{T} = (q_s^2-\mathbf{q}_v^T\mathbf{q}_v)\mathbf{I}_{3\times 3}+2\mathbf{q}_v\mathbf{q}_v^T+2q_s
        \left[\mathbf{q}_v\times\right]

    The matrix rotates vectors the same way as :func:`.vector_rotation`, i.e. ``T @ v`` equals
    ``vector_rotation(q, v)``.  A 4xn input gives an nx3x3 stack.

    :param quaternion: The rotation quaternion(s)
    :return: the rotation matrix(ces)
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    qv = quaternion[:3].reshape(3, -1)
    qs = quaternion[-1].reshape(-1, 1, 1)

    diagonal = (qs ** 2 - (qv ** 2).sum(axis=0).reshape(-1, 1, 1)) * np.eye(3)

    rotmat = diagonal + 2 * np.einsum('in,jn->nij', qv, qv) + 2 * qs * _skew_stack(qv)

    return rotmat[0] if quaternion.ndim == 1 else rotmat


def rotvec_to_quaternion(rot_vec: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Converts rotation vector(s) into rotation quaternion(s) (the quaternion exponential map).

    .. math::
        \theta = \left\|\mathbf{v}\right\|,\qquad
        \mathbf{q} = \left[\begin{array}{c} \text{sin}(\frac{\theta}{2})\frac{\mathbf{v}}{\theta} \\
        \text{cos}(\frac{\theta}{2})\end{array}\right]

    Vectors shorter than :data:`SMALL_ROTATION` give exactly the identity quaternion ``[0, 0, 0, 1]``.  A 3xn input
    gives a 4xn output.

    :param rot_vec: The rotation vector(s), with the angle in radians as the length
    :return: the rotation quaternion(s)
    """

    rot_vec = _check_vector_array_and_shape(rot_vec)

    columns = rot_vec.reshape(3, -1)

    theta = np.linalg.norm(columns, axis=0)
    small = theta < SMALL_ROTATION

    # the small columns are replaced below, this just keeps the division finite
    safe_theta = np.where(small, 1.0, theta)

    quaternion = np.concatenate([columns * (np.sin(theta / 2) / safe_theta), [np.cos(theta / 2)]], axis=0)

    quaternion[:, small] = [[0], [0], [0], [1]]

    return quaternion.reshape((4,) + rot_vec.shape[1:])


def rotmat_to_quaternion(rotation_matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Converts rotation matrix(ces) into rotation quaternion(s) with a non-negative scalar portion.

    Every product of quaternion components can be read off of the matrix:

    .. math::
        4q_s^2 = 1+\text{Tr}(\mathbf{T}),\qquad 4q_x^2 = 1+2t_{11}-\text{Tr}(\mathbf{T}),\qquad
        4q_xq_s = t_{32}-t_{23},\qquad 4q_xq_y = t_{12}+t_{21},\qquad\ldots

    The component with the largest square is recovered from the diagonal and the rest are divided out of its row of
    products (Shepperd's method), which avoids the loss of precision that comes from taking the square root of a
    component that is nearly zero.

    Matrices can be stacked along the first axis (nx3x3), in which case the quaternions are returned as the columns of a
    4xn array.

    :param rotation_matrix: The rotation matrix(ces)
    :return: the rotation quaternion(s)
    """

    rotation_matrix = _check_matrix_array_and_shape(rotation_matrix)

    t = rotation_matrix.reshape(-1, 3, 3)

    trace = np.trace(t, axis1=1, axis2=2)

    # products[n, i, j] = 4 q_i q_j in the [x, y, z, s] ordering
    products = np.empty((t.shape[0], 4, 4))

    products[:, 0, 0] = 1 + 2 * t[:, 0, 0] - trace
    products[:, 1, 1] = 1 + 2 * t[:, 1, 1] - trace
    products[:, 2, 2] = 1 + 2 * t[:, 2, 2] - trace
    products[:, 3, 3] = 1 + trace

    products[:, 0, 1] = products[:, 1, 0] = t[:, 0, 1] + t[:, 1, 0]
    products[:, 0, 2] = products[:, 2, 0] = t[:, 0, 2] + t[:, 2, 0]
    products[:, 1, 2] = products[:, 2, 1] = t[:, 1, 2] + t[:, 2, 1]

    products[:, 0, 3] = products[:, 3, 0] = t[:, 2, 1] - t[:, 1, 2]
    products[:, 1, 3] = products[:, 3, 1] = t[:, 0, 2] - t[:, 2, 0]
    products[:, 2, 3] = products[:, 3, 2] = t[:, 1, 0] - t[:, 0, 1]

    index = np.arange(t.shape[0])
    pivot = np.argmax(products[:, [0, 1, 2, 3], [0, 1, 2, 3]], axis=1)

    # 4 q_p q_j / (2 sqrt(4 q_p^2)) = q_j
    quaternion = products[index, pivot] / (2 * np.sqrt(products[index, pivot, pivot])).reshape(-1, 1)

    quaternion[quaternion[:, 3] < 0] *= -1

    if rotation_matrix.ndim == 2:
        return quaternion[0]

    return quaternion.T
