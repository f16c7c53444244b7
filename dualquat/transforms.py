r"""
This module converts between dual quaternions and rotation/translation pairs and applies rigid transforms to points.

The convention used throughout dualquat is that the transform built from rotation :math:`\mathbf{q}` and translation
:math:`\mathbf{t}` first rotates a point and then translates it:

.. math::
    \mathbf{p}' = \mathbf{R}(\mathbf{q})\mathbf{p} + \mathbf{t}, \qquad
    \hat{\mathbf{q}} = \mathbf{q} + \frac{\epsilon}{2}\mathbf{t}\otimes\mathbf{q}

where :math:`\mathbf{t}` is treated as a pure quaternion.  Composition then follows the rotation convention: with
``a = from_quat_vector(q_b2c, t_b2c)`` and ``b = from_quat_vector(q_a2b, t_a2b)``, ``mul(a, b)`` maps points from
frame A to frame C.

Every function here is vectorized: dual quaternions holding n columns, points given as 3xn arrays, or one transform
applied to many points all work.
"""

import warnings

import numpy as np

from dualquat._typing import ARRAY_LIKE, DOUBLE_ARRAY
from dualquat.core._helpers import _check_homogeneous_array_and_shape, _check_vector_array_and_shape, _match_columns
from dualquat.core.conversions import quaternion_to_rotmat, rotmat_to_quaternion
from dualquat.core.dual_quaternion import DualQuaternion, conj, conj_dual_num, mul
from dualquat.core.quaternion_math import (frame_rotation, pure_quaternion, quaternion_conjugate,
                                           quaternion_multiplication, quaternion_norm, vector_rotation)


__all__ = ['from_quat_vector', 'get_translation', 'get_rotation', 'vector_translation', 'vector_translation_sandwich',
           'frame_translation', 'to_homogeneous', 'from_homogeneous']


UNIT_TOLERANCE = 1e-6
"""
How far the length of a rotation quaternion may be from 1 before a warning is issued.
"""


def _warn_if_not_unit(quaternion: DOUBLE_ARRAY, action: str):

    if np.any(np.abs(quaternion_norm(quaternion) - 1) > UNIT_TOLERANCE):
        warnings.warn(f'The rotation quaternion is not unit length so {action}.  '
                      'Normalize it before using it as a rigid transform.')


def _vector_product(quaternion_1: DOUBLE_ARRAY, quaternion_2: DOUBLE_ARRAY) -> DOUBLE_ARRAY:
    """
    The vector portion of the hamiltonian product of the quaternions.
    """

    return quaternion_multiplication(quaternion_1, quaternion_2)[:3]


def from_quat_vector(rotation: ARRAY_LIKE, translation: ARRAY_LIKE) -> DualQuaternion:
    r"""
    Builds the dual quaternion that rotates by `rotation` and then translates by `translation`.

    .. math::
        \hat{\mathbf{q}} = \mathbf{q} + \frac{\epsilon}{2}\mathbf{t}\otimes\mathbf{q}

    The rotation should be a unit quaternion in the ``[x, y, z, s]`` layout.  If it is not a warning is issued and the
    result will not satisfy the rigid transformation invariants.

    :param rotation: the rotation quaternion(s)
    :param translation: the translation vector(s)
    :return: the rigid transform
    """

    rotation = np.asanyarray(rotation, dtype=np.float64)

    _warn_if_not_unit(rotation, 'the dual quaternion built from it is not a rigid transform')

    dual = 0.5 * quaternion_multiplication(pure_quaternion(translation), rotation)

    return DualQuaternion(rotation, dual)


def get_translation(a: DualQuaternion) -> DOUBLE_ARRAY:
    r"""
    Extracts the translation vector from a rigid transform.

    .. math::
        \mathbf{t} = 2\,\text{vec}(\mathbf{q}_1\otimes\mathbf{q}_0^*)

    This inverts :func:`from_quat_vector` exactly when the primary quaternion is unit length.  Otherwise the
    result is scaled by the squared length of the primary quaternion and a warning is issued.

    :param a: the rigid transform
    :return: the translation vector(s)
    """

    _warn_if_not_unit(a.primary, 'the extracted translation is scaled by its squared length')

    return 2 * _vector_product(a.dual, quaternion_conjugate(a.primary))


def get_rotation(a: DualQuaternion) -> DOUBLE_ARRAY:
    """
    Returns the rotation quaternion of a rigid transform (a writeable copy of the primary part).

    :param a: the rigid transform
    :return: the rotation quaternion(s)
    """

    return np.array(a.primary)


def vector_translation(a: DualQuaternion, point: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Applies the rigid transform to the point(s), rotating and then translating them.

    This is the vector portion of the dual part of the sandwich product
    :math:`\hat{\mathbf{q}}\otimes(1+\epsilon\mathbf{p})\otimes\overline{\hat{\mathbf{q}}^*}` (see
    :func:`vector_translation_sandwich`) expanded into the closed form

    .. math::
        \mathbf{p}' = \text{vec}(\mathbf{q}_1\otimes\mathbf{q}_0^*) - \text{vec}(\mathbf{q}_0\otimes\mathbf{q}_1^*) +
        \mathbf{q}_0\otimes\mathbf{p}\otimes\mathbf{q}_0^*

    which avoids two full dual quaternion products.  For a transform from :func:`from_quat_vector` this is
    :math:`\mathbf{R}\mathbf{p}+\mathbf{t}`.

    :param a: the rigid transform
    :param point: the point(s) to transform
    :return: the transformed point(s)
    """

    point = _check_vector_array_and_shape(point)

    term1 = _vector_product(a.dual, quaternion_conjugate(a.primary))
    term2 = _vector_product(a.primary, quaternion_conjugate(a.dual))

    offset, rotated = _match_columns(term1 - term2, vector_rotation(a.primary, point))

    return offset + rotated


def vector_translation_sandwich(a: DualQuaternion, point: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Applies the rigid transform to the point(s) using the full sandwich product.

    .. math::
        \hat{\mathbf{p}}' = \hat{\mathbf{q}}\otimes(1+\epsilon\mathbf{p})\otimes\overline{\hat{\mathbf{q}}^*}

    where :math:`\hat{\mathbf{q}}^*` is :func:`.conj` and the overline is :func:`.conj_dual_num`.  The transformed
    point is the vector portion of the dual part of the result.  This gives the same result as
    :func:`vector_translation` but is slower.

    :param a: the rigid transform
    :param point: the point(s) to transform
    :return: the transformed point(s)
    """

    point = _check_vector_array_and_shape(point)

    identity = np.zeros((4,) + point.shape[1:])
    identity[-1] = 1

    point_dq = DualQuaternion(identity, pure_quaternion(point))

    return mul(mul(a, point_dq), conj_dual_num(conj(a))).dual[:3]


def frame_translation(a: DualQuaternion, point: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Expresses the point(s) in the frame defined by the rigid transform, undoing :func:`vector_translation`.

    .. math::
        \mathbf{p}' = \mathbf{q}_0^*\otimes\mathbf{p}\otimes\mathbf{q}_0 - \text{vec}(\mathbf{q}_0^*\otimes\mathbf{q}_1) +
        \text{vec}(\mathbf{q}_1^*\otimes\mathbf{q}_0)

    For a transform from :func:`from_quat_vector` this is :math:`\mathbf{R}^T(\mathbf{p}-\mathbf{t})`, so that
    ``frame_translation(a, vector_translation(a, p))`` returns ``p`` for any rigid transform ``a``.

    :param a: the rigid transform
    :param point: the point(s) to transform
    :return: the transformed point(s)
    """

    point = _check_vector_array_and_shape(point)

    term1 = _vector_product(quaternion_conjugate(a.primary), a.dual)
    term2 = _vector_product(quaternion_conjugate(a.dual), a.primary)

    offset, rotated = _match_columns(term2 - term1, frame_rotation(a.primary, point))

    return offset + rotated


def to_homogeneous(a: DualQuaternion) -> DOUBLE_ARRAY:
    r"""
    Converts a single rigid transform into a 4x4 homogeneous transformation matrix.

    .. math::
        \mathbf{T} = \left[\begin{array}{cc}\mathbf{R} & \mathbf{t} \\ \mathbf{0}^T & 1\end{array}\right]

    :param a: the rigid transform (not vectorized)
    :return: the homogeneous transformation matrix
    :raises ValueError: if `a` holds more than one dual quaternion
    """

    if a.primary.ndim != 1:
        raise ValueError('Only a single dual quaternion can be converted to a homogeneous matrix')

    matrix = np.eye(4)
    matrix[:3, :3] = quaternion_to_rotmat(a.primary)
    matrix[:3, 3] = get_translation(a)

    return matrix


def from_homogeneous(matrix: ARRAY_LIKE) -> DualQuaternion:
    """
    Converts a 4x4 homogeneous transformation matrix into a rigid transform.

    The upper left 3x3 block must be a rotation matrix.  The bottom row is not checked.

    :param matrix: the homogeneous transformation matrix
    :return: the rigid transform
    :raises ValueError: if the input is not a single 4x4 matrix
    """

    matrix = _check_homogeneous_array_and_shape(matrix)

    if matrix.ndim != 2:
        raise ValueError('Only a single homogeneous matrix can be converted')

    return from_quat_vector(rotmat_to_quaternion(matrix[:3, :3]), matrix[:3, 3])
