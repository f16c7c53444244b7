r"""
This package contains the core algebra of dualquat: the single quaternion and dual number algebras and the dual
quaternion type with its ring operations, norm, inverse, normalization, and exponential map.

.. _quaternion-representation:

=================  =====================================================================================================
Representation     Description
=================  =====================================================================================================
quaternion         A 4 element quaternion of the form
                   :math:`\mathbf{q}=\left[\begin{array}{c} q_x \\ q_y \\ q_z \\ q_s\end{array}\right]`.  Rotation
                   quaternions have unit length and equal
                   :math:`\left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
                   \text{cos}(\frac{\theta}{2})\end{array}\right]` for a rotation by :math:`\theta` about the unit
                   axis :math:`\hat{\mathbf{x}}`.  Vectors are rotated actively with the hamiltonian product,
                   :math:`\mathbf{q}\otimes\mathbf{v}\otimes\mathbf{q}^*`.
dual number        A pair :math:`a_0+\epsilon a_1` with :math:`\epsilon^2=0`, see :class:`.DualNumber`.
dual quaternion    A pair of quaternions :math:`\mathbf{q}_0+\epsilon\mathbf{q}_1`, see :class:`.DualQuaternion`.
=================  =====================================================================================================

Nothing in this package depends on the transform or kinematics modules, so it can be used on its own for pure
algebra.
"""

import dualquat.core.conversions
import dualquat.core.dual_number
import dualquat.core.dual_quaternion
import dualquat.core.exponential
import dualquat.core.norm
import dualquat.core.quaternion_math

from dualquat.core.conversions import skew, quaternion_to_rotmat, rotvec_to_quaternion, rotmat_to_quaternion

from dualquat.core.dual_number import (DualNumber, dual_add, dual_sub, dual_mul, dual_inverse, dual_conjugate,
                                       dual_sin, dual_cos, dual_exp, dual_sqrt)

from dualquat.core.quaternion_math import (quaternion_identity, pure_quaternion, quaternion_conjugate,
                                           quaternion_multiplication, quaternion_norm, quaternion_dot,
                                           quaternion_normalize, vector_rotation, frame_rotation,
                                           quaternion_integration)

from dualquat.core.dual_quaternion import (DualQuaternion, IDENTITY, identity, add, sub, scale, negate, conj,
                                           conj_dual_num, add_num_quat, mul_num_quat, mul)

from dualquat.core.norm import norm, dot, inverse

from dualquat.core.exponential import normalize, exp, log

__all__ = ['skew', 'quaternion_to_rotmat', 'rotvec_to_quaternion', 'rotmat_to_quaternion',
           'DualNumber', 'dual_add', 'dual_sub', 'dual_mul', 'dual_inverse', 'dual_conjugate',
           'dual_sin', 'dual_cos', 'dual_exp', 'dual_sqrt',
           'quaternion_identity', 'pure_quaternion', 'quaternion_conjugate', 'quaternion_multiplication',
           'quaternion_norm', 'quaternion_dot', 'quaternion_normalize', 'vector_rotation', 'frame_rotation',
           'quaternion_integration',
           'DualQuaternion', 'IDENTITY', 'identity', 'add', 'sub', 'scale', 'negate', 'conj', 'conj_dual_num',
           'add_num_quat', 'mul_num_quat', 'mul',
           'norm', 'dot', 'inverse',
           'normalize', 'exp', 'log']
