# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


r"""
dualquat: rigid transforms as dual quaternions.

A dual quaternion :math:`\mathbf{q}_0+\epsilon\mathbf{q}_1` packs a rotation and a translation into a single algebraic
object so that poses can be composed, inverted, exponentiated, and integrated without tracking the rotation and
translation separately.  A typical session looks like::

    >>> import numpy as np
    >>> import dualquat as dq
    >>> rot_z_90 = [0, 0, np.sin(np.pi/4), np.cos(np.pi/4)]
    >>> pose = dq.from_quat_vector(rot_z_90, [1, 0, 0])
    >>> dq.vector_translation(pose, [1, 0, 0])
    array([1., 1., 0.])
    >>> dq.frame_translation(pose, [1, 1, 0])
    array([1., 0., 0.])
    >>> (pose * dq.inverse(pose)).isclose(dq.IDENTITY)
    True

The package is organized as

* :mod:`dualquat.core` -- the quaternion, dual number, and dual quaternion algebra
* :mod:`dualquat.transforms` -- building transforms from rotations and translations and applying them to points
* :mod:`dualquat.kinematics` -- integrating angular velocity and acceleration into transforms

Quaternions use the ``[x, y, z, s]`` layout (scalar last) throughout.
"""

import dualquat.core
import dualquat.transforms
import dualquat.kinematics

from dualquat.core import *
from dualquat.exceptions import ZeroNormError
from dualquat.transforms import (from_quat_vector, get_translation, get_rotation, vector_translation,
                                 vector_translation_sandwich, frame_translation, to_homogeneous, from_homogeneous)
from dualquat.kinematics import (integration, vector_integration, coordinate_integration, PoseIntegratorOptions,
                                 PoseIntegrator)

__all__ = dualquat.core.__all__ + \
          ['ZeroNormError',
           'from_quat_vector', 'get_translation', 'get_rotation', 'vector_translation', 'vector_translation_sandwich',
           'frame_translation', 'to_homogeneous', 'from_homogeneous',
           'integration', 'vector_integration', 'coordinate_integration', 'PoseIntegratorOptions', 'PoseIntegrator']
