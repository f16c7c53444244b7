r"""
This module integrates angular velocity and linear acceleration into rigid transforms.

Over a short time step :math:`\Delta t` the incremental transform is built from

* the rotation :math:`\Delta\mathbf{q}`, the exponential of the rotation vector :math:`\boldsymbol{\omega}\Delta t`
  (see :func:`.quaternion_integration`), and
* the translation :math:`\Delta\mathbf{r}=\mathbf{a}\Delta t^2`.

Note that the translation increment is position level: it is the acceleration multiplied by the *square* of the time
step, not a velocity increment.  Any initial velocity contribution must be folded into the acceleration (or applied as
a separate transform) by the caller.

The increment is composed with a running pose either on the left (:func:`vector_integration`, for rates given in the
body frame) or on the right (:func:`coordinate_integration`, for rates given in the spatial frame).  No
renormalization is performed by these functions, so round off slowly pulls a pose that is integrated over many steps
away from being a rigid transform.  Call :func:`.normalize` periodically, or use :class:`PoseIntegrator` with a
``renormalize_every`` cadence.
"""

from dataclasses import dataclass

from numbers import Real

from typing import Literal

import numpy as np
from pandas import Timedelta

from dualquat._typing import ARRAY_LIKE, DT_LIKE, SCALAR_OR_ARRAY
from dualquat.core._helpers import _check_vector_array_and_shape
from dualquat.core.dual_quaternion import IDENTITY, DualQuaternion, mul
from dualquat.core.exponential import normalize
from dualquat.core.quaternion_math import quaternion_integration
from dualquat.transforms import from_quat_vector
from dualquat.utilities.mixin_classes import UserOptionConfigured
from dualquat.utilities.options import UserOptions


__all__ = ['integration', 'vector_integration', 'coordinate_integration', 'PoseIntegratorOptions', 'PoseIntegrator']


def _dt_to_seconds(dt: DT_LIKE) -> SCALAR_OR_ARRAY:
    """
    Interprets a time step given either as a number of seconds or as anything :class:`pandas.Timedelta` understands.
    """

    # numpy registers timedelta64 as an integer so it has to be excluded explicitly
    if isinstance(dt, (Real, np.ndarray)) and not isinstance(dt, np.timedelta64):
        return dt

    try:
        return Timedelta(dt).total_seconds()
    except (TypeError, ValueError) as err:
        raise TypeError('dt must be a number of seconds or a timedelta like object (datetime.timedelta, '
                        f'numpy.timedelta64, pandas.Timedelta, or a string such as "10ms"). Got {dt!r}') from err


def integration(angular_velocity: ARRAY_LIKE, acceleration: ARRAY_LIKE, dt: DT_LIKE) -> DualQuaternion:
    r"""
    Returns the incremental rigid transform produced by a constant angular velocity and acceleration over `dt`.

    .. math::
        \Delta\hat{\mathbf{q}} = \Delta\mathbf{q} + \frac{\epsilon}{2}\Delta\mathbf{r}\otimes\Delta\mathbf{q},\quad
        \Delta\mathbf{r} = \mathbf{a}\Delta t^2

    A zero angular velocity and zero acceleration give the identity for any time step.

    :param angular_velocity: the angular velocity vector in radians per second
    :param acceleration: the linear acceleration vector
    :param dt: the time step, in seconds or as a timedelta like object
    :return: the incremental transform
    """

    dt = _dt_to_seconds(dt)

    rotation = quaternion_integration(angular_velocity, dt)
    translation = _check_vector_array_and_shape(acceleration) * dt ** 2

    return from_quat_vector(rotation, translation)


def vector_integration(pose: DualQuaternion, angular_velocity: ARRAY_LIKE, acceleration: ARRAY_LIKE,
                       dt: DT_LIKE) -> DualQuaternion:
    """
    Advances `pose` by one step, composing the increment on the left (``mul(increment, pose)``).

    Use this when the angular velocity and acceleration are expressed in the body frame.

    :param pose: the current pose
    :param angular_velocity: the angular velocity vector in radians per second
    :param acceleration: the linear acceleration vector
    :param dt: the time step, in seconds or as a timedelta like object
    :return: the new pose (not renormalized)
    """

    return mul(integration(angular_velocity, acceleration, dt), pose)


def coordinate_integration(pose: DualQuaternion, angular_velocity: ARRAY_LIKE, acceleration: ARRAY_LIKE,
                           dt: DT_LIKE) -> DualQuaternion:
    """
    Advances `pose` by one step, composing the increment on the right (``mul(pose, increment)``).

    Use this when the angular velocity and acceleration are expressed in the spatial (world) frame.

    :param pose: the current pose
    :param angular_velocity: the angular velocity vector in radians per second
    :param acceleration: the linear acceleration vector
    :param dt: the time step, in seconds or as a timedelta like object
    :return: the new pose (not renormalized)
    """

    return mul(pose, integration(angular_velocity, acceleration, dt))


@dataclass
class PoseIntegratorOptions(UserOptions):
    """
    This dataclass serves as one way to control the settings for the :class:`PoseIntegrator` class.

    You can set any of the options on an instance of this dataclass and pass it to the :class:`PoseIntegrator` class at
    initialization (or through the method :meth:`PoseIntegrator.reset_settings`) to set the settings on the class.  This
    class is the preferred way of setting options on the class due to ease of use in IDEs.
    """

    frame: Literal['body', 'spatial'] = 'body'
    """
    The frame the angular velocity and acceleration are expressed in.

    ``'body'`` composes each increment on the left (:func:`vector_integration`) and ``'spatial'`` composes it on the
    right (:func:`coordinate_integration`).
    """

    renormalize_every: int = 0
    """
    Renormalize the running pose after every this many steps.

    The default of 0 never renormalizes, leaving drift control entirely to the caller.
    """

    def override_options(self):

        if self.frame not in ('body', 'spatial'):
            raise ValueError(f"frame must be 'body' or 'spatial'. Got {self.frame!r}")

        if self.renormalize_every < 0:
            raise ValueError(f'renormalize_every must be non-negative. Got {self.renormalize_every}')


class PoseIntegrator(UserOptionConfigured[PoseIntegratorOptions], PoseIntegratorOptions):
    """
    Keeps a running pose and advances it with angular velocity and acceleration measurements.

    This is a thin stateful wrapper around :func:`vector_integration` and :func:`coordinate_integration`::

        >>> from dualquat.kinematics import PoseIntegrator, PoseIntegratorOptions
        >>> integrator = PoseIntegrator(options=PoseIntegratorOptions(renormalize_every=100))
        >>> for omega, accel in measurements:
        ...     pose = integrator.step(omega, accel, '10ms')

    Unlike the functions in this module an instance is mutable and should not be shared between threads.
    """

    def __init__(self, pose: DualQuaternion | None = None, options: PoseIntegratorOptions | None = None):
        """
        :param pose: The starting pose.  Defaults to the identity
        :param options: the options to configure the integrator with
        """

        super().__init__(PoseIntegratorOptions, options=options)

        self.pose: DualQuaternion = IDENTITY if pose is None else pose
        """
        The current pose
        """

        self.steps: int = 0
        """
        The number of steps taken since the last reset
        """

    def step(self, angular_velocity: ARRAY_LIKE, acceleration: ARRAY_LIKE, dt: DT_LIKE) -> DualQuaternion:
        """
        Advances the running pose by one time step.

        :param angular_velocity: the angular velocity vector in radians per second
        :param acceleration: the linear acceleration vector
        :param dt: the time step, in seconds or as a timedelta like object
        :return: the updated pose
        """

        if self.frame == 'body':
            self.pose = vector_integration(self.pose, angular_velocity, acceleration, dt)
        elif self.frame == 'spatial':
            self.pose = coordinate_integration(self.pose, angular_velocity, acceleration, dt)
        else:
            raise ValueError(f"frame must be 'body' or 'spatial'. Got {self.frame!r}")

        self.steps += 1

        if self.renormalize_every and self.steps % self.renormalize_every == 0:
            self.normalize()

        return self.pose

    def normalize(self) -> DualQuaternion:
        """
        Renormalizes the running pose (see :func:`.normalize`) and returns it.
        """

        self.pose = normalize(self.pose)

        return self.pose

    def reset(self, pose: DualQuaternion | None = None):
        """
        Resets the running pose (to the identity by default) and the step counter.

        :param pose: the pose to restart from
        """

        self.pose = IDENTITY if pose is None else pose
        self.steps = 0
