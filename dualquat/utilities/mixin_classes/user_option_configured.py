"""
This module provides the :class:`UserOptionConfigured` mixin, which copies the fields of a :class:`.UserOptions`
dataclass onto an instance as plain attributes and remembers them so they can be restored later.

It is how :class:`.PoseIntegrator` is configured::

    >>> from dualquat.kinematics import PoseIntegrator, PoseIntegratorOptions
    >>> integrator = PoseIntegrator(options=PoseIntegratorOptions(frame='spatial'))
    >>> integrator.frame = 'body'  # tweak a setting for a while
    >>> integrator.reset_settings()
    >>> integrator.frame
    'spatial'

.. Note::
    The mixin must come before the options dataclass in the bases of the configured class so that its ``__init__``
    runs first.
"""

import copy

from typing import Generic, TypeVar

from dualquat.utilities.options import UserOptions


OptionsT = TypeVar("OptionsT", bound=UserOptions)
"""
The :class:`.UserOptions` subclass a configured class is built from
"""


class UserOptionConfigured(Generic[OptionsT]):
    """
    Mixin that configures an instance from a :class:`.UserOptions` dataclass and can restore that configuration.

    The configured class inherits from both this mixin (parametrized with the options type) and the options dataclass
    itself, so every option is also a typed attribute of the instance::

        class PoseIntegrator(UserOptionConfigured[PoseIntegratorOptions], PoseIntegratorOptions):
            def __init__(self, pose=None, options=None):
                super().__init__(PoseIntegratorOptions, options=options)

    A deep copy of the options is stored at initialization so later changes to the options object the caller passed
    in do not leak into :meth:`reset_settings`.
    """

    def __init__(self, options_type: type[OptionsT], *args, options: OptionsT | None = None, **kwargs) -> None:
        """
        :param options_type: The options dataclass used when `options` is not given
        :param options: The options to apply.  Defaults to ``options_type()``
        :raises ValueError: if the options fail the checks in :meth:`.UserOptions.override_options`
        """

        super().__init__(*args, **kwargs)

        if options is None:
            options = options_type()

        options.apply_options(self)

        self._original_options: OptionsT = copy.deepcopy(options)

    def reset_settings(self) -> None:
        """
        Restores every option attribute to the value it had at initialization.
        """

        self._original_options.apply_options(self)

    @property
    def original_options(self) -> OptionsT:
        """
        The options the instance was initialized with.

        This property is read only.
        """

        return self._original_options
