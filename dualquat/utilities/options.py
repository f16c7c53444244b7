"""
This module provides the :class:`UserOptions` base class for the option dataclasses in dualquat.
"""

from dataclasses import dataclass, fields

from abc import ABCMeta


@dataclass
class UserOptions(metaclass=ABCMeta):
    """
    Base class for a dataclass of user options.

    Each field of the subclass is an option with its default value.  Subclasses are named ``<ClassName>Options`` and
    are passed as the ``options`` keyword argument of ``<ClassName>`` (for instance :class:`.PoseIntegratorOptions`
    and :class:`.PoseIntegrator`).  The options are copied onto the configured instance as attributes by
    :meth:`apply_options`, usually through :class:`.UserOptionConfigured`::

        >>> @dataclass
        ... class ExampleOptions(UserOptions):
        ...     tolerance: float = 1e-9
        >>> class Target:
        ...     pass
        >>> target = Target()
        >>> ExampleOptions(tolerance=1e-6).apply_options(target)
        >>> target.tolerance
        1e-06
    """

    def override_options(self):
        """
        Hook for validating (or adjusting) the option values before they are applied.

        The default does nothing.  Subclasses raise ``ValueError`` here for values that cannot be used.
        """

    def apply_options(self, target: object) -> None:
        """
        Sets every option as an attribute of `target`.

        :param target: the instance to configure
        """

        target.__dict__.update(self.options_dict)

    @property
    def options_dict(self) -> dict:
        """
        The options as a dictionary mapping field name to value, checked by :meth:`override_options` first.
        """

        self.override_options()

        return {field.name: getattr(self, field.name) for field in fields(self)}
