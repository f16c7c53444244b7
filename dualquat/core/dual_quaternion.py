r"""
This module defines the :class:`DualQuaternion` value type along with its linear and multiplicative algebra.

A dual quaternion :math:`\hat{\mathbf{q}}=\mathbf{q}_0+\epsilon\mathbf{q}_1` is a pair of quaternions, the primary part
:math:`\mathbf{q}_0` and the dual part :math:`\mathbf{q}_1`, combined under the dual number rule :math:`\epsilon^2=0`.
When :math:`\mathbf{q}_0` is unit length and :math:`\mathbf{q}_0^T\mathbf{q}_1=0` (the Study condition) the dual
quaternion represents a rigid transformation, with :math:`\mathbf{q}_0` the rotation and
:math:`\mathbf{q}_1=\frac{1}{2}\mathbf{t}\otimes\mathbf{q}_0` encoding the translation :math:`\mathbf{t}`.

The functions in this module form the linear core (addition, scaling, and the two conjugations), the action of a dual
number scalar on a dual quaternion, and the dual quaternion product.  None of them preserve the rigid transformation
invariants in general so results should be renormalized (:func:`.normalize`) before being used as transforms.
"""

from numbers import Real

import numpy as np

from dualquat._typing import ARRAY_LIKE, DOUBLE_ARRAY, SCALAR_OR_ARRAY
from dualquat.core._helpers import _check_array_and_shape, _check_quaternion_array_and_shape, _match_columns
from dualquat.core.dual_number import DualNumber
from dualquat.core.quaternion_math import quaternion_conjugate, quaternion_identity, quaternion_multiplication


__all__ = ['DualQuaternion', 'IDENTITY', 'identity', 'add', 'sub', 'scale', 'negate', 'conj', 'conj_dual_num',
           'add_num_quat', 'mul_num_quat', 'mul']


class DualQuaternion:
    """
    An immutable dual quaternion ``primary + ε dual``.

    Both parts are stored as read only numpy arrays in the ``[x, y, z, s]`` layout.  Either both parts are length 4
    (a single dual quaternion) or both are 4xn (n dual quaternions, one per column), in which case every routine in
    dualquat operates column by column.

    The class overloads the arithmetic operators to call the module level functions, so the following are
    equivalent::

        >>> from dualquat import DualQuaternion, mul, add, scale
        >>> a = DualQuaternion([0, 0, 1, 0], [0.5, 0, 0, 0])
        >>> b = DualQuaternion([1, 0, 0, 0])
        >>> a * b == mul(a, b)
        True
        >>> a + b == add(a, b)
        True
        >>> 2 * a == scale(2, a)
        True

    Note that ``*`` between two dual quaternions is the non-commutative dual quaternion product while ``*`` with a
    real number is scaling.  The equality operator checks for exact equality of both parts; use :meth:`isclose` for a
    tolerance based comparison.

    Instances unpack as ``primary, dual = dual_quaternion``.
    """

    __slots__ = ('_primary', '_dual')

    def __init__(self, primary: ARRAY_LIKE | None = None, dual: ARRAY_LIKE | None = None):
        """
        :param primary: The primary (real) quaternion(s).  Defaults to the identity quaternion
        :param dual: The dual quaternion(s).  Defaults to zeros shaped like `primary`
        :raises ValueError: if either part does not have a first axis of length 4 or the parts are shaped differently
        """

        if primary is None:
            primary = quaternion_identity()

        primary = _check_quaternion_array_and_shape(primary, return_copy=True)

        if dual is None:
            dual = np.zeros(primary.shape)

        dual = _check_quaternion_array_and_shape(dual, return_copy=True)

        if primary.shape != dual.shape:
            raise ValueError('The primary and dual parts must have the same shape. '
                             f'Got {primary.shape} and {dual.shape}')

        # break mutability so the value semantics can't be violated through the properties
        primary.flags.writeable = False
        dual.flags.writeable = False

        self._primary = primary
        self._dual = dual

    @classmethod
    def from_array(cls, array: ARRAY_LIKE) -> 'DualQuaternion':
        """
        Creates a dual quaternion from an 8 element array (or 8xn array) ordered ``[primary, dual]``.

        :param array: the stacked primary and dual parts
        :return: the dual quaternion
        """

        array = _check_array_and_shape(array, first_axis_length=8)

        return cls(array[:4], array[4:])

    @property
    def primary(self) -> DOUBLE_ARRAY:
        """
        The primary (real) part of the dual quaternion.

        This property is read only.
        """

        return self._primary

    @property
    def dual(self) -> DOUBLE_ARRAY:
        """
        The dual (infinitesimal) part of the dual quaternion.

        This property is read only.
        """

        return self._dual

    @property
    def array(self) -> DOUBLE_ARRAY:
        """
        The dual quaternion as a new 8 element (or 8xn) array ordered ``[primary, dual]``.
        """

        return np.concatenate([self._primary, self._dual], axis=0)

    def isclose(self, other: 'DualQuaternion', atol: float = 1e-9) -> bool:
        """
        Checks whether both parts of `other` are within an absolute tolerance of this dual quaternion.

        A single dual quaternion compared with a vectorized one is checked against every column.

        :param other: the dual quaternion to compare against
        :param atol: the absolute tolerance
        :return: ``True`` if every component agrees to within `atol`
        """

        primary, other_primary = _match_columns(self._primary, other.primary)
        dual, other_dual = _match_columns(self._dual, other.dual)

        return bool(np.allclose(primary, other_primary, rtol=0, atol=atol) and
                    np.allclose(dual, other_dual, rtol=0, atol=atol))

    def is_rigid_transform(self, atol: float = 1e-9) -> bool:
        """
        Checks whether this dual quaternion satisfies the invariants of a rigid transformation.

        That is, the primary part is unit length and the primary and dual parts are orthogonal (the Study condition).

        :param atol: the absolute tolerance used for both checks
        :return: ``True`` if the dual quaternion (every column of it) is a valid rigid transformation
        """

        unit = np.abs(np.linalg.norm(self._primary, axis=0) - 1) <= atol
        study = np.abs((self._primary * self._dual).sum(axis=0)) <= atol

        return bool(np.all(unit) and np.all(study))

    def __iter__(self):
        yield self._primary
        yield self._dual

    def __eq__(self, other) -> bool:

        if not isinstance(other, DualQuaternion):
            return NotImplemented

        return (self._primary.shape == other.primary.shape and
                bool((self._primary == other.primary).all() and (self._dual == other.dual).all()))

    __hash__ = None

    def __add__(self, other: 'DualQuaternion') -> 'DualQuaternion':

        if isinstance(other, DualQuaternion):
            return add(self, other)

        return NotImplemented

    def __sub__(self, other: 'DualQuaternion') -> 'DualQuaternion':

        if isinstance(other, DualQuaternion):
            return sub(self, other)

        return NotImplemented

    def __neg__(self) -> 'DualQuaternion':
        return negate(self)

    def __mul__(self, other: 'DualQuaternion | float') -> 'DualQuaternion':

        if isinstance(other, DualQuaternion):
            return mul(self, other)

        elif isinstance(other, Real):
            return scale(other, self)

        return NotImplemented

    def __rmul__(self, other: float) -> 'DualQuaternion':

        # only scalars end up here, a DualQuaternion on the left is handled by __mul__
        if isinstance(other, Real):
            return scale(other, self)

        return NotImplemented

    def __repr__(self) -> str:
        return 'DualQuaternion({0!r}, {1!r})'.format(self._primary, self._dual)

    def __str__(self) -> str:
        return '{0} + ε{1}'.format(self._primary, self._dual)


def identity() -> DualQuaternion:
    """
    Returns the identity dual quaternion (identity rotation, zero translation).
    """

    return DualQuaternion(quaternion_identity(), np.zeros(4))


IDENTITY = identity()
"""
The identity dual quaternion ``([0, 0, 0, 1], [0, 0, 0, 0])``, a two sided identity of :func:`mul`.
"""


def _column_parts(a: DualQuaternion, *factors: SCALAR_OR_ARRAY) -> tuple[DOUBLE_ARRAY, DOUBLE_ARRAY]:
    """
    The parts of `a`, spread to one column per factor when `a` is single and any of the factors is a 1d array.
    """

    columns = [np.size(factor) for factor in factors if np.ndim(factor) > 0]

    if not columns or a.primary.ndim > 1:
        return a.primary, a.dual

    shape = (4, max(columns))

    return np.broadcast_to(a.primary.reshape(4, 1), shape), np.broadcast_to(a.dual.reshape(4, 1), shape)


def add(a: DualQuaternion, b: DualQuaternion) -> DualQuaternion:
    """
    Adds two dual quaternions part by part.

    A single dual quaternion is added to every column of a vectorized one.
    """

    primary_a, primary_b = _match_columns(a.primary, b.primary)
    dual_a, dual_b = _match_columns(a.dual, b.dual)

    return DualQuaternion(primary_a + primary_b, dual_a + dual_b)


def sub(a: DualQuaternion, b: DualQuaternion) -> DualQuaternion:
    """
    Subtracts dual quaternion `b` from `a` part by part.

    A single dual quaternion is subtracted from (or has subtracted from it) every column of a vectorized one.
    """

    primary_a, primary_b = _match_columns(a.primary, b.primary)
    dual_a, dual_b = _match_columns(a.dual, b.dual)

    return DualQuaternion(primary_a - primary_b, dual_a - dual_b)


def scale(s: SCALAR_OR_ARRAY, a: DualQuaternion) -> DualQuaternion:
    """
    Multiplies both parts of the dual quaternion by the real scalar `s`.

    A 1d array of n factors scales the columns of a vectorized dual quaternion one by one, or turns a single dual
    quaternion into n scaled copies.

    :param s: the scale factor (or a 1d array of factors, one per column)
    :param a: the dual quaternion to scale
    :return: the scaled dual quaternion
    """

    primary, dual = _column_parts(a, s)

    return DualQuaternion(s * primary, s * dual)


def negate(a: DualQuaternion) -> DualQuaternion:
    """
    Negates both parts of the dual quaternion.

    A negated unit dual quaternion represents the same rigid transformation as the original.
    """

    return DualQuaternion(-a.primary, -a.dual)


def conj(a: DualQuaternion) -> DualQuaternion:
    r"""
    Returns the quaternion conjugate of both parts, :math:`\mathbf{q}_0^*+\epsilon\mathbf{q}_1^*`.

    This is the conjugate used to invert dual quaternions since
    :math:`\hat{\mathbf{q}}\hat{\mathbf{q}}^*` is a dual number (see :func:`.inverse`).  It is not the same as
    :func:`conj_dual_num`.

    :param a: the dual quaternion to conjugate
    :return: the conjugate
    """

    return DualQuaternion(quaternion_conjugate(a.primary), quaternion_conjugate(a.dual))


def conj_dual_num(a: DualQuaternion) -> DualQuaternion:
    r"""
    Returns the dual number conjugate, :math:`\mathbf{q}_0-\epsilon\mathbf{q}_1`.

    This replaces :math:`\epsilon` with :math:`-\epsilon` and leaves both quaternions otherwise untouched.  Combined with
    :func:`conj` it forms the conjugate used in the sandwich product that applies a transform to a point.

    :param a: the dual quaternion to conjugate
    :return: the conjugate
    """

    return DualQuaternion(a.primary, -a.dual)


def add_num_quat(d: DualNumber, a: DualQuaternion) -> DualQuaternion:
    """
    Adds the dual number `d` to the dual quaternion `a`.

    The real part of `d` is added to the scalar portion of the primary quaternion and the dual part of `d` is added to
    the scalar portion of the dual quaternion.

    A dual number with 1d array parts applies one element per column, spreading a single dual quaternion into as
    many columns as needed.

    :param d: the dual number
    :param a: the dual quaternion
    :return: the sum
    """

    primary, dual = (np.array(part) for part in _column_parts(a, d.real, d.dual))

    primary[-1] += d.real
    dual[-1] += d.dual

    return DualQuaternion(primary, dual)


def mul_num_quat(d: DualNumber, a: DualQuaternion) -> DualQuaternion:
    r"""
    Multiplies the dual quaternion `a` by the dual number `d`.

    .. math::
        (d_0+\epsilon d_1)(\mathbf{q}_0+\epsilon\mathbf{q}_1) = d_0\mathbf{q}_0 + \epsilon(d_0\mathbf{q}_1 +
        d_1\mathbf{q}_0)

    Unlike :func:`mul` this product is commutative.  As with :func:`add_num_quat`, 1d array parts of `d` apply one
    element per column.

    :param d: the dual number
    :param a: the dual quaternion
    :return: the product
    """

    primary, dual = _column_parts(a, d.real, d.dual)

    return DualQuaternion(d.real * primary, d.real * dual + d.dual * primary)


def mul(a: DualQuaternion, b: DualQuaternion) -> DualQuaternion:
    r"""
    Multiplies two dual quaternions.

    .. math::
        (\mathbf{a}_0+\epsilon\mathbf{a}_1)\otimes(\mathbf{b}_0+\epsilon\mathbf{b}_1) =
        \mathbf{a}_0\otimes\mathbf{b}_0 + \epsilon(\mathbf{a}_0\otimes\mathbf{b}_1+\mathbf{a}_1\otimes\mathbf{b}_0)

    where :math:`\otimes` is the hamiltonian quaternion product (see :func:`.quaternion_multiplication`).

    The product is associative but not commutative.  When both dual quaternions are rigid transforms,
    ``mul(a, b)`` is the transform that applies `b` first and then `a`, mirroring the quaternion convention
    `q_from_A_to_C = quaternion_multiplication(q_from_B_to_C, q_from_A_to_B)`.

    :param a: the left dual quaternion
    :param b: the right dual quaternion
    :return: the product
    """

    primary = quaternion_multiplication(a.primary, b.primary)
    dual = quaternion_multiplication(a.primary, b.dual) + quaternion_multiplication(a.dual, b.primary)

    return DualQuaternion(primary, dual)
