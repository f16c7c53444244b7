import copy

import numpy as np

from dualquat._typing import ARRAY_LIKE, DOUBLE_ARRAY
from dualquat.exceptions import ZeroNormError


def _check_array_and_shape(input: ARRAY_LIKE,
                           return_copy: bool = False,
                           first_axis_length: int | None = None,
                           matrix_size: int | None = None,
                           what: str = 'input') -> DOUBLE_ARRAY:
    """
    Converts `input` to a float64 array after checking its shape.

    :param input: the array like to check
    :param return_copy: always copy the data, even when `input` is already a float64 array
    :param first_axis_length: the required length of the first axis.  The result may then be 1d or 2d
    :param matrix_size: the required size of the trailing square matrix axes
    :param what: what the input is, used in the error messages
    :return: the input as a float64 array
    :raises ValueError: if the shape is not as required
    """

    in_shape = np.shape(input)

    if not in_shape:
        raise ValueError(f'The {what} must be an array, not a scalar')

    if first_axis_length is not None:
        if in_shape[0] != first_axis_length or len(in_shape) > 2:
            raise ValueError(f'The {what} must be shaped ({first_axis_length},) or ({first_axis_length}, n). '
                             f'Got {in_shape}')

    if matrix_size is not None:
        if len(in_shape) < 2 or in_shape[-2:] != (matrix_size, matrix_size):
            raise ValueError(f'The {what} must be shaped ({matrix_size}, {matrix_size}) or '
                             f'(n, {matrix_size}, {matrix_size}). Got {in_shape}')

    if return_copy:
        input = copy.deepcopy(input)

    return np.asanyarray(input, dtype=np.float64)


def _check_quaternion_array_and_shape(quaternion: ARRAY_LIKE, return_copy: bool = False) -> DOUBLE_ARRAY:
    return _check_array_and_shape(quaternion, return_copy, first_axis_length=4, what='quaternion')


def _check_vector_array_and_shape(vector: ARRAY_LIKE, return_copy: bool = False) -> DOUBLE_ARRAY:
    return _check_array_and_shape(vector, return_copy, first_axis_length=3, what='vector')


def _check_matrix_array_and_shape(matrix: ARRAY_LIKE, return_copy: bool = False) -> DOUBLE_ARRAY:
    return _check_array_and_shape(matrix, return_copy, matrix_size=3, what='rotation matrix')


def _check_homogeneous_array_and_shape(matrix: ARRAY_LIKE, return_copy: bool = False) -> DOUBLE_ARRAY:
    return _check_array_and_shape(matrix, return_copy, matrix_size=4, what='homogeneous matrix')


def _match_columns(array_1: DOUBLE_ARRAY, array_2: DOUBLE_ARRAY) -> tuple[DOUBLE_ARRAY, DOUBLE_ARRAY]:
    """
    Turns a 1d input into a single column when the other input is 2d so that one quaternion can be applied to many.
    """

    if array_1.ndim == 1 and array_2.ndim > 1:
        array_1 = array_1.reshape(-1, 1)

    elif array_2.ndim == 1 and array_1.ndim > 1:
        array_2 = array_2.reshape(-1, 1)

    return array_1, array_2


def _check_nonzero_norm(norm: ARRAY_LIKE, what: str = 'primary quaternion') -> None:
    """
    Raises :class:`.ZeroNormError` if any of the supplied norms is exactly zero.

    :param norm: the norm(s) to check
    :param what: what the norm belongs to, used in the error message
    """

    if np.any(np.asanyarray(norm) == 0):
        raise ZeroNormError(f'The norm of the {what} is zero so the operation is undefined')
