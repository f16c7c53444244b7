from typing import Union
from datetime import timedelta

from pandas import Timedelta

import numpy as np
import numpy.typing as npt

DOUBLE_ARRAY = np.typing.NDArray[np.float64]
ARRAY_LIKE = npt.ArrayLike
SCALAR_OR_ARRAY = Union[float, npt.ArrayLike]
F_SCALAR_OR_ARRAY = Union[float, DOUBLE_ARRAY]

TimedeltaLike = Union[timedelta, Timedelta, np.timedelta64, str]
DT_LIKE = Union[float, TimedeltaLike]
