"""
This module aims to express an interface agreement
between the streams and the various kinds of data they carry.
"""

from abc import ABC
from typing import Any, Sequence, Union


NATIVE_DATA = Union[int, float, str, bool, None]

class BrookValue(ABC):
	""" Root for classes that implement specialized run-time data structures """
	def __str__(self):
		from .printer import render
		return render(self)

VALUE = Union[NATIVE_DATA, BrookValue]
ARGS = Sequence[VALUE]
ENV = dict[str, Any]
