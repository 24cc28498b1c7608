"""
This module defines the specialized value-types the streams operate in terms of.
Basic primitive values play themselves, but lists and callables need more help.
"""
from abc import abstractmethod
from typing import Callable, Iterable, Optional, Sequence
from .types import BrookValue, VALUE, ARGS, ENV
from .diagnostics import Fault, ValueFault, TypeFault, IndexFault

###############################################################################

class List(BrookValue):
	"""
	A materialized sequence. The elements live in a tuple which is never mutated,
	so passing a List around (or taking another reference) never copies anything.
	"""
	__slots__ = ("elements",)
	
	def __init__(self, elements:Iterable[VALUE]=()):
		self.elements = tuple(elements)
	
	def __len__(self): return len(self.elements)
	def __iter__(self): return iter(self.elements)
	def __reversed__(self): return reversed(self.elements)
	def __hash__(self): return hash(self.elements)
	
	def __getitem__(self, item):
		if isinstance(item, slice): return List(self.elements[item])
		return self.elements[item]
	
	def __eq__(self, other):
		if isinstance(other, List): return self.elements == other.elements
		return NotImplemented
	
	# Lexicographic; raises TypeError when some pair of elements is incomparable.
	def __lt__(self, other):
		if isinstance(other, List): return self.elements < other.elements
		return NotImplemented
	def __le__(self, other):
		if isinstance(other, List): return self.elements <= other.elements
		return NotImplemented
	def __gt__(self, other):
		if isinstance(other, List): return self.elements > other.elements
		return NotImplemented
	def __ge__(self, other):
		if isinstance(other, List): return self.elements >= other.elements
		return NotImplemented
	
	def __repr__(self):
		return "List(%r)"%(self.elements,)

def as_list(*items:VALUE) -> List:
	return List(items)

###############################################################################

def compare(a:VALUE, b:VALUE) -> Optional[int]:
	""" The partial order on values: -1, 0, 1, or None when a and b are incomparable. """
	try:
		if a < b: return -1
		if b < a: return 1
		if a == b: return 0
	except TypeError:
		pass
	return None

def total_compare(a:VALUE, b:VALUE) -> int:
	""" Incomparable pairs count as equal. """
	return compare(a, b) or 0

###############################################################################

class Function(BrookValue):
	""" A run-time object that can be applied with arguments. """
	
	# Python's own complaints become faults of the corresponding kind.
	_TRANSLATE = (
		(ArithmeticError, ValueFault),
		(TypeError, TypeFault),
		(LookupError, IndexFault),
	)
	
	@abstractmethod
	def apply(self, args: ARGS, env: ENV) -> VALUE: pass
	
	def _invoke(self, fn:Callable, *args) -> VALUE:
		try:
			return fn(*args)
		except Fault:
			raise
		except Exception as ex:
			for native, fault in self._TRANSLATE:
				if isinstance(ex, native): raise fault(str(ex)) from ex
			raise

class Primitive(Function):
	""" Wraps a native callable. The environment is irrelevant to it. """
	
	def __init__(self, fn: Callable, name:str=None):
		self._fn = fn
		self.name = name or getattr(fn, "__name__", "primitive")
	
	def apply(self, args: ARGS, env: ENV) -> VALUE:
		return self._invoke(self._fn, *args)

class Closure(Function):
	"""
	A callable value tied to its natal environment.
	
	The body is a native callable taking the activation frame. Parameters shadow
	captured bindings, which in turn shadow the dynamic environment.
	"""
	
	def __init__(self, params:Sequence[str], body:Callable[[ENV], VALUE], captures:ENV=None, name:str="lambda"):
		self.params = tuple(params)
		self._body = body
		self._captures = dict(captures or {})
		self.name = name
	
	def apply(self, args: ARGS, env: ENV) -> VALUE:
		if len(args) != len(self.params):
			raise TypeFault("%s takes %d argument(s) but got %d"%(self.name, len(self.params), len(args)))
		frame = dict(env or {})
		frame.update(self._captures)
		frame.update(zip(self.params, args))
		return self._invoke(self._body, frame)
