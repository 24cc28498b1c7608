"""
The capability contract every lazy generator implements,
and the handful of generic operations the rest of the interpreter
performs on sequences without caring which kind it holds.

A sequence is either a `List` or a `Stream`. A stream held as a value
is shared, so the generic operations never advance it: they clone first.
"""
from abc import abstractmethod
from itertools import islice
from typing import Iterator, Optional, Union
from .types import BrookValue, VALUE
from .values import List
from .diagnostics import ValueFault, IndexFault

class Stream(BrookValue):
	"""
	A possibly-infinite, restartable-only-by-clone source of values.
	
	Pulling is `next(stream)`: a value, or StopIteration at the end,
	or else a Fault raised in place of the value.
	"""
	
	def __iter__(self): return self
	
	@abstractmethod
	def __next__(self) -> VALUE: pass
	
	@abstractmethod
	def clone(self) -> "Stream":
		""" An independently-advanceable copy. """
	
	def __copy__(self): return self.clone()
	
	def length(self) -> Optional[int]:
		""" The exact number of items left, or None if that's unknown (or infinite). """
		return None
	
	def infinite(self) -> bool:
		""" True only when this stream is known never to end. """
		return False
	
	def force(self) -> tuple:
		""" Everything left, as a tuple. This stream itself is not advanced. """
		if self.infinite():
			raise ValueFault("Cannot force %s because it's infinite"%self)
		return tuple(self.clone())
	
	def index(self, i:int) -> VALUE:
		if i < 0:
			return _index_tuple(self.force(), i)
		it = self.clone()
		for _ in range(i):
			if next(it, _END) is _END: raise IndexFault("stream index %d out of range"%i)
		item = next(it, _END)
		if item is _END: raise IndexFault("stream index %d out of range"%i)
		return item
	
	def slice(self, lo:Optional[int], hi:Optional[int]) -> "SEQUENCE":
		if (lo is None or lo >= 0) and hi is not None and hi >= 0:
			return List(islice(self.clone(), lo or 0, max(hi, lo or 0)))
		return List(self.force()[lo:hi])
	
	def reversed(self) -> "SEQUENCE":
		return List(reversed(self.force()))

SEQUENCE = Union[List, Stream]

_END = object()

def _index_tuple(items:tuple, i:int):
	try: return items[i]
	except IndexError: raise IndexFault("index %d out of range for length %d"%(i, len(items))) from None

###############################################################################

def is_sequence(it) -> bool:
	return isinstance(it, (List, Stream))

def _check(seq):
	if not is_sequence(seq): raise ValueFault("not a sequence: %s"%(seq,))

def length(seq:SEQUENCE) -> Optional[int]:
	_check(seq)
	return len(seq) if isinstance(seq, List) else seq.length()

def index(seq:SEQUENCE, i:int) -> VALUE:
	_check(seq)
	return _index_tuple(seq.elements, i) if isinstance(seq, List) else seq.index(i)

def slice_of(seq:SEQUENCE, lo:Optional[int]=None, hi:Optional[int]=None) -> SEQUENCE:
	_check(seq)
	return seq[lo:hi] if isinstance(seq, List) else seq.slice(lo, hi)

def reverse(seq:SEQUENCE) -> SEQUENCE:
	_check(seq)
	return List(reversed(seq)) if isinstance(seq, List) else seq.reversed()

def force(seq:SEQUENCE) -> tuple:
	_check(seq)
	return seq.elements if isinstance(seq, List) else seq.force()

def each(seq:SEQUENCE) -> Iterator[VALUE]:
	""" An independent iterator over the sequence; a shared stream is left where it was. """
	_check(seq)
	return iter(seq) if isinstance(seq, List) else seq.clone()

def display(seq:SEQUENCE) -> str:
	from .printer import render
	return render(seq)
