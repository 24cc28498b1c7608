"""
Self-contained generators: nothing wrapped, nothing called.
"""
from typing import Optional, Sequence
from .types import VALUE
from .values import List
from .sequence import Stream, SEQUENCE
from .diagnostics import ValueFault, IndexFault

def _ceil_div(a:int, b:int) -> int:
	return -(-a // b)

class Repeat(Stream):
	""" The same value, forever. """
	def __init__(self, value:VALUE):
		self.value = value
	
	def __next__(self): return self.value
	def clone(self): return Repeat(self.value)
	
	def infinite(self): return True
	
	def index(self, i:int): return self.value
	
	def slice(self, lo:Optional[int], hi:Optional[int]) -> SEQUENCE:
		# Negative bounds count from a notional one-past-the-end.
		lo = 0 if lo is None else lo - 1 if lo < 0 else lo
		hi = -1 if hi is None else hi - 1 if hi < 0 else hi
		if (lo < 0) == (hi < 0):
			return List((self.value,) * max(0, hi - lo))
		if lo < 0:
			return List()
		return Repeat(self.value)
	
	def reversed(self) -> SEQUENCE: return self.clone()

class Cycle(Stream):
	""" Round and round a non-empty buffer, starting from the cursor. """
	def __init__(self, items:Sequence[VALUE], cursor:int=0):
		items = tuple(items)
		if not items: raise ValueFault("Cannot cycle an empty sequence")
		self.items = items
		self.cursor = cursor % len(items)
	
	def __next__(self):
		item = self.items[self.cursor]
		self.cursor = (self.cursor + 1) % len(self.items)
		return item
	
	def clone(self): return Cycle(self.items, self.cursor)
	
	def infinite(self): return True
	
	def index(self, i:int):
		# Python's modulo is already the floored kind.
		return self.items[(self.cursor + i) % len(self.items)]
	
	def slice(self, lo:Optional[int], hi:Optional[int]) -> SEQUENCE:
		if (lo is None or lo >= 0) and hi is None:
			return Cycle(self.items, self.cursor + (lo or 0))
		return super().slice(lo, hi)
	
	def reversed(self) -> SEQUENCE:
		n = len(self.items)
		return Cycle(self.items[::-1], (n - self.cursor) % n)

class Range(Stream):
	"""
	An arithmetic progression over integers: start, start+step, ...
	stopping short of `end` if there is one.
	"""
	def __init__(self, start:int, end:Optional[int], step:int=1):
		self.start = start
		self.end = end
		self.step = step
	
	def empty(self) -> bool:
		if self.end is None: return False
		if self.step < 0: return self.start <= self.end
		# Zero step counts as non-negative here.
		return self.start >= self.end
	
	def __next__(self):
		if self.empty(): raise StopIteration
		item = self.start
		self.start += self.step
		return item
	
	def clone(self): return Range(self.start, self.end, self.step)
	
	def length(self) -> Optional[int]:
		start, end, step = self.start, self.end, self.step
		if end is None: return None
		if step == 0:
			# A degenerate case: either nothing, or the same number forever.
			return 0 if start >= end else None
		return max(0, _ceil_div(end - start, step))
	
	def infinite(self) -> bool:
		if self.end is None: return True
		return self.step == 0 and self.start < self.end
	
	def index(self, i:int):
		n = self.length()
		if i < 0:
			if n is None: raise IndexFault("Cannot index an infinite range from the end")
			i += n
			if i < 0: raise IndexFault("range index out of range")
		elif n is not None and i >= n:
			raise IndexFault("range index %d out of range"%i)
		return self.start + i * self.step
	
	def slice(self, lo:Optional[int], hi:Optional[int]) -> SEQUENCE:
		if self.end is None and self.step and (lo is None or lo >= 0) and (hi is None or hi >= 0):
			lo = lo or 0
			first = self.start + lo * self.step
			if hi is None: return Range(first, None, self.step)
			return Range(first, self.start + max(lo, hi) * self.step, self.step)
		return super().slice(lo, hi)
	
	def reversed(self) -> SEQUENCE:
		if self.infinite(): raise ValueFault("Cannot reverse range because it's infinite")
		n = self.length()
		last = self.start + (n - 1) * self.step
		return Range(last, self.start - self.step, -self.step)
