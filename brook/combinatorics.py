"""
Combinatorial enumerators.

Each one is an index-vector state machine over a fixed buffer of values.
A pull materializes the current state, steps the state to its lexicographic
successor (or to None, which is terminal), and returns what it materialized.

The buffer is a tuple and never changes. The state is a list which a clone
shares with its original until one of them is about to step: copy-on-write.
"""
from math import comb
from typing import Optional, Sequence
from .types import VALUE
from .values import List
from .sequence import Stream

class Enumerator(Stream):
	items: tuple
	state: Optional[list]
	
	def __init__(self, items:Sequence[VALUE], state:Optional[list]):
		self.items = tuple(items)
		self.state = state
		self._owned = True
	
	def clone(self):
		twin = object.__new__(type(self))
		twin.__dict__.update(self.__dict__)
		self._owned = twin._owned = False
		return twin
	
	def _writable(self) -> list:
		if not self._owned:
			self.state = list(self.state)
			self._owned = True
		return self.state
	
	def __next__(self):
		if self.state is None: raise StopIteration
		state = self._writable()
		result = self.materialize(state)
		if not self.advance(state): self.state = None
		return result
	
	def materialize(self, state:list) -> List:
		return List(self.items[i] for i in state)
	
	def advance(self, state:list) -> bool:
		""" Step the state in place to its successor. False means there is none. """
		raise NotImplementedError(type(self))
	
	def remaining(self, state:list) -> Optional[int]:
		return None
	
	def length(self) -> Optional[int]:
		if self.state is None: return 0
		return self.remaining(self.state)

class Permutations(Enumerator):
	""" All orderings of the buffer, in lexicographic order of index. """
	def __init__(self, items:Sequence[VALUE]):
		super().__init__(items, list(range(len(items))))
	
	def advance(self, v:list) -> bool:
		# Rightmost ascent, then the rightmost later element still above it.
		for i in range(len(v) - 2, -1, -1):
			if v[i] < v[i+1]: break
		else:
			return False
		j = len(v) - 1
		while v[j] < v[i]: j -= 1
		v[i], v[j] = v[j], v[i]
		v[i+1:] = v[:i:-1]
		return True
	
	def remaining(self, v:list) -> int:
		n = len(v)
		total, weight = 1, 1
		for i in range(1, n):
			# Each later element bigger than v[n-1-i] starts i! more permutations.
			weight *= i
			pivot = v[n-1-i]
			total += weight * sum(1 for j in range(n-i, n) if v[j] > pivot)
		return total

class Combinations(Enumerator):
	""" The size-k subsets of the buffer's positions, in lexicographic order. """
	def __init__(self, items:Sequence[VALUE], k:int):
		super().__init__(items, list(range(k)) if 0 <= k <= len(items) else None)
	
	def advance(self, v:list) -> bool:
		limit = len(self.items)
		for i in range(len(v) - 1, -1, -1):
			if v[i] + 1 < limit:
				v[i] += 1
				for j in range(i+1, len(v)): v[j] = v[j-1] + 1
				return True
			limit -= 1
		return False
	
	def remaining(self, v:list) -> int:
		# Counting those at or after v: the hockey-stick identity
		# collapses each position's sum into one binomial.
		n, k = len(self.items), len(v)
		return 1 + sum(comb(n - 1 - v[i], k - i) for i in range(k))

class Subsequences(Enumerator):
	""" Every subset of the buffer, kept in original order; the mask counts in big-endian binary. """
	def __init__(self, items:Sequence[VALUE]):
		super().__init__(items, [False] * len(items))
	
	def materialize(self, mask:list) -> List:
		return List(x for keep, x in zip(mask, self.items) if keep)
	
	def advance(self, mask:list) -> bool:
		for i in range(len(mask) - 1, -1, -1):
			if not mask[i]:
				mask[i] = True
				mask[i+1:] = [False] * (len(mask) - i - 1)
				return True
		return False
	
	def remaining(self, mask:list) -> int:
		total, weight = 1, 1
		for bit in reversed(mask):
			if not bit: total += weight
			weight *= 2
		return total

class CartesianPower(Enumerator):
	""" Every n-tuple drawn from the buffer, odometer-style. """
	def __init__(self, items:Sequence[VALUE], n:int):
		state = [0] * n if items or not n else None
		super().__init__(items, state)
	
	def advance(self, digits:list) -> bool:
		m = len(self.items)
		for i in range(len(digits) - 1, -1, -1):
			digits[i] += 1
			if digits[i] < m: return True
			digits[i] = 0
		return False
	
	def remaining(self, digits:list) -> int:
		m = len(self.items)
		total, weight = 1, 1
		for d in reversed(digits):
			total += (m - 1 - d) * weight
			weight *= m
		return total
