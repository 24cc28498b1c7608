"""
Best-first exploration of a state space, one state per pull.
"""
import heapq
from .types import VALUE, ENV
from .values import Function, List, total_compare
from .combinators import Combinator
from .diagnostics import TypeFault

class _Priority:
	"""
	Orders values for heapq, which keeps the *least* item on top,
	so the comparison is flipped to make the greatest value come out first.
	Incomparable values count as equal; among those, pop order is unspecified.
	"""
	__slots__ = ("value",)
	def __init__(self, value:VALUE):
		self.value = value
	
	def __lt__(self, other:"_Priority"):
		return total_compare(self.value, other.value) > 0

class HeapStream(Combinator):
	"""
	Seeded with one value. Each pull pops the greatest pending value,
	hands it to the callable, pushes every value of the list it returns,
	and yields the popped value. An empty frontier ends the stream.
	"""
	def __init__(self, seed:VALUE, func:Function, env:ENV):
		super().__init__(([_Priority(seed)], func, env))
	
	def __next__(self):
		heap, func, env = self._payload()
		if not heap: self._finish()
		top = heapq.heappop(heap).value
		successors = self._call(func, env, top)
		if not isinstance(successors, List):
			self._poison(TypeFault("HeapStream func must return lists. Got %s"%(successors,)))
		for item in successors:
			heapq.heappush(heap, _Priority(item))
		return top
	
	def _clone_payload(self, payload:tuple) -> tuple:
		heap, func, env = payload
		return list(heap), func, env
