"""
Textual rendering of values and streams, for printing and debugging.

The notation is informal. What matters is that each kind of stream
always renders the same way, and that rendering never pulls anything.
"""
from boozetools.support.foundation import Visitor
from .combinators import Active, Faulted, DONE

DEFAULT_LIMIT = 20

class Printer(Visitor):
	def __init__(self, limit:int=DEFAULT_LIMIT):
		self._limit = limit
	
	def render(self, it) -> str:
		return self.visit(it)
	
	def commas(self, items) -> str:
		items = tuple(items)
		text = [self.visit(x) for x in items[:self._limit]]
		if len(items) > self._limit: text.append("...")
		return ", ".join(text)
	
	@staticmethod
	def visit_int(n): return str(n)
	@staticmethod
	def visit_float(x): return repr(x)
	@staticmethod
	def visit_bool(b): return "true" if b else "false"
	@staticmethod
	def visit_NoneType(_): return "null"
	@staticmethod
	def visit_str(s): return s
	
	def visit_List(self, lst): return "[%s]"%self.commas(lst)
	
	@staticmethod
	def visit_Primitive(p): return "<%s>"%p.name
	@staticmethod
	def visit_Closure(c): return "<%s(%s)>"%(c.name, ", ".join(c.params))
	
	# Primitive generators
	
	def visit_Repeat(self, r): return "repeat(%s)"%self.visit(r.value)
	def visit_Cycle(self, c): return "cycle(%s)"%self.commas(c.items)
	
	def visit_Range(self, r):
		end = "..." if r.end is None else self.visit(r.end)
		return "%s til %s by %s"%(r.start, end, r.step)
	
	# Combinatorial enumerators
	
	def _enumerator(self, name, e):
		if e.state is None: return "%s(done)"%name
		return "%s(%s @ %s)"%(name, self.commas(e.items), self.commas(e.state))
	
	def visit_Permutations(self, e): return self._enumerator("permutations", e)
	def visit_Combinations(self, e): return self._enumerator("combinations", e)
	def visit_Subsequences(self, e): return self._enumerator("subsequences", e)
	def visit_CartesianPower(self, e): return self._enumerator("cartesian_power", e)
	
	# Functional combinators
	
	def _combinator(self, name, c, show):
		state = c.state
		if state is DONE: return "%s(stopped)"%name
		if isinstance(state, Faulted): return "%s(ERROR: %s)"%(name, state.fault.describe())
		assert isinstance(state, Active), state
		return "%s(%s, ...)"%(name, ", ".join(self.visit(x) for x in show(state.payload)))
	
	def visit_Iterate(self, c):
		return self._combinator("Iterate", c, lambda p: p[:2])
	
	def visit_MappedStream(self, c):
		return self._combinator("MappedStream", c, lambda p: p[:2])
	
	def visit_StridedStream(self, c):
		return self._combinator("StridedStream", c, lambda p: p + (c.position,))
	
	def visit_ScannedStream(self, c):
		return self._combinator("ScannedStream", c, lambda p: (p[0], c.accumulator if c.started else p[1], p[2]))
	
	@staticmethod
	def visit_HeapStream(c):
		if c.state is DONE: return "HeapStream(stopped)"
		if isinstance(c.state, Faulted): return "HeapStream(ERROR: %s)"%c.state.fault.describe()
		return "HeapStream(...)"

def render(it, limit:int=DEFAULT_LIMIT) -> str:
	return Printer(limit).render(it)
