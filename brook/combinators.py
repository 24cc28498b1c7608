"""
Functional combinators: streams driven by a user callable and/or an inner stream.

Each holds one state which is either Active (with whatever payload it needs),
Faulted (with the fault it saw), or DONE. The latter two never change again:
a poisoned combinator replays its fault on every pull, and a finished one
stays finished. Nothing is ever retried.
"""
from typing import Any
from .types import VALUE, ENV
from .values import Function
from .sequence import Stream
from .diagnostics import Fault, Break, ValueFault

class Active:
	__slots__ = ("payload",)
	def __init__(self, payload:tuple):
		self.payload = payload

class Faulted:
	__slots__ = ("fault",)
	def __init__(self, fault:Fault):
		self.fault = fault

class _Done:
	def __repr__(self): return "DONE"

DONE = _Done()

###############################################################################

class Combinator(Stream):
	state: Any
	
	def __init__(self, payload:tuple):
		self.state = Active(payload)
	
	def _payload(self) -> tuple:
		state = self.state
		if isinstance(state, Active): return state.payload
		if isinstance(state, Faulted): raise state.fault.with_traceback(None)
		raise StopIteration
	
	def _poison(self, fault:Fault):
		""" Never returns. Break ends the stream quietly; anything else sticks. """
		if isinstance(fault, Break):
			self.state = DONE
			raise StopIteration
		self.state = Faulted(fault)
		raise fault
	
	def _finish(self):
		self.state = DONE
		raise StopIteration
	
	def _pull(self, inner:Stream) -> VALUE:
		""" One item from the inner stream, poisoning or finishing this stream accordingly. """
		try: return next(inner)
		except StopIteration: self._finish()
		except Fault as fault: self._poison(fault)
	
	def _call(self, func:Function, env:ENV, *args) -> VALUE:
		try: return func.apply(args, env)
		except Fault as fault: self._poison(fault)
	
	def clone(self):
		twin = object.__new__(type(self))
		twin.__dict__.update(self.__dict__)
		if isinstance(self.state, Active):
			twin.state = Active(self._clone_payload(self.state.payload))
		return twin
	
	def _clone_payload(self, payload:tuple) -> tuple:
		return payload
	
	def infinite(self) -> bool:
		state = self.state
		return isinstance(state, Active) and self._infinite_payload(state.payload)
	
	@staticmethod
	def _infinite_payload(payload:tuple) -> bool:
		return False

def _clone_inner(payload:tuple) -> tuple:
	return (payload[0].clone(),) + payload[1:]

def _inner_infinite(payload:tuple) -> bool:
	return payload[0].infinite()

###############################################################################

class Iterate(Combinator):
	""" The orbit seed, f(seed), f(f(seed)), ... """
	def __init__(self, seed:VALUE, func:Function, env:ENV):
		super().__init__((seed, func, env))
	
	def __next__(self):
		current, func, env = self._payload()
		following = self._call(func, env, current)
		self.state = Active((following, func, env))
		return current

class MappedStream(Combinator):
	""" f(x) for each x of the inner stream. """
	def __init__(self, inner:Stream, func:Function, env:ENV):
		super().__init__((inner, func, env))
	
	def __next__(self):
		inner, func, env = self._payload()
		return self._call(func, env, self._pull(inner))
	
	_clone_payload = staticmethod(_clone_inner)
	_infinite_payload = staticmethod(_inner_infinite)

class StridedStream(Combinator):
	""" Every stride-th item of the inner stream, starting with the first. """
	def __init__(self, inner:Stream, stride:int, position:int=0):
		if stride < 1: raise ValueFault("stride must be positive, not %s"%stride)
		super().__init__((inner, stride))
		self.position = position
	
	def __next__(self):
		inner, stride = self._payload()
		while True:
			item = self._pull(inner)
			keep = self.position % stride == 0
			self.position += 1
			if keep: return item
	
	_clone_payload = staticmethod(_clone_inner)
	_infinite_payload = staticmethod(_inner_infinite)

class ScannedStream(Combinator):
	""" The running fold: init, f(init, x0), f(f(init, x0), x1), ... """
	def __init__(self, inner:Stream, init:VALUE, func:Function, env:ENV):
		super().__init__((inner, init, func, env))
		self.started = False
		self.accumulator = None
	
	def __next__(self):
		inner, init, func, env = self._payload()
		if not self.started:
			self.started = True
			self.accumulator = init
			return init
		item = self._pull(inner)
		self.accumulator = self._call(func, env, self.accumulator, item)
		return self.accumulator
	
	_clone_payload = staticmethod(_clone_inner)
	_infinite_payload = staticmethod(_inner_infinite)
