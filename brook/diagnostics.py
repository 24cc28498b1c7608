"""
Faults, and the means to report them.

A fault is what a pull produces in place of a value when something went wrong.
They are ordinary exceptions so that they travel through user code the way
the rest of the interpreter's run-time errors do, but streams never re-derive
their own state from them: see the poisoning states in `combinators`.
"""
import sys
from typing import Any

class Fault(Exception):
	""" Root of every run-time fault a stream may surface. """
	def describe(self):
		return "%s: %s"%(type(self).__name__, self.args[0] if self.args else "")

class Break(Fault):
	"""
	Iteration terminated. Carries no payload.
	A combinator that sees this from its source or its callable simply ends.
	It never reaches the combinator's own consumer.
	"""
	def __init__(self):
		super().__init__()
	
	def describe(self):
		return "Break"

class ValueFault(Fault):
	pass

class TypeFault(Fault):
	pass

class IndexFault(Fault):
	pass

class TooManyIssues(Exception):
	pass

class Report:
	""" Collects the faults a consumer ran into, and talks to the console about them. """
	_issues : list[str]
	
	def __init__(self, *, verbose:int=0, max_issues=3):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues
	
	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)
	
	@property
	def issues(self): return tuple(self._issues)
	
	def issue(self, it:Any):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)
	
	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)
	
	def fault(self, where, fault:Fault):
		""" Record a fault surfaced while pulling from `where`. """
		self.issue("%s (while pulling from %s)"%(fault.describe(), where))
	
	def complain_to_console(self):
		""" Emit all the issues to the console. """
		for text in self._issues:
			print(" * ", text, file=sys.stderr)
	
	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(message)
