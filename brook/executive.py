"""
The consumer's end of a pipeline.

Streams are pulled only on demand; the caller decides how much to ask for,
since nothing else will stop an infinite one. Faults surfaced along the way
go into the Report rather than up the stack.
"""
import sys
from itertools import islice
from typing import Optional
from .types import VALUE
from .values import List
from .sequence import SEQUENCE, each
from .diagnostics import Report, Fault
from .printer import Printer

def take(seq:SEQUENCE, n:int) -> List:
	""" The first n items, or fewer. Faults propagate. """
	return List(islice(each(seq), n))

def drain(seq:SEQUENCE, report:Report, limit:Optional[int]=None) -> list[VALUE]:
	"""
	Pull up to `limit` items (all of them if None) from an independent copy of `seq`.
	Stops at the end of the sequence or at the first fault, which is recorded.
	"""
	items = []
	it = each(seq)
	while limit is None or len(items) < limit:
		try: items.append(next(it))
		except StopIteration: break
		except Fault as fault:
			report.fault(seq, fault)
			break
	report.info("Pulled %d item(s) from %s"%(len(items), seq))
	return items

def show(seq:SEQUENCE, report:Report, limit:int, out=sys.stdout):
	""" Print the first few items of a sequence the way a REPL would. """
	printer = Printer(limit)
	items = drain(seq, report, limit + 1)
	print(printer.render(List(items)), file=out)
