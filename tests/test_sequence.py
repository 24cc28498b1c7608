import copy
import unittest

from brook import sequence
from brook.sequence import Stream
from brook.primitives import Repeat, Cycle, Range
from brook.combinatorics import Permutations
from brook.combinators import Iterate, MappedStream, StridedStream, ScannedStream
from brook.values import List, as_list, compare, total_compare, Primitive
from brook.diagnostics import ValueFault, IndexFault, Break
from brook.printer import render

INC = Primitive(lambda x: x + 1, "inc")

class ValueTests(unittest.TestCase):
	
	def test_list_is_immutable_and_shared(self):
		items = [1, 2]
		lst = List(items)
		items.append(3)
		self.assertEqual(2, len(lst))
		self.assertEqual(as_list(1, 2), lst)
		self.assertEqual(hash(as_list(1, 2)), hash(lst))
		self.assertIsInstance(lst[0:1], List)
	
	def test_partial_order(self):
		self.assertEqual(-1, compare(1, 2))
		self.assertEqual(1, compare(as_list(1, 3), as_list(1, 2)))
		self.assertEqual(0, compare("a", "a"))
		self.assertIsNone(compare(1, "a"))
		self.assertIsNone(compare(as_list(1), as_list("x")))
		self.assertIsNone(compare(as_list(1), 1))
		self.assertEqual(0, total_compare(1, "a"))
		self.assertEqual(-1, total_compare(1, 2))

class GenericOperationTests(unittest.TestCase):
	""" The same operations, whether the sequence is a list or a stream. """
	
	def test_list_and_stream_agree(self):
		for seq in (as_list(0, 1, 2, 3, 4), Range(0, 5, 1)):
			with self.subTest(str(seq)):
				self.assertEqual(5, sequence.length(seq))
				self.assertEqual(2, sequence.index(seq, 2))
				self.assertEqual(4, sequence.index(seq, -1))
				self.assertEqual((1, 2), sequence.force(sequence.slice_of(seq, 1, 3)))
				self.assertEqual((4, 3, 2, 1, 0), sequence.force(sequence.reverse(seq)))
				self.assertEqual([0, 1, 2, 3, 4], list(sequence.each(seq)))
	
	def test_generic_operations_never_advance_a_stream(self):
		stream = Range(0, 3, 1)
		sequence.force(stream)
		sequence.index(stream, 2)
		list(sequence.each(stream))
		self.assertEqual([0, 1, 2], list(stream))
	
	def test_not_a_sequence(self):
		for op in (sequence.length, sequence.force, sequence.reverse):
			with self.subTest(op.__name__), self.assertRaises(ValueFault):
				op(42)
		self.assertFalse(sequence.is_sequence("abc"))
		self.assertTrue(sequence.is_sequence(Repeat(1)))
	
	def test_list_index_out_of_range(self):
		with self.assertRaises(IndexFault):
			sequence.index(as_list(1, 2), 2)
	
	def test_display_matches_render(self):
		for seq in (as_list(1, as_list(2)), Range(0, None, 3), MappedStream(Cycle([1]), INC, {})):
			with self.subTest(render(seq)):
				self.assertEqual(render(seq), sequence.display(seq))
		self.assertEqual("[1, [2]]", sequence.display(as_list(1, as_list(2))))
		self.assertEqual("0 til ... by 3", sequence.display(Range(0, None, 3)))

class DefaultCapabilityTests(unittest.TestCase):
	""" What a stream gets when it doesn't know anything better. """
	
	def test_index_pulls_a_clone(self):
		stream = Iterate(0, INC, {})
		self.assertEqual(10, stream.index(10))
		self.assertEqual(0, next(stream))
	
	def test_index_off_the_end(self):
		stream = MappedStream(Range(0, 3, 1), INC, {})
		self.assertEqual(3, stream.index(-1))
		with self.assertRaises(IndexFault):
			stream.index(3)
		with self.assertRaises(IndexFault):
			stream.index(-4)
	
	def test_slice_of_infinite_stream_with_bounds(self):
		self.assertEqual(as_list(2, 3, 4), Iterate(0, INC, {}).slice(2, 5))
		self.assertEqual(as_list(), Iterate(0, INC, {}).slice(5, 2))
	
	def test_slice_needing_the_end_forces(self):
		with self.assertRaises(ValueFault):
			Cycle([1, 2]).slice(-2, None)
		stream = MappedStream(Range(0, 5, 1), INC, {})
		self.assertEqual(as_list(4, 5), stream.slice(-2, None))
	
	def test_reversed_forces(self):
		self.assertEqual(as_list(3, 2, 1), MappedStream(Range(0, 3, 1), INC, {}).reversed())
	
	def test_unknown_length(self):
		for stream in (Iterate(0, INC, {}), MappedStream(Range(0, 3, 1), INC, {})):
			with self.subTest(type(stream).__name__):
				self.assertIsNone(stream.length())
	
	def test_copy_means_clone(self):
		for stream in (Repeat(1), Cycle([1, 2]), Range(0, 3, 1), Permutations([1, 2]), Iterate(0, INC, {})):
			with self.subTest(type(stream).__name__):
				twin = copy.copy(stream)
				self.assertIsInstance(twin, type(stream))
				self.assertIsNot(twin, stream)
				self.assertEqual(next(stream), next(twin))
	
	def test_every_stream_is_its_own_iterator(self):
		stream = Range(0, 2, 1)
		self.assertIs(stream, iter(stream))
		self.assertTrue(issubclass(Range, Stream))

class InfiniteSourceTests(unittest.TestCase):
	""" Wrapping an endless stream never makes it safe to force. """
	
	SOURCES = (lambda: Repeat(1), lambda: Cycle([1, 2]), lambda: Range(0, None, 1), lambda: Range(0, 5, 0))
	
	def wrappers(self, source):
		return (
			MappedStream(source(), INC, {}),
			StridedStream(source(), 2),
			ScannedStream(source(), 0, Primitive(lambda a, x: a + x), {}),
			MappedStream(StridedStream(source(), 3), INC, {}),
		)
	
	def test_known_infinite(self):
		for source in self.SOURCES:
			self.assertTrue(source().infinite())
			for stream in self.wrappers(source):
				with self.subTest(render(stream)):
					self.assertTrue(stream.infinite())
	
	def test_refuses_to_consume(self):
		for source in self.SOURCES:
			for stream in self.wrappers(source):
				with self.subTest(render(stream)):
					for attempt in (sequence.force, sequence.reverse, lambda s: s.index(-1), lambda s: s.slice(-2, None)):
						with self.assertRaises(ValueFault):
							attempt(stream)
					self.assertEqual(2, len(stream.slice(0, 2)))
	
	def test_finite_sources_still_force(self):
		self.assertEqual((1, 2, 3), sequence.force(MappedStream(Range(0, 3, 1), INC, {})))
		self.assertEqual((0, 2), sequence.force(StridedStream(Range(0, 4, 1), 2)))
		self.assertFalse(MappedStream(Range(0, 3, 1), INC, {}).infinite())
		self.assertFalse(Iterate(0, INC, {}).infinite())
		self.assertFalse(Range(5, 3, 0).infinite())
	
	def test_finished_or_poisoned_wrapper_is_not_infinite(self):
		def halt(x): raise Break()
		stream = MappedStream(Repeat(1), Primitive(halt), {})
		self.assertEqual([], list(stream))
		self.assertFalse(stream.infinite())
		self.assertEqual((), stream.force())

if __name__ == '__main__':
	unittest.main()
