"""
This module defines the run-time values that the evaluator operates in terms of.

Every value is an instance of exactly one of the classes below, and everything that
cares which kind of value it holds asks by class, never by shape. In particular a
user-defined function is not a pair of things that happens to look like an array.
"""
import math
from abc import ABC, abstractmethod
from typing import Callable, Sequence
from .errors import InvalidParameterType

class BellaValue(ABC):
	""" Root for the classes that implement run-time data """
	type_name: str

	@abstractmethod
	def truthy(self) -> bool:
		""" How this value behaves as a condition. """

class Number(BellaValue):
	type_name = "number"

	def __init__(self, value:float):
		assert not isinstance(value, bool), value
		self.value = float(value)

	def truthy(self): return not (self.value == 0 or math.isnan(self.value))
	def __eq__(self, other):
		# Every value equals itself, NaN included.
		if not isinstance(other, Number): return False
		return self.value == other.value or (math.isnan(self.value) and math.isnan(other.value))
	def __hash__(self): return hash(math.nan if math.isnan(self.value) else self.value)
	def __repr__(self): return "Number(%r)" % self.value
	def __str__(self): return format_number(self.value)

class Boolean(BellaValue):
	type_name = "boolean"

	def __init__(self, value:bool):
		assert isinstance(value, bool), type(value)
		self.value = value

	def truthy(self): return self.value
	def __eq__(self, other): return isinstance(other, Boolean) and self.value == other.value
	def __hash__(self): return hash(self.value)
	def __repr__(self): return "Boolean(%r)" % self.value
	def __str__(self): return "true" if self.value else "false"

class Array(BellaValue):
	""" Fixed-length once constructed. Equality is element-wise and order-sensitive. """
	type_name = "array"

	def __init__(self, elements:Sequence[BellaValue]):
		self.elements = tuple(elements)

	def truthy(self): return True
	def __len__(self): return len(self.elements)
	def __iter__(self): return iter(self.elements)
	def __getitem__(self, index:int) -> BellaValue: return self.elements[index]
	def __eq__(self, other): return isinstance(other, Array) and self.elements == other.elements
	def __hash__(self): return hash(self.elements)
	def __repr__(self): return "Array(%r)" % (list(self.elements),)
	def __str__(self): return ",".join(map(str, self.elements))

class Function(BellaValue):
	""" A run-time object that can be called. Functions equal only themselves. """
	type_name = "function"
	name: str

	def truthy(self): return True

class NativeFunction(Function):
	"""
	Host-provided. All parameters to native functions are numbers.
	The host function sees exactly `arity` of them: extra arguments are ignored,
	and missing ones arrive as NaN.
	"""
	def __init__(self, name:str, fn:Callable[..., float], arity:int=1):
		self.name, self._fn, self.arity = name, fn, arity

	def apply(self, args:Sequence[BellaValue]) -> BellaValue:
		for a in args:
			if not isinstance(a, Number):
				raise InvalidParameterType("%s wants numbers, but got a(n) %s" % (self.name, a.type_name))
		numbers = [a.value for a in args[:self.arity]]
		numbers.extend([math.nan] * (self.arity - len(numbers)))
		result = self._fn(*numbers)
		return result if isinstance(result, BellaValue) else Number(result)

	def __repr__(self): return "<built-in %s>" % self.name
	__str__ = __repr__

class UserFunction(Function):
	"""
	Parameter names and a body expression. It captures nothing from where it was declared:
	the body sees whatever the name store holds at the time of the call.
	"""
	def __init__(self, name:str, params:Sequence[str], body):
		self.name, self.params, self.body = name, tuple(params), body

	def __repr__(self): return "<function %s(%s)>" % (self.name, ", ".join(self.params))
	__str__ = __repr__

###############################################################################

def format_number(x:float) -> str:
	"""
	The canonical text of a number, as print shows it:
	integral values have no decimal point, and the exponent form only
	kicks in for very large or very small magnitudes.
	"""
	if math.isnan(x): return "NaN"
	if math.isinf(x): return "Infinity" if x > 0 else "-Infinity"
	if x == 0: return "0"
	sign = "-" if x < 0 else ""
	digits, point = _decimal_digits(abs(x))
	size = len(digits)
	if size <= point <= 21:
		text = digits + "0" * (point - size)
	elif 0 < point <= 21:
		text = digits[:point] + "." + digits[point:]
	elif -6 < point <= 0:
		text = "0." + "0" * -point + digits
	else:
		exponent = point - 1
		mantissa = digits[0] + ("." + digits[1:] if size > 1 else "")
		text = "%se%s%d" % (mantissa, "+" if exponent >= 0 else "-", abs(exponent))
	return sign + text

def _decimal_digits(x:float) -> tuple[str, int]:
	"""
	Shortest round-tripping digits of a positive finite x, and the position of
	the decimal point relative to them: x == 0.<digits> * 10**point
	"""
	text = repr(x)
	if "e" in text:
		text, exponent = text.split("e")
		exponent = int(exponent)
	else:
		exponent = 0
	whole, _, fraction = text.partition(".")
	digits = whole + fraction
	point = len(whole) + exponent
	stripped = digits.lstrip("0")
	point -= len(digits) - len(stripped)
	return stripped.rstrip("0"), point
