"""
Build the primitive namespace.
Also, the bits used for operator syntax.

Arithmetic follows IEEE-754 double precision the whole way through:
where Python's float operations would raise (division by zero, domain errors, overflow)
these produce the infinity or NaN that the hardware would.
"""
import math
import operator
from .values import BellaValue, Number, NativeFunction

def _divide(a:float, b:float) -> float:
	try: return a / b
	except ZeroDivisionError:
		if a == 0 or math.isnan(a): return math.nan
		return math.copysign(math.inf, a) * math.copysign(1.0, b)

def _modulo(a:float, b:float) -> float:
	# The remainder takes the sign of the dividend, as in C's fmod.
	try: return math.fmod(a, b)
	except ValueError: return math.nan

def _odd_integer(x:float) -> bool:
	return x.is_integer() and x % 2 == 1

def _power(a:float, b:float) -> float:
	try: result = a ** b
	except ZeroDivisionError:
		return -math.inf if math.copysign(1.0, a) < 0 and _odd_integer(b) else math.inf
	except OverflowError:
		return -math.inf if a < 0 and _odd_integer(b) else math.inf
	if isinstance(result, complex): return math.nan
	return result

ARITHMETIC = {
	"+"  : operator.add,
	"-"  : operator.sub,
	"*"  : operator.mul,
	"/"  : _divide,
	"%"  : _modulo,
	"**" : _power,
}
RELATIONAL = {
	"<"  : operator.lt,
	"<=" : operator.le,
	">"  : operator.gt,
	">=" : operator.ge,
}
EQUALITY = {
	"==" : operator.eq,
	"!=" : operator.ne,
}
SHORTCUT = {
	"&&" : False,
	"||" : True,
}

###############################################################################

def _sqrt(x:float) -> float:
	return math.sqrt(x) if x >= 0 else math.nan

def _trig(fn):
	def trig(x:float) -> float:
		return math.nan if math.isinf(x) else fn(x)
	return trig

def _exp(x:float) -> float:
	try: return math.exp(x)
	except OverflowError: return math.inf

def _ln(x:float) -> float:
	# The natural logarithm. Zero goes to negative infinity; negatives have none.
	if x == 0: return -math.inf
	if x < 0: return math.nan
	return math.log(x)

def built_ins() -> dict[str, BellaValue]:
	""" A fresh copy of the table every program starts with. """
	return {
		"π": Number(math.pi),
		"sqrt": NativeFunction("sqrt", _sqrt),
		"sin": NativeFunction("sin", _trig(math.sin)),
		"cos": NativeFunction("cos", _trig(math.cos)),
		"exp": NativeFunction("exp", _exp),
		"ln": NativeFunction("ln", _ln),
		"hypot": NativeFunction("hypot", math.hypot),
	}
