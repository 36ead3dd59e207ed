"""
Evaluate expressions to values: plain recursive descent over the syntax tree.

Each kind of expression has one `_eval_...` function here, and the EVALUATE table
(built at the bottom from the type annotations) dispatches on the node's class.
Nothing here writes to the name store except a user-function call, which binds its
parameters for exactly the duration of the call.
"""
from . import syntax
from .context import Context
from .errors import (
	InvalidOperandType, InvalidOperator, InvalidFunctionCall, InvalidArgumentCount,
	SubscriptTypeError, NotAnArray, SubscriptOutOfRange, CannotSubscriptFunction,
)
from .primitive import ARITHMETIC, RELATIONAL, EQUALITY, SHORTCUT
from .values import BellaValue, Number, Boolean, Array, NativeFunction, UserFunction

def evaluate(expr:syntax.ValueExpression, ctx:Context) -> BellaValue:
	try: fn = EVALUATE[type(expr)]
	except KeyError: raise NotImplementedError(type(expr), expr)
	return fn(expr, ctx)

def _number(value:BellaValue, op:str) -> float:
	if not isinstance(value, Number):
		raise InvalidOperandType("%s needs numbers, but got a(n) %s" % (op, value.type_name))
	return value.value

###############################################################################

def _eval_numeral(expr:syntax.Numeral, ctx:Context):
	return Number(expr.value)

def _eval_boolean(expr:syntax.BooleanLiteral, ctx:Context):
	return Boolean(expr.value)

def _eval_identifier(expr:syntax.Identifier, ctx:Context):
	return ctx.memory.lookup(expr.name)

def _eval_unary(expr:syntax.UnaryExpression, ctx:Context):
	operand = evaluate(expr.operand, ctx)
	if expr.op == "-":
		return Number(-_number(operand, expr.op))
	if expr.op == "!":
		return Boolean(not operand.truthy())
	raise InvalidOperator("unary %r" % expr.op)

def _eval_binary(expr:syntax.BinaryExpression, ctx:Context):
	op = expr.op
	if op in SHORTCUT:
		lhs = evaluate(expr.left, ctx)
		return lhs if lhs.truthy() == SHORTCUT[op] else evaluate(expr.right, ctx)
	if op in ARITHMETIC:
		lhs = _number(evaluate(expr.left, ctx), op)
		rhs = _number(evaluate(expr.right, ctx), op)
		return Number(ARITHMETIC[op](lhs, rhs))
	if op in RELATIONAL:
		lhs = _number(evaluate(expr.left, ctx), op)
		rhs = _number(evaluate(expr.right, ctx), op)
		return Boolean(RELATIONAL[op](lhs, rhs))
	if op in EQUALITY:
		return Boolean(EQUALITY[op](evaluate(expr.left, ctx), evaluate(expr.right, ctx)))
	raise InvalidOperator("binary %r" % op)

def _eval_conditional(expr:syntax.ConditionalExpression, ctx:Context):
	test = evaluate(expr.test, ctx)
	sequel = expr.consequent if test.truthy() else expr.alternate
	return evaluate(sequel, ctx)

def _eval_array(expr:syntax.ArrayLiteral, ctx:Context):
	return Array([evaluate(e, ctx) for e in expr.elements])

def _eval_subscript(expr:syntax.SubscriptExpression, ctx:Context):
	base = evaluate(expr.array, ctx)
	index = evaluate(expr.subscript, ctx)
	if not isinstance(index, Number):
		raise SubscriptTypeError("subscripts are numbers, not a(n) %s" % index.type_name)
	if isinstance(base, UserFunction):
		raise CannotSubscriptFunction(str(base))
	if not isinstance(base, Array):
		raise NotAnArray("cannot subscript a(n) %s" % base.type_name)
	position = index.value
	if not (0 <= position < len(base) and position.is_integer()):
		raise SubscriptOutOfRange("%s is not a position in an array of length %d" % (index, len(base)))
	return base[int(position)]

def _eval_call(expr:syntax.CallExpression, ctx:Context):
	callee = ctx.memory.lookup(expr.callee.name)
	if isinstance(callee, NativeFunction):
		return callee.apply([evaluate(a, ctx) for a in expr.args])
	if isinstance(callee, UserFunction):
		return apply_user_function(callee, expr.args, ctx)
	raise InvalidFunctionCall("%s is a(n) %s, not a function" % (expr.callee.name, callee.type_name))

def apply_user_function(udf:UserFunction, arg_exprs, ctx:Context) -> BellaValue:
	if len(arg_exprs) != len(udf.params):
		pattern = "%s takes %d argument(s), but got %d"
		raise InvalidArgumentCount(pattern % (udf.name, len(udf.params), len(arg_exprs)))
	# Arguments are evaluated in the caller's bindings, before any parameter is bound.
	args = [evaluate(a, ctx) for a in arg_exprs]
	with ctx.memory.activation(udf, udf.params, args):
		return evaluate(udf.body, ctx)

###############################################################################

EVALUATE = {}
for _k, _v in list(globals().items()):
	if _k.startswith("_eval_"):
		_t = _v.__annotations__["expr"]
		assert isinstance(_t, type), (_k, _t)
		EVALUATE[_t] = _v
