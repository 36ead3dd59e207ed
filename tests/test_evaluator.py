import itertools
import math
import operator
import unittest

from bella import syntax
from bella.context import Context
from bella.errors import (
	ErrorKind, NotDeclared, InvalidOperandType, InvalidOperator, InvalidFunctionCall,
	InvalidParameterType, InvalidArgumentCount, SubscriptTypeError, NotAnArray,
	SubscriptOutOfRange, CannotSubscriptFunction,
)
from bella.evaluator import evaluate
from bella.values import Number, Boolean, Array, NativeFunction, UserFunction

def num(x): return syntax.Numeral(x)
def name(n): return syntax.Identifier(n)
def binary(op, a, b): return syntax.BinaryExpression(op, a, b)
def call(n, *args): return syntax.CallExpression(name(n), args)
def array(*elements): return syntax.ArrayLiteral(elements)
TRUE = syntax.BooleanLiteral(True)
FALSE = syntax.BooleanLiteral(False)

class EvaluatorCase(unittest.TestCase):
	""" Gives each test a fresh context, and a `tick` built-in which counts how often it runs. """

	def setUp(self) -> None:
		self.ctx = Context()
		self.ticks = 0
		def tick(x):
			self.ticks += 1
			return self.ticks
		self.ctx.memory.declare("tick", NativeFunction("tick", tick))

	def ev(self, expr):
		return evaluate(expr, self.ctx)

	def declare_function(self, fn_name, params, body):
		self.ctx.memory.declare(fn_name, UserFunction(fn_name, params, body))

class Arithmetic(EvaluatorCase):

	def test_agrees_with_floating_point(self):
		samples = [3, 4, 10, 2.5, 0.5, -7, 1e10, 3e-3]
		host = {
			"+": operator.add,
			"-": operator.sub,
			"*": operator.mul,
			"/": operator.truediv,
			"%": math.fmod,
		}
		for (a, b), (op, fn) in itertools.product(itertools.permutations(samples, 2), host.items()):
			with self.subTest(a=a, op=op, b=b):
				self.assertEqual(Number(fn(a, b)), self.ev(binary(op, num(a), num(b))))

	def test_power(self):
		for a, b in [(2, 10), (2, 0.5), (-2, 3), (-2, 2), (10, -2), (0.5, -1)]:
			with self.subTest(a=a, b=b):
				self.assertEqual(Number(float(a) ** float(b)), self.ev(binary("**", num(a), num(b))))

	def test_division_by_zero(self):
		self.assertEqual(Number(math.inf), self.ev(binary("/", num(1), num(0))))
		self.assertEqual(Number(-math.inf), self.ev(binary("/", num(-1), num(0))))
		self.assertTrue(math.isnan(self.ev(binary("/", num(0), num(0))).value))
		self.assertTrue(math.isnan(self.ev(binary("%", num(5), num(0))).value))

	def test_power_edges(self):
		self.assertEqual(Number(math.inf), self.ev(binary("**", num(0), num(-1))))
		self.assertEqual(Number(math.inf), self.ev(binary("**", num(10), num(400))))
		self.assertTrue(math.isnan(self.ev(binary("**", num(-8), num(1/3))).value))

	def test_numbers_only(self):
		for op in ["+", "-", "*", "/", "%", "**", "<", "<=", ">", ">="]:
			with self.subTest(op):
				with self.assertRaises(InvalidOperandType):
					self.ev(binary(op, TRUE, num(1)))
				with self.assertRaises(InvalidOperandType):
					self.ev(binary(op, num(1), array(num(1))))

	def test_relational(self):
		for op, expect in [("<", True), ("<=", True), (">", False), (">=", False)]:
			with self.subTest(op):
				self.assertEqual(Boolean(expect), self.ev(binary(op, num(1), num(2))))
		self.assertEqual(Boolean(True), self.ev(binary("<=", num(2), num(2))))

	def test_unknown_operator(self):
		with self.assertRaises(InvalidOperator) as cm:
			self.ev(binary("^", num(1), num(2)))
		self.assertIs(ErrorKind.INVALID_OPERATOR, cm.exception.kind)
		with self.assertRaises(InvalidOperator):
			self.ev(syntax.UnaryExpression("~", num(1)))

class Unary(EvaluatorCase):

	def test_negate(self):
		self.assertEqual(Number(-3), self.ev(syntax.UnaryExpression("-", num(3))))
		with self.assertRaises(InvalidOperandType):
			self.ev(syntax.UnaryExpression("-", TRUE))

	def test_not(self):
		for operand, expect in [(TRUE, False), (FALSE, True), (num(0), True), (num(2), False), (array(), False)]:
			with self.subTest(operand):
				self.assertEqual(Boolean(expect), self.ev(syntax.UnaryExpression("!", operand)))

class Equality(EvaluatorCase):

	def test_equality(self):
		for a, b, expect in [
			(num(1), num(1), True),
			(num(1), TRUE, False),
			(array(num(1), num(2)), array(num(1), num(2)), True),
			(array(num(1), num(2)), array(num(2), num(1)), False),
			(name("sqrt"), name("sqrt"), True),
			(name("sqrt"), name("cos"), False),
			(binary("/", num(0), num(0)), binary("/", num(0), num(0)), True),
		]:
			with self.subTest(a=a, b=b):
				self.assertEqual(Boolean(expect), self.ev(binary("==", a, b)))
				self.assertEqual(Boolean(not expect), self.ev(binary("!=", a, b)))

	def test_every_value_equals_itself(self):
		self.ctx.memory.declare("a", Number(math.nan))
		self.ctx.memory.declare("b", Array([Number(math.nan)]))
		self.declare_function("f", ["x"], name("x"))
		for n in ["a", "b", "f", "sqrt", "π"]:
			with self.subTest(n):
				self.assertEqual(Boolean(True), self.ev(binary("==", name(n), name(n))))
				self.assertEqual(Boolean(False), self.ev(binary("!=", name(n), name(n))))
		nan_array = array(binary("/", num(0), num(0)))
		self.assertEqual(Boolean(True), self.ev(binary("==", nan_array, nan_array)))

class ShortCircuit(EvaluatorCase):

	def test_skips_right_side(self):
		self.assertEqual(Boolean(False), self.ev(binary("&&", FALSE, call("tick", num(0)))))
		self.assertEqual(Boolean(True), self.ev(binary("||", TRUE, call("tick", num(0)))))
		self.assertEqual(0, self.ticks)

	def test_evaluates_right_side(self):
		self.assertEqual(Number(1), self.ev(binary("&&", TRUE, call("tick", num(0)))))
		self.assertEqual(Number(2), self.ev(binary("||", FALSE, call("tick", num(0)))))
		self.assertEqual(2, self.ticks)

	def test_answers_an_operand(self):
		self.assertEqual(Number(5), self.ev(binary("||", num(0), num(5))))
		self.assertEqual(Number(7), self.ev(binary("&&", num(1), num(7))))
		self.assertEqual(Number(0), self.ev(binary("&&", num(0), num(7))))

class Conditional(EvaluatorCase):

	def test_only_one_branch(self):
		expr = syntax.ConditionalExpression(TRUE, num(10), call("tick", num(0)))
		self.assertEqual(Number(10), self.ev(expr))
		expr = syntax.ConditionalExpression(num(0), call("tick", num(0)), num(20))
		self.assertEqual(Number(20), self.ev(expr))
		self.assertEqual(0, self.ticks)

class Arrays(EvaluatorCase):

	def test_elements_left_to_right(self):
		result = self.ev(array(call("tick", num(0)), call("tick", num(0)), num(9)))
		self.assertEqual(Array([Number(1), Number(2), Number(9)]), result)

	def test_subscript(self):
		a = array(num(1), num(2), num(3))
		self.assertEqual(Number(2), self.ev(syntax.SubscriptExpression(a, num(1))))
		nested = array(num(1), array(num(2), num(3)))
		inner = syntax.SubscriptExpression(nested, num(1))
		self.assertEqual(Number(3), self.ev(syntax.SubscriptExpression(inner, num(1))))

	def test_out_of_range(self):
		a = array(num(1), num(2), num(3))
		for index in [3, -1, 1.5, 100]:
			with self.subTest(index):
				with self.assertRaises(SubscriptOutOfRange):
					self.ev(syntax.SubscriptExpression(a, num(index)))
		with self.assertRaises(SubscriptOutOfRange):
			self.ev(syntax.SubscriptExpression(array(), num(0)))

	def test_subscript_must_be_a_number(self):
		with self.assertRaises(SubscriptTypeError):
			self.ev(syntax.SubscriptExpression(array(num(1)), TRUE))
		with self.assertRaises(SubscriptTypeError):
			self.ev(syntax.SubscriptExpression(array(num(1)), array(num(0))))

	def test_only_arrays(self):
		with self.assertRaises(NotAnArray):
			self.ev(syntax.SubscriptExpression(num(5), num(0)))
		with self.assertRaises(NotAnArray):
			self.ev(syntax.SubscriptExpression(TRUE, num(0)))

	def test_user_functions_are_not_arrays(self):
		self.declare_function("f", ["x"], name("x"))
		with self.assertRaises(CannotSubscriptFunction):
			self.ev(syntax.SubscriptExpression(name("f"), num(0)))

	def test_built_ins_are_not_arrays_either(self):
		with self.assertRaises(NotAnArray):
			self.ev(syntax.SubscriptExpression(name("sqrt"), num(0)))

class Calls(EvaluatorCase):

	def test_parameters_shadow_then_vanish(self):
		self.ctx.memory.declare("x", Number(10))
		self.declare_function("timesTwo", ["x"], binary("*", name("x"), num(2)))
		self.assertEqual(Number(400), self.ev(call("timesTwo", num(200))))
		self.assertEqual(Number(10), self.ctx.memory.lookup("x"))
		self.assertEqual(0, self.ctx.memory.depth())

	def test_arguments_evaluated_before_binding(self):
		self.ctx.memory.declare("x", Number(1))
		self.declare_function("f", ["x", "y"], binary("+", name("x"), name("y")))
		self.assertEqual(Number(6), self.ev(call("f", num(5), name("x"))))

	def test_callee_sees_callers_parameters(self):
		self.declare_function("g", ["b"], binary("+", name("a"), name("b")))
		self.declare_function("f", ["a"], call("g", num(1)))
		self.assertEqual(Number(11), self.ev(call("f", num(10))))
		with self.assertRaises(NotDeclared):
			self.ev(call("g", num(1)))

	def test_recursion(self):
		n = name("n")
		body = syntax.ConditionalExpression(
			binary("<=", n, num(1)),
			num(1),
			binary("*", n, call("fact", binary("-", n, num(1)))),
		)
		self.declare_function("fact", ["n"], body)
		self.assertEqual(Number(120), self.ev(call("fact", num(5))))
		self.assertEqual(0, self.ctx.memory.depth())

	def test_failure_inside_a_call_leaves_no_frame(self):
		self.declare_function("f", ["x"], name("nope"))
		with self.assertRaises(NotDeclared):
			self.ev(call("f", num(1)))
		self.assertEqual(0, self.ctx.memory.depth())
		self.assertNotIn("x", self.ctx.memory)

	def test_failure_remembers_the_calls_it_left(self):
		self.declare_function("g", ["b"], binary("+", name("b"), TRUE))
		self.declare_function("f", ["a"], call("g", binary("*", name("a"), num(2))))
		with self.assertRaises(InvalidOperandType) as cm:
			self.ev(call("f", num(10)))
		frames = cm.exception.backtrace
		self.assertEqual(["g", "f"], [frame.breadcrumb.name for frame in frames])
		self.assertEqual({"b": Number(20)}, frames[0].copy_bindings())

	def test_argument_count(self):
		self.declare_function("f", ["x", "y"], name("x"))
		with self.assertRaises(InvalidArgumentCount):
			self.ev(call("f", num(1)))
		with self.assertRaises(InvalidArgumentCount):
			self.ev(call("f", num(1), num(2), call("tick", num(0))))
		self.assertEqual(0, self.ticks)

	def test_built_ins_ignore_extra_arguments(self):
		self.assertEqual(Number(2), self.ev(call("sqrt", num(4), num(9))))
		self.assertTrue(math.isnan(self.ev(call("sqrt")).value))
		with self.assertRaises(InvalidParameterType):
			self.ev(call("sqrt", num(4), TRUE))

	def test_only_functions_are_callable(self):
		self.ctx.memory.declare("x", Number(10))
		for callee in ["x", "π"]:
			with self.subTest(callee):
				with self.assertRaises(InvalidFunctionCall):
					self.ev(call(callee, num(1)))
		with self.assertRaises(NotDeclared):
			self.ev(call("nope", num(1)))

class BuiltIns(EvaluatorCase):

	def test_agree_with_host(self):
		for fn_name, fn in [("sqrt", math.sqrt), ("sin", math.sin), ("cos", math.cos), ("exp", math.exp), ("ln", math.log)]:
			with self.subTest(fn_name):
				self.assertEqual(Number(fn(10)), self.ev(call(fn_name, num(10))))

	def test_ln_is_natural(self):
		self.assertEqual(Number(1), self.ev(call("ln", call("exp", num(1)))))

	def test_hypot_and_pi(self):
		self.assertEqual(Number(3), self.ev(call("hypot", num(-3))))
		self.assertEqual(Number(math.pi), self.ev(name("π")))

	def test_domain_edges(self):
		self.assertTrue(math.isnan(self.ev(call("sqrt", num(-1))).value))
		self.assertEqual(Number(-math.inf), self.ev(call("ln", num(0))))
		self.assertEqual(Number(math.inf), self.ev(call("exp", num(1000))))

	def test_numbers_only(self):
		with self.assertRaises(InvalidParameterType) as cm:
			self.ev(call("cos", TRUE))
		self.assertIs(ErrorKind.INVALID_PARAMETER_TYPE, cm.exception.kind)

if __name__ == '__main__':
	unittest.main()
