"""
The set of parse-nodes in simple form.
The front end calls these constructors with subordinate semantic-values in a bottom-up tree transduction,
but they are just as happy to be called by hand, which is how most of the tests build programs.
"""
from typing import Sequence
from .ontology import Phrase, ValueExpression, Statement

class Numeral(ValueExpression):
	def __init__(self, value:float):
		self.value = float(value)
	def __str__(self): return "<Numeral %r>" % self.value

class BooleanLiteral(ValueExpression):
	def __init__(self, value:bool):
		assert isinstance(value, bool), type(value)
		self.value = value
	def __str__(self): return "<Boolean %r>" % self.value

class Identifier(ValueExpression):
	""" Representing the occurrence of a name anywhere: in an expression, a declaration, or a parameter list. """
	def __init__(self, name:str):
		assert isinstance(name, str), type(name)
		self.name = name
	def __repr__(self): return "<Name %r>" % self.name
	def __str__(self): return self.name

class UnaryExpression(ValueExpression):
	def __init__(self, op:str, operand:ValueExpression):
		self.op, self.operand = op, operand
	def __str__(self): return "(%s%s)" % (self.op, self.operand)

class BinaryExpression(ValueExpression):
	def __init__(self, op:str, left:ValueExpression, right:ValueExpression):
		self.op, self.left, self.right = op, left, right
	def __str__(self): return "(%s %s %s)" % (self.left, self.op, self.right)

class CallExpression(ValueExpression):
	def __init__(self, callee:Identifier, args:Sequence[ValueExpression]):
		assert isinstance(callee, Identifier), type(callee)
		self.callee, self.args = callee, tuple(args)
	def __str__(self):
		return "%s(%s)" % (self.callee, ', '.join(map(str, self.args)))

class ConditionalExpression(ValueExpression):
	def __init__(self, test:ValueExpression, consequent:ValueExpression, alternate:ValueExpression):
		self.test, self.consequent, self.alternate = test, consequent, alternate
	def __str__(self): return "(%s ? %s : %s)" % (self.test, self.consequent, self.alternate)

class ArrayLiteral(ValueExpression):
	def __init__(self, elements:Sequence[ValueExpression]):
		for e in elements:
			assert isinstance(e, ValueExpression), e
		self.elements = tuple(elements)
	def __str__(self): return "[%s]" % ', '.join(map(str, self.elements))

class SubscriptExpression(ValueExpression):
	def __init__(self, array:ValueExpression, subscript:ValueExpression):
		self.array, self.subscript = array, subscript
	def __str__(self): return "%s[%s]" % (self.array, self.subscript)

###############################################################################

class VariableDeclaration(Statement):
	def __init__(self, id:Identifier, expression:ValueExpression):
		assert isinstance(id, Identifier), type(id)
		self.id, self.expression = id, expression
	def __str__(self): return "let %s = %s;" % (self.id, self.expression)

class Assignment(Statement):
	def __init__(self, id:Identifier, expression:ValueExpression):
		assert isinstance(id, Identifier), type(id)
		self.id, self.expression = id, expression
	def __str__(self): return "%s = %s;" % (self.id, self.expression)

class FunctionDeclaration(Statement):
	def __init__(self, id:Identifier, params:Sequence[Identifier], body:ValueExpression):
		assert isinstance(id, Identifier), type(id)
		assert all(isinstance(p, Identifier) for p in params), params
		self.id, self.params, self.body = id, tuple(params), body
	def __str__(self):
		return "function %s(%s) = %s;" % (self.id, ', '.join(map(str, self.params)), self.body)

class PrintStatement(Statement):
	def __init__(self, expression:ValueExpression):
		self.expression = expression
	def __str__(self): return "print %s;" % self.expression

class Block(Statement):
	def __init__(self, statements:Sequence[Statement]):
		for s in statements:
			assert isinstance(s, Statement), s
		self.statements = tuple(statements)
	def __str__(self): return "{ %s }" % ' '.join(map(str, self.statements))

class WhileStatement(Statement):
	def __init__(self, test:ValueExpression, body:Block):
		assert isinstance(body, Block), type(body)
		self.test, self.body = test, body
	def __str__(self): return "while %s %s" % (self.test, self.body)

class Program(Phrase):
	def __init__(self, block:Block):
		assert isinstance(block, Block), type(block)
		self.block = block
