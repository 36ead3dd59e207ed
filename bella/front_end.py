"""
Turn the text of Bella programs into syntax trees.

Lark does the scanning and parsing according to Bella.lark, which sits beside this file.
BellaBuilder then transduces Lark's parse tree, bottom-up, into the classes in `syntax`,
stamping each node with where in the text it came from.
"""
from pathlib import Path
from typing import Optional
from lark import Lark, Token, Transformer, v_args
from lark.exceptions import UnexpectedInput
from . import syntax
from .diagnostics import Report
from .location import Span, register_text

bella_parser = Lark.open("Bella.lark", rel_to=__file__, parser="lalr", start="program", propagate_positions=True)

@v_args(meta=True, inline=True)
class BellaBuilder(Transformer):

	def __init__(self, source:str):
		super().__init__()
		self._source = source

	def _where(self, meta) -> Optional[Span]:
		if meta.empty: return None
		return Span(self._source, meta.line, meta.column, meta.start_pos, meta.end_pos)

	def _name(self, token:Token) -> syntax.Identifier:
		where = Span(self._source, token.line, token.column, token.start_pos, token.end_pos)
		return syntax.Identifier(str(token)).at(where)

	def program(self, meta, *statements):
		block = syntax.Block(statements).at(self._where(meta))
		return syntax.Program(block).at(block.where)

	def variable_declaration(self, meta, name, expression):
		return syntax.VariableDeclaration(self._name(name), expression).at(self._where(meta))

	def function_declaration(self, meta, name, params, body):
		return syntax.FunctionDeclaration(self._name(name), params or (), body).at(self._where(meta))

	def assignment(self, meta, name, expression):
		return syntax.Assignment(self._name(name), expression).at(self._where(meta))

	def print_statement(self, meta, expression):
		return syntax.PrintStatement(expression).at(self._where(meta))

	def while_statement(self, meta, test, body):
		return syntax.WhileStatement(test, body).at(self._where(meta))

	def params(self, meta, *names):
		return [self._name(n) for n in names]

	def block(self, meta, *statements):
		return syntax.Block(statements).at(self._where(meta))

	def conditional(self, meta, test, consequent, alternate):
		return syntax.ConditionalExpression(test, consequent, alternate).at(self._where(meta))

	def binary(self, meta, left, op, right):
		return syntax.BinaryExpression(str(op), left, right).at(self._where(meta))

	def unary(self, meta, op, operand):
		return syntax.UnaryExpression(str(op), operand).at(self._where(meta))

	def subscript(self, meta, array, index):
		return syntax.SubscriptExpression(array, index).at(self._where(meta))

	def numeral(self, meta, token):
		return syntax.Numeral(float(token)).at(self._where(meta))

	def true(self, meta):
		return syntax.BooleanLiteral(True).at(self._where(meta))

	def false(self, meta):
		return syntax.BooleanLiteral(False).at(self._where(meta))

	def call(self, meta, name, args):
		return syntax.CallExpression(self._name(name), args or ()).at(self._where(meta))

	def identifier(self, meta, name):
		return self._name(name)

	def array(self, meta, elements):
		return syntax.ArrayLiteral(elements or ()).at(self._where(meta))

	def args(self, meta, *exprs):
		return list(exprs)

def parse_text(text:str, source:str, report:Report) -> Optional[syntax.Program]:
	""" Submit text to parser; submit the resulting tree to the builder """
	register_text(source, text)
	try: tree = bella_parser.parse(text)
	except UnexpectedInput as ex:
		report.syntax_error(source, ex)
		return None
	return BellaBuilder(source).transform(tree)

def parse_file(path:Path, report:Report) -> Optional[syntax.Program]:
	try:
		with open(path, "r", encoding="utf-8") as fh:
			text = fh.read()
	except FileNotFoundError:
		report.no_such_file(path)
	except OSError as ex:
		report.broken_file(path, ex)
	else:
		report.info("Parsing", path)
		return parse_text(text, str(path), report)
