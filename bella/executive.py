"""
Execute statements, and run whole programs.

Statements work the same way expressions do over in the evaluator:
one `_exec_...` function per kind of statement, dispatched through the EXECUTE table.
A failure anywhere stops the program on the spot; nothing here catches anything.
"""
from typing import NamedTuple, Optional
from . import syntax
from .context import Context
from .errors import BellaError, AlreadyDeclared
from .evaluator import evaluate
from .values import UserFunction

def execute(stmt:syntax.Statement, ctx:Context):
	try: fn = EXECUTE[type(stmt)]
	except KeyError: raise NotImplementedError(type(stmt), stmt)
	fn(stmt, ctx)

###############################################################################

def _exec_variable_declaration(stmt:syntax.VariableDeclaration, ctx:Context):
	if stmt.id.name in ctx.memory:
		raise AlreadyDeclared(stmt.id.name)
	ctx.memory.declare(stmt.id.name, evaluate(stmt.expression, ctx))

def _exec_assignment(stmt:syntax.Assignment, ctx:Context):
	ctx.memory.assign(stmt.id.name, evaluate(stmt.expression, ctx))

def _exec_function_declaration(stmt:syntax.FunctionDeclaration, ctx:Context):
	params = [p.name for p in stmt.params]
	ctx.memory.declare(stmt.id.name, UserFunction(stmt.id.name, params, stmt.body))

def _exec_print(stmt:syntax.PrintStatement, ctx:Context):
	ctx.emit(str(evaluate(stmt.expression, ctx)))

def _exec_while(stmt:syntax.WhileStatement, ctx:Context):
	# No break, no bound: a test that never goes false loops forever, and that is the language.
	while evaluate(stmt.test, ctx).truthy():
		execute(stmt.body, ctx)
		ctx.pc = stmt

def _exec_block(stmt:syntax.Block, ctx:Context):
	for each in stmt.statements:
		ctx.pc = each
		execute(each, ctx)

###############################################################################

def run(program:syntax.Program, ctx:Context):
	""" Start from a clean slate with the built-ins installed, then run the root block. """
	ctx.reset()
	execute(program.block, ctx)

def interpret(program:syntax.Program) -> list[str]:
	""" Run a program in a context of its own; answer the output log. """
	ctx = Context()
	run(program, ctx)
	return ctx.output

class Outcome(NamedTuple):
	output: list[str]
	error: Optional[BellaError]

	def ok(self) -> bool: return self.error is None

def attempt(program:syntax.Program, ctx:Context) -> Outcome:
	"""
	For callers who would rather have a result than an exception:
	the output log up to the point of failure, and the failure (if any).
	"""
	try: run(program, ctx)
	except BellaError as ex: return Outcome(ctx.output, ex)
	return Outcome(ctx.output, None)

EXECUTE = {}
for _k, _v in list(globals().items()):
	if _k.startswith("_exec_"):
		_t = _v.__annotations__["stmt"]
		assert isinstance(_t, type), (_k, _t)
		EXECUTE[_t] = _v
