"""
Everything that can go wrong while a Bella program runs.

Each failure is its own exception class, so callers can catch exactly what they mean,
and each carries an ErrorKind, so callers who would rather switch on a value can do that.
Nothing in the run-time recovers from any of these: they unwind to whoever called `run`.
"""
from enum import Enum

class ErrorKind(Enum):
	NOT_DECLARED = "Not declared"
	ALREADY_DECLARED = "Already declared"
	INVALID_OPERAND_TYPE = "Invalid operand type"
	INVALID_OPERATOR = "Invalid operator"
	INVALID_FUNCTION_CALL = "Invalid function call"
	INVALID_PARAMETER_TYPE = "Invalid parameter type"
	INVALID_ARGUMENT_COUNT = "Invalid argument count"
	SUBSCRIPT_TYPE_ERROR = "Subscript type error"
	NOT_AN_ARRAY = "Not an array"
	SUBSCRIPT_OUT_OF_RANGE = "Subscript out of range"
	CANNOT_SUBSCRIPT_FUNCTION = "Cannot subscript a function"
	NOT_ASSIGNABLE = "Not assignable"

class BellaError(Exception):
	kind: ErrorKind
	backtrace: list   # Call frames unwound on the way out, innermost first.

	def __init__(self, detail:str):
		super().__init__(detail)
		self.detail = detail
		self.backtrace = []

	def __str__(self): return "%s: %s" % (self.kind.value, self.detail)

class NotDeclared(BellaError):
	kind = ErrorKind.NOT_DECLARED

class AlreadyDeclared(BellaError):
	kind = ErrorKind.ALREADY_DECLARED

class InvalidOperandType(BellaError):
	kind = ErrorKind.INVALID_OPERAND_TYPE

class InvalidOperator(BellaError):
	kind = ErrorKind.INVALID_OPERATOR

class InvalidFunctionCall(BellaError):
	kind = ErrorKind.INVALID_FUNCTION_CALL

class InvalidParameterType(BellaError):
	kind = ErrorKind.INVALID_PARAMETER_TYPE

class InvalidArgumentCount(BellaError):
	kind = ErrorKind.INVALID_ARGUMENT_COUNT

class SubscriptTypeError(BellaError):
	kind = ErrorKind.SUBSCRIPT_TYPE_ERROR

class NotAnArray(BellaError):
	kind = ErrorKind.NOT_AN_ARRAY

class SubscriptOutOfRange(BellaError):
	kind = ErrorKind.SUBSCRIPT_OUT_OF_RANGE

class CannotSubscriptFunction(BellaError):
	kind = ErrorKind.CANNOT_SUBSCRIPT_FUNCTION

class NotAssignable(BellaError):
	kind = ErrorKind.NOT_ASSIGNABLE
