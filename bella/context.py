"""
The state a running program works against, gathered into one object
that gets passed explicitly to every evaluation and execution step.
Two contexts never share anything, so tests (or threads) can each have their own.
"""
from typing import Callable, Optional
from .memory import Memory
from .ontology import Phrase

class Context:
	memory: Memory
	output: list[str]
	pc: Optional[Phrase]   # The statement under execution, for diagnostics.

	def __init__(self, echo:Optional[Callable[[str], None]] = None):
		self.memory = Memory()
		self.output = []
		self.echo = echo
		self.reset()

	def reset(self):
		self.output.clear()
		self.memory.reset_to_builtins()
		self.pc = None

	def emit(self, text:str):
		self.output.append(text)
		if self.echo is not None:
			self.echo(text)
