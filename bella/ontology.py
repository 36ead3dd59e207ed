"""
These most-fundamental classes in the syntax class hierarchy
are separate from the rest to avoid circular-import scenarios:
the run-time, the diagnostics, and the syntax module all need them.
"""
from typing import Optional
from .location import Span

class Phrase:
	""" Anything the front end builds. It fills in `where`; hand-built trees leave it as None. """
	where: Optional[Span] = None

	def at(self, where:Optional[Span]):
		self.where = where
		return self

class ValueExpression(Phrase):
	""" Evaluates to a value. Reads the name store, but changes nothing. """

class Statement(Phrase):
	""" Executes for effect on the name store or the output log. """
