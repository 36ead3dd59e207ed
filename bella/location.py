"""
I want a simple, light-weight way to point at places within the texts of Bella programs.
The front end registers each text it parses; diagnostics can then quote the line a node came from.
Hand-built syntax trees have no location, and everything downstream copes with that.
"""
from typing import NamedTuple, Optional
from boozetools.support.failureprone import SourceText

class Span(NamedTuple):
	""" Aimed at whatever prints error messages """
	source: str
	line: int
	column: int
	start: int   # Character offsets into the text,
	stop: int    # as a slice would have them.

	def __str__(self): return "%s:%d:%d" % (self.source, self.line, self.column)

# Only the most recent few texts stay quotable.
TEXTS_KEPT = 8
_texts: dict[str, SourceText] = {}

def reset_location_index():
	_texts.clear()

def register_text(source:str, text:str):
	_texts.pop(source, None)
	_texts[source] = SourceText(text, filename=source)
	while len(_texts) > TEXTS_KEPT:
		del _texts[next(iter(_texts))]

def source_text(source:str) -> Optional[SourceText]:
	return _texts.get(source)
