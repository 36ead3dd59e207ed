import sys, random
from typing import Any, Optional
from boozetools.support.failureprone import illustration
from lark.exceptions import UnexpectedInput, UnexpectedToken, UnexpectedCharacters
from .errors import BellaError
from .location import Span, source_text
from .memory import Activation
from .ontology import Phrase

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]

	minced_oaths = [
		'Ack', 'ARGH', 'Blargh', 'Confound it', 'Crud', 'Curses', "Crikey",
		'Dag Nabbit', 'Drat', 'Fiddlesticks', 'Good Grief', "Great Scott",
		"Heavens", 'Jeepers', "Mercy", 'Nuts', 'Rats', 'Woe is me',
	]

	resignations = [
		'I am undone.',
		'I cannot continue.',
		'I have no idea what the right answer is.',
		'Bella needs to ask for help.',
	]

	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Report:
	""" Collects what went wrong, and tells the console about it on request. """
	_issues : list["Pic"]

	def __init__(self, *, verbose:int=0):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []

	def ok(self): return not self._issues
	def sick(self): return bool(self._issues)

	def issue(self, it:"Pic"):
		self._issues.append(it)

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self._issues)

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)

	def descriptions(self) -> list[str]:
		return [pic.intro for pic in self._issues]

	# Methods the front-end is likely to call:

	def no_such_file(self, path:Any):
		self.issue(Pic("I see no file called "+str(path), []))

	def broken_file(self, path:Any, cause:OSError):
		intro = "Something went pear-shaped while trying to read "+str(path)
		self.issue(Pic(intro, [], [str(cause)]))

	def syntax_error(self, source:str, ex:UnexpectedInput):
		if isinstance(ex, UnexpectedToken):
			anns = _point_at(source, ex, len(ex.token))
			intro = "Bella got confused by %s." % _describe_token(ex.token)
			hint = "Expected one of: " + ", ".join(sorted(ex.expected))
		elif isinstance(ex, UnexpectedCharacters):
			anns = _point_at(source, ex, 1)
			intro = "Bella does not know what to make of %r." % ex.char
			hint = "That character does not begin any word or symbol of the language."
		else:
			anns = []
			intro = "Ran out of words in %s." % source
			hint = "The program seems to stop in the middle of something."
		self.issue(Pic(intro, anns, [hint]))

	# Methods the run-time's caller invokes:

	def runtime_error(self, ex:BellaError, site:Optional[Phrase]):
		intro = "The program failed with %s." % ex
		footer = ["... inside " + _describe_call(frame) for frame in ex.backtrace]
		self.issue(Pic(intro, _annotate(site, ex.kind.value), footer))

	def too_deep(self, site:Optional[Phrase]):
		intro = "The program went too deep into function calls."
		footer = ["Perhaps some recursion never reaches its base case?"]
		self.issue(Pic(intro, _annotate(site, "while doing this"), footer))

def _describe_token(token) -> str:
	if token.type == "$END": return "the end of the text"
	return "%r" % str(token)

def _describe_call(frame:Activation) -> str:
	bindings = frame.copy_bindings()
	args = ", ".join("%s=%s" % (p, bindings[p]) for p in frame.breadcrumb.params)
	return "%s(%s)" % (frame.breadcrumb.name, args)

def _point_at(source:str, ex:UnexpectedInput, width:int) -> list["Annotation"]:
	start = ex.pos_in_stream or 0
	return [Annotation(Span(source, ex.line, ex.column, start, start+width), "Bella got confused here")]

def _annotate(site:Optional[Phrase], caption:str) -> list["Annotation"]:
	if site is None or site.where is None: return []
	return [Annotation(site.where, caption)]

class Annotation:
	def __init__(self, where:Span, caption:str=""):
		self.where = where
		self.caption = caption

	def illustrate(self):
		source = source_text(self.where.source)
		if source is None:
			return '% 6d | (source unavailable) %s' % (self.where.line, self.caption)
		row, col = source.find_row_col(self.where.start)
		single_line = source.line_of_text(row)
		width = self.where.stop - self.where.start
		return illustration(single_line, col, width, prefix='% 6d |' % row, caption=self.caption)

class Pic:
	def __init__(self, intro:str, anns:list[Annotation], footer=()):
		self.intro, self._anns, self._footer = intro, anns, footer
	def as_text(self):
		lines = [self.intro, ""]
		source = None
		for ann in self._anns:
			if ann.where.source != source:
				source = ann.where.source
				lines.append(str(source))
			lines.append(ann.illustrate())
		lines.extend(self._footer)
		return '\n'.join(lines)

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
