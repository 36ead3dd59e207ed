"""
The name store: every binding a running Bella program can see.

There is one flat global frame, and each user-function call pushes an activation
frame holding its parameters on top of whatever was current at the call.
Lookups search from the newest frame down to the globals, so a function body sees its
own parameters first and its callers' parameters after that. Leaving the call pops
the frame, so nothing a call binds survives it, and the caller's bindings are
exactly as they were.
"""
from contextlib import contextmanager
from typing import Iterator, NamedTuple, Optional, Sequence
from . import primitive
from .errors import BellaError, AlreadyDeclared, NotDeclared, NotAssignable
from .values import BellaValue, Array, Function, UserFunction

class Frame:
	_bindings : dict[str, BellaValue]
	dynamic_link : Optional["Frame"] = None

	def holds(self, key:str) -> bool: return key in self._bindings
	def fetch(self, key:str) -> BellaValue: return self._bindings[key]
	def assign(self, key:str, value:BellaValue):
		self._bindings[key] = value
		return value
	def copy_bindings(self) -> dict[str, BellaValue]: return dict(self._bindings)
	def replace_bindings(self, bindings:dict[str, BellaValue]): self._bindings = dict(bindings)
	def clear(self): self._bindings.clear()

	def chase(self, key:str) -> Optional["Frame"]:
		""" The nearest frame, this one or along the dynamic links, which holds the key. """
		frame = self
		while frame is not None:
			if frame.holds(key): return frame
			frame = frame.dynamic_link
		return None

class RootFrame(Frame):
	""" The global bindings, built-ins included. """
	def __init__(self):
		self._bindings = {}

class Activation(Frame):
	""" One call's parameter bindings. """
	def __init__(self, dynamic_link:Frame, breadcrumb:UserFunction, bindings:dict[str, BellaValue]):
		self._bindings = bindings
		self.dynamic_link = dynamic_link
		self.breadcrumb = breadcrumb

class Snapshot(NamedTuple):
	top: Frame
	contents: tuple[tuple[Frame, dict[str, BellaValue]], ...]

class Memory:
	def __init__(self):
		self.root = RootFrame()
		self._top : Frame = self.root

	def depth(self) -> int:
		frame, count = self._top, 0
		while frame is not self.root:
			frame, count = frame.dynamic_link, count+1
		return count

	def __contains__(self, name:str) -> bool:
		return self._top.chase(name) is not None

	def declare(self, name:str, value:BellaValue) -> BellaValue:
		if name in self:
			raise AlreadyDeclared(name)
		return self._top.assign(name, value)

	def lookup(self, name:str) -> BellaValue:
		frame = self._top.chase(name)
		if frame is None:
			raise NotDeclared(name)
		return frame.fetch(name)

	def assign(self, name:str, value:BellaValue) -> BellaValue:
		frame = self._top.chase(name)
		if frame is None:
			raise NotDeclared(name)
		current = frame.fetch(name)
		if isinstance(current, (Array, Function)):
			raise NotAssignable("%s holds a(n) %s" % (name, current.type_name))
		return frame.assign(name, value)

	@contextmanager
	def activation(self, function:UserFunction, params:Sequence[str], args:Sequence[BellaValue]) -> Iterator[Activation]:
		"""
		Bind parameters for the duration of a call.
		Calls nest strictly, so the frame popped is always the one pushed.
		"""
		assert len(params) == len(args)
		frame = Activation(self._top, function, dict(zip(params, args)))
		self._top = frame
		try: yield frame
		except BellaError as ex:
			ex.backtrace.append(frame)
			raise
		finally: self._top = frame.dynamic_link

	def snapshot(self) -> Snapshot:
		contents = []
		frame = self._top
		while frame is not None:
			contents.append((frame, frame.copy_bindings()))
			frame = frame.dynamic_link
		return Snapshot(self._top, tuple(contents))

	def restore(self, snapshot:Snapshot):
		for frame, bindings in snapshot.contents:
			frame.replace_bindings(bindings)
		self._top = snapshot.top

	def reset_to_builtins(self):
		self.root.clear()
		self._top = self.root
		for name, value in primitive.built_ins().items():
			self.root.assign(name, value)

	def clear(self):
		self.root.clear()
		self._top = self.root
