from typing import Optional, Any, List

class ZFSError(Exception):
	pass

class SysCallError(ZFSError):
	"""
	Raised when ``zfs``/``zpool`` (or any child process) exits abnormally.
	Carries the underlying error, a debug string of the invocation and
	whatever the process wrote to stderr.
	"""
	def __init__(self,
		message :str,
		exit_code :Optional[int] = None,
		error :Optional[BaseException] = None,
		debug :Optional[str] = None,
		stderr :Optional[str] = None,
		worker :Optional[Any] = None) -> None:

		super(SysCallError, self).__init__(message)
		self.message = message
		self.exit_code = exit_code
		self.error = error
		self.debug = debug
		self.stderr = stderr
		self.worker = worker

	def __str__(self) -> str:
		return f"{self.message}: {self.debug} => {self.stderr}"

class RequirementError(ZFSError):
	pass

class DecodeError(ZFSError):
	"""
	Base class for output that could not be decoded.
	These are never worth retrying, the command output itself is unexpected.
	"""
	pass

class OutputShapeError(DecodeError):
	pass

class UnknownTokenError(DecodeError):
	pass

class ScalarParseError(DecodeError):
	pass

class FieldDecodeError(DecodeError):
	def __init__(self, property :str, value :str, reason :Optional[BaseException] = None) -> None:
		super(FieldDecodeError, self).__init__(f"Could not decode property {property} from value {value!r}: {reason}")
		self.property = property
		self.value = value

class LineDecodeError(DecodeError):
	def __init__(self, message :str, index :int, line :List[str]) -> None:
		super(LineDecodeError, self).__init__(f"{message} on line {index}, got: {line!r}")
		self.index = index
		self.line = line
