import os
import shlex
import logging
import subprocess
import time
import uuid
from typing import Union, List, Optional, Dict, Any, IO

from .storage import storage
from .logger import log
from .exceptions import SysCallError, RequirementError

def locate_binary(name :str) -> str:
	for PATH in os.environ['PATH'].split(':'):
		for root, folders, files in os.walk(PATH):
			for file in files:
				if file == name and os.access(os.path.join(root, file), os.X_OK):
					return os.path.join(root, file)
			break  # Don't recurse

	raise RequirementError(f"Binary {name} does not exist.")

class SysCommand:
	"""
	Runs a command to completion and keeps its stdout, stderr and exit code.

	If ``stdout`` is given, output goes straight into that file object and
	nothing is captured, so ``.lines()`` will return ``None``.
	"""
	def __init__(self,
		cmd :Union[str, List[str]],
		stdout :Optional[IO[bytes]] = None,
		stdin :Optional[IO[bytes]] = None,
		environment_vars :Optional[Dict[str, Any]] = None,
		timeout :Optional[float] = None):

		if not environment_vars:
			environment_vars = {}

		if type(cmd) is str:
			cmd = shlex.split(cmd)

		cmd = list(cmd)
		if cmd[0][0] != '/' and cmd[0][:2] != './':
			# "which" is a builtin to most shells, so do the PATH lookup by hand
			cmd[0] = locate_binary(cmd[0])

		self.cmd = cmd
		self.stdout = stdout
		self.stdin = stdin
		# define the standard locale for command outputs. For now the C ascii one. Can be overriden
		self.environment_vars = {'LC_ALL' : storage['arguments'].locale, **environment_vars}
		self.timeout = timeout if timeout is not None else storage['arguments'].command_timeout

		self.id = str(uuid.uuid4())
		self.exit_code :Optional[int] = None
		self._trace_log = b''
		self._stderr = b''
		self.started :Optional[float] = None
		self.ended :Optional[float] = None

		self.execute()

	def __repr__(self) -> str:
		return f"SysCommand(id={self.id}, cmd={self.cmd!r}, exit_code={self.exit_code})"

	@property
	def debug(self) -> str:
		return ' '.join(self.cmd)

	def execute(self) -> bool:
		log(f"ID:{self.id} START {self.debug}", level=logging.DEBUG, fg="gray")

		self.started = time.time()
		try:
			worker = subprocess.Popen(
				self.cmd,
				shell=False,
				stdin=self.stdin,
				stdout=self.stdout if self.stdout is not None else subprocess.PIPE,
				stderr=subprocess.PIPE,
				env={**os.environ, **self.environment_vars}
			)
		except OSError as error:
			self.ended = time.time()
			log(f"ID:{self.id} FAILED to start: {error}", level=logging.DEBUG, fg="red")
			raise SysCallError(f"{self.cmd[0]} could not be executed", error=error, debug=self.debug, stderr="", worker=self)

		try:
			stdout, stderr = worker.communicate(timeout=self.timeout)
		except subprocess.TimeoutExpired as error:
			worker.kill()
			stdout, stderr = worker.communicate()
			self._stderr = stderr or b''
			self.exit_code = worker.returncode
			self.ended = time.time()
			log(f"ID:{self.id} TIMEOUT after {self.timeout}s", level=logging.DEBUG, fg="red")
			raise SysCallError(f"{self.cmd[0]} timed out after {self.timeout}s", self.exit_code, error=error, debug=self.debug, stderr=self.stderr, worker=self)

		self._trace_log = stdout or b''
		self._stderr = stderr or b''
		self.exit_code = worker.returncode
		self.ended = time.time()

		log(f"ID:{self.id} FINISH [{self.exit_code}] ({self.ended - self.started:.3f}s)", level=logging.DEBUG, fg="gray")

		if self.exit_code != 0:
			# A negative exit code means the process was killed by a signal,
			# which is reported exactly like any other failure.
			error = subprocess.CalledProcessError(self.exit_code, self.cmd, stdout, stderr)
			raise SysCallError(f"{self.cmd[0]} exited with abnormal exit code [{self.exit_code}]", self.exit_code, error=error, debug=self.debug, stderr=self.stderr, worker=self)

		return True

	def decode(self, encoding :str = 'UTF-8') -> str:
		return self._trace_log.decode(encoding, errors='surrogateescape')

	@property
	def stderr(self) -> str:
		return self._stderr.decode('UTF-8', errors='replace')

	@property
	def trace_log(self) -> bytes:
		return self._trace_log

	def lines(self) -> Optional[List[List[str]]]:
		"""
		Splits stdout on newlines and every line on whitespace.
		The final newline of the output is not counted as an empty line.
		"""
		# Output went to a caller supplied sink, they know what to do with it
		if self.stdout is not None:
			return None

		lines = self.decode().split('\n')
		if lines[-1] == '':
			lines = lines[:-1]

		return [line.split() for line in lines]

class Runner:
	"""
	Runs one program (``zfs`` or ``zpool``) with varying arguments.
	Everything in zfscli that needs command output takes one of these,
	so anything callable as ``runner(*args) -> lines`` can stand in for it.
	"""
	def __init__(self, program :str):
		self.program = program

	def __repr__(self) -> str:
		return f"Runner(program={self.program})"

	def __call__(self, *args :str, stdout :Optional[IO[bytes]] = None, stdin :Optional[IO[bytes]] = None) -> Optional[List[List[str]]]:
		return SysCommand([self.program, *args], stdout=stdout, stdin=stdin).lines()

def zfs() -> Runner:
	return Runner(storage['arguments'].zfs_binary)

def zpool() -> Runner:
	return Runner(storage['arguments'].zpool_binary)
