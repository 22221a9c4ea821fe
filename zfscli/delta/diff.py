import re
from typing import Callable, List, Optional

from ..exceptions import (
	DecodeError,
	OutputShapeError,
	UnknownTokenError,
	ScalarParseError,
	LineDecodeError
)
from ..general import zfs
from ..models import ChangeType, InodeType, InodeChange

CHANGE_TYPES = {
	"-" : ChangeType.Removed,
	"+" : ChangeType.Created,
	"M" : ChangeType.Modified,
	"R" : ChangeType.Renamed,
}

INODE_TYPES = {
	"B" : InodeType.BlockDevice,
	"C" : InodeType.CharacterDevice,
	"/" : InodeType.Directory,
	">" : InodeType.Door,
	"|" : InodeType.NamedPipe,
	"@" : InodeType.SymbolicLink,
	"P" : InodeType.EventPort,
	"=" : InodeType.Socket,
	"F" : InodeType.File,
}

# Number of fields each kind of change is printed with
CHANGE_ARITY = {
	ChangeType.Removed : (3,),
	ChangeType.Created : (3,),
	ChangeType.Modified : (3, 4),
	ChangeType.Renamed : (4,),
}

# matches (+1) or (-1)
REFERENCE_COUNT_REGEX = re.compile(r'\(([+-]\d+)\)')

BACKSLASH = ord('\\')

def unescape_filepath(path :str) -> str:
	"""
	Reverses the escaping zfs diff applies to file names.

	Anything outside printable 7-bit ASCII (including every 8-bit byte)
	is printed as a backslash followed by a 3 digit octal value.
	Bytes that do not form valid UTF-8 survive as surrogate escapes,
	so ``os.fsencode()`` gives back the exact bytes on disk.
	"""
	raw = path.encode('UTF-8', errors='surrogateescape')
	buffer = bytearray()

	position = 0
	while position < len(raw):
		if raw[position] == BACKSLASH:
			octal_code = raw[position + 1:position + 4]
			if len(octal_code) < 3:
				raise ScalarParseError(f"Invalid octal code: too short in {path!r}")

			if not all(0x30 <= digit <= 0x37 for digit in octal_code):
				raise ScalarParseError(f"Invalid octal code: {octal_code.decode('ascii', errors='replace')!r} in {path!r}")

			value = int(octal_code, 8)
			if value > 0xff:
				raise ScalarParseError(f"Invalid octal code: {value} does not fit in a byte in {path!r}")

			buffer.append(value)
			position += 4
		else:
			buffer.append(raw[position])
			position += 1

	return bytes(buffer).decode('UTF-8', errors='surrogateescape')

def escape_filepath(path :str) -> str:
	"""
	The escaping zfs diff applies, see unescape_filepath().
	"""
	escaped = []
	for byte in path.encode('UTF-8', errors='surrogateescape'):
		# Space and backslash are escaped too, an escaped name is always a single field
		if 0x20 < byte < 0x7f and byte != BACKSLASH:
			escaped.append(chr(byte))
		else:
			escaped.append(f"\\{byte:03o}")

	return ''.join(escaped)

def parse_reference_count(field :str) -> int:
	if not (match := REFERENCE_COUNT_REGEX.fullmatch(field)):
		raise ScalarParseError(f"Reference count {field!r} is not of the form (+N) or (-N)")

	return int(match.group(1))

def decode_diff_line(line :List[str]) -> InodeChange:
	if len(line) < 1:
		raise OutputShapeError("Empty line passed")

	if (change := CHANGE_TYPES.get(line[0])) is None:
		raise UnknownTokenError(f"Unknown change type {line[0]!r}")

	if len(line) not in CHANGE_ARITY[change]:
		expected = '..'.join(str(count) for count in CHANGE_ARITY[change])
		raise OutputShapeError(f"Mismatching number of fields: expect {expected}, got: {len(line)}")

	if (inode_type := INODE_TYPES.get(line[1])) is None:
		raise UnknownTokenError(f"Unknown inode type {line[1]!r}")

	path = unescape_filepath(line[2])

	new_path = ''
	reference_count = 0
	if change == ChangeType.Renamed:
		new_path = unescape_filepath(line[3])
	elif change == ChangeType.Modified and len(line) == 4:
		reference_count = parse_reference_count(line[3])

	# Paths may carry surrogate escapes for bytes that are not UTF-8, which validation would refuse
	return InodeChange.model_construct(
		change=change,
		type=inode_type,
		path=path,
		new_path=new_path,
		reference_count_change=reference_count
	)

def decode_diff_lines(lines :List[List[str]]) -> List[InodeChange]:
	"""
	Decodes every line of ``zfs diff -FH``, for instance::

		M       /       /testpool/bar/
		+       F       /testpool/bar/hello.txt
		M       F       /testpool/bar/hello.txt (+1)
		R       F       /testpool/bar/a\\040b   /testpool/bar/c

	Stops at the first line that does not decode.
	"""
	changes = []
	for index, line in enumerate(lines):
		try:
			changes.append(decode_diff_line(line))
		except DecodeError as error:
			raise LineDecodeError(f"Failed to parse zfs diff: {error}", index, line) from error

	return changes

def diff(snapshot :str, other :str = '', runner :Optional[Callable] = None) -> List[InodeChange]:
	"""
	Changes between ``snapshot`` and either a later snapshot or,
	if ``other`` is not given, the current state of the filesystem.
	"""
	if '@' not in snapshot:
		raise ValueError(f"diff() requires a snapshot as its origin, {snapshot} is lacking @.")

	runner = runner or zfs()

	args = ["diff", "-FH", snapshot]
	if other:
		args.append(other)

	return decode_diff_lines(runner(*args))
