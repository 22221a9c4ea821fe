"""
Converters for single values as printed by ``zfs``/``zpool`` in scripted (-H) mode.

The tools print ``-`` for anything that is unset or does not apply,
so every decoder that takes a sentinel treats ``-`` the same way.
"""
import re
from decimal import Decimal, InvalidOperation

from .exceptions import ScalarParseError, UnknownTokenError

UNSET = '-'

# Same suffixes zfs uses when printing sizes, always powers of 1024
SIZE_UNITS = {'': 0, 'K': 1, 'M': 2, 'G': 3, 'T': 4, 'P': 5, 'E': 6, 'Z': 7}
SIZE_REGEX = re.compile(r'^(\d+(?:\.\d+)?)\s*([KMGTPEZ]?)(?:I?B)?$', re.IGNORECASE)

TRUE_VALUES = ('on', 'yes')
FALSE_VALUES = ('off', 'no', UNSET)

def string_or_empty(value :str) -> str:
	if value == UNSET:
		return ''
	return value

def unsigned_int(value :str) -> int:
	if value == UNSET:
		return 0

	# int() accepts signs, underscores and surrounding whitespace, zfs never prints those
	if not value.isascii() or not value.isdigit():
		raise ScalarParseError(f"Expected an unsigned integer, got {value!r}")

	number = int(value)
	if number >= 2 ** 64:
		raise ScalarParseError(f"Value {value!r} is out of range for an unsigned 64 bit integer")

	return number

def parse_size(value :str) -> int:
	"""
	Parses a human readable size such as ``10G``, ``1.50M`` or ``512`` into bytes.
	"""
	if not (match := SIZE_REGEX.match(value)):
		raise ScalarParseError(f"Invalid size format: {value!r}")

	number, unit = match.groups()
	try:
		size = int(Decimal(number) * 1024 ** SIZE_UNITS[unit.upper()])
	except InvalidOperation as error:
		raise ScalarParseError(f"Invalid size format: {value!r}") from error

	if size >= 2 ** 64:
		raise ScalarParseError(f"Size {value!r} is out of range for an unsigned 64 bit integer")

	return size

def storage_size(value :str) -> int:
	if value == UNSET:
		return 0
	return parse_size(value)

def boolean(value :str) -> bool:
	if value in TRUE_VALUES:
		return True
	elif value in FALSE_VALUES:
		return False

	raise UnknownTokenError(f"Value {value!r} is neither on/yes nor off/no")

def trailing_percent_uint(value :str) -> int:
	"""
	``42%`` -> 42. The last character is dropped without looking at it.
	"""
	remainder = value[:-1]
	if not remainder:
		raise ScalarParseError(f"Expected a number followed by a suffix, got {value!r}")
	return unsigned_int(remainder)

def trailing_x_float(value :str) -> float:
	"""
	``1.50x`` -> 1.5. The last character is dropped without looking at it.
	"""
	try:
		return float(value[:-1])
	except ValueError as error:
		raise ScalarParseError(f"Expected a ratio such as 1.00x, got {value!r}") from error
