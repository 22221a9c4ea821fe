import logging
from typing import Callable, Dict, List, Optional, Tuple, Any

from ..decoders import (
	string_or_empty,
	unsigned_int,
	storage_size,
	boolean,
	trailing_percent_uint,
	trailing_x_float
)
from ..exceptions import DecodeError, OutputShapeError, FieldDecodeError
from ..general import zpool
from ..logger import log
from ..models import Zpool
from ..properties import ZPOOL_PROPERTY_OPTIONS

# zpool property name -> (Zpool field, decoder)
ZPOOL_FIELDS :Dict[str, Tuple[str, Callable[[str], Any]]] = {
	"name" : ("name", string_or_empty),
	"health" : ("health", string_or_empty),
	"allocated" : ("allocated", storage_size),
	"size" : ("size", storage_size),
	"free" : ("free", storage_size),
	"dedupratio" : ("dedupratio", trailing_x_float),
	"capacity" : ("capacity", trailing_percent_uint),
	"altroot" : ("altroot", string_or_empty),
	"guid" : ("guid", string_or_empty),
	"version" : ("version", unsigned_int),
	"bootfs" : ("bootfs", string_or_empty),
	"delegation" : ("delegation", boolean),
	"autoreplace" : ("autoreplace", boolean),
	"cachefile" : ("cachefile", string_or_empty),
	"failmode" : ("failmode", string_or_empty),
	"listsnapshots" : ("listsnapshots", boolean),
	"autoexpand" : ("autoexpand", boolean),
	"dedupditto" : ("dedupditto", string_or_empty),
	"ashift" : ("ashift", string_or_empty),
}

def decode_pool_line(fields :Dict[str, Any], line :List[str]) -> Dict[str, Any]:
	"""
	Merges one ``[name, property, value]`` line into ``fields``.
	Properties zfscli does not know about are skipped, newer zpool
	versions keep adding them.
	"""
	if len(line) != 3:
		raise OutputShapeError(f"Expected 3 fields (name, property, value) from zpool get, got {len(line)}: {line!r}")

	name, property, value = line
	if property not in ZPOOL_FIELDS:
		log(f"Ignoring unknown zpool property {property} on {name}", level=logging.DEBUG, fg="gray")
		return fields

	field, decoder = ZPOOL_FIELDS[property]
	try:
		fields[field] = decoder(value)
	except DecodeError as error:
		raise FieldDecodeError(property, value, error) from error

	return fields

def decode_pool_lines(lines :List[List[str]]) -> Zpool:
	"""
	Decodes ``zpool get -H -o name,property,value <properties> <pool>`` for one pool.
	"""
	if not lines:
		raise OutputShapeError("zpool get returned no properties to build a Zpool from.")

	pool_name = lines[0][0] if lines[0] else ''
	fields = {"name": pool_name}

	for line in lines:
		if line and line[0] != pool_name:
			raise OutputShapeError(f"Expected properties for pool {pool_name} only, got a line for {line[0]}")

		decode_pool_line(fields, line)

	return Zpool(**fields)

def decode_pool_listing(lines :List[List[str]]) -> List[Zpool]:
	"""
	Same as decode_pool_lines() but for output covering several pools,
	lines are grouped by adjacent pool name.
	"""
	groups :List[List[List[str]]] = []

	name = None
	for line in lines:
		if not line:
			raise OutputShapeError("Expected 3 fields (name, property, value) from zpool get, got an empty line")

		if groups and line[0] == name:
			groups[-1].append(line)
		else:
			name = line[0]
			groups.append([line])

	return [decode_pool_lines(group) for group in groups]

def get_zpool(name :str, runner :Optional[Callable] = None) -> Zpool:
	runner = runner or zpool()
	return decode_pool_lines(runner("get", "-H", "-o", "name,property,value", ZPOOL_PROPERTY_OPTIONS, name))

def list_zpools(runner :Optional[Callable] = None) -> List[Zpool]:
	runner = runner or zpool()

	names = [line[0] for line in runner("list", "-Ho", "name") if line]
	if not names:
		return []

	return decode_pool_listing(runner("get", "-H", "-o", "name,property,value", ZPOOL_PROPERTY_OPTIONS, *names))
