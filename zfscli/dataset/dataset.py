import functools
from typing import Callable, Dict, List, Tuple, Any

from ..decoders import (
	string_or_empty,
	unsigned_int,
	storage_size,
	boolean,
	trailing_x_float
)
from ..exceptions import DecodeError, OutputShapeError, FieldDecodeError
from ..models import Dataset
from ..properties import PropertySchema, DATASET_SCHEMAS

# zfs property name -> (Dataset field, decoder)
DATASET_FIELDS :Dict[str, Tuple[str, Callable[[str], Any]]] = {
	"name" : ("name", string_or_empty),
	"available" : ("available", storage_size),
	"compressratio" : ("compress_ratio", trailing_x_float),
	"defer_destroy" : ("defer_destroy", boolean),
	"mounted" : ("mounted", boolean),
	"origin" : ("origin", string_or_empty),
	"referenced" : ("referenced", storage_size),
	"type" : ("type", string_or_empty),
	"used" : ("used", storage_size),
	"usedbychildren" : ("used_by_children", storage_size),
	"usedbydataset" : ("used_by_dataset", storage_size),
	"usedbyrefreservation" : ("used_by_ref_reservation", storage_size),
	"usedbysnapshots" : ("used_by_snapshots", storage_size),
	"userrefs" : ("user_refs", unsigned_int),
	"aclinherit" : ("aclinherit", string_or_empty),
	"aclmode" : ("aclmode", string_or_empty),
	"atime" : ("atime", boolean),
	"canmount" : ("canmount", string_or_empty),
	"casesensitivity" : ("casesensitivity", string_or_empty),
	"checksum" : ("checksum", string_or_empty),
	"compression" : ("compression", string_or_empty),
	"copies" : ("copies", string_or_empty),
	"dedup" : ("dedup", string_or_empty),
	"devices" : ("devices", boolean),
	"exec" : ("exec", boolean),
	"logbias" : ("logbias", string_or_empty),
	"mlslabel" : ("mlslabel", string_or_empty),
	"mountpoint" : ("mountpoint", string_or_empty),
	"nbmand" : ("nbmand", boolean),
	"normalization" : ("normalization", string_or_empty),
	"primarycache" : ("primarycache", string_or_empty),
	"quota" : ("quota", string_or_empty),
	"readonly" : ("readonly", boolean),
	"recordsize" : ("recordsize", string_or_empty),
	"refquota" : ("refquota", string_or_empty),
	"refreservation" : ("refreservation", string_or_empty),
	"reservation" : ("reservation", string_or_empty),
	"secondarycache" : ("secondarycache", string_or_empty),
	"setuid" : ("setuid", boolean),
	"sharenfs" : ("sharenfs", string_or_empty),
	"sharesmb" : ("sharesmb", string_or_empty),
	"snapdir" : ("snapdir", string_or_empty),
	"utf8only" : ("utf8only", boolean),
	"version" : ("version", string_or_empty),
	"volblocksize" : ("volblocksize", string_or_empty),
	"volsize" : ("volsize", string_or_empty),
	"vscan" : ("vscan", boolean),
	"xattr" : ("xattr", boolean),
	"zoned" : ("zoned", boolean),
}

@functools.lru_cache(maxsize=16)
def layout(schema :PropertySchema) -> Tuple[Tuple[int, str, str, Callable[[str], Any]], ...]:
	"""
	Resolves a schema into (position, property, field, decoder) once,
	instead of looking every property up by name for every line.
	"""
	fields = []
	for position, name in enumerate(schema.names):
		if name not in DATASET_FIELDS:
			raise ValueError(f"Property {name} in PropertySchema({schema.variant}) has no Dataset field.")

		field, decoder = DATASET_FIELDS[name]
		fields.append((position, name, field, decoder))

	if "name" not in schema.positions:
		raise ValueError(f"PropertySchema({schema.variant}) must include the name property.")

	return tuple(fields)

# The built-in variants are resolved at import
for _schema in DATASET_SCHEMAS.values():
	layout(_schema)

def decode_dataset_line(line :List[str], schema :PropertySchema) -> Dataset:
	if len(line) != len(schema):
		raise OutputShapeError(f"Output does not match what is expected on this platform: expected {len(schema)} fields, got {len(line)}")

	values = {}
	for position, name, field, decoder in layout(schema):
		try:
			values[field] = decoder(line[position])
		except DecodeError as error:
			raise FieldDecodeError(name, line[position], error) from error

	return Dataset(**values)

def decode_dataset_lines(lines :List[List[str]], schema :PropertySchema) -> List[Dataset]:
	"""
	Decodes the output of ``zfs list -H -o <schema.options>``.

	A new Dataset starts whenever the leading name differs from the previous line's.
	The first line that fails to decode fails the whole call.
	"""
	datasets = []

	name = None
	for line in lines:
		dataset = decode_dataset_line(line, schema)

		if datasets and line[0] == name:
			# Adjacent lines for the same dataset, the later one wins
			datasets[-1] = dataset
		else:
			name = line[0]
			datasets.append(dataset)

	return datasets
