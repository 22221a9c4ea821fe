from typing import List, Optional, Callable

from ..general import zfs
from ..models import Dataset
from ..properties import PropertySchema, current_schema
from ..dataset import decode_dataset_lines

DATASET_TYPES = ('all', 'filesystem', 'volume', 'snapshot', 'bookmark')

def list_by_type(dataset_type :str, filter :str = '', runner :Optional[Callable] = None, schema :Optional[PropertySchema] = None) -> List[Dataset]:
	if dataset_type not in DATASET_TYPES:
		raise ValueError(f"list_by_type() does not know dataset type {dataset_type}, expected one of {', '.join(DATASET_TYPES)}.")

	runner = runner or zfs()
	schema = schema or current_schema()

	args = ["list", "-rH", "-t", dataset_type, "-o", schema.options]
	if filter:
		args.append(filter)

	return decode_dataset_lines(runner(*args), schema)

def datasets(filter :str = '', **kwargs) -> List[Dataset]:
	return list_by_type('all', filter, **kwargs)

def filesystems(filter :str = '', **kwargs) -> List[Dataset]:
	return list_by_type('filesystem', filter, **kwargs)

def volumes(filter :str = '', **kwargs) -> List[Dataset]:
	return list_by_type('volume', filter, **kwargs)

def snapshots(filter :str = '', **kwargs) -> List[Dataset]:
	return list_by_type('snapshot', filter, **kwargs)

def bookmarks(filter :str = '', **kwargs) -> List[Dataset]:
	return list_by_type('bookmark', filter, **kwargs)

def get_dataset(name :str, runner :Optional[Callable] = None, schema :Optional[PropertySchema] = None) -> Dataset:
	"""
	Looks up a single dataset (or snapshot) by its full name.
	"""
	runner = runner or zfs()
	schema = schema or current_schema()

	found = decode_dataset_lines(runner("list", "-H", "-t", "all", "-o", schema.options, name), schema)
	if not found:
		raise KeyError(f"zfs list did not return anything for {name}.")

	return found[0]
