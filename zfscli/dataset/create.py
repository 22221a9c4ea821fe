import logging
from typing import Dict, List, Optional, Callable

from ..general import zfs
from ..logger import log
from ..models import Dataset

def props_slice(properties :Optional[Dict[str, str]]) -> List[str]:
	"""
	{"compression": "lz4"} -> ["-o", "compression=lz4"]
	"""
	args = []
	for key, value in (properties or {}).items():
		args += ["-o", f"{key}={value}"]
	return args

def create_filesystem(name :str, properties :Optional[Dict[str, str]] = None, runner :Optional[Callable] = None) -> Dataset:
	from ..list import get_dataset

	runner = runner or zfs()

	log(f"Creating filesystem {name}", fg="green", level=logging.INFO)
	runner("create", *props_slice(properties), name)

	return get_dataset(name, runner=runner)

def create_volume(name :str, size :int, properties :Optional[Dict[str, str]] = None, runner :Optional[Callable] = None) -> Dataset:
	from ..list import get_dataset

	runner = runner or zfs()

	log(f"Creating volume {name} of {size} bytes", fg="green", level=logging.INFO)
	runner("create", "-p", "-V", str(size), *props_slice(properties), name)

	return get_dataset(name, runner=runner)

def snapshot(dataset :str, name :str, recursive :bool = False, runner :Optional[Callable] = None) -> Dataset:
	from ..list import get_dataset

	runner = runner or zfs()
	snapshot_name = f"{dataset}@{name}"

	log(f"Taking snapshot {snapshot_name}", fg="green", level=logging.INFO)
	if recursive:
		runner("snapshot", "-r", snapshot_name)
	else:
		runner("snapshot", snapshot_name)

	return get_dataset(snapshot_name, runner=runner)

def destroy(name :str, recursive :bool = False, recursive_clones :bool = False, defer :bool = False, force_unmount :bool = False, runner :Optional[Callable] = None) -> None:
	runner = runner or zfs()

	flags = []
	if recursive:
		flags.append("-r")
	if recursive_clones:
		flags.append("-R")
	if defer:
		flags.append("-d")
	if force_unmount:
		flags.append("-f")

	log(f"Destroying {name}", fg="red", level=logging.INFO)
	runner("destroy", *flags, name)

def rollback(snapshot :str, destroy_more_recent :bool = False, runner :Optional[Callable] = None) -> None:
	runner = runner or zfs()

	if '@' not in snapshot:
		raise ValueError(f"rollback() requires a snapshot name, {snapshot} is lacking @.")

	log(f"Rolling back ZFS snapshot {snapshot}", fg="orange", level=logging.INFO)
	if destroy_more_recent:
		runner("rollback", "-r", snapshot)
	else:
		runner("rollback", snapshot)
