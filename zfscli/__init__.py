import pathlib
import argparse
import logging

from .exceptions import (
	ZFSError,
	SysCallError,
	RequirementError,
	DecodeError,
	OutputShapeError,
	UnknownTokenError,
	ScalarParseError,
	FieldDecodeError,
	LineDecodeError
)
from .storage import storage
from .logger import log

__version__ = '0.1.0'

parent = argparse.ArgumentParser(description="A ZFS utility and library that turns zfs/zpool command output into typed records.", add_help=False, allow_abbrev=False)

# General library options, that will affect anything surrounding python-zfscli
parent.add_argument("--verbosity-level", default='info', type=str, nargs='?', help="Sets the lowest threashold for log messages, according to https://docs.python.org/3/library/logging.html#logging-levels")
parent.add_argument("--locale", default="C", type=str, nargs="?", help="Sets the locale of subshells executed.")
parent.add_argument("--log-dir", default=pathlib.Path("./").resolve(), type=pathlib.Path, nargs="?", help="Sets the destination of where to save logs.")
parent.add_argument("--debug", default=False, action="store_true", help="Turns on debugging output.")
parent.add_argument("--platform", default="auto", choices=["auto", "default", "solaris"], type=str, nargs="?", help="Which property list variant the zfs binary speaks (auto detects it from the running system).")
parent.add_argument("--zfs-binary", default="zfs", type=str, nargs="?", help="Name or path of the zfs binary.")
parent.add_argument("--zpool-binary", default="zpool", type=str, nargs="?", help="Name or path of the zpool binary.")
parent.add_argument("--command-timeout", default=None, type=float, nargs="?", help="Seconds to wait for a zfs/zpool command before giving up.")

storage['argparse'] = parent
storage['arguments'], unknowns = parent.parse_known_args()
storage['version'] = __version__

match storage['arguments'].verbosity_level.lower():
	case 'critical':
		storage['arguments'].verbosity_level = logging.CRITICAL
	case 'error':
		storage['arguments'].verbosity_level = logging.ERROR
	case 'warning':
		storage['arguments'].verbosity_level = logging.WARNING
	case 'info':
		storage['arguments'].verbosity_level = logging.INFO
	case 'debug':
		storage['arguments'].verbosity_level = logging.DEBUG
	case 'notset':
		storage['arguments'].verbosity_level = logging.NOTSET
	case _:
		storage['arguments'].verbosity_level = logging.INFO

if storage['arguments'].debug:
	storage['arguments'].verbosity_level = logging.DEBUG

from .general import SysCommand, Runner, zfs, zpool, locate_binary
from .properties import (
	PropertySchema,
	DATASET_SCHEMAS,
	ZPOOL_PROPERTIES,
	ZPOOL_PROPERTY_OPTIONS,
	current_schema
)
from . import decoders
from .models import (
	Dataset,
	Zpool,
	InodeChange,
	ChangeType,
	InodeType
)
from .dataset import (
	decode_dataset_line,
	decode_dataset_lines,
	props_slice,
	create_filesystem,
	create_volume,
	snapshot,
	destroy,
	rollback
)
from .pool import (
	decode_pool_line,
	decode_pool_lines,
	decode_pool_listing,
	get_zpool,
	list_zpools
)
from .delta import (
	unescape_filepath,
	escape_filepath,
	parse_reference_count,
	decode_diff_line,
	decode_diff_lines,
	diff
)
from .list import (
	list_by_type,
	datasets,
	filesystems,
	volumes,
	snapshots,
	bookmarks,
	get_dataset
)
