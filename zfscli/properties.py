import sys
from dataclasses import dataclass, field
from typing import Tuple, Dict

from .storage import storage

@dataclass(frozen=True)
class PropertySchema:
	"""
	The ordered property names requested with ``zfs list -o``.

	The same order is used to build the request and to decode the reply,
	so a reordering here shifts every decoded field.
	"""
	variant :str
	names :Tuple[str, ...]
	positions :Dict[str, int] = field(init=False, repr=False, compare=False, hash=False)

	def __post_init__(self):
		if len(set(self.names)) != len(self.names):
			raise ValueError(f"PropertySchema({self.variant}) lists a property more than once.")

		object.__setattr__(self, 'positions', {name: position for position, name in enumerate(self.names)})

	def __len__(self) -> int:
		return len(self.names)

	@property
	def options(self) -> str:
		return ','.join(self.names)

	def index(self, name :str) -> int:
		return self.positions[name]

# Non-Solaris platforms (Linux, FreeBSD, illumos based OpenZFS)
DEFAULT_DATASET_PROPERTIES = PropertySchema('default', (
	"name",
	"available",
	"compressratio",
	"defer_destroy",
	"mounted",
	"origin",
	"referenced",
	"type",
	"used",
	"usedbychildren",
	"usedbydataset",
	"usedbyrefreservation",
	"usedbysnapshots",
	"userrefs",
	"aclinherit",
	"aclmode",
	"atime",
	"canmount",
	"casesensitivity",
	"checksum",
	"compression",
	"copies",
	"dedup",
	"devices",
	"exec",
	"logbias",
	"mlslabel",
	"mountpoint",
	"nbmand",
	"normalization",
	"primarycache",
	"quota",
	"readonly",
	"recordsize",
	"refquota",
	"refreservation",
	"reservation",
	"secondarycache",
	"setuid",
	"sharenfs",
	"sharesmb",
	"snapdir",
	"utf8only",
	"version",
	"volblocksize",
	"volsize",
	"vscan",
	"xattr",
	"zoned",
))

# Oracle Solaris only reports a reduced set reliably
SOLARIS_DATASET_PROPERTIES = PropertySchema('solaris', (
	"name",
	"origin",
	"used",
	"available",
	"mountpoint",
	"compression",
	"type",
	"volsize",
	"quota",
	"referenced",
	"usedbydataset",
))

DATASET_SCHEMAS = {
	DEFAULT_DATASET_PROPERTIES.variant : DEFAULT_DATASET_PROPERTIES,
	SOLARIS_DATASET_PROPERTIES.variant : SOLARIS_DATASET_PROPERTIES,
}

ZPOOL_PROPERTIES = (
	"name",
	"health",
	"allocated",
	"size",
	"free",
	"capacity",
	"altroot",
	"guid",
	"version",
	"bootfs",
	"delegation",
	"autoreplace",
	"cachefile",
	"failmode",
	"listsnapshots",
	"autoexpand",
	"dedupditto",
	"dedupratio",
	"ashift",
)
ZPOOL_PROPERTY_OPTIONS = ','.join(ZPOOL_PROPERTIES)

def current_schema() -> PropertySchema:
	variant = storage['arguments'].platform

	if variant in (None, 'auto'):
		variant = 'solaris' if sys.platform.startswith('sunos') else 'default'

	return DATASET_SCHEMAS[variant]
