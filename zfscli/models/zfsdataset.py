import pydantic

class Dataset(pydantic.BaseModel):
	"""
	One line of ``zfs list -H -o <properties>``: a filesystem, volume, snapshot or bookmark.
	Properties the tool reports as ``-`` decode to an empty string, zero or False.
	"""
	model_config = pydantic.ConfigDict(frozen=True)

	name :str
	type :str = ''
	origin :str = ''

	available :int = 0
	used :int = 0
	used_by_children :int = 0
	used_by_dataset :int = 0
	used_by_ref_reservation :int = 0
	used_by_snapshots :int = 0
	referenced :int = 0
	compress_ratio :float = 0.0
	user_refs :int = 0

	defer_destroy :bool = False
	mounted :bool = False
	aclinherit :str = ''
	aclmode :str = ''
	atime :bool = False
	canmount :str = ''
	casesensitivity :str = ''
	checksum :str = ''
	compression :str = ''
	copies :str = ''
	dedup :str = ''
	devices :bool = False
	exec :bool = False
	logbias :str = ''
	mlslabel :str = ''
	mountpoint :str = ''
	nbmand :bool = False
	normalization :str = ''
	primarycache :str = ''
	quota :str = ''
	readonly :bool = False
	recordsize :str = ''
	refquota :str = ''
	refreservation :str = ''
	reservation :str = ''
	secondarycache :str = ''
	setuid :bool = False
	sharenfs :str = ''
	sharesmb :str = ''
	snapdir :str = ''
	utf8only :bool = False
	version :str = ''
	volblocksize :str = ''
	volsize :str = ''
	vscan :bool = False
	xattr :bool = False
	zoned :bool = False

	@property
	def pool(self) -> str:
		return self.name.split('/', 1)[0].split('@', 1)[0].split('#', 1)[0]

	@property
	def is_snapshot(self) -> bool:
		return '@' in self.name
