from .zfsdataset import Dataset
from .zfspool import Zpool
from .inodechange import (
	ChangeType,
	InodeType,
	InodeChange
)
