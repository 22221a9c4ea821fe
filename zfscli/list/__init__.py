from .volumes import (
	DATASET_TYPES,
	list_by_type,
	datasets,
	filesystems,
	volumes,
	snapshots,
	bookmarks,
	get_dataset
)
