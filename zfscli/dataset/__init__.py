from .dataset import (
	DATASET_FIELDS,
	decode_dataset_line,
	decode_dataset_lines
)
from .create import (
	props_slice,
	create_filesystem,
	create_volume,
	snapshot,
	destroy,
	rollback
)
