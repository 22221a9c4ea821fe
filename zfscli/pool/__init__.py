from .pool import (
	ZPOOL_FIELDS,
	decode_pool_line,
	decode_pool_lines,
	decode_pool_listing,
	get_zpool,
	list_zpools
)
