from .diff import (
	CHANGE_TYPES,
	INODE_TYPES,
	unescape_filepath,
	escape_filepath,
	parse_reference_count,
	decode_diff_line,
	decode_diff_lines,
	diff
)
