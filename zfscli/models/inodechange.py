import enum
import pydantic

class ChangeType(enum.IntEnum):
	Removed = 1
	Created = 2
	Modified = 3
	Renamed = 4

class InodeType(enum.IntEnum):
	BlockDevice = 1
	CharacterDevice = 2
	Directory = 3
	Door = 4
	NamedPipe = 5
	SymbolicLink = 6
	EventPort = 7
	Socket = 8
	File = 9

class InodeChange(pydantic.BaseModel):
	"""
	One line of ``zfs diff -FH``.
	``new_path`` is only set for renames, ``reference_count_change`` only
	for modifications that print a link count delta such as ``(+1)``.
	"""
	model_config = pydantic.ConfigDict(frozen=True)

	change :ChangeType
	type :InodeType
	path :str
	new_path :str = ''
	reference_count_change :int = 0
