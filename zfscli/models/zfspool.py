import pydantic

class Zpool(pydantic.BaseModel):
	model_config = pydantic.ConfigDict(frozen=True)

	name :str
	health :str = ''
	allocated :int = 0
	size :int = 0
	free :int = 0
	capacity :int = 0
	dedupratio :float = 0.0
	altroot :str = ''
	guid :str = ''
	version :int = 0
	bootfs :str = ''
	delegation :bool = False
	autoreplace :bool = False
	cachefile :str = ''
	failmode :str = ''
	listsnapshots :bool = False
	autoexpand :bool = False
	dedupditto :str = ''
	ashift :str = ''
