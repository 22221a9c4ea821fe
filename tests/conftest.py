import pytest

class FakeRunner:
	"""
	Stands in for zfscli.general.Runner, replaying captured command output.
	``outputs`` maps the first argument (list, get, diff, ...) to the text the command printed.
	"""
	def __init__(self, outputs=None):
		self.outputs = outputs or {}
		self.calls = []

	def __call__(self, *args, stdout=None, stdin=None):
		self.calls.append(list(args))

		output = self.outputs.get(args[0], '')
		if isinstance(output, BaseException):
			raise output

		lines = output.split('\n')
		if lines[-1] == '':
			lines = lines[:-1]
		return [line.split() for line in lines]

def dataset_line(schema, **values):
	"""
	A zfs list -H line with sensible values for every property in ``schema``,
	``values`` overrides single properties by their zfs name.
	"""
	defaults = {
		"name" : "pool1/a",
		"available" : "10G",
		"compressratio" : "1.00x",
		"defer_destroy" : "-",
		"mounted" : "yes",
		"origin" : "-",
		"referenced" : "96K",
		"type" : "filesystem",
		"used" : "1.5M",
		"usedbychildren" : "0B",
		"usedbydataset" : "96K",
		"usedbyrefreservation" : "0B",
		"usedbysnapshots" : "0B",
		"userrefs" : "-",
		"aclinherit" : "restricted",
		"aclmode" : "discard",
		"atime" : "on",
		"canmount" : "on",
		"casesensitivity" : "sensitive",
		"checksum" : "on",
		"compression" : "lz4",
		"copies" : "1",
		"dedup" : "off",
		"devices" : "on",
		"exec" : "on",
		"logbias" : "latency",
		"mlslabel" : "none",
		"mountpoint" : "/pool1/a",
		"nbmand" : "off",
		"normalization" : "none",
		"primarycache" : "all",
		"quota" : "none",
		"readonly" : "off",
		"recordsize" : "128K",
		"refquota" : "none",
		"refreservation" : "none",
		"reservation" : "none",
		"secondarycache" : "all",
		"setuid" : "on",
		"sharenfs" : "off",
		"sharesmb" : "off",
		"snapdir" : "hidden",
		"utf8only" : "off",
		"version" : "5",
		"volblocksize" : "-",
		"volsize" : "-",
		"vscan" : "off",
		"xattr" : "on",
		"zoned" : "off",
	}
	defaults.update(values)
	return [defaults[name] for name in schema.names]

def dataset_output(*lines):
	return ''.join('\t'.join(line) + '\n' for line in lines)

@pytest.fixture
def fake_runner():
	return FakeRunner

@pytest.fixture
def make_line():
	return dataset_line

@pytest.fixture
def make_output():
	return dataset_output

@pytest.fixture
def default_schema():
	import zfscli
	return zfscli.DATASET_SCHEMAS['default']
