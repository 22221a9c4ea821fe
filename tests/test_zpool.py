import pytest

import zfscli
from zfscli.exceptions import OutputShapeError, FieldDecodeError

ZPOOL_GET = """\
pool1	name	pool1
pool1	health	ONLINE
pool1	allocated	1.50G
pool1	size	10G
pool1	free	8.50G
pool1	capacity	15%
pool1	altroot	-
pool1	guid	10283715129463812398
pool1	version	-
pool1	bootfs	-
pool1	delegation	on
pool1	autoreplace	off
pool1	cachefile	-
pool1	failmode	wait
pool1	listsnapshots	off
pool1	autoexpand	on
pool1	dedupditto	0
pool1	dedupratio	1.00x
pool1	ashift	12
"""

def lines_of(text):
	return [line.split() for line in text.splitlines()]

def test_decode_pool_lines():
	pool = zfscli.decode_pool_lines([
		["pool1", "health", "ONLINE"],
		["pool1", "size", "10G"],
		["pool1", "capacity", "42%"],
	])

	assert pool.name == 'pool1'
	assert pool.health == 'ONLINE'
	assert pool.size == 10 * 2 ** 30
	assert pool.capacity == 42
	assert pool.allocated == 0

def test_decode_full_pool():
	pool = zfscli.decode_pool_lines(lines_of(ZPOOL_GET))

	assert pool.name == 'pool1'
	assert pool.allocated == 1536 * 2 ** 20
	assert pool.free == 8704 * 2 ** 20
	assert pool.capacity == 15
	assert pool.altroot == ''
	assert pool.guid == '10283715129463812398'
	assert pool.version == 0
	assert pool.delegation is True
	assert pool.autoreplace is False
	assert pool.autoexpand is True
	assert pool.failmode == 'wait'
	assert pool.dedupratio == 1.0
	assert pool.dedupditto == '0'
	assert pool.ashift == '12'

def test_unknown_pool_properties_are_ignored():
	pool = zfscli.decode_pool_lines([
		["pool1", "health", "ONLINE"],
		["pool1", "feature@async_destroy", "enabled"],
		["pool1", "load_guid", "123"],
	])

	assert pool == zfscli.Zpool(name='pool1', health='ONLINE')

def test_decode_pool_line_names_failing_field():
	with pytest.raises(FieldDecodeError) as error:
		zfscli.decode_pool_lines([["pool1", "autoexpand", "sometimes"]])

	assert error.value.property == 'autoexpand'

	with pytest.raises(FieldDecodeError):
		zfscli.decode_pool_lines([["pool1", "capacity", "-"]])

@pytest.mark.parametrize('lines', [
	[],
	[["pool1", "health"]],
	[["pool1", "health", "ONLINE", "default"]],
	[["pool1", "health", "ONLINE"], ["pool2", "health", "ONLINE"]],
])
def test_decode_pool_lines_shape(lines):
	with pytest.raises(OutputShapeError):
		zfscli.decode_pool_lines(lines)

def test_decode_pool_listing():
	pools = zfscli.decode_pool_listing([
		["pool1", "health", "ONLINE"],
		["pool1", "size", "10G"],
		["pool2", "health", "DEGRADED"],
	])

	assert [pool.name for pool in pools] == ['pool1', 'pool2']
	assert pools[0].size == 10 * 2 ** 30
	assert pools[1].health == 'DEGRADED'

def test_get_zpool(fake_runner):
	runner = fake_runner({"get": ZPOOL_GET})
	pool = zfscli.get_zpool('pool1', runner=runner)

	assert pool.health == 'ONLINE'
	assert runner.calls == [["get", "-H", "-o", "name,property,value", zfscli.ZPOOL_PROPERTY_OPTIONS, "pool1"]]

def test_list_zpools(fake_runner):
	runner = fake_runner({
		"list": "pool1\npool2\n",
		"get": ZPOOL_GET + "pool2\thealth\tFAULTED\n",
	})
	pools = zfscli.list_zpools(runner=runner)

	assert [pool.name for pool in pools] == ['pool1', 'pool2']
	assert pools[1].health == 'FAULTED'
	assert runner.calls[0] == ["list", "-Ho", "name"]
	assert runner.calls[1][-2:] == ["pool1", "pool2"]

def test_list_zpools_without_pools(fake_runner):
	runner = fake_runner({"list": ""})

	assert zfscli.list_zpools(runner=runner) == []
	assert len(runner.calls) == 1

def test_subprocess_failure_is_forwarded(fake_runner):
	failure = zfscli.SysCallError("zpool exited with abnormal exit code [1]", 1, debug="/sbin/zpool get ...", stderr="cannot open 'nope': no such pool")
	runner = fake_runner({"get": failure})

	with pytest.raises(zfscli.SysCallError) as error:
		zfscli.get_zpool('nope', runner=runner)

	assert error.value.stderr == "cannot open 'nope': no such pool"
	assert error.value.debug == "/sbin/zpool get ..."
