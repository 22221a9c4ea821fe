import pytest

import zfscli

def test_list_by_type(fake_runner, default_schema, make_line, make_output):
	runner = fake_runner({"list": make_output(
		make_line(default_schema, name='pool1/a'),
		make_line(default_schema, name='pool1/b', type='volume', volsize='1G', mountpoint='-'),
	)})
	datasets = zfscli.list_by_type('all', runner=runner, schema=default_schema)

	assert [dataset.name for dataset in datasets] == ['pool1/a', 'pool1/b']
	assert datasets[1].volsize == '1G'
	assert datasets[1].mountpoint == ''
	assert runner.calls == [["list", "-rH", "-t", "all", "-o", default_schema.options]]

def test_list_helpers_pass_type_and_filter(fake_runner, default_schema):
	runner = fake_runner()

	for function, dataset_type in (
		(zfscli.datasets, 'all'),
		(zfscli.filesystems, 'filesystem'),
		(zfscli.volumes, 'volume'),
		(zfscli.snapshots, 'snapshot'),
		(zfscli.bookmarks, 'bookmark')):

		assert function('pool1', runner=runner, schema=default_schema) == []
		assert runner.calls[-1] == ["list", "-rH", "-t", dataset_type, "-o", default_schema.options, "pool1"]

def test_list_by_unknown_type(fake_runner):
	with pytest.raises(ValueError):
		zfscli.list_by_type('pool', runner=fake_runner())

def test_list_shape_mismatch_returns_nothing(fake_runner, default_schema, make_line, make_output):
	runner = fake_runner({"list": make_output(
		make_line(default_schema, name='pool1/a'),
		make_line(default_schema, name='pool1/b')[:10],
	)})

	with pytest.raises(zfscli.OutputShapeError):
		zfscli.filesystems(runner=runner, schema=default_schema)

def test_get_dataset(fake_runner, default_schema, make_line, make_output):
	runner = fake_runner({"list": make_output(make_line(default_schema, name='pool1/a'))})

	assert zfscli.get_dataset('pool1/a', runner=runner, schema=default_schema).name == 'pool1/a'
	assert runner.calls[-1][-1] == 'pool1/a'

	with pytest.raises(KeyError):
		zfscli.get_dataset('pool1/missing', runner=fake_runner(), schema=default_schema)

def test_create_filesystem(fake_runner, default_schema, make_line, make_output):
	arguments = zfscli.storage['arguments']
	original = arguments.platform
	arguments.platform = 'default'

	try:
		runner = fake_runner({"list": make_output(make_line(default_schema, name='pool1/new', compression='zstd'))})
		dataset = zfscli.create_filesystem('pool1/new', {"compression": "zstd"}, runner=runner)
	finally:
		arguments.platform = original

	assert dataset.compression == 'zstd'
	assert runner.calls[0] == ["create", "-o", "compression=zstd", "pool1/new"]

def test_create_volume_and_snapshot(fake_runner, default_schema, make_line, make_output):
	arguments = zfscli.storage['arguments']
	original = arguments.platform
	arguments.platform = 'default'

	try:
		runner = fake_runner({"list": make_output(make_line(default_schema, name='pool1/vol', type='volume'))})
		zfscli.create_volume('pool1/vol', 2 ** 30, runner=runner)
		assert runner.calls[0] == ["create", "-p", "-V", str(2 ** 30), "pool1/vol"]

		runner = fake_runner({"list": make_output(make_line(default_schema, name='pool1/vol@now', type='snapshot'))})
		snapshot = zfscli.snapshot('pool1/vol', 'now', recursive=True, runner=runner)
		assert runner.calls[0] == ["snapshot", "-r", "pool1/vol@now"]
		assert snapshot.is_snapshot
	finally:
		arguments.platform = original

def test_destroy_and_rollback(fake_runner):
	runner = fake_runner()

	zfscli.destroy('pool1/a', recursive=True, defer=True, runner=runner)
	zfscli.rollback('pool1/a@now', destroy_more_recent=True, runner=runner)

	assert runner.calls == [["destroy", "-r", "-d", "pool1/a"], ["rollback", "-r", "pool1/a@now"]]

	with pytest.raises(ValueError):
		zfscli.rollback('pool1/a', runner=runner)
