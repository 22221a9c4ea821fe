import sys
import json
import logging
import argparse

import zfscli

type_entrypoint = argparse.ArgumentParser(parents=[zfscli.storage['argparse']], description="Prints zfs/zpool state as JSON records.", add_help=True)
type_entrypoint.add_argument("--type", default="all", choices=zfscli.list.DATASET_TYPES, type=str, nargs="?", help="Which dataset type --datasets should list.")
type_entrypoint.add_argument("--diff-to", default="", type=str, nargs="?", help="Later snapshot to compare --diff against (defaults to the live filesystem).")

type_options = type_entrypoint.add_mutually_exclusive_group(required=True)
type_options.add_argument("--datasets", nargs="?", const="", type=str, help="Lists datasets, optionally only the ones under the given name.")
type_options.add_argument("--pools", default=False, action="store_true", help="Lists all pools and their properties.")
type_options.add_argument("--diff", nargs="?", type=str, help="Lists file changes since the given snapshot.")

zfscli.storage['arguments'], unknown = type_entrypoint.parse_known_args(namespace=zfscli.storage['arguments'])
args = zfscli.storage['arguments']

# Options given on the command line are parsed again above, which undoes the level translation done at import
if type(args.verbosity_level) is str:
	args.verbosity_level = logging.getLevelNamesMapping().get(args.verbosity_level.upper(), logging.INFO)

if args.debug:
	args.verbosity_level = logging.DEBUG

try:
	if args.pools:
		records = zfscli.list_zpools()
	elif args.diff:
		records = zfscli.diff(args.diff, args.diff_to)
	else:
		records = zfscli.list_by_type(args.type, args.datasets or '')
except zfscli.SysCallError as error:
	zfscli.log(f"{error.debug} failed: {error.stderr.strip()}", fg="red", level=logging.ERROR)
	sys.exit(error.exit_code if error.exit_code and error.exit_code > 0 else 1)
except zfscli.DecodeError as error:
	zfscli.log(f"Could not decode command output: {error}", fg="red", level=logging.ERROR)
	sys.exit(2)

print(json.dumps([record.model_dump(mode='json') for record in records], indent=2))
