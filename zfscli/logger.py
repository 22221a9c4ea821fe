import os
import sys
import logging
import pathlib

from .storage import storage

logger = logging.getLogger('zfscli')

# Found first reference here: https://stackoverflow.com/questions/7445658/how-to-detect-if-the-console-does-support-ansi-escape-codes-in-python
# And re-used this: https://github.com/django/django/blob/master/django/core/management/color.py#L12
def supports_color():
	"""
	Return True if the running system's terminal supports color,
	and False otherwise.
	"""
	supported_platform = sys.platform != 'win32' or 'ANSICON' in os.environ

	# isatty is not always implemented, #6223.
	is_a_tty = hasattr(sys.stdout, 'isatty') and sys.stdout.isatty()
	return supported_platform and is_a_tty

# Heavily influenced by: https://github.com/django/django/blob/ae8338daf34fd746771e0678081999b656177bae/django/utils/termcolors.py#L13
def stylize_output(text: str, *opts :str, **kwargs) -> str:
	"""
	Adds styling to a text given a set of color arguments.
	"""
	opt_dict = {'bold': '1', 'italic': '3', 'underscore': '4', 'blink': '5', 'reverse': '7', 'conceal': '8'}
	colors = {
		'black' : '0',
		'red' : '1',
		'green' : '2',
		'yellow' : '3',
		'blue' : '4',
		'magenta' : '5',
		'cyan' : '6',
		'white' : '7',
		'orange' : '8;5;208',
		'gray' : '8;5;246',
		'grey' : '8;5;246',
		'darkgray' : '8;5;240'
	}
	foreground = {key: f'3{colors[key]}' for key in colors}
	background = {key: f'4{colors[key]}' for key in colors}
	reset = '0'

	code_list = []
	if text == '' and len(opts) == 1 and opts[0] == 'reset':
		return '\x1b[%sm' % reset

	for k, v in kwargs.items():
		if k == 'fg':
			code_list.append(foreground[str(v)])
		elif k == 'bg':
			code_list.append(background[str(v)])

	for o in opts:
		if o in opt_dict:
			code_list.append(opt_dict[o])

	if 'noreset' not in opts:
		text = '%s\x1b[%sm' % (text or '', reset)

	return '%s%s' % (('\x1b[%sm' % ';'.join(code_list)), text or '')

def _write_logfile(filename :str, line :str) -> None:
	absolute_logfile = pathlib.Path(storage.get('LOG_PATH', storage['arguments'].log_dir)) / filename

	try:
		absolute_logfile.parent.mkdir(exist_ok=True, parents=True)
		with absolute_logfile.open('a') as log_file:
			log_file.write(f"{line}\n")
	except PermissionError:
		# Fallback to creating the log file in the current folder
		fallback = pathlib.Path('./').absolute() / filename
		storage['LOG_PATH'] = './'
		with fallback.open('a') as log_file:
			log_file.write(f"{line}\n")

		log(f"Not enough permission to place log file at {absolute_logfile}, creating it in {fallback} instead.", fg="red", level=logging.WARNING)

def log(*args, **kwargs):
	string = orig_string = ' '.join([str(x) for x in args])
	level = kwargs.get('level', logging.INFO)

	# Library users can attach their own handlers to the "zfscli" logger
	logger.log(level, orig_string)

	# Log files get *ALL* the output, regardless of the verbosity level
	if filename := storage.get('LOG_FILE', None):
		_write_logfile(filename, orig_string)

	if level < storage['arguments'].verbosity_level and not kwargs.get('force', False):
		return None

	if supports_color():
		style = {key: value for key, value in kwargs.items() if key in ('fg', 'bg')}
		string = stylize_output(string, **{'fg': 'white', **style})

	if kwargs.get('mute_output', False) is False:
		# sys.stdout.write()+flush() rather than print() so output
		# is not held back when stdout is a pipe.
		sys.stdout.write(f"{string}\n")
		sys.stdout.flush()
