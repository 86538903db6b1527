'''	 The settings module holds the user preferences of the pygearmesh library.

dictionaries:
	:generation:  preferred options for gear mesh generation

`gearmesh()` never reads these dictionaries, its results only depend on its arguments. Callers wanting the user preferences ask for them explicitly:

	>>> settings.load()
	>>> mesh = gearmesh(params, **settings.generation_options())

The settings can be persisted in a yaml file (see `config`), it is only read when `load()` is called.
'''

import sys, os, yaml
from os.path import dirname, exists

# settings for gear mesh generation
generation = {
	'normalize_normals': False,  # scale all generated normals to unit length, default keeps the raw face vectors
	'repeat_first_pitch': True,  # generate teeth+1 pitches, the last one overlapping the first
	}


# get configuration directory depending on OS
if sys.platform == 'win32':
	home = os.getenv('USERPROFILE', '')
	configdir = home+'/AppData/Local'
else:
	home = os.getenv('HOME', '')
	configdir = home+'/.config'

config = configdir+'/gearmesh/gearmesh.yaml'
settings = {'generation':generation}


def install():
	''' Create and fill the config directory if not already existing '''
	if not exists(config):
		os.makedirs(dirname(config), exist_ok=True)
		dump()

def clean():
	''' Delete the default configuration file '''
	os.remove(config)

def load(file=None):
	''' Load the settings directly in this module, from the specified file or the default one '''
	if not file:	file = config
	if isinstance(file, str):
		with open(file, 'r') as stream:
			changes = yaml.safe_load(stream)
	else:
		changes = yaml.safe_load(file)
	def update(dst, src):
		for key in dst:
			if key in src:
				if isinstance(dst[key], dict) and isinstance(src[key], dict):
					update(dst[key], src[key])
				else:
					dst[key] = src[key]
	if changes:
		update(settings, changes)

def dump(file=None):
	''' Write the current settings into the specified file or to the default one '''
	if not file:	file = config
	text = yaml.safe_dump(settings, default_flow_style=None, width=40, indent=4)
	if isinstance(file, str):
		with open(file, 'w') as stream:
			stream.write(text)
	else:
		file.write(text)


def getparam(levels: list, key):
	''' Get the first found value for key through the given dictionnaries.
		Dictionnaries are tested successively until the matching value is found. If no value is found, None is returned
	'''
	for d in levels:
		if d is not None:
			if key in d:	return d[key]
	return None


def generation_options(**options) -> dict:
	''' Keyword arguments for `gearmesh()` following the `generation` settings, the given options take precedence '''
	return {
		'normalize': getparam([options, generation], 'normalize_normals'),
		'repeat_first_pitch': getparam([options, generation], 'repeat_first_pitch'),
		}
