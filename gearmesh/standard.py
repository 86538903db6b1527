'''
	Module exposing ready-made gear dimensions.

	The presets are the three gears of the classic rotating gears scene:

		>>> gearmesh(preset('gear1'))

	Random gears are meant to populate demo scenes with variety. The randomness is kept on the caller side: `gearmesh` itself stays deterministic, and a seed gives reproducible scenes

		>>> scene = [gearmesh(params)  for params in randomgears(10, seed=2)]
'''

import random

from .gear import GearParameters


__all__ = ['PRESETS', 'preset', 'randomgear', 'randomgears']


PRESETS = {
	'gear1': GearParameters(inner_radius=1.0, outer_radius=4.0, width=1.0, teeth=20, tooth_depth=0.7),
	'gear2': GearParameters(inner_radius=0.5, outer_radius=2.0, width=2.0, teeth=10, tooth_depth=0.7),
	'gear3': GearParameters(inner_radius=1.3, outer_radius=2.0, width=0.5, teeth=10, tooth_depth=0.7),
	}

def preset(name: str) -> GearParameters:
	''' Dimensions of a preset gear, raise `KeyError` if there is no such preset '''
	try:
		return PRESETS[name]
	except KeyError:
		raise KeyError('no gear preset named {}, available presets are {}'.format(repr(name), ', '.join(PRESETS))) from None


def randomgear(rng: random.Random=None) -> GearParameters:
	''' Random gear dimensions, drawn from the given random generator or from a new unseeded one

		The values are uniformly drawn in:
			:inner_radius:	0.5 - 1
			:outer_radius:	1.1 - 2
			:width:			0.2 - 1
			:teeth:			5 - 14
			:tooth_depth:	0.2 - 0.5
	'''
	if rng is None:
		rng = random.Random()
	return GearParameters(
		inner_radius = rng.uniform(0.5, 1),
		outer_radius = rng.uniform(1.1, 2),
		width = rng.uniform(0.2, 1),
		teeth = int(rng.uniform(5, 15)),
		tooth_depth = rng.uniform(0.2, 0.5),
		)

def randomgears(n: int, seed=None) -> list:
	''' List of `n` random gear dimensions, reproducible when a seed is given '''
	rng = random.Random(seed)
	return [randomgear(rng)  for i in range(n)]
