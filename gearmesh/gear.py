# This file is part of pygearmesh,  distributed under license LGPL v3
r'''
	This module generates flat-shaded triangle meshes of spur gears with trapezoidal teeth.

	The gear is an extrusion along the Z axis (centered on the XY plane) of a toothed ring profile. The profile is built pitch by pitch, each pitch covering one tooth and the gap following it:

		       b__c
		       /  \
		      /    \__
		     a     d  e

	where `a, b, c, d, e` are angles spaced by a quarter of the pitch angle.
	Each pitch emits 34 vertices grouped by face (front cap, back cap, tooth left flank, tooth top, tooth right flank, gap top, inner bore), every group carrying its own normal, and 20 triangles connecting them.

	Examples
	--------

		>>> mesh = gearmesh(GearParameters(inner_radius=1, outer_radius=2, width=1, teeth=4, tooth_depth=0.4))
		>>> len(mesh.positions), len(mesh.indices)
		(510, 300)

		>>> # unit normals and no overlapping pitch
		>>> mesh = gearmesh(inner_radius=1, outer_radius=2, width=1, teeth=4, tooth_depth=0.4,
		...			normalize=True, repeat_first_pitch=False)
'''

from .mathutils import *
from .mesh import GearMesh

from math import *
from dataclasses import dataclass, replace
from numbers import Integral, Real
import logging
import warnings

logger = logging.getLogger(__name__)


__all__ = [	'GearParameters', 'ValidationError', 'GearWarning',
			'validate_teeth', 'pitch_angles', 'pitch_profile', 'pitch_vertices', 'pitch_indices',
			'PITCH_VERTICES', 'PITCH_TRIANGLES', 'gearmesh',
			]


class ValidationError(ValueError):
	''' Gear parameters that cannot produce a mesh '''
	pass

class GearWarning(UserWarning):
	''' Gear parameters producing a degenerated, yet well formed, mesh '''
	pass


@dataclass(frozen=True)
class GearParameters:
	''' Dimensions of a gear, all lengths in the same unit '''
	inner_radius: float
	''' radius of the bore '''
	outer_radius: float
	''' nominal outer radius, teeth are protruding half of their depth above it and half below '''
	width: float
	''' thickness of the gear along its axis '''
	teeth: int
	''' number of teeth around the gear '''
	tooth_depth: float
	''' radial depth of a tooth '''

	@property
	def root_radius(self) -> float:
		''' radius at the bottom of the teeth '''
		return self.outer_radius - self.tooth_depth / 2.

	@property
	def tip_radius(self) -> float:
		''' radius at the top of the teeth '''
		return self.outer_radius + self.tooth_depth / 2.

	@property
	def pitch_angle(self) -> float:
		''' angle covered by one tooth and its gap '''
		return 2.*pi / self.teeth


def validate_teeth(teeth) -> int:
	''' Return the tooth count as an int, or raise `ValidationError` if it is not an exact positive integer that a float can represent '''
	if isinstance(teeth, bool) or not isinstance(teeth, Real):
		raise ValidationError('number of teeth must be an integer, not {}'.format(type(teeth).__name__))
	if not isinstance(teeth, Integral):
		if not (isfinite(teeth) and float(teeth).is_integer()):
			raise ValidationError('number of teeth must be an integer, got {}'.format(teeth))
		teeth = int(teeth)
	if not 0 < teeth <= MAXSAFEINT:
		raise ValidationError('number of teeth must be a positive integer not above {}, got {}'.format(MAXSAFEINT, teeth))
	return int(teeth)


def pitch_angles(params: GearParameters, i: int) -> tuple:
	''' The angles `a, b, c, d, e` delimiting the quarters of pitch `i` '''
	a = i * 2.*pi / params.teeth
	da = params.pitch_angle / 4.
	b = a + da
	c = b + da
	d = c + da
	e = d + da
	return a, b, c, d, e

def pitch_profile(params: GearParameters, i: int) -> list:
	''' The 14 points of the profile of pitch `i`, the 7 front points (`z = width/2`) then the 7 matching back points.

		On each side the points are: bore at `a`, root at `a`, tip at `b`, tip at `c`, root at `d`, root at `e`, bore at `e`
	'''
	a, b, c, d, e = pitch_angles(params, i)
	r0, r1, r2 = params.inner_radius, params.root_radius, params.tip_radius
	outline = [(r0,a), (r1,a), (r2,b), (r2,c), (r1,d), (r1,e), (r0,e)]
	return (	[polar(r, t, params.width * 0.5)  for r,t in outline]
			+	[polar(r, t, -params.width * 0.5)  for r,t in outline])


# position in the profile of each vertex emitted for a pitch, grouped by face
PITCH_VERTICES = (
	0, 1, 2, 3, 4, 5, 6,    # front cap
	7, 8, 9, 10, 11, 12, 13,    # back cap
	1, 8, 2, 9,     # tooth left flank
	2, 9, 3, 10,    # tooth top
	3, 10, 4, 11,   # tooth right flank
	4, 11, 5, 12,   # gap top
	0, 7, 6, 13,    # inner bore
	)

# triangles of a pitch, indexing its emitted vertices, all counter-clockwise seen from outside
PITCH_TRIANGLES = (
	# front cap
	(0, 1, 4), (0, 4, 6), (4, 5, 6), (1, 2, 4), (2, 3, 4),
	# back cap, same footprint facing the other way
	(7, 11, 8), (7, 13, 11), (11, 13, 12), (8, 10, 9), (8, 11, 10),
	# tooth left flank
	(14, 15, 16), (16, 15, 17),
	# tooth top
	(18, 19, 20), (20, 19, 21),
	# tooth right flank
	(22, 23, 24), (24, 23, 25),
	# gap top
	(26, 27, 28), (28, 27, 29),
	# inner bore, walked from e to a
	(32, 33, 30), (30, 33, 31),
	)


def pitch_vertices(params: GearParameters, i: int) -> list:
	''' The 34 `(position, normal)` pairs of pitch `i`, in the order of `PITCH_VERTICES`.

		Normals are the raw face vectors, they are not of unit length except on the caps.
	'''
	a, b, c, d, e = pitch_angles(params, i)
	p = pitch_profile(params, i)
	r1, r2 = params.root_radius, params.tip_radius

	front = vec3(0, 0, 1)
	back = vec3(0, 0, -1)
	tooth_left = cross(p[8] - p[1], p[1] - p[2])
	tooth_top = polar(r2, b)
	tooth_right = cross(p[11] - p[4], p[4] - p[3])
	gap_top = polar(r1, e)
	bottom = polar(r1, e)

	normals = [front]*7 + [back]*7 + [tooth_left]*4 + [tooth_top]*4 + [tooth_right]*4 + [gap_top]*4 + [bottom]*4
	return [(p[k], n)  for k, n in zip(PITCH_VERTICES, normals)]

def pitch_indices(i: int) -> list:
	''' The triangle indices of pitch `i`, flattened and offset by the vertices of the previous pitches '''
	offset = len(PITCH_VERTICES) * i
	return [j + offset  for face in PITCH_TRIANGLES for j in face]


def gearmesh(params: GearParameters=None, normalize=False, repeat_first_pitch=True, **kwargs) -> GearMesh:
	''' Generate the mesh of a gear

		Parameters:
			params:    the gear dimensions, they can also be given as keyword arguments (same names as `GearParameters` fields)
			normalize:    if True, the normals are scaled to unit length after generation, else the raw face vectors are kept
			repeat_first_pitch:   if True, `teeth+1` pitches are generated and the last one overlaps the first, else exactly `teeth` pitches

		The result owns fresh buffers and always holds the same values for the same arguments.
		Raise `ValidationError` if the tooth count is not a positive integer.
	'''
	if params is None:
		params = GearParameters(**kwargs)
	elif kwargs:
		raise TypeError('gear dimensions must be given either as GearParameters or as keywords, not both')
	teeth = validate_teeth(params.teeth)
	if type(params.teeth) is not int:
		params = replace(params, teeth=teeth)

	if params.root_radius < params.inner_radius:
		warnings.warn('tooth root radius {} is below the inner radius {}, the gear faces will be self-intersecting'
						.format(params.root_radius, params.inner_radius), GearWarning)
	if params.tip_radius < params.root_radius:
		warnings.warn('negative tooth depth {}, the teeth are inverted'.format(params.tooth_depth), GearWarning)

	pitches = teeth+1 if repeat_first_pitch else teeth
	positions = []
	normals = []
	indices = []
	for i in range(pitches):
		for position, normal in pitch_vertices(params, i):
			positions.extend(position)
			normals.extend(safenormalize(normal) if normalize else normal)
		indices.extend(pitch_indices(i))

	mesh = GearMesh(
		typedlist(positions, dtype='d'),
		typedlist(normals, dtype='d'),
		typedlist(indices, dtype='I'),
		)
	logger.debug('generated gear mesh with %d pitches: %d vertices, %d triangles', pitches, mesh.vertex_count(), mesh.triangle_count())
	return mesh
