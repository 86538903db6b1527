# This file is part of pygearmesh,  distributed under license LGPL v3

''' Group of math functions and aliases used by pygearmesh '''

import glm
from glm import *
del version, license
import math
from math import pi, inf, nan
max = __builtins__['max']
min = __builtins__['min']
any = __builtins__['any']
all = __builtins__['all']
round = __builtins__['round']
abs = __builtins__['abs']

from arrex import typedlist

# alias definitions, everything is computed in double precision
vec3 = dvec3
mat3 = dmat3
mat4 = dmat4


# greatest integer a float64 can hold without loss, any integer above can collide with its neighbours
MAXSAFEINT = 2**53 - 1


# common base definition, for end user
O = vec3(0,0,0)
X = vec3(1,0,0)
Y = vec3(0,1,0)
Z = vec3(0,0,1)


def isfinite(x):
	''' Return false if x contains a `inf` or a `nan` '''
	if isinstance(x, (int,float)):
		return math.isfinite(x)
	return not (glm.any(isinf(x)) or glm.any(isnan(x)))

def polar(radius, angle, z=0.) -> vec3:
	''' Point at the given distance of the Z axis, in the direction given by `angle` around it '''
	return vec3(radius*math.cos(angle), radius*math.sin(angle), z)

def safenormalize(v) -> vec3:
	''' Same as `normalize` but leaves null vectors null instead of returning nan '''
	l = length(v)
	return v/l if l else v

def transformer(trans):
	''' Return an function to apply the given transform on points

		Supported inputs:
			:float:	scale by the given ratio
			:vec3:  translate the given position
			:mat3:  rotate the given position
			:quat:  rotate the given position
			:mat4:  affine transform (rotate then translate)
	'''
	if isinstance(trans, (dquat, fquat)):		trans = mat3_cast(trans)
	if callable(trans):													return trans
	if isinstance(trans, (dvec3, fvec3)):								return lambda v: v + trans
	if isinstance(trans, (dmat3, fmat3, dmat4, fmat4, int, float)):		return lambda v: trans * v
	raise TypeError('a transformer must be a  vec3, quat, mat3, mat4 or callable, not {}'.format(trans))

def normaltransformer(trans):
	''' Return a function to apply the given transform on normal vectors,
		meaning the inverse transpose of its linear part. Translations and scalings leave normals directions unchanged.

		Supported inputs are the same as `transformer` except callables
	'''
	if isinstance(trans, (dquat, fquat)):		trans = mat3_cast(trans)
	if isinstance(trans, (dvec3, fvec3, int, float)):	return lambda n: n
	if isinstance(trans, (dmat3, fmat3, dmat4, fmat4)):
		linear = transpose(inverse(mat3(trans)))
		return lambda n: linear * n
	raise TypeError('a normal transformer must be a  vec3, quat, mat3, mat4, not {}'.format(trans))

def flatten(vectors) -> 'iterator':
	''' Iterate the components of the given vectors one after the other '''
	for v in vectors:
		yield from v
