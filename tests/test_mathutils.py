from math import pi
import warnings

from pytest import approx

from gearmesh import mathutils, gear, io, mesh, settings, standard
from gearmesh.mathutils import *
from . import closeto


def test_polar():
	assert polar(2, 0) == vec3(2, 0, 0)
	p = polar(2, pi/2, 0.5)
	assert (p.x, p.y, p.z) == approx((0, 2, 0.5))

def test_safenormalize():
	assert closeto(safenormalize(vec3(0, 3, 4)), vec3(0, 0.6, 0.8))
	assert safenormalize(vec3(0)) == vec3(0)

def test_normaltransformer():
	assert normaltransformer(vec3(1,2,3))(Z) == Z
	assert normaltransformer(2.)(Z) == Z
	stretch = mat3(1, 0, 0,  0, 1, 0,  0, 0, 4)
	assert closeto(normaltransformer(stretch)(vec3(0, 0, 4)), vec3(0, 0, 1))

def test_double_precision_aliases():
	assert vec3 is dvec3
	assert mat3 is dmat3
	assert mat4 is dmat4
	assert MAXSAFEINT == 2**53 - 1

def test_sources_compile_cleanly():
	# docstrings holding drawings must not contain invalid escape sequences
	for module in (mathutils, gear, io, mesh, settings, standard):
		with open(module.__file__) as stream:
			source = stream.read()
		with warnings.catch_warnings():
			warnings.simplefilter('error')
			compile(source, module.__file__, 'exec')
	assert '\\__' in gear.__doc__
