import pytest
from pytest import approx

from gearmesh.gear import gearmesh
from gearmesh.standard import preset
from gearmesh.io import *
from gearmesh.mathutils import dot
from . import closeto


def test_filetype():
	assert filetype('gear.ply') == 'ply'
	assert filetype('some.dir/gear.STL') == 'stl'
	assert filetype('gear', 'obj') == 'obj'
	with pytest.raises(FileFormatError):
		filetype('gear')

def test_unknown_format(tmp_path):
	mesh = gearmesh(preset('gear3'))
	with pytest.raises(FileFormatError):
		write(mesh, str(tmp_path/'gear.xyz'))
	with pytest.raises(FileFormatError):
		read(str(tmp_path/'gear.obj'))

def test_ply(tmp_path):
	pytest.importorskip('plyfile')
	original = gearmesh(preset('gear3'))
	write(original, str(tmp_path/'gear.ply'))
	loaded = read(str(tmp_path/'gear.ply'))
	loaded.check()
	assert loaded.vertex_count() == original.vertex_count()
	assert list(loaded.indices) == list(original.indices)
	# stored as float32
	assert list(loaded.positions) == approx(list(original.positions), abs=1e-5)
	assert list(loaded.normals) == approx(list(original.normals), abs=1e-5)

def test_stl(tmp_path):
	stl = pytest.importorskip('stl')
	import stl.mesh
	original = gearmesh(preset('gear2'))
	write(original, str(tmp_path/'gear.stl'))
	loaded = stl.mesh.Mesh.from_file(str(tmp_path/'gear.stl'))
	assert loaded.vectors.shape == (original.triangle_count(), 3, 3)
	assert loaded.vectors[0][1].tolist() == approx(list(original.vertex(original.triangle(0)[1])), abs=1e-5)

def test_stl_read(tmp_path):
	pytest.importorskip('stl')
	original = gearmesh(preset('gear2'))
	write(original, str(tmp_path/'gear.stl'))
	loaded = read(str(tmp_path/'gear.stl'))
	loaded.check()
	# triangles are not sharing vertices in STL
	assert loaded.triangle_count() == original.triangle_count()
	assert loaded.vertex_count() == 3*original.triangle_count()
	assert list(loaded.indices) == list(range(3*original.triangle_count()))
	for t in (0, 7, 15):
		a, b, c = original.triangle(t)
		for corner, i in enumerate((a, b, c)):
			assert closeto(loaded.vertex(3*t+corner), original.vertex(i), 1e-5)
		# the face normal is stored, so it points the same way as the triangle
		assert dot(loaded.normal(3*t), original.facenormal(t)) > 0
		assert loaded.normal(3*t) == loaded.normal(3*t+2)

def test_obj(tmp_path):
	original = gearmesh(preset('gear3')).option(name='gear3')
	write(original, str(tmp_path/'gear.obj'))
	lines = (tmp_path/'gear.obj').read_text().splitlines()
	assert lines[0] == 'o gear3'
	assert sum(1 for l in lines if l.startswith('v ')) == original.vertex_count()
	assert sum(1 for l in lines if l.startswith('vn ')) == original.vertex_count()
	faces = [l for l in lines if l.startswith('f ')]
	assert len(faces) == original.triangle_count()
	assert faces[0] == 'f 1//1 2//2 5//5'

def test_json(tmp_path):
	original = gearmesh(preset('gear1'))
	write(original, str(tmp_path/'gear.json'))
	loaded = read(str(tmp_path/'gear.json'))
	loaded.check()
	assert loaded == original
