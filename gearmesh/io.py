# This file is part of pygearmesh,  distributed under license LGPL v3

''' Import and export of gear meshes to common mesh file formats

	The format is guessed from the file extension unless given explicitly. PLY, STL and JSON can be read and written, OBJ is write-only:

		>>> write(gearmesh(preset('gear1')), 'gear1.ply')
		>>> write(mesh, 'gear1.data', type='stl')
'''

import numpy as np
import json

from .mathutils import typedlist
from .mesh import GearMesh

class FileFormatError(Exception):
	''' Unsupported or malformed mesh file '''
	pass


def filetype(name, type=None):
	''' get the name for the file format, using the given forced type or the name extension '''
	if not type:
		type = name[name.rfind('.')+1:] if '.' in name else ''
	if not type:
		raise FileFormatError('unable to guess the file type')
	return type.lower()

def read(name: str, type=None, **opts) -> GearMesh:
	''' load a mesh from a file, guessing its file type '''
	type = filetype(name, type)
	reader = globals().get(type+'_read')
	if reader:
		return reader(name, **opts)
	else:
		raise FileFormatError('no read function available for format '+type)

def write(mesh: GearMesh, name: str, type=None, **opts):
	''' write a mesh to a file, guessing its file type '''
	type = filetype(name, type)
	writer = globals().get(type+'_write')
	if writer:
		return writer(mesh, name, **opts)
	else:
		raise FileFormatError('no write function available for format '+type)


'''
	PLY is written using plyfile module 	https://github.com/dranjan/python-plyfile
	vertices are stored with their normals, so the flat shading is kept
'''
try:
	from plyfile import PlyData, PlyElement
except ImportError:	pass
else:

	def ply_read(file, **opts):
		data = PlyData.read(file)
		if 'vertex' not in data:	raise FileFormatError('file must have a vertex buffer')
		if 'face' not in data:		raise FileFormatError('file must have a face buffer')
		vertices = data['vertex'].data
		names = vertices.dtype.names
		positions = np.stack([vertices['x'], vertices['y'], vertices['z']], axis=-1).astype('f8')
		if {'nx', 'ny', 'nz'}.issubset(names):
			normals = np.stack([vertices['nx'], vertices['ny'], vertices['nz']], axis=-1).astype('f8')
		else:
			normals = np.zeros(positions.shape, 'f8')
		faces = data['face'].data['vertex_indices']
		for face in faces:
			if len(face) != 3:	raise FileFormatError('only triangular faces are supported')
		indices = np.concatenate(list(faces)).astype('u4') if len(faces) else np.zeros(0, 'u4')
		return GearMesh(
			typedlist(positions.ravel(), dtype='d'),
			typedlist(normals.ravel(), dtype='d'),
			typedlist(indices, dtype='I'),
			)

	def ply_write(mesh, file, **opts):
		arrays = mesh.arrays('f4', 'u4')
		vertices = np.empty(mesh.vertex_count(), dtype=[
						('x', 'f4'), ('y', 'f4'), ('z', 'f4'),
						('nx', 'f4'), ('ny', 'f4'), ('nz', 'f4'),
						])
		for i, name in enumerate('xyz'):
			vertices[name] = arrays['position'][:,i]
			vertices['n'+name] = arrays['normal'][:,i]
		faces = np.empty(mesh.triangle_count(), dtype=[('vertex_indices', 'u4', (3,))])
		faces['vertex_indices'] = arrays['indices']
		ev = PlyElement.describe(vertices, 'vertex')
		ef = PlyElement.describe(faces, 'face')
		PlyData([ev,ef], opts.get('text', False)).write(file)


'''
	STL is read and written using numpy-stl module 	https://github.com/WoLpH/numpy-stl
	STL only stores triangles with a face normal, the vertex normals are lost and a read mesh gets its corners the face normals
'''
try:
	import stl
	import stl.mesh
except ImportError:	pass
else:

	def stl_read(file, **opts):
		stlmesh = stl.mesh.Mesh.from_file(file, calculate_normals=False)
		trinum = stlmesh.points.shape[0]
		# the face normal is given to each of its corners
		normals = np.repeat(stlmesh.normals.astype('f8'), 3, axis=0)
		mesh = GearMesh(
			typedlist(stlmesh.points.astype('f8').ravel(), dtype='d'),
			typedlist(normals.ravel(), dtype='d'),
			typedlist(range(3*trinum), dtype='I'),
			)
		if stlmesh.name:
			mesh.options['name'] = stlmesh.name.decode() if isinstance(stlmesh.name, bytes) else stlmesh.name
		return mesh

	def stl_write(mesh, file, **opts):
		arrays = mesh.arrays('f4', 'i4')
		stlmesh = stl.mesh.Mesh(np.zeros(mesh.triangle_count(), dtype=stl.mesh.Mesh.dtype), name=mesh.options.get('name', ''))
		stlmesh.vectors[:] = arrays['position'][arrays['indices']]
		stlmesh.save(file)


'''
	OBJ is written as plain text following the specifications from 	https://en.wikipedia.org/wiki/Wavefront_.obj_file
	each face corner references both its position and its normal
'''
def obj_write(mesh, file, **opts):
	with open(file, 'w') as stream:
		if 'name' in mesh.options:
			stream.write('o {}\n'.format(mesh.options['name']))
		for p in mesh.vertices():
			stream.write('v {} {} {}\n'.format(*p))
		for i in range(mesh.vertex_count()):
			stream.write('vn {} {} {}\n'.format(*mesh.normal(i)))
		for f in mesh.triangles():
			stream.write('f {0}//{0} {1}//{1} {2}//{2}\n'.format(*(i+1 for i in f)))


'''
	JSON is written using the builtin json module
	the buffers are stored as flat lists, as expected by javascript vertex buffer builders
'''
def json_read(file, **opts):
	with open(file, 'r') as stream:
		content = json.load(stream)
	try:
		return GearMesh(content['position'], content['normal'], content['indices'])
	except KeyError as err:
		raise FileFormatError('missing buffer {} in json file'.format(err)) from err

def json_write(mesh, file, **opts):
	with open(file, 'w') as stream:
		json.dump({
			'position': list(mesh.positions),
			'normal': list(mesh.normals),
			'indices': list(mesh.indices),
			}, stream, **opts)
