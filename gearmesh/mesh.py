# This file is part of pygearmesh,  distributed under license LGPL v3

'''
	This module defines the container for generated gear meshes.

	Architecture
	------------

	`GearMesh` is just a container wrapping three flat buffers, in the layout rendering libraries expect for vertex arrays:

		:positions:   typedlist of float64, 3 consecutive components per vertex
		:normals:     typedlist of float64, 3 consecutive components per vertex, the normal at index `i` belongs to the vertex at index `i`
		:indices:     typedlist of uint32, 3 consecutive vertex indices per triangle

	Vertices are not shared between faces: each face carries its own copy of its points so that it can have its own normal (flat shading). Hence there is no attempt to merge close points here.

	The same ownership rules as in most mesh libraries apply:

		+ methods that modify a small portion of the data do it in-place and return 'self'
		+ methods that modify most of the data return a new instance of 'Self', sharing the untouched buffers with the current one

	The caller owns the buffers: it is free to upload them to a GPU, copy or modify them.
'''

from copy import copy, deepcopy
import numpy as np

from .mathutils import *


class MeshError(Exception):
	''' Inconsistent data in mesh '''
	pass


class GearMesh(object):
	''' Triangulated mesh with per-vertex normals, stored in flat buffers

		Attributes:
			positions:	typedlist of float64, vertex positions as consecutive `x,y,z` triplets
			normals:	typedlist of float64, vertex normals as consecutive `x,y,z` triplets, same length as positions
			indices:	typedlist of uint32, triangles as consecutive `a,b,c` vertex indices such that  `cross(b-a, c-a)` is oriented to the exterior
			options:	custom informations for the entire mesh
	'''
	__slots__ = 'positions', 'normals', 'indices', 'options'

	# BEGIN --- special methods ---

	def __init__(self, positions=None, normals=None, indices=None, options=None):
		self.positions = ensure_typedlist(positions if positions is not None else (), 'd')
		self.normals = ensure_typedlist(normals if normals is not None else (), 'd')
		self.indices = ensure_typedlist(indices if indices is not None else (), 'I')
		self.options = options or {}

	def __add__(self, other):
		''' Return a new mesh concatenating the vertices and triangles of both meshes '''
		if isinstance(other, GearMesh):
			r = GearMesh(
				self.positions[:],
				self.normals[:],
				self.indices[:],
				dict(self.options),
				)
			r.__iadd__(other)
			return r
		else:
			return NotImplemented

	def __iadd__(self, other):
		''' Append the vertices and triangles of the other mesh '''
		if isinstance(other, GearMesh):
			offset = self.vertex_count()
			self.positions.extend(other.positions)
			self.normals.extend(other.normals)
			self.indices.extend(i+offset  for i in other.indices)
			return self
		else:
			return NotImplemented

	def __eq__(self, other):
		''' Meshes are equal when their buffers hold the same values in the same order '''
		if isinstance(other, GearMesh):
			return (	list(self.positions) == list(other.positions)
					and list(self.normals) == list(other.normals)
					and list(self.indices) == list(other.indices))
		else:
			return NotImplemented

	__hash__ = None

	def __repr__(self):
		return '<{} vertices={} triangles={}>'.format(type(self).__name__, self.vertex_count(), self.triangle_count())

	# END BEGIN --- data management ---

	def own(self, **kwargs) -> 'Self':
		''' Return a copy of the current mesh, which attributes are referencing the original data or duplicates if demanded

			Example:

				>>> b = a.own(positions=True, indices=False)
				>>> b.positions is a.positions
				False
				>>> b.indices is a.indices
				True
		'''
		new = copy(self)
		for name, required in kwargs.items():
			if required:
				setattr(new, name, deepcopy(getattr(self, name)))
		return new

	def option(self, **kwargs) -> 'self':
		''' Update the internal options with the given keywords arguments '''
		self.options.update(kwargs)
		return self

	def vertex_count(self) -> int:
		''' Number of vertices (each holding a position and a normal) '''
		return len(self.positions) // 3

	def triangle_count(self) -> int:
		''' Number of triangles '''
		return len(self.indices) // 3

	def vertex(self, i) -> vec3:
		''' Position of the vertex at the given index '''
		p = self.positions
		return vec3(p[3*i], p[3*i+1], p[3*i+2])

	def normal(self, i) -> vec3:
		''' Normal of the vertex at the given index '''
		n = self.normals
		return vec3(n[3*i], n[3*i+1], n[3*i+2])

	def triangle(self, i) -> uvec3:
		''' Vertex indices of the triangle at the given index '''
		f = self.indices
		return uvec3(f[3*i], f[3*i+1], f[3*i+2])

	def vertices(self) -> 'iterator':
		''' Iterate the vertex positions as vec3 '''
		return map(self.vertex, range(self.vertex_count()))

	def triangles(self) -> 'iterator':
		''' Iterate the triangles as uvec3 '''
		return map(self.triangle, range(self.triangle_count()))

	def facenormal(self, i) -> vec3:
		''' Geometric normal of a triangle, deduced from its winding '''
		f = self.triangle(i)
		p0 = self.vertex(f[0])
		return normalize(cross(self.vertex(f[1]) - p0, self.vertex(f[2]) - p0))

	# END BEGIN --- transformations ---

	def normalized(self) -> 'Self':
		''' Return a new mesh sharing positions and indices, with all normals scaled to unit length.
			Null normals stay null.
		'''
		new = copy(self)
		new.normals = typedlist(flatten(
						safenormalize(self.normal(i))  for i in range(self.vertex_count())),
						dtype='d')
		return new

	def transform(self, trans) -> 'Self':
		''' Apply the transform to the vertices of the mesh, returning the new transformed mesh.
			Normals are transformed accordingly, keeping their length when the transform is a rotation.
		'''
		points = transformer(trans)
		normals = normaltransformer(trans)
		transformed = copy(self)
		transformed.positions = typedlist(flatten(points(p) for p in self.vertices()), dtype='d')
		transformed.normals = typedlist(flatten(
						normals(self.normal(i))  for i in range(self.vertex_count())),
						dtype='d')
		return transformed

	# END BEGIN --- verification methods ---

	def check(self):
		''' Raise if the internal data is inconsistent '''
		if not (isinstance(self.positions, typedlist) and self.positions.dtype == 'd'):	raise MeshError("positions must be a typedlist(dtype='d')")
		if not (isinstance(self.normals, typedlist) and self.normals.dtype == 'd'):	raise MeshError("normals must be a typedlist(dtype='d')")
		if not (isinstance(self.indices, typedlist) and self.indices.dtype == 'I'):	raise MeshError("indices must be a typedlist(dtype='I')")
		if len(self.positions) % 3:		raise MeshError("positions length is not a multiple of 3", len(self.positions))
		if len(self.positions) != len(self.normals):	raise MeshError("normals list doesn't match positions list length", len(self.normals), len(self.positions))
		if len(self.indices) % 3:		raise MeshError("indices length is not a multiple of 3", len(self.indices))
		l = self.vertex_count()
		for face in self.triangles():
			for p in face:
				if p >= l:	raise MeshError("some vertex indices are greater than the number of vertices", face, l)
		for x in self.positions:
			if not isfinite(x):	raise MeshError("some positions are not finite", x)
		for x in self.normals:
			if not isfinite(x):	raise MeshError("some normals are not finite", x)

	def isvalid(self):
		''' Return true if the internal data is consistent (all indices refer to actual vertices) '''
		try:				self.check()
		except MeshError:	return False
		else:				return True

	# END BEGIN --- conversions ---

	def arrays(self, dtype='f4', index_dtype='u4') -> dict:
		''' Return numpy copies of the buffers, shaped as the caller's vertex buffer builder expects them

			:position:   array of shape `(vertices, 3)`
			:normal:     array of shape `(vertices, 3)`
			:indices:    array of shape `(triangles, 3)`
		'''
		return {
			'position': typedlist_to_numpy(self.positions, dtype).reshape(-1, 3),
			'normal': typedlist_to_numpy(self.normals, dtype).reshape(-1, 3),
			'indices': typedlist_to_numpy(self.indices, index_dtype).reshape(-1, 3),
			}

	# END


def typedlist_to_numpy(array: 'typedlist', dtype) -> 'ndarray':
	''' Convert a typedlist to a numpy.ndarray with the given dtype, if the conversion is possible term to term '''
	return np.asarray(array).astype(dtype)

def ensure_typedlist(obj, dtype):
	''' Return a typedlist with the given dtype, create it from whatever is in obj if needed '''
	if isinstance(obj, typedlist) and obj.dtype == dtype:
		return obj
	else:
		return typedlist(obj, dtype=dtype)
