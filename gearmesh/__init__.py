# This file is part of pygearmesh,  distributed under license LGPL v3

'''     pygearmesh

Procedural triangle meshes of spur gears, ready for vertex buffers.

main concepts
-------------

A gear is described by a few dimensions (`GearParameters`), and `gearmesh()` turns them into a `GearMesh`: three flat buffers of vertex positions, vertex normals and triangle indices.

	- the mesh is flat-shaded
		each face owns its vertices, so each face has its own normal. Vertices are never merged.

	- the generation is pure
		the same dimensions always give the same buffers, and the result is owned by the caller only. Uploading it to a GPU, drawing or animating it is left to the rendering library of your choice.

data types
----------

* GearParameters	dimensions of a gear (inner_radius, outer_radius, width, teeth, tooth_depth)
* GearMesh		positions, normals and indices buffers of a generated gear

Examples
--------

	>>> mesh = gearmesh(inner_radius=1, outer_radius=2, width=1, teeth=4, tooth_depth=0.4)
	>>> mesh
	<GearMesh vertices=170 triangles=100>
	>>> buffers = mesh.arrays()   # numpy arrays for a vertex buffer builder
	>>> write(mesh, 'gear.ply')
'''
version = '0.1.0'

# computation
from . import (
		# base tools (defines types for the whole library)
		mathutils, mesh,
		# generation
		gear,
		# near-independant modules
		io,
		# parts
		standard,
		settings,
	)

# the most common tools, imported to access it directly from gearmesh
from .mesh import GearMesh, MeshError
from .gear import GearParameters, ValidationError, GearWarning, gearmesh
from .io import read, write, FileFormatError
from .standard import *
