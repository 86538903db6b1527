from gearmesh.mathutils import vec3, cross, dot, length

def signed_volume(mesh) -> float:
	''' volume enclosed by the mesh triangles, positive when they are all oriented to the exterior '''
	volume = 0.
	for f in mesh.triangles():
		volume += dot(mesh.vertex(f[0]), cross(mesh.vertex(f[1]), mesh.vertex(f[2])))
	return volume / 6

def polygon_area(points) -> float:
	''' area of a counter-clockwise polygon of the XY plane (shoelace formula) '''
	area = 0.
	for a, b in zip(points, points[1:] + points[:1]):
		area += a.x*b.y - b.x*a.y
	return area / 2

def closeto(a, b, prec=1e-9) -> bool:
	''' vectors equality with tolerance, tuples are accepted as well '''
	if isinstance(a, tuple):	a = vec3(*a)
	if isinstance(b, tuple):	b = vec3(*b)
	return length(a - b) <= prec
