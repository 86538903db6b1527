#!/usr/bin/python3

from setuptools import setup, find_packages

setup(
	# package declaration
	name='pygearmesh',
	version='0.1.0',
	python_requires='>=3.8',
	install_requires=[
		'pyglm>=2.5.5',
		'numpy>=1.1',
		'pyyaml>=5',
		'arrex>=0.5',
		],
	extras_require={
		'PLY': ['plyfile>=0.7'],
		'STL': ['numpy-stl>=2'],
		'test': ['pytest', 'plyfile>=0.7', 'numpy-stl>=2'],
		},
	# source declaration
	packages=find_packages(include=['gearmesh', 'gearmesh.*']),
	package_data={
		'': ['README.md'],
		},

	# metadata for pypi
	description="Procedural flat-shaded spur gear meshes, ready for vertex buffers",
	long_description=open('README.md').read(),
	long_description_content_type='text/markdown',
	license='GNU LGPL v3',
	keywords='gear mesh procedural webgl opengl vertex buffer',
	classifiers=[
		'Topic :: Scientific/Engineering',
		'Development Status :: 3 - Alpha',
		'Programming Language :: Python :: 3.8',
		'Programming Language :: Python :: 3.9',
		'Programming Language :: Python :: 3.10',
		'Programming Language :: Python :: Implementation :: CPython',
		'License :: OSI Approved :: GNU Lesser General Public License v3 (LGPLv3)',
		'Intended Audience :: Science/Research',
		'Intended Audience :: Education',
		'Topic :: Scientific/Engineering :: Visualization',
		'Topic :: Multimedia :: Graphics :: 3D Modeling',
		],
	)
