"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='brook-streams',
	author='Beth Kjos',
	author_email='kjosib@gmail.com',
	version='0.0.7',
	packages=['brook', ],
	license='MIT',
	description='The lazy-sequence core of a dynamic language run-time: ranges, combinatorial enumerators, and user-driven stream combinators',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Topic :: Software Development :: Interpreters",
	],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	]
)
