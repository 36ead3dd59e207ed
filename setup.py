"""
Packaging script for PyPI.
"""
import setuptools
from pathlib import Path

readme = Path(__file__).parent / "README.md"

setuptools.setup(
	name='bella-lang',
	version='0.1.0',
	packages=['bella'],
	package_data={
		'bella': ["Bella.lark"],
	},
	entry_points={
		'console_scripts': ["bella = bella.cmdline:main"],
	},
	license='MIT',
	description='A tree-walking interpreter for Bella, a small imperative expression language',
	long_description=readme.read_text(encoding="utf-8") if readme.exists() else "",
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.12",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Education",
		"Topic :: Software Development :: Interpreters",
		"Topic :: Education",
		"Environment :: Console",
	],
	python_requires='>=3.9',
	install_requires=[
		"lark>=1.1",
		"booze-tools>=0.6",
	]
)
