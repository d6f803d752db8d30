from setuptools import find_packages, setup

setup(
  name = 'sdxxd',
  packages = find_packages(where='src'),
  package_dir = {'': 'src'},
  version = '1.0.0',
  license='GNU',
  description = 'make a hexadecimal dump of a file or standard input, or turn a dump back into binary',
  python_requires='>=3.11',
  keywords = ['hexdump', 'xxd', 'binary'],
  install_requires=[
"typer>=0.9",
"rich>=13.0",
"pydantic>=2.0",
"pydantic-settings>=2.0",
"PyYAML>=6.0",
      ],
  extras_require={
    'test': [
"pytest>=7.0",
    ],
  },
  entry_points={
    'console_scripts': [
      'sdxxd = sdxxd.cli.main:run_cli',
    ],
  },
  classifiers=[
    'Development Status :: 4 - Beta',
    'Intended Audience :: Developers',
    'Topic :: Utilities',
    'License :: OSI Approved :: GNU General Public License (GPL)',
    'Programming Language :: Python :: 3',
    'Programming Language :: Python :: 3.11',
    'Programming Language :: Python :: 3.12',
  ],
)
