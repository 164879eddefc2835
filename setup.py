import setuptools

# read the contents of your README file
from os import path
from carlib.__version__ import __version__ as lib_version
this_directory = path.abspath(path.dirname(__file__))
with open(path.join(this_directory, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

setuptools.setup(
    name='carlib',
    version=lib_version,
    description='A car with a speed that can be accelerated',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=setuptools.find_packages(exclude=['test', 'test.*', 'example']),
    provides=["carlib"],
    python_requires='>=3.7',
    install_requires=[],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['carlib = carlib.__main__:main'],
    },
)
