from setuptools import setup
import sys

if sys.version_info < (3, 9):
    print('Sorry, rankwindow requires Python version 3.9+.')
    sys.exit()

with open('README.md') as fh:
    long_description = fh.read()

setup(
    name='rankwindow',
    version='0.1',

    description='Track the n-th highest value in a stream, using memory proportional to n',
    long_description=long_description,
    long_description_content_type="text/markdown",

    packages=['rankwindow', 'rankwindow.core', 'rankwindow.utils'],
    python_requires='>=3.9',
    extras_require={
        'test': ['pytest', 'sortedcontainers'],
    },
    entry_points={
        'console_scripts': ['rankwindow=rankwindow.main:cli'],
    },
)
