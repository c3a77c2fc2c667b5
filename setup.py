# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='blazon',
  version='0.1.0',
  description='Blazon is a combinator library for building escaped markup fragments and rendering them in linear time.',
  python_requires='>=3.11',
  packages=['blazon', 'utest'],
  extras_require={
    'test': ['lxml'],
    'perf': ['pyperf'],
  },
)
