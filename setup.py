# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='casesplit',
  version='0.0.1',
  description='casesplit performs tagged-union style dispatch over plain key/value records.',
  python_requires='>=3.10',
  packages=['casesplit', 'utest'],
)
