#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import environ, getcwd, makedirs, walk
from os.path import abspath, isdir, join as path_join
from subprocess import run
from sys import executable
from typing import Iterator


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()

  env = dict(environ)
  env.setdefault('UTEST_WORK_DIR', getcwd())
  work_dir = env['UTEST_WORK_DIR']
  # Test files import the packages from the working directory, not from the build directory.
  env['PYTHONPATH'] = ':'.join(p for p in (work_dir, env.get('PYTHONPATH')) if p)

  utest_cwd = '_build/_utest'
  makedirs(utest_cwd, exist_ok=True)
  ok = True
  for path in walk_ut_files(*args.paths):
    print(path)
    c = run([executable, abspath(path)], cwd=utest_cwd, env=env).returncode
    if c != 0:
      ok = False
      print()

  exit(0 if ok else 1)


def walk_ut_files(*paths:str) -> Iterator[str]:
  'Yield the paths of all `.ut.py` files in `paths`, in sorted order.'
  for path in paths:
    if not isdir(path):
      yield path
      continue
    for dir_path, dir_names, file_names in walk(path):
      dir_names.sort()
      for name in sorted(file_names):
        if name.endswith('.ut.py'): yield path_join(dir_path, name)


if __name__ == '__main__': main()
