#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import environ, getcwd, walk
from os.path import isdir, join as path_join
from subprocess import run
from sys import executable
from typing import Iterator


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()

  env = dict(environ)
  env.setdefault('UTEST_WORK_DIR', getcwd())

  ok = True
  count = 0
  for path in walk_ut_files(args.paths):
    print(path)
    count += 1
    c = run([executable, path], env=env).returncode
    if c != 0:
      ok = False
      print()

  if not count: exit('utest: no `.ut.py` files found.')
  exit(0 if ok else 1)


def walk_ut_files(paths:list[str]) -> Iterator[str]:
  'Yield the `.ut.py` files in `paths`, descending into directories in sorted order.'
  for path in paths:
    if not isdir(path):
      yield path
      continue
    for dir_path, dir_names, file_names in walk(path):
      dir_names.sort()
      for name in sorted(file_names):
        if name.endswith('.ut.py'): yield path_join(dir_path, name)


if __name__ == '__main__': main()
