# -*- coding: utf-8 -*-
"""pytest plumbing for the macro-enabled test modules.

The test modules use `unpythonic.test.fixtures` and macros, so they must be
imported through the `mcpyrate` import hook (not pytest's assertion-rewriting
importer), and each one exposes a `runtests()` entry point instead of
`test_*` functions. Each test module becomes one pytest item that runs its
`runtests()` inside an `unpythonic` test session, just like `runtests.py`.
"""

from importlib import import_module

import pytest

import mcpyrate.activate  # noqa: F401


def _modname(path, rootpath):
    rel = path.relative_to(rootpath).with_suffix("")
    return ".".join(rel.parts)


class RuntestsModule(pytest.File):
    def collect(self):
        yield RuntestsItem.from_parent(self, name="runtests")


class RuntestsItem(pytest.Item):
    def runtest(self):
        from unpythonic.collections import unbox
        from unpythonic.test.fixtures import session, tests_errored, tests_failed, testset

        modname = _modname(self.path, self.config.rootpath)
        with session():
            with testset(modname):
                mod = import_module(modname)
                mod.runtests()
            failed, errored = unbox(tests_failed), unbox(tests_errored)
        if failed or errored:
            raise AssertionError(f"{modname}: {failed} failed, {errored} errored")

    def reportinfo(self):
        return self.path, None, f"{_modname(self.path, self.config.rootpath)}::runtests"


def pytest_pycollect_makemodule(module_path, parent):
    return RuntestsModule.from_parent(parent, path=module_path)
