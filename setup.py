# -*- coding: utf-8 -*-
#
"""setuptools-based setup.py for bangnotation.

Usage as usual with setuptools:
    python3 setup.py build
    python3 setup.py sdist
    python3 setup.py bdist_wheel
    python3 setup.py install

or with pip:
    pip install -e .[test]

For details, see
    http://setuptools.readthedocs.io/en/latest/setuptools.html#command-reference
"""

import ast
import os

from setuptools import setup  # type: ignore[import]


def read(*relpath, **kwargs):  # https://blog.ionelmc.ro/2014/05/25/python-packaging/#the-setup-script
    with open(os.path.join(os.path.dirname(__file__), *relpath),
              encoding=kwargs.get('encoding', 'utf8')) as fh:
        return fh.read()

# Extract __version__ from the package __init__.py
# (since it's not a good idea to actually run __init__.py during the build process).
init_py_path = os.path.join("bangnotation", "__init__.py")
version = None
with open(init_py_path) as f:
    for line in f:
        if line.startswith("__version__"):
            module = ast.parse(line, filename=init_py_path)
            expr = module.body[0]
            assert isinstance(expr, ast.Assign)
            v = expr.value
            assert isinstance(v, ast.Constant)
            version = v.value
            break
if not version:
    raise RuntimeError(f"Version information not found in {init_py_path}")

#########################################################
# Call setup()
#########################################################

setup(
    name="bangnotation",
    version=version,
    # The tests in `bangnotation.tests` and `bangnotation.syntax.tests` are NOT deployed.
    packages=["bangnotation", "bangnotation.syntax"],
    provides=["bangnotation"],
    keywords=["functional-programming", "language-extension", "syntactic-macros",
              "monads", "bang-notation", "do-notation", "macros", "haskell", "idris"],
    install_requires=["mcpyrate"],
    extras_require={"test": ["unpythonic"]},
    python_requires=">=3.9",
    description="Bang notation for monadic binds in Python, as a syntactic macro.",
    long_description=read("README.md"),
    long_description_content_type="text/markdown",
    license="BSD",
    platforms=["Linux"],
    classifiers=["Development Status :: 3 - Alpha",
                 "Environment :: Console",
                 "Intended Audience :: Developers",
                 "License :: OSI Approved :: BSD License",
                 "Operating System :: POSIX :: Linux",
                 "Programming Language :: Python",
                 "Programming Language :: Python :: 3",
                 "Programming Language :: Python :: Implementation :: CPython",
                 "Programming Language :: Python :: Implementation :: PyPy",
                 "Topic :: Software Development :: Libraries",
                 "Topic :: Software Development :: Libraries :: Python Modules"
                 ],
    zip_safe=False  # macros are not zip safe, because the zip importer fails to find sources.
)
