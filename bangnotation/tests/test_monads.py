# -*- coding: utf-8 -*-
"""Run-time monads."""

from unpythonic.syntax import macros, test, test_raises  # noqa: F401
from unpythonic.test.fixtures import session, testset

import pickle

from ..monads import Just, Maybe, MonadicList, Nothing, Writer

def runtests():
    with testset("Maybe"):
        test[Just(21).and_then(lambda x: Just(2 * x)) == Just(42)]
        test[(Just(21) >> (lambda x: Just(2 * x))) == Just(42)]

        with testset("short-circuit"):
            def crash(x):  # pragma: no cover
                raise AssertionError("should not be called")
            test[Nothing.and_then(crash) is Nothing]
            test[(Nothing >> crash) is Nothing]
            test[Just(1).and_then(lambda x: Nothing).and_then(crash) is Nothing]

        test[Maybe.of(42) == Just(42)]
        test[Maybe.of(None) == Just(None)]
        test[Maybe.from_optional(None) is Nothing]
        test[Maybe.from_optional(0) == Just(0)]

        test[Just(41).map(lambda x: x + 1) == Just(42)]
        test[Nothing.map(lambda x: x + 1) is Nothing]

        test[Just(1) == Just(1)]
        test[Just(1) != Just(2)]
        test[Just(1) != Nothing]
        test[Nothing != Just(1)]
        test[hash(Just(1)) == hash(Just(1))]

        test[Just(0)]  # truthy even if the value isn't
        test[not Nothing]

        test[type(Nothing)() is Nothing]
        test[pickle.loads(pickle.dumps(Nothing)) is Nothing]

        test_raises[TypeError, Just(1).and_then(lambda x: x + 1), "the bound function must return a Maybe"]

    with testset("MonadicList"):
        xs = MonadicList(1, 2, 3)
        test[xs.and_then(lambda x: MonadicList(x, 10 * x)) == MonadicList(1, 10, 2, 20, 3, 30)]
        test[(xs >> (lambda x: MonadicList())) == MonadicList()]

        ys = MonadicList(1, 2, 3, 4)
        evens = ys >> (lambda y: MonadicList.guard(y % 2 == 0) >> (lambda _: MonadicList(y)))
        test[evens == MonadicList(2, 4)]

        test[len(xs) == 3]
        test[xs[1] == 2]
        test[list(xs) == [1, 2, 3]]
        test[xs == (1, 2, 3)]
        test[xs + MonadicList(4) == MonadicList(1, 2, 3, 4)]

        test_raises[TypeError, MonadicList(1, 2) >> (lambda x: x)]
        test_raises[TypeError, MonadicList(1) + (2,)]

    with testset("Writer"):
        w = Writer(1, ["a"]) >> (lambda x: Writer(x + 1, ["b"]))
        test[w == Writer(2, ["a", "b"])]

        test[Writer.pure(42) == Writer(42, ())]
        test[Writer.tell("hello", "world") == Writer(None, ["hello", "world"])]

        # the log follows the sequencing
        result = (Writer.tell("first")
                  .and_then(lambda _: Writer.tell("second"))
                  .and_then(lambda _: Writer.pure(42)))
        test[result.value == 42]
        test[result.log == ("first", "second")]

        test_raises[TypeError, Writer(1).and_then(lambda x: x), "the bound function must return a Writer"]

if __name__ == '__main__':  # pragma: no cover
    with session(__file__):
        runtests()
