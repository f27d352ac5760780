from catalogue.patterns.strategy import FastAlgorithm, SlowAlgorithm, SomeObject


def test_swap_strategy():
    some_object = SomeObject(SlowAlgorithm())
    assert some_object.run() == "very slow algorithm ..."
    some_object.set_behaviour(FastAlgorithm())
    assert some_object.run() == "very fast algorithm"


def test_plain_function_strategy():
    assert SomeObject(lambda: "custom").run() == "custom"


def test_demo(catalogue):
    assert catalogue.run("strategy")["runs"][:2] == [
        "very slow algorithm ...",
        "very fast algorithm",
    ]
