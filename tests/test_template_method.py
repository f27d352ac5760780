from catalogue.patterns.template_method import (
    SpecificRoutine,
    WeightedObject,
)


def test_sorted_by_weight_then_name():
    objects = [
        WeightedObject("object1", 3),
        WeightedObject("object2", 2),
        WeightedObject("object3", 1),
        WeightedObject("object4", 4),
        WeightedObject("object0", 2),
    ]
    assert [obj.name for obj in sorted(objects)] == [
        "object3",
        "object0",
        "object2",
        "object1",
        "object4",
    ]


def test_derived_comparisons():
    light, heavy = WeightedObject("a", 1), WeightedObject("a", 2)
    assert heavy > light
    assert light <= WeightedObject("a", 1)
    assert light == WeightedObject("a", 1)


def test_describe():
    assert WeightedObject("object1", 3.0).describe() == "object1 with weight 3"


def test_routine_template():
    assert SpecificRoutine().do_something() == (
        "starting do specific thing 1; doing thing 2 and do generic thing 3"
    )


def test_routine_hook_can_be_overridden():
    class Quick(SpecificRoutine):
        def step_two(self):
            return "skipping thing 2"

    assert "skipping thing 2" in Quick().do_something()


def test_demo(catalogue):
    result = catalogue.run("template method")
    assert result["sorted"][0] == "object3 with weight 1"
