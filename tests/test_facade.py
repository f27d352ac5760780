from catalogue.patterns.facade import Compiler, Parser


def test_compiler_runs_every_stage_in_order():
    assert Compiler().run() == (
        "parsing source code\n"
        "generating machine code\n"
        "optimising generated machine code\n"
        "linking code"
    )


def test_subsystems_can_be_replaced():
    class LoudParser(Parser):
        def run(self):
            return "PARSING"

    assert Compiler(parser=LoudParser()).run().startswith("PARSING\n")


def test_demo(catalogue):
    assert len(catalogue.run("facade")["stages"]) == 4
